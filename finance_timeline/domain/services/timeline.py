"""Merging of transaction totals and asset totals into a timeline."""

from collections.abc import Iterable, Mapping
from decimal import Decimal

from finance_timeline.domain.constants import GRANULARITY_MONTH
from finance_timeline.domain.models import (
    MonthlyBankBalance,
    MonthlyCashflowSummary,
    PeriodTotals,
    TimelineRecord,
    Transaction,
)
from finance_timeline.domain.services.aggregation import aggregate_transactions
from finance_timeline.domain.services.periods import (
    parse_period_key,
    sort_period_keys,
)


def merge_timeline(
    periods: Iterable[str],
    transaction_totals: Mapping[str, PeriodTotals],
    asset_totals: Mapping[str, Decimal | None],
    granularity: str,
) -> list[TimelineRecord]:
    """Combine per-period transaction and asset totals.

    Periods missing from ``transaction_totals`` report zero income and
    expenses. Periods missing from ``asset_totals`` report no asset total.

    Args:
        periods: Period keys to report; duplicates are collapsed.
        transaction_totals: Output of the transaction aggregator.
        asset_totals: Output of the asset balance resolver.
        granularity: Granularity the keys were generated with.

    Returns:
        list[TimelineRecord]: Records sorted by period start date.
    """
    records = []
    for period in sort_period_keys(set(periods), granularity):
        totals = transaction_totals.get(period)
        records.append(
            TimelineRecord(
                period=period,
                income=totals.income if totals else Decimal("0"),
                expenses=totals.expenses if totals else Decimal("0"),
                asset_total=asset_totals.get(period),
            )
        )
    return records


def summarize_monthly_cashflow(
    transactions: Iterable[Transaction],
    bank_balances: Iterable[MonthlyBankBalance],
) -> list[MonthlyCashflowSummary]:
    """Return month-by-month cash flow with recorded bank balances.

    Only months with at least one transaction are reported. The bank
    balance is None for months without a recorded value.
    """
    balances = {
        (balance.year, balance.month): balance.balance
        for balance in bank_balances
    }
    totals = aggregate_transactions(transactions, GRANULARITY_MONTH)
    summaries = []
    for period, period_totals in totals.items():
        start = parse_period_key(period, GRANULARITY_MONTH)
        summaries.append(
            MonthlyCashflowSummary(
                year=start.year,
                month=start.month,
                income=period_totals.income,
                expenses=period_totals.expenses,
                balance=balances.get((start.year, start.month)),
            )
        )
    return summaries


__all__ = ["merge_timeline", "summarize_monthly_cashflow"]

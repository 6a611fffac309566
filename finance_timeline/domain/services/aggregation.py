"""Aggregation of transactions into period totals."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from finance_timeline.domain.constants import KIND_EXPENSE, KIND_INCOME
from finance_timeline.domain.models import PeriodTotals, Transaction
from finance_timeline.domain.services.periods import (
    period_key_for,
    sort_period_keys,
)
from finance_timeline.domain.services.validation import validate_granularity
from finance_timeline.utils.decimal_utils import coerce_decimal


def aggregate_transactions(
    transactions: Iterable[Transaction],
    granularity: str,
    *,
    logger: Logger | None = None,
) -> dict[str, PeriodTotals]:
    """Sum income and expense amounts per period.

    Each transaction is bucketed by the period containing its own date.
    Range filtering is the caller's responsibility: every transaction passed
    in is counted exactly once.

    Args:
        transactions: Transactions to aggregate.
        granularity: Bucket size (week, month, or year).
        logger: Optional logger used to report skipped transactions.

    Returns:
        dict[str, PeriodTotals]: Totals keyed by period, in chronological
        order. Periods without transactions are absent.
    """
    validate_granularity(granularity)
    income: dict[str, Decimal] = {}
    expenses: dict[str, Decimal] = {}
    skipped = 0

    for transaction in transactions:
        if transaction.kind not in (KIND_INCOME, KIND_EXPENSE):
            skipped += 1
            continue
        key = period_key_for(transaction.date, granularity)
        amount = coerce_decimal(transaction.amount)
        income.setdefault(key, Decimal("0"))
        expenses.setdefault(key, Decimal("0"))
        if transaction.kind == KIND_INCOME:
            income[key] += amount
        else:
            expenses[key] += amount

    if skipped and logger is not None:
        logger.warning(
            f"Skipped {skipped} transactions with an unknown kind"
        )

    return {
        key: PeriodTotals(income=income[key], expenses=expenses[key])
        for key in sort_period_keys(income, granularity)
    }


__all__ = ["aggregate_transactions"]

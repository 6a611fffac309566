"""Domain models for period-indexed timeline views."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class PeriodTotals:
    """Income and expense totals for one period."""

    income: Decimal
    expenses: Decimal


@dataclass(frozen=True)
class TimelineRecord:
    """Merged cash flow and asset figures for one period.

    Attributes:
        period: Canonical period key.
        income: Income total, zero when the period has no transactions.
        expenses: Expense total, zero when the period has no transactions.
        asset_total: Sum of asset balances at period end, or None when no
            asset had a known balance.
    """

    period: str
    income: Decimal
    expenses: Decimal
    asset_total: Decimal | None

    @property
    def net(self) -> Decimal:
        """Return income minus expenses."""
        return self.income - self.expenses


@dataclass(frozen=True)
class TimelineView:
    """Ordered timeline for a date range and granularity."""

    granularity: str
    start_date: date
    end_date: date
    records: list[TimelineRecord]


@dataclass(frozen=True)
class MonthlyCashflowSummary:
    """Calendar month cash flow with the recorded bank balance."""

    year: int
    month: int
    income: Decimal
    expenses: Decimal
    balance: Decimal | None

    @property
    def savings(self) -> Decimal:
        return self.income - self.expenses


__all__ = [
    "PeriodTotals",
    "TimelineRecord",
    "TimelineView",
    "MonthlyCashflowSummary",
]

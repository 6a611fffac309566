"""Domain models for recorded ledger data."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from finance_timeline.domain.constants import (
    ASSET_TYPE_OTHER,
    FREQUENCY_MONTHLY,
    KIND_EXPENSE,
    KIND_INCOME,
    SOURCE_MANUAL,
)


@dataclass(frozen=True)
class Transaction:
    """Income or expense transaction.

    Attributes:
        amount: Unsigned amount; the direction is carried by ``kind``.
        kind: Either ``income`` or ``expense``.
        category: Category display name.
        date: Date the transaction occurred.
        source: Origin of the record (manual, imported, recurring-generated).
        description: Free-text description.
        transaction_id: Storage identifier, when persisted.
    """

    amount: Decimal
    kind: str
    category: str
    date: date
    source: str = SOURCE_MANUAL
    description: str = ""
    transaction_id: str | None = None


@dataclass(frozen=True)
class AssetBalanceSnapshot:
    """Dated balance observation for an asset."""

    amount: Decimal
    date: date
    snapshot_id: str | None = None


@dataclass(frozen=True)
class Asset:
    """Tracked asset with its balance history.

    ``current_balance`` and ``last_updated`` are cached projections of the
    snapshot with the maximum date. Use the snapshot services to change the
    history so both stay in sync.
    """

    name: str
    created_on: date
    current_balance: Decimal
    snapshots: tuple[AssetBalanceSnapshot, ...] = ()
    last_updated: date | None = None
    asset_type: str = ASSET_TYPE_OTHER
    asset_id: str | None = None


@dataclass(frozen=True)
class BudgetCategoryLine:
    """Planned recurring amount for a budget category."""

    name: str
    kind: str
    planned_amount: Decimal
    frequency: str = FREQUENCY_MONTHLY
    category_id: str | None = None
    description: str = ""


@dataclass(frozen=True)
class Budget:
    """Budget made of category lines.

    Totals are always derived from the lines and never stored.
    """

    name: str
    lines: tuple[BudgetCategoryLine, ...] = field(default_factory=tuple)
    description: str = ""

    @property
    def total_income(self) -> Decimal:
        return sum(
            (line.planned_amount for line in self.lines if line.kind == KIND_INCOME),
            Decimal("0"),
        )

    @property
    def total_expenses(self) -> Decimal:
        return sum(
            (line.planned_amount for line in self.lines if line.kind == KIND_EXPENSE),
            Decimal("0"),
        )

    @property
    def net_income(self) -> Decimal:
        return self.total_income - self.total_expenses


@dataclass(frozen=True)
class Category:
    """Canonical transaction category owned by a user."""

    name: str
    kind: str
    sort_order: int
    is_default: bool = False


@dataclass(frozen=True)
class MonthlyBankBalance:
    """Manually recorded month-end bank balance."""

    year: int
    month: int
    balance: Decimal


__all__ = [
    "Transaction",
    "AssetBalanceSnapshot",
    "Asset",
    "BudgetCategoryLine",
    "Budget",
    "Category",
    "MonthlyBankBalance",
]

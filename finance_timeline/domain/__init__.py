"""Domain package for timeline and budget rules and core models."""

from .constants import FREQUENCIES, GRANULARITIES, TRANSACTION_KINDS
from .models import (
    Asset,
    AssetBalanceSnapshot,
    Budget,
    BudgetCategoryLine,
    Category,
    MonthlyBankBalance,
    TimelineRecord,
    Transaction,
)
from .policies import can_remove_snapshot
from .services import (
    aggregate_transactions,
    compute_budget_variance,
    iter_period_keys,
    merge_timeline,
    normalize_frequency,
    resolve_asset_totals,
)

__all__ = [
    "FREQUENCIES",
    "GRANULARITIES",
    "TRANSACTION_KINDS",
    "Asset",
    "AssetBalanceSnapshot",
    "Budget",
    "BudgetCategoryLine",
    "Category",
    "MonthlyBankBalance",
    "TimelineRecord",
    "Transaction",
    "can_remove_snapshot",
    "aggregate_transactions",
    "compute_budget_variance",
    "iter_period_keys",
    "merge_timeline",
    "normalize_frequency",
    "resolve_asset_totals",
]

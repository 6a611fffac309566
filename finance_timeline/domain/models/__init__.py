"""Domain models package."""

from .budget import (
    BudgetSummary,
    BudgetVarianceReport,
    CategoryVariance,
    FrequencyAmounts,
    ScenarioProjection,
)
from .ledger import (
    Asset,
    AssetBalanceSnapshot,
    Budget,
    BudgetCategoryLine,
    Category,
    MonthlyBankBalance,
    Transaction,
)
from .timeline import (
    MonthlyCashflowSummary,
    PeriodTotals,
    TimelineRecord,
    TimelineView,
)

__all__ = [
    "Asset",
    "AssetBalanceSnapshot",
    "Budget",
    "BudgetCategoryLine",
    "Category",
    "MonthlyBankBalance",
    "Transaction",
    "FrequencyAmounts",
    "CategoryVariance",
    "BudgetVarianceReport",
    "BudgetSummary",
    "ScenarioProjection",
    "PeriodTotals",
    "TimelineRecord",
    "TimelineView",
    "MonthlyCashflowSummary",
]

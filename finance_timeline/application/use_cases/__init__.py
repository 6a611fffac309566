"""Application use cases package."""

from .get_budget_summary import GetBudgetSummaryUseCase, ProjectScenarioUseCase
from .get_budget_variance import GetBudgetVarianceUseCase, BudgetVarianceReport
from .get_monthly_cashflow import GetMonthlyCashflowUseCase
from .get_timeline import GetTimelineUseCase, TimelineView
from .manage_asset_snapshots import ManageAssetSnapshotsUseCase
from .provision_default_categories import (
    ProvisionCategoriesResult,
    ProvisionDefaultCategoriesUseCase,
)

__all__ = [
    "GetBudgetSummaryUseCase",
    "ProjectScenarioUseCase",
    "GetBudgetVarianceUseCase",
    "BudgetVarianceReport",
    "GetMonthlyCashflowUseCase",
    "GetTimelineUseCase",
    "TimelineView",
    "ManageAssetSnapshotsUseCase",
    "ProvisionCategoriesResult",
    "ProvisionDefaultCategoriesUseCase",
]

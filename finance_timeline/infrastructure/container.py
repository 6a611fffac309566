"""Composition root for wiring infrastructure adapters."""

from finance_timeline.application.ports.categories_repository import (
    CategoriesRepositoryPort,
)
from finance_timeline.application.ports.database import DatabaseEnginePort
from finance_timeline.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from finance_timeline.application.use_cases.get_budget_summary import (
    GetBudgetSummaryUseCase,
    ProjectScenarioUseCase,
)
from finance_timeline.application.use_cases.get_budget_variance import (
    GetBudgetVarianceUseCase,
)
from finance_timeline.application.use_cases.get_monthly_cashflow import (
    GetMonthlyCashflowUseCase,
)
from finance_timeline.application.use_cases.get_timeline import (
    GetTimelineUseCase,
)
from finance_timeline.application.use_cases.manage_asset_snapshots import (
    ManageAssetSnapshotsUseCase,
)
from finance_timeline.application.use_cases.provision_default_categories import (
    ProvisionDefaultCategoriesUseCase,
)
from finance_timeline.infrastructure.categories_repository import (
    SqlAlchemyCategoriesRepository,
)
from finance_timeline.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from finance_timeline.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from finance_timeline.infrastructure.logging.logger import get_app_logger


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the ledger repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_categories_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CategoriesRepositoryPort:
    """Return the categories repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCategoriesRepository(resolved_db)


def build_timeline_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetTimelineUseCase:
    """Return the timeline use case wired to SQLAlchemy storage."""
    return GetTimelineUseCase(
        build_ledger_repository(db_port),
        logger=get_app_logger(),
    )


def build_budget_variance_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetBudgetVarianceUseCase:
    """Return the budget variance use case wired to SQLAlchemy storage."""
    return GetBudgetVarianceUseCase(
        build_ledger_repository(db_port),
        logger=get_app_logger(),
    )


def build_provision_categories_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ProvisionDefaultCategoriesUseCase:
    """Return the default categories use case wired to SQLAlchemy storage."""
    return ProvisionDefaultCategoriesUseCase(
        build_categories_repository(db_port),
        logger=get_app_logger(),
    )


def build_budget_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetBudgetSummaryUseCase:
    """Return the budget summary use case wired to SQLAlchemy storage."""
    return GetBudgetSummaryUseCase(
        build_ledger_repository(db_port),
        logger=get_app_logger(),
    )


def build_project_scenario_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ProjectScenarioUseCase:
    """Return the scenario projection use case wired to SQLAlchemy storage."""
    return ProjectScenarioUseCase(
        build_ledger_repository(db_port),
        logger=get_app_logger(),
    )


def build_monthly_cashflow_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> GetMonthlyCashflowUseCase:
    """Return the monthly cash flow use case wired to SQLAlchemy storage."""
    return GetMonthlyCashflowUseCase(
        build_ledger_repository(db_port),
        logger=get_app_logger(),
    )


def build_asset_snapshots_use_case(
    db_port: DatabaseEnginePort | None = None,
) -> ManageAssetSnapshotsUseCase:
    """Return the asset snapshot use case wired to SQLAlchemy storage."""
    return ManageAssetSnapshotsUseCase(
        build_ledger_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_categories_repository",
    "build_timeline_use_case",
    "build_budget_variance_use_case",
    "build_provision_categories_use_case",
    "build_budget_summary_use_case",
    "build_project_scenario_use_case",
    "build_monthly_cashflow_use_case",
    "build_asset_snapshots_use_case",
]

"""Use cases for budget totals and forward projections."""

from datetime import date

from finance_timeline.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from finance_timeline.domain.models import BudgetSummary, ScenarioProjection
from finance_timeline.domain.services.budget import (
    compute_budget_summary,
    project_scenario,
)
from finance_timeline.infrastructure.logging.logger import get_app_logger


class GetBudgetSummaryUseCase:
    """Compute frequency-normalized totals for the user's budget."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> BudgetSummary:
        """Return monthly and annual budget totals for the user."""
        budget = self._ledger_repository.fetch_budget(user_id)
        lines = budget.lines if budget is not None else ()
        summary = compute_budget_summary(lines, logger=self._logger)
        self._logger.info(
            f"Budget summary computed: monthly income={summary.monthly_income}, "
            f"monthly expenses={summary.monthly_expenses}"
        )
        return summary


class ProjectScenarioUseCase:
    """Project the user's budget forward month by month."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        start: date,
        months: int = 12,
    ) -> list[ScenarioProjection]:
        """Return projections for ``months`` months starting at ``start``.

        Raises:
            ValueError: If ``months`` is outside 1-120.
        """
        budget = self._ledger_repository.fetch_budget(user_id)
        lines = budget.lines if budget is not None else ()
        projections = project_scenario(lines, start, months, logger=self._logger)
        self._logger.info(
            f"Projected {len(projections)} months from {start:%Y-%m}"
        )
        return projections


__all__ = ["GetBudgetSummaryUseCase", "ProjectScenarioUseCase"]

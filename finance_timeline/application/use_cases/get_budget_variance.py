"""Use case to compare a month of spending against the budget."""

import calendar
from datetime import date

from finance_timeline.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from finance_timeline.domain.constants import GRANULARITY_MONTH
from finance_timeline.domain.models import BudgetVarianceReport
from finance_timeline.domain.services.budget import compute_budget_variance
from finance_timeline.domain.services.periods import format_period_key
from finance_timeline.domain.services.validation import validate_month
from finance_timeline.infrastructure.logging.logger import get_app_logger


class GetBudgetVarianceUseCase:
    """Compute budget variance per category for one calendar month."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing transactions and the budget.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, year: int, month: int) -> BudgetVarianceReport:
        """Return budgeted, actual, and variance amounts per category.

        Args:
            user_id: Identifier of the authenticated user.
            year: Calendar year of the month.
            month: Calendar month (1-12).

        Returns:
            BudgetVarianceReport: Income and expense variances.

        Raises:
            ValueError: If the month is invalid. Nothing is fetched.
        """
        validate_month(year, month)
        start_date = date(year, month, 1)
        end_date = date(year, month, calendar.monthrange(year, month)[1])

        budget = self._ledger_repository.fetch_budget(user_id)
        lines = list(budget.lines) if budget is not None else []
        if budget is None:
            self._logger.warning(
                f"No budget found for user {user_id}; budgeted amounts are 0"
            )
        transactions = self._ledger_repository.fetch_transactions(
            user_id,
            start_date,
            end_date,
        )
        self._logger.info(
            f"Fetched {len(transactions)} transactions and {len(lines)} "
            f"budget lines for {start_date:%Y-%m}"
        )
        return compute_budget_variance(
            transactions,
            lines,
            period=format_period_key(start_date, GRANULARITY_MONTH),
            logger=self._logger,
        )


__all__ = ["GetBudgetVarianceUseCase", "BudgetVarianceReport"]

"""Use case to list monthly cash flow alongside recorded bank balances."""

from finance_timeline.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from finance_timeline.domain.models import MonthlyCashflowSummary
from finance_timeline.domain.services.timeline import summarize_monthly_cashflow
from finance_timeline.infrastructure.logging.logger import get_app_logger


class GetMonthlyCashflowUseCase:
    """Combine monthly income and expenses with manual bank balances."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing transactions and balances.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> list[MonthlyCashflowSummary]:
        """Return one summary per month that has transactions."""
        transactions = self._ledger_repository.fetch_transactions(
            user_id,
            None,
            None,
        )
        balances = self._ledger_repository.fetch_monthly_bank_balances(user_id)
        self._logger.info(
            f"Fetched {len(transactions)} transactions and {len(balances)} "
            f"bank balances for monthly cash flow"
        )
        return summarize_monthly_cashflow(transactions, balances)


__all__ = ["GetMonthlyCashflowUseCase"]

"""Use case to build the cash flow and net worth timeline."""

from datetime import date

from finance_timeline.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from finance_timeline.domain.constants import GRANULARITY_MONTH
from finance_timeline.domain.models import TimelineView
from finance_timeline.domain.services.aggregation import aggregate_transactions
from finance_timeline.domain.services.asset_balances import resolve_asset_totals
from finance_timeline.domain.services.periods import period_keys
from finance_timeline.domain.services.timeline import merge_timeline
from finance_timeline.domain.services.validation import validate_granularity
from finance_timeline.infrastructure.logging.logger import get_app_logger


class GetTimelineUseCase:
    """Merge transaction totals and asset balances per period."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing transactions and assets.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
        granularity: str = GRANULARITY_MONTH,
    ) -> TimelineView:
        """Return one timeline record per period of the range.

        Args:
            user_id: Identifier of the authenticated user.
            start_date: First date of the range.
            end_date: Last date of the range.
            granularity: Bucket size (week, month, or year).

        Returns:
            TimelineView: Chronologically ordered timeline records.

        Raises:
            ValueError: If the granularity is invalid. Nothing is fetched.
        """
        validate_granularity(granularity)
        periods = period_keys(start_date, end_date, granularity)

        transactions = self._ledger_repository.fetch_transactions(
            user_id,
            start_date,
            end_date,
        )
        assets = self._ledger_repository.fetch_assets(user_id)
        self._logger.info(
            f"Fetched {len(transactions)} transactions and {len(assets)} "
            f"assets for timeline {start_date}..{end_date} ({granularity})"
        )

        transaction_totals = aggregate_transactions(
            transactions,
            granularity,
            logger=self._logger,
        )
        asset_totals = resolve_asset_totals(
            assets,
            periods,
            granularity,
            logger=self._logger,
        )
        records = merge_timeline(
            periods,
            transaction_totals,
            asset_totals,
            granularity,
        )
        self._logger.info(f"Timeline computed: {len(records)} periods")
        return TimelineView(
            granularity=granularity,
            start_date=start_date,
            end_date=end_date,
            records=records,
        )


__all__ = ["GetTimelineUseCase", "TimelineView"]

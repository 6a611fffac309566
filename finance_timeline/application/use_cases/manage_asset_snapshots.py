"""Use case to record and delete asset balance snapshots."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

from finance_timeline.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from finance_timeline.domain.models import Asset, AssetBalanceSnapshot
from finance_timeline.domain.services.asset_balances import (
    add_snapshot,
    remove_snapshot,
)
from finance_timeline.infrastructure.logging.logger import get_app_logger
from finance_timeline.utils.decimal_utils import coerce_decimal


class ManageAssetSnapshotsUseCase:
    """Change an asset's balance history and refresh its current balance.

    The asset's current balance and last-updated date are recomputed from
    the snapshot with the maximum date after every change.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing asset reads and writes.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def add_snapshot(
        self,
        user_id: str,
        asset_id: str,
        amount: Decimal,
        recorded_on: date,
    ) -> Asset:
        """Record a balance observation and return the updated asset."""
        asset = self._load_asset(user_id, asset_id)
        snapshot = AssetBalanceSnapshot(
            amount=coerce_decimal(amount),
            date=recorded_on,
            snapshot_id=uuid4().hex,
        )
        updated = add_snapshot(asset, snapshot)
        self._ledger_repository.save_asset_snapshots(user_id, updated)
        self._logger.info(
            f"Added balance {snapshot.amount} on {recorded_on} to asset "
            f"{asset_id}; current balance is {updated.current_balance}"
        )
        return updated

    def remove_snapshot(
        self,
        user_id: str,
        asset_id: str,
        snapshot_id: str,
    ) -> Asset:
        """Delete a balance observation and return the updated asset.

        Raises:
            RuntimeError: If the asset does not exist for the user.
            LookupError: If the snapshot does not exist.
            ValueError: If the snapshot is the asset's last one.
        """
        asset = self._load_asset(user_id, asset_id)
        updated = remove_snapshot(asset, snapshot_id)
        self._ledger_repository.save_asset_snapshots(user_id, updated)
        self._logger.info(
            f"Removed balance {snapshot_id} from asset {asset_id}; current "
            f"balance is {updated.current_balance}"
        )
        return updated

    def _load_asset(self, user_id: str, asset_id: str) -> Asset:
        asset = self._ledger_repository.fetch_asset(user_id, asset_id)
        if asset is None:
            raise RuntimeError(f"Asset not found: {asset_id}")
        return asset


__all__ = ["ManageAssetSnapshotsUseCase"]

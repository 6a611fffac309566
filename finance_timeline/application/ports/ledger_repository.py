"""Application port for user ledger data access."""

from datetime import date
from typing import Protocol

from finance_timeline.domain.models import (
    Asset,
    Budget,
    MonthlyBankBalance,
    Transaction,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing a user's transactions, assets, and budget."""

    def fetch_transactions(
        self,
        user_id: str,
        start_date: date | None,
        end_date: date | None,
    ) -> list[Transaction]:
        """Return transactions dated within the inclusive range."""

    def fetch_assets(self, user_id: str) -> list[Asset]:
        """Return all assets with their snapshot histories."""

    def fetch_asset(self, user_id: str, asset_id: str) -> Asset | None:
        """Return one asset, or None when the user does not own it."""

    def save_asset_snapshots(self, user_id: str, asset: Asset) -> None:
        """Persist an asset's snapshots and derived balance fields."""

    def fetch_budget(self, user_id: str) -> Budget | None:
        """Return the user's budget, or None when none exists."""

    def fetch_monthly_bank_balances(
        self,
        user_id: str,
    ) -> list[MonthlyBankBalance]:
        """Return manually recorded month-end bank balances."""


__all__ = ["LedgerRepositoryPort"]

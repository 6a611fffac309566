"""Tests for the GetTimelineUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_timeline.application.use_cases.get_timeline import GetTimelineUseCase
from finance_timeline.domain.models import (
    Asset,
    AssetBalanceSnapshot,
    TimelineRecord,
    Transaction,
)


def test_execute_merges_transactions_and_snapshot_balances() -> None:
    """Historical snapshots win over the current balance for every month."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction(Decimal("3000"), "income", "Salary", date(2024, 1, 15)),
        Transaction(Decimal("200"), "expense", "Groceries", date(2024, 2, 3)),
    ]
    repository.fetch_assets.return_value = [
        Asset(
            name="Savings",
            created_on=date(2024, 1, 10),
            current_balance=Decimal("1200"),
            snapshots=(AssetBalanceSnapshot(Decimal("1000"), date(2024, 1, 10)),),
        )
    ]
    use_case = GetTimelineUseCase(ledger_repository=repository, logger=MagicMock())

    view = use_case.execute(
        "user-1",
        date(2024, 1, 1),
        date(2024, 3, 31),
        "month",
    )

    assert view.granularity == "month"
    assert view.records == [
        TimelineRecord("2024-01", Decimal("3000"), Decimal("0"), Decimal("1000")),
        TimelineRecord("2024-02", Decimal("0"), Decimal("200"), Decimal("1000")),
        TimelineRecord("2024-03", Decimal("0"), Decimal("0"), Decimal("1000")),
    ]
    repository.fetch_transactions.assert_called_once_with(
        "user-1",
        date(2024, 1, 1),
        date(2024, 3, 31),
    )
    repository.fetch_assets.assert_called_once_with("user-1")


def test_execute_reports_null_balance_without_assets() -> None:
    """Periods without contributing assets keep a None balance."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction(Decimal("10"), "expense", "Coffee", date(2024, 1, 2)),
    ]
    repository.fetch_assets.return_value = []
    use_case = GetTimelineUseCase(ledger_repository=repository, logger=MagicMock())

    view = use_case.execute("user-1", date(2024, 1, 1), date(2024, 1, 31))

    assert len(view.records) == 1
    assert view.records[0].expenses == Decimal("10")
    assert view.records[0].asset_total is None


def test_execute_rejects_invalid_granularity_before_fetching() -> None:
    """Invalid granularity is rejected without touching the repository."""
    repository = MagicMock()
    use_case = GetTimelineUseCase(ledger_repository=repository, logger=MagicMock())

    with pytest.raises(ValueError, match="Invalid granularity"):
        use_case.execute("user-1", date(2024, 1, 1), date(2024, 1, 31), "day")

    repository.fetch_transactions.assert_not_called()
    repository.fetch_assets.assert_not_called()


def test_execute_with_inverted_range_returns_no_records() -> None:
    """A start after the end yields an empty timeline."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = []
    repository.fetch_assets.return_value = []
    use_case = GetTimelineUseCase(ledger_repository=repository, logger=MagicMock())

    view = use_case.execute("user-1", date(2024, 3, 1), date(2024, 1, 1), "week")

    assert view.records == []


def test_repository_errors_propagate() -> None:
    """Fetch failures surface unchanged to the caller."""
    repository = MagicMock()
    repository.fetch_transactions.side_effect = RuntimeError("db down")
    use_case = GetTimelineUseCase(ledger_repository=repository, logger=MagicMock())

    with pytest.raises(RuntimeError, match="db down"):
        use_case.execute("user-1", date(2024, 1, 1), date(2024, 1, 31))

"""Tests for transaction aggregation."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_timeline.domain.models import PeriodTotals, Transaction
from finance_timeline.domain.services.aggregation import aggregate_transactions


def _tx(amount: str, kind: str, on: date, category: str = "Misc") -> Transaction:
    return Transaction(Decimal(amount), kind, category, on)


def test_groups_by_month_and_kind() -> None:
    """Income and expenses are summed separately per month."""
    transactions = [
        _tx("3000", "income", date(2024, 1, 15)),
        _tx("45.50", "expense", date(2024, 1, 20)),
        _tx("200", "expense", date(2024, 2, 3)),
        _tx("4.50", "expense", date(2024, 1, 31)),
    ]

    result = aggregate_transactions(transactions, "month")

    assert result == {
        "2024-01": PeriodTotals(income=Decimal("3000"), expenses=Decimal("50.00")),
        "2024-02": PeriodTotals(income=Decimal("0"), expenses=Decimal("200")),
    }


def test_week_buckets_use_each_transaction_date() -> None:
    """A Sunday transaction lands in the week starting the previous Monday."""
    transactions = [
        _tx("10", "expense", date(2024, 1, 7)),
        _tx("20", "expense", date(2024, 1, 8)),
    ]

    result = aggregate_transactions(transactions, "week")

    assert list(result) == ["2024-01-01", "2024-01-08"]
    assert result["2024-01-01"].expenses == Decimal("10")
    assert result["2024-01-08"].expenses == Decimal("20")


def test_result_is_chronological_across_year_boundary() -> None:
    """Output order follows dates even when input order does not."""
    transactions = [
        _tx("1", "income", date(2025, 1, 7)),
        _tx("1", "income", date(2024, 12, 24)),
        _tx("1", "income", date(2024, 12, 31)),
    ]

    result = aggregate_transactions(transactions, "week")

    assert list(result) == ["2024-12-23", "2024-12-30", "2025-01-06"]


@pytest.mark.parametrize("granularity", ["week", "month", "year"])
def test_sums_are_conserved(granularity) -> None:
    """Per-period sums add up to the input totals exactly."""
    transactions = [
        _tx("0.10", "income", date(2023, 12, 31)),
        _tx("0.20", "income", date(2024, 1, 1)),
        _tx("1234.56", "income", date(2024, 7, 4)),
        _tx("0.05", "expense", date(2024, 2, 29)),
        _tx("99.99", "expense", date(2025, 1, 1)),
        _tx("15", "expense", date(2024, 2, 29)),
    ]

    result = aggregate_transactions(transactions, granularity)

    assert sum(t.income for t in result.values()) == Decimal("1234.86")
    assert sum(t.expenses for t in result.values()) == Decimal("115.04")


def test_empty_input_gives_empty_map() -> None:
    """No transactions means no periods."""
    assert aggregate_transactions([], "month") == {}


def test_unknown_kind_is_skipped_with_warning() -> None:
    """Transactions with an unknown kind are not counted."""
    logger = MagicMock()
    transactions = [
        _tx("10", "transfer", date(2024, 1, 1)),
        _tx("5", "income", date(2024, 1, 2)),
    ]

    result = aggregate_transactions(transactions, "month", logger=logger)

    assert result["2024-01"].income == Decimal("5")
    assert result["2024-01"].expenses == Decimal("0")
    logger.warning.assert_called_once()


def test_invalid_granularity_raises() -> None:
    """Granularity is validated before aggregating."""
    with pytest.raises(ValueError):
        aggregate_transactions([], "quarter")


def test_timestamped_transactions_bucket_by_day() -> None:
    """A transaction carrying a time of day groups under its week start."""
    transactions = [_tx("15", "expense", datetime(2024, 1, 3, 9, 30))]

    result = aggregate_transactions(transactions, "week")

    assert list(result) == ["2024-01-01"]
    assert result["2024-01-01"].expenses == Decimal("15")

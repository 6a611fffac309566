"""Tests for the SQLAlchemy categories repository."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from finance_timeline.domain.models import Category
from finance_timeline.infrastructure.categories_repository import (
    SqlAlchemyCategoriesRepository,
)


def _build_db_port():
    engine = MagicMock()
    conn = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    engine.begin.return_value.__enter__.return_value = conn
    db_port = MagicMock()
    db_port.get_finance_engine.return_value = engine
    return db_port, conn


def test_has_categories_reads_count() -> None:
    """A non-zero count means the user is provisioned."""
    db_port, conn = _build_db_port()
    conn.execute.return_value.first.return_value = SimpleNamespace(
        category_count=3
    )

    assert SqlAlchemyCategoriesRepository(db_port).has_categories("u") is True


def test_has_categories_false_for_zero() -> None:
    """A zero count means the user has no categories."""
    db_port, conn = _build_db_port()
    conn.execute.return_value.first.return_value = SimpleNamespace(
        category_count=0
    )

    assert SqlAlchemyCategoriesRepository(db_port).has_categories("u") is False


def test_insert_categories_writes_one_row_per_category() -> None:
    """Categories are inserted in one executemany call."""
    db_port, conn = _build_db_port()
    categories = [
        Category("Groceries", "expense", 1, is_default=True),
        Category("Salary", "income", 1, is_default=True),
    ]

    inserted = SqlAlchemyCategoriesRepository(db_port).insert_categories(
        "user-1",
        categories,
    )

    assert inserted == 2
    payload = conn.execute.call_args.args[1]
    assert [row["name"] for row in payload] == ["Groceries", "Salary"]
    assert all(row["user_id"] == "user-1" for row in payload)
    assert all(row["is_default"] for row in payload)


def test_insert_categories_skips_empty_payload() -> None:
    """Nothing is executed for an empty list."""
    db_port, conn = _build_db_port()

    inserted = SqlAlchemyCategoriesRepository(db_port).insert_categories("u", [])

    assert inserted == 0
    conn.execute.assert_not_called()

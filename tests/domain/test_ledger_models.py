"""Tests for ledger models, boundary normalization, and validation."""

from datetime import date
from decimal import Decimal

import pytest

from finance_timeline.domain.models import (
    Asset,
    AssetBalanceSnapshot,
    Budget,
    BudgetCategoryLine,
)
from finance_timeline.domain.policies import can_remove_snapshot
from finance_timeline.domain.services.categories import build_default_categories
from finance_timeline.domain.services.normalization import (
    normalize_asset_type,
    normalize_granularity,
    normalize_signed_amount,
    normalize_source,
)
from finance_timeline.domain.services.validation import (
    validate_budget_line,
    validate_granularity,
    validate_month,
)


def test_budget_totals_are_derived_from_lines() -> None:
    """Budget totals are sums of planned amounts by kind."""
    budget = Budget(
        name="My Budget",
        lines=(
            BudgetCategoryLine("Salary", "income", Decimal("5000")),
            BudgetCategoryLine("Rent", "income", Decimal("800")),
            BudgetCategoryLine("Groceries", "expense", Decimal("600")),
        ),
    )

    assert budget.total_income == Decimal("5800")
    assert budget.total_expenses == Decimal("600")
    assert budget.net_income == Decimal("5200")
    assert Budget(name="Empty").net_income == Decimal("0")


def test_signed_amounts_are_split_at_the_boundary() -> None:
    """Negative amounts become expenses with a positive amount."""
    assert normalize_signed_amount(Decimal("-42.10")) == (
        Decimal("42.10"),
        "expense",
    )
    assert normalize_signed_amount("15") == (Decimal("15"), "income")
    assert normalize_signed_amount(0) == (Decimal("0"), "income")


def test_signed_amount_rejects_non_numbers() -> None:
    """Non-numeric and non-finite amounts are rejected."""
    with pytest.raises(ValueError, match="not a number"):
        normalize_signed_amount("twelve")
    with pytest.raises(ValueError, match="finite"):
        normalize_signed_amount("-Infinity")


def test_normalize_source_and_asset_type() -> None:
    """Unknown sources and asset types fall back to the defaults."""
    assert normalize_source(" Imported ") == "imported"
    assert normalize_source("recurring-generated") == "recurring-generated"
    assert normalize_source("csv") == "manual"
    assert normalize_source(None) == "manual"
    assert normalize_asset_type("Property") == "property"
    assert normalize_asset_type("crypto") == "other"


def test_normalize_granularity() -> None:
    """Granularity input is stripped and lower-cased."""
    assert normalize_granularity(" Week ") == "week"
    assert normalize_granularity("   ") is None
    assert normalize_granularity(None) is None


def test_validate_granularity_rejects_unknown_values() -> None:
    """Only week, month, and year are accepted."""
    assert validate_granularity("year") == "year"
    with pytest.raises(ValueError):
        validate_granularity("Month")


def test_validate_month() -> None:
    """Months must be between 1 and 12."""
    validate_month(2024, 12)
    with pytest.raises(ValueError):
        validate_month(2024, 13)
    with pytest.raises(ValueError):
        validate_month(2024, 0)


@pytest.mark.parametrize(
    "line",
    [
        BudgetCategoryLine("Rent", "expense", Decimal("-1")),
        BudgetCategoryLine("Rent", "spending", Decimal("1")),
        BudgetCategoryLine("Rent", "expense", Decimal("1"), "daily"),
    ],
)
def test_validate_budget_line_rejects_bad_lines(line) -> None:
    """Negative amounts, bad kinds, and bad frequencies are rejected."""
    with pytest.raises(ValueError):
        validate_budget_line(line)


def test_validate_budget_line_accepts_valid_line() -> None:
    """A valid line is returned unchanged."""
    line = BudgetCategoryLine("Rent", "expense", Decimal("0"), "fortnightly")

    assert validate_budget_line(line) is line


def test_can_remove_snapshot_requires_two_snapshots() -> None:
    """The last snapshot of an asset cannot be removed."""
    snapshot = AssetBalanceSnapshot(Decimal("1"), date(2024, 1, 1))
    single = Asset("A", date(2024, 1, 1), Decimal("1"), snapshots=(snapshot,))
    double = Asset(
        "A",
        date(2024, 1, 1),
        Decimal("1"),
        snapshots=(snapshot, snapshot),
    )

    assert can_remove_snapshot(single) is False
    assert can_remove_snapshot(double) is True


def test_default_categories() -> None:
    """Defaults include ten expense and two income categories."""
    categories = build_default_categories()

    expense = [c for c in categories if c.kind == "expense"]
    income = [c for c in categories if c.kind == "income"]
    assert len(expense) == 10
    assert [c.name for c in income] == ["Salary", "Rent"]
    assert all(c.is_default for c in categories)
    assert expense[0].name == "Groceries"
    assert expense[0].sort_order == 1

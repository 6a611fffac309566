"""Domain validation helpers."""

from decimal import Decimal

from finance_timeline.domain.constants import (
    FREQUENCIES,
    GRANULARITIES,
    TRANSACTION_KINDS,
)
from finance_timeline.domain.models import BudgetCategoryLine


def validate_granularity(granularity: str) -> str:
    """Return the granularity when it is supported.

    Args:
        granularity: Requested bucket size.

    Returns:
        str: The validated granularity.

    Raises:
        ValueError: If the granularity is not week, month, or year.
    """
    if granularity not in GRANULARITIES:
        raise ValueError(
            f"Invalid granularity '{granularity}'. "
            f"Must be one of: {', '.join(GRANULARITIES)}."
        )
    return granularity


def validate_kind(kind: str) -> str:
    """Return the transaction kind when it is income or expense."""
    if kind not in TRANSACTION_KINDS:
        raise ValueError(
            f"Invalid kind '{kind}'. Must be income or expense."
        )
    return kind


def validate_frequency(frequency: str) -> str:
    """Return the frequency when it is one of the supported cadences."""
    if frequency not in FREQUENCIES:
        raise ValueError(
            f"Invalid frequency '{frequency}'. "
            f"Must be one of: {', '.join(FREQUENCIES)}."
        )
    return frequency


def validate_month(year: int, month: int) -> None:
    """Reject month numbers outside 1-12 and non-positive years."""
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month {month}. Must be between 1 and 12.")
    if year < 1:
        raise ValueError(f"Invalid year {year}.")


def validate_budget_line(line: BudgetCategoryLine) -> BudgetCategoryLine:
    """Check the invariants of a budget category line.

    Args:
        line: Budget line to check.

    Returns:
        BudgetCategoryLine: The unchanged line.

    Raises:
        ValueError: If the kind or frequency is unknown or the planned
            amount is negative.
    """
    validate_kind(line.kind)
    validate_frequency(line.frequency)
    if line.planned_amount < Decimal("0"):
        raise ValueError(
            f"Planned amount for '{line.name}' must be non-negative: "
            f"{line.planned_amount}"
        )
    return line


__all__ = [
    "validate_granularity",
    "validate_kind",
    "validate_frequency",
    "validate_month",
    "validate_budget_line",
]

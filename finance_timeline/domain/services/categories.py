"""Default category provisioning."""

from finance_timeline.domain.constants import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
    KIND_EXPENSE,
    KIND_INCOME,
)
from finance_timeline.domain.models import Category


def build_default_categories() -> list[Category]:
    """Return the categories every new user starts with."""
    categories = [
        Category(name=name, kind=KIND_EXPENSE, sort_order=order, is_default=True)
        for name, order in DEFAULT_EXPENSE_CATEGORIES
    ]
    categories.extend(
        Category(name=name, kind=KIND_INCOME, sort_order=order, is_default=True)
        for name, order in DEFAULT_INCOME_CATEGORIES
    )
    return categories


__all__ = ["build_default_categories"]

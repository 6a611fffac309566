"""Domain models for budget reports."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class FrequencyAmounts:
    """Monthly and annual equivalents of a recurring amount."""

    monthly: Decimal
    annual: Decimal


@dataclass(frozen=True)
class CategoryVariance:
    """Budgeted versus actual amount for one category.

    ``variance`` is always ``actual - budgeted``; whether a positive value is
    favorable depends on ``kind`` and is left to the consumer.
    """

    name: str
    kind: str
    budgeted: Decimal
    actual: Decimal
    variance: Decimal


@dataclass(frozen=True)
class BudgetVarianceReport:
    """Per-category variances split by kind."""

    period: str | None
    income: list[CategoryVariance]
    expenses: list[CategoryVariance]

    @property
    def total_budgeted_income(self) -> Decimal:
        return sum((row.budgeted for row in self.income), Decimal("0"))

    @property
    def total_actual_income(self) -> Decimal:
        return sum((row.actual for row in self.income), Decimal("0"))

    @property
    def total_budgeted_expenses(self) -> Decimal:
        return sum((row.budgeted for row in self.expenses), Decimal("0"))

    @property
    def total_actual_expenses(self) -> Decimal:
        return sum((row.actual for row in self.expenses), Decimal("0"))


@dataclass(frozen=True)
class BudgetSummary:
    """Frequency-normalized budget totals."""

    monthly_income: Decimal
    monthly_expenses: Decimal
    annual_income: Decimal
    annual_expenses: Decimal

    @property
    def monthly_net(self) -> Decimal:
        return self.monthly_income - self.monthly_expenses

    @property
    def annual_net(self) -> Decimal:
        return self.annual_income - self.annual_expenses


@dataclass(frozen=True)
class ScenarioProjection:
    """Projected budget figures for one future month."""

    year: int
    month: int
    total_income: Decimal
    total_expenses: Decimal
    net_income: Decimal
    cumulative_net: Decimal


__all__ = [
    "FrequencyAmounts",
    "CategoryVariance",
    "BudgetVarianceReport",
    "BudgetSummary",
    "ScenarioProjection",
]

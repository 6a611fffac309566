"""Budget variance, summary, and projection computations."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from finance_timeline.domain.constants import (
    GRANULARITY_MONTH,
    KIND_EXPENSE,
    KIND_INCOME,
    MAX_SCENARIO_MONTHS,
)
from finance_timeline.domain.models import (
    BudgetCategoryLine,
    BudgetSummary,
    BudgetVarianceReport,
    CategoryVariance,
    ScenarioProjection,
    Transaction,
)
from finance_timeline.domain.services.frequency import normalize_frequency
from finance_timeline.domain.services.periods import advance_period
from finance_timeline.utils.decimal_utils import coerce_decimal


def compute_budget_variance(
    transactions: Iterable[Transaction],
    lines: Iterable[BudgetCategoryLine],
    *,
    period: str | None = None,
    logger: Logger | None = None,
) -> BudgetVarianceReport:
    """Compare one month of actual transactions against budget lines.

    Categories are matched by exact display name. Every name found in the
    budget or in the transactions is reported once.

    Args:
        transactions: Transactions already restricted to one month.
        lines: Budget category lines.
        period: Optional period label copied onto the report.
        logger: Optional logger for frequency warnings.

    Returns:
        BudgetVarianceReport: Variances split into income and expense rows,
        budget lines first in declared order, then unbudgeted categories in
        the order they were first seen.
    """
    kinds: dict[str, str] = {}
    budgeted: dict[str, Decimal] = {}
    actual: dict[str, Decimal] = {}

    for line in lines:
        kinds.setdefault(line.name, line.kind)
        monthly = normalize_frequency(
            line.planned_amount,
            line.frequency,
            logger=logger,
        ).monthly
        budgeted[line.name] = budgeted.get(line.name, Decimal("0")) + monthly

    for transaction in transactions:
        kinds.setdefault(transaction.category, transaction.kind)
        actual[transaction.category] = actual.get(
            transaction.category, Decimal("0")
        ) + coerce_decimal(transaction.amount)

    income: list[CategoryVariance] = []
    expenses: list[CategoryVariance] = []
    for name, kind in kinds.items():
        planned = budgeted.get(name, Decimal("0"))
        spent = actual.get(name, Decimal("0"))
        row = CategoryVariance(
            name=name,
            kind=kind,
            budgeted=planned,
            actual=spent,
            variance=spent - planned,
        )
        if kind == KIND_INCOME:
            income.append(row)
        elif kind == KIND_EXPENSE:
            expenses.append(row)
        elif logger is not None:
            logger.warning(f"Skipping category '{name}' with unknown kind '{kind}'")

    return BudgetVarianceReport(period=period, income=income, expenses=expenses)


def compute_budget_summary(
    lines: Iterable[BudgetCategoryLine],
    *,
    logger: Logger | None = None,
) -> BudgetSummary:
    """Return monthly and annual totals of a budget's lines."""
    monthly = {KIND_INCOME: Decimal("0"), KIND_EXPENSE: Decimal("0")}
    annual = {KIND_INCOME: Decimal("0"), KIND_EXPENSE: Decimal("0")}
    for line in lines:
        if line.kind not in monthly:
            continue
        amounts = normalize_frequency(
            line.planned_amount,
            line.frequency,
            logger=logger,
        )
        monthly[line.kind] += amounts.monthly
        annual[line.kind] += amounts.annual
    return BudgetSummary(
        monthly_income=monthly[KIND_INCOME],
        monthly_expenses=monthly[KIND_EXPENSE],
        annual_income=annual[KIND_INCOME],
        annual_expenses=annual[KIND_EXPENSE],
    )


def project_scenario(
    lines: Iterable[BudgetCategoryLine],
    start: date,
    months: int,
    *,
    logger: Logger | None = None,
) -> list[ScenarioProjection]:
    """Project monthly budget figures forward from ``start``.

    Args:
        lines: Budget lines driving the projection.
        start: Any date in the first projected month.
        months: Number of months to project (1 to 120).
        logger: Optional logger for frequency warnings.

    Returns:
        list[ScenarioProjection]: One projection per month with the running
        cumulative net.

    Raises:
        ValueError: If ``months`` is outside 1-120.
    """
    if not 1 <= months <= MAX_SCENARIO_MONTHS:
        raise ValueError(
            f"Projection length must be between 1 and {MAX_SCENARIO_MONTHS} "
            f"months: {months}"
        )
    summary = compute_budget_summary(lines, logger=logger)
    net = summary.monthly_net
    cumulative = Decimal("0")
    cursor = start.replace(day=1)
    projections = []
    for _ in range(months):
        cumulative += net
        projections.append(
            ScenarioProjection(
                year=cursor.year,
                month=cursor.month,
                total_income=summary.monthly_income,
                total_expenses=summary.monthly_expenses,
                net_income=net,
                cumulative_net=cumulative,
            )
        )
        cursor = advance_period(cursor, GRANULARITY_MONTH)
    return projections


__all__ = [
    "compute_budget_variance",
    "compute_budget_summary",
    "project_scenario",
]

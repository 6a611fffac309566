"""Tests for the GetBudgetVarianceUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_timeline.application.use_cases.get_budget_variance import (
    GetBudgetVarianceUseCase,
)
from finance_timeline.domain.models import Budget, BudgetCategoryLine, Transaction


def test_execute_fetches_the_calendar_month() -> None:
    """Transactions are fetched for the whole month and compared to lines."""
    repository = MagicMock()
    repository.fetch_budget.return_value = Budget(
        name="My Budget",
        lines=(
            BudgetCategoryLine("Groceries", "expense", Decimal("500")),
            BudgetCategoryLine("Salary", "income", Decimal("5000")),
        ),
    )
    repository.fetch_transactions.return_value = [
        Transaction(Decimal("650"), "expense", "Groceries", date(2024, 2, 10)),
        Transaction(Decimal("4800"), "income", "Salary", date(2024, 2, 25)),
    ]
    use_case = GetBudgetVarianceUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    )

    report = use_case.execute("user-1", 2024, 2)

    repository.fetch_transactions.assert_called_once_with(
        "user-1",
        date(2024, 2, 1),
        date(2024, 2, 29),
    )
    assert report.period == "2024-02"
    assert report.expenses[0].variance == Decimal("150")
    assert report.income[0].variance == Decimal("-200")


def test_execute_without_budget_reports_actuals_only() -> None:
    """A missing budget yields zero budgeted amounts and a warning."""
    repository = MagicMock()
    repository.fetch_budget.return_value = None
    repository.fetch_transactions.return_value = [
        Transaction(Decimal("25"), "expense", "Transport", date(2024, 5, 3)),
    ]
    logger = MagicMock()
    use_case = GetBudgetVarianceUseCase(ledger_repository=repository, logger=logger)

    report = use_case.execute("user-1", 2024, 5)

    assert report.expenses[0].budgeted == Decimal("0")
    assert report.expenses[0].variance == Decimal("25")
    logger.warning.assert_called_once()


def test_execute_rejects_invalid_month() -> None:
    """Invalid months are rejected before any fetch."""
    repository = MagicMock()
    use_case = GetBudgetVarianceUseCase(
        ledger_repository=repository,
        logger=MagicMock(),
    )

    with pytest.raises(ValueError):
        use_case.execute("user-1", 2024, 13)

    repository.fetch_budget.assert_not_called()
    repository.fetch_transactions.assert_not_called()

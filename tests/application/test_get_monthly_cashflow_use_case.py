"""Tests for the GetMonthlyCashflowUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from finance_timeline.application.use_cases.get_monthly_cashflow import (
    GetMonthlyCashflowUseCase,
)
from finance_timeline.domain.models import MonthlyBankBalance, Transaction


def test_execute_combines_transactions_and_bank_balances() -> None:
    """Every month with transactions is summarized with its bank balance."""
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        Transaction(Decimal("1800"), "income", "Salary", date(2024, 6, 28)),
        Transaction(Decimal("300"), "expense", "Shopping", date(2024, 6, 2)),
        Transaction(Decimal("45"), "expense", "Transport", date(2024, 7, 1)),
    ]
    repository.fetch_monthly_bank_balances.return_value = [
        MonthlyBankBalance(2024, 6, Decimal("9000")),
    ]
    use_case = GetMonthlyCashflowUseCase(repository, logger=MagicMock())

    summaries = use_case.execute("user-1")

    repository.fetch_transactions.assert_called_once_with("user-1", None, None)
    assert [(s.month, s.savings, s.balance) for s in summaries] == [
        (6, Decimal("1500"), Decimal("9000")),
        (7, Decimal("-45"), None),
    ]

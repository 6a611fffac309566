"""Tests for the budget_report_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from finance_timeline.adapters import budget_report_cli
from finance_timeline.domain.models import (
    BudgetSummary,
    BudgetVarianceReport,
    CategoryVariance,
    ScenarioProjection,
)
from finance_timeline.infrastructure.settings import TimelineSettings


def _row(kind, budgeted, actual):
    budgeted = Decimal(budgeted)
    actual = Decimal(actual)
    return CategoryVariance("Row", kind, budgeted, actual, actual - budgeted)


@pytest.mark.parametrize(
    ("row", "label"),
    [
        (_row("expense", "500", "650"), "unfavorable"),
        (_row("expense", "500", "400"), "favorable"),
        (_row("income", "5000", "4800"), "unfavorable"),
        (_row("income", "5000", "5100"), "favorable"),
        (_row("income", "10", "10"), "on budget"),
    ],
)
def test_status_label_depends_on_kind(row, label):
    """Over-spending and under-earning are both unfavorable."""
    assert budget_report_cli._status_label(row) == label


@pytest.fixture
def wired(monkeypatch):
    logger = MagicMock()
    variance = MagicMock()
    summary = MagicMock()
    projection = MagicMock()
    monkeypatch.setattr(budget_report_cli, "get_app_logger", lambda: logger)
    monkeypatch.setattr(budget_report_cli, "get_usage_logger", lambda: MagicMock())
    monkeypatch.setattr(
        budget_report_cli.TimelineSettings,
        "from_env",
        classmethod(lambda cls: TimelineSettings("month", 6)),
    )
    monkeypatch.setattr(
        budget_report_cli, "build_budget_variance_use_case", lambda: variance
    )
    monkeypatch.setattr(
        budget_report_cli, "build_budget_summary_use_case", lambda: summary
    )
    monkeypatch.setattr(
        budget_report_cli, "build_project_scenario_use_case", lambda: projection
    )
    return logger, variance, summary, projection


def test_main_prints_report(monkeypatch, capsys, wired):
    """The CLI prints variances, totals, and the projected cumulative net."""
    _, variance, summary, projection = wired
    monkeypatch.setenv("FINANCE_USER_ID", "user-1")
    monkeypatch.setenv("BUDGET_MONTH", "2024-05")
    variance.execute.return_value = BudgetVarianceReport(
        period="2024-05",
        income=[],
        expenses=[
            CategoryVariance(
                "Groceries",
                "expense",
                Decimal("500"),
                Decimal("650"),
                Decimal("150"),
            )
        ],
    )
    summary.execute.return_value = BudgetSummary(
        Decimal("5000"), Decimal("3000"), Decimal("60000"), Decimal("36000")
    )
    projection.execute.return_value = [
        ScenarioProjection(
            2024, 10, Decimal("5000"), Decimal("3000"), Decimal("2000"),
            Decimal("12000"),
        )
    ]

    assert budget_report_cli.main() == 0

    variance.execute.assert_called_once_with("user-1", 2024, 5)
    projection.execute.assert_called_once_with("user-1", date(2024, 5, 1), 6)
    out = capsys.readouterr().out
    assert "Budget variance for 2024-05" in out
    assert "Groceries: budgeted=500.00, actual=650.00, variance=150.00 (unfavorable)" in out
    assert "Annual budget: income=60,000.00, expenses=36,000.00, net=24,000.00" in out
    assert "(2024-10): 12,000.00" in out


def test_main_rejects_invalid_month(monkeypatch, wired):
    """An out-of-range month is reported and the CLI exits with 1."""
    logger, variance, summary, _ = wired
    monkeypatch.setenv("FINANCE_USER_ID", "user-1")
    monkeypatch.setenv("BUDGET_MONTH", "2024-13")
    variance.execute.side_effect = ValueError("Invalid month 13.")

    assert budget_report_cli.main() == 1

    logger.error.assert_called_once_with("Invalid month 13.")
    summary.execute.assert_not_called()


def test_main_requires_user(monkeypatch, wired):
    """Without FINANCE_USER_ID nothing runs."""
    _, variance, _, _ = wired
    monkeypatch.delenv("FINANCE_USER_ID", raising=False)

    assert budget_report_cli.main() == 1

    variance.execute.assert_not_called()


@pytest.mark.parametrize("raw_month", ["March", "2024-03-01"])
def test_main_rejects_malformed_month(monkeypatch, wired, raw_month):
    """A BUDGET_MONTH that is not YYYY-MM exits with 1 instead of defaulting."""
    logger, variance, summary, _ = wired
    monkeypatch.setenv("FINANCE_USER_ID", "user-1")
    monkeypatch.setenv("BUDGET_MONTH", raw_month)

    assert budget_report_cli.main() == 1

    logger.warning.assert_called_once_with(
        f"Invalid month '{raw_month}'. Expected format YYYY-MM."
    )
    variance.execute.assert_not_called()
    summary.execute.assert_not_called()

"""CLI adapter printing budget variance, totals, and projections.

Inputs come from environment variables: FINANCE_USER_ID, BUDGET_MONTH
(YYYY-MM, defaults to the current month), and SCENARIO_MONTHS.
"""

from datetime import date
import os

from finance_timeline.adapters.cli_inputs import (
    format_amount,
    parse_month,
    read_user_id,
)
from finance_timeline.domain.constants import KIND_EXPENSE
from finance_timeline.domain.models import CategoryVariance
from finance_timeline.infrastructure.container import (
    build_budget_summary_use_case,
    build_budget_variance_use_case,
    build_project_scenario_use_case,
)
from finance_timeline.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finance_timeline.infrastructure.settings import TimelineSettings


def _status_label(row: CategoryVariance) -> str:
    """Return whether the variance is favorable for the category's kind.

    Spending above the budget is unfavorable; earning below it is too.
    """
    if row.variance == 0:
        return "on budget"
    favorable = row.variance < 0 if row.kind == KIND_EXPENSE else row.variance > 0
    return "favorable" if favorable else "unfavorable"


def _print_rows(title: str, rows: list[CategoryVariance]) -> None:
    print(title)
    for row in rows:
        print(
            f"  {row.name}: budgeted={format_amount(row.budgeted)}, "
            f"actual={format_amount(row.actual)}, "
            f"variance={format_amount(row.variance)} ({_status_label(row)})"
        )


def main() -> int:
    """Run the budget use cases and print a plain-text report."""
    logger = get_app_logger()
    get_usage_logger().info("budget_report_cli invoked")
    settings = TimelineSettings.from_env()

    user_id = read_user_id(logger)
    if user_id is None:
        return 1
    raw_month = os.getenv("BUDGET_MONTH")
    if raw_month:
        parsed = parse_month(raw_month, logger)
        if parsed is None:
            return 1
        year, month = parsed
    else:
        today = date.today()
        year, month = today.year, today.month

    try:
        report = build_budget_variance_use_case().execute(user_id, year, month)
    except ValueError as exc:
        logger.error(str(exc))
        return 1
    summary = build_budget_summary_use_case().execute(user_id)
    projections = build_project_scenario_use_case().execute(
        user_id,
        date(year, month, 1),
        settings.scenario_months,
    )

    print(f"Budget variance for {report.period}")
    _print_rows("Income", report.income)
    _print_rows("Expenses", report.expenses)
    print(
        f"Monthly budget: income={format_amount(summary.monthly_income)}, "
        f"expenses={format_amount(summary.monthly_expenses)}, "
        f"net={format_amount(summary.monthly_net)}"
    )
    print(
        f"Annual budget: income={format_amount(summary.annual_income)}, "
        f"expenses={format_amount(summary.annual_expenses)}, "
        f"net={format_amount(summary.annual_net)}"
    )
    if projections:
        last = projections[-1]
        print(
            f"Projected cumulative net after {len(projections)} months "
            f"({last.year}-{last.month:02d}): "
            f"{format_amount(last.cumulative_net)}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

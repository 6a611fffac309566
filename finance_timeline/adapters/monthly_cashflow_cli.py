"""CLI adapter printing monthly cash flow with recorded bank balances."""

from finance_timeline.adapters.cli_inputs import format_amount, read_user_id
from finance_timeline.infrastructure.container import (
    build_monthly_cashflow_use_case,
)
from finance_timeline.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def main() -> int:
    """Run the monthly cash flow use case and print one line per month."""
    logger = get_app_logger()
    get_usage_logger().info("monthly_cashflow_cli invoked")
    user_id = read_user_id(logger)
    if user_id is None:
        return 1

    summaries = build_monthly_cashflow_use_case().execute(user_id)
    for summary in summaries:
        print(
            f"{summary.year}-{summary.month:02d}: "
            f"income={format_amount(summary.income)}, "
            f"expenses={format_amount(summary.expenses)}, "
            f"savings={format_amount(summary.savings)}, "
            f"bank balance={format_amount(summary.balance)}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

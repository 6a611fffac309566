"""CLI adapter printing the cash flow and net worth timeline.

Inputs come from environment variables: FINANCE_USER_ID,
TIMELINE_START_DATE, TIMELINE_END_DATE, and TIMELINE_GRANULARITY.
"""

import os

from finance_timeline.adapters.cli_inputs import (
    format_amount,
    parse_date,
    read_user_id,
)
from finance_timeline.infrastructure.container import build_timeline_use_case
from finance_timeline.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finance_timeline.infrastructure.settings import TimelineSettings


def main() -> int:
    """Run the timeline use case and print one line per period."""
    logger = get_app_logger()
    get_usage_logger().info("timeline_cli invoked")
    settings = TimelineSettings.from_env()

    user_id = read_user_id(logger)
    if user_id is None:
        return 1
    start_date = parse_date(os.getenv("TIMELINE_START_DATE"), logger)
    end_date = parse_date(os.getenv("TIMELINE_END_DATE"), logger)
    if start_date is None or end_date is None:
        logger.warning(
            "TIMELINE_START_DATE and TIMELINE_END_DATE must be valid dates."
        )
        return 1

    use_case = build_timeline_use_case()
    try:
        view = use_case.execute(
            user_id,
            start_date,
            end_date,
            granularity=settings.default_granularity,
        )
    except ValueError as exc:
        logger.error(str(exc))
        return 1

    print(
        f"Timeline ({view.granularity}, {view.start_date} to {view.end_date})"
    )
    for record in view.records:
        print(
            f"{record.period}: income={format_amount(record.income)}, "
            f"expenses={format_amount(record.expenses)}, "
            f"net={format_amount(record.net)}, "
            f"assets={format_amount(record.asset_total)}"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

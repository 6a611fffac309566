"""CLI adapter recording a dated balance for an asset.

Inputs come from environment variables: FINANCE_USER_ID, ASSET_ID,
BALANCE_AMOUNT, and BALANCE_DATE (defaults to today).
"""

from datetime import date
import os

from finance_timeline.adapters.cli_inputs import (
    format_amount,
    parse_date,
    read_user_id,
)
from finance_timeline.infrastructure.container import (
    build_asset_snapshots_use_case,
)
from finance_timeline.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finance_timeline.utils.decimal_utils import coerce_decimal


def main() -> int:
    """Add a balance snapshot and print the asset's current balance."""
    logger = get_app_logger()
    get_usage_logger().info("record_balance_cli invoked")
    user_id = read_user_id(logger)
    asset_id = os.getenv("ASSET_ID", "").strip()
    if user_id is None or not asset_id:
        logger.warning("FINANCE_USER_ID and ASSET_ID are required.")
        return 1
    try:
        amount = coerce_decimal(os.getenv("BALANCE_AMOUNT", ""))
    except ValueError as exc:
        logger.warning(f"BALANCE_AMOUNT must be a finite number: {exc}")
        return 1
    raw_date = os.getenv("BALANCE_DATE")
    if raw_date:
        recorded_on = parse_date(raw_date, logger)
        if recorded_on is None:
            return 1
    else:
        recorded_on = date.today()

    try:
        asset = build_asset_snapshots_use_case().add_snapshot(
            user_id,
            asset_id,
            amount,
            recorded_on,
        )
    except RuntimeError as exc:
        logger.error(str(exc))
        return 1

    print(
        f"{asset.name}: current balance {format_amount(asset.current_balance)} "
        f"as of {asset.last_updated}"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""CLI adapter creating the finance tables and seeding default categories.

This module wires the ProvisionDefaultCategoriesUseCase to the concrete
database adapter. Running it twice for the same user inserts nothing the
second time.
"""

from finance_timeline.adapters.cli_inputs import read_user_id
from finance_timeline.infrastructure.container import (
    build_database_adapter,
    build_provision_categories_use_case,
)
from finance_timeline.infrastructure.db import dispose_finance_engine
from finance_timeline.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from finance_timeline.infrastructure.schema import ensure_schema


def main() -> int:
    """Ensure the schema exists and provision the user's categories."""
    logger = get_app_logger()
    get_usage_logger().info("provision_categories_cli invoked")
    user_id = read_user_id(logger)
    if user_id is None:
        return 1

    db_adapter = build_database_adapter()
    try:
        ensure_schema(db_adapter.get_finance_engine())
        result = build_provision_categories_use_case(db_adapter).execute(user_id)
    finally:
        dispose_finance_engine()

    if result.already_provisioned:
        print(f"User {user_id} already has categories; nothing inserted.")
    else:
        print(
            f"Inserted {result.inserted_count} default categories "
            f"for user {user_id}."
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

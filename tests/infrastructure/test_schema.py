"""Tests for the finance database schema helper."""

from unittest.mock import MagicMock

from finance_timeline.infrastructure.schema import SCHEMA_STATEMENTS, ensure_schema


def test_ensure_schema_runs_every_statement_in_one_transaction() -> None:
    """All DDL statements run inside a single begin block."""
    engine = MagicMock()
    conn = MagicMock()
    engine.begin.return_value.__enter__.return_value = conn

    ensure_schema(engine)

    engine.begin.assert_called_once()
    executed = [call.args[0] for call in conn.exec_driver_sql.call_args_list]
    assert executed == list(SCHEMA_STATEMENTS)


def test_schema_declares_every_table() -> None:
    """Each persisted aggregate has a table."""
    ddl = "\n".join(SCHEMA_STATEMENTS)

    for table in (
        "transactions",
        "assets",
        "asset_balance_snapshots",
        "budgets",
        "budget_category_lines",
        "categories",
        "monthly_bank_balances",
    ):
        assert f"CREATE TABLE IF NOT EXISTS {table} (" in ddl

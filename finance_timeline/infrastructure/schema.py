"""Table definitions for the finance database."""

from sqlalchemy.engine import Engine


CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    amount NUMERIC NOT NULL,
    kind TEXT,
    category TEXT NOT NULL,
    description TEXT,
    occurred_on DATE NOT NULL,
    source TEXT NOT NULL DEFAULT 'manual'
)
"""

CREATE_TRANSACTIONS_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS ix_transactions_user_date
ON transactions (user_id, occurred_on)
"""

CREATE_ASSETS_SQL = """
CREATE TABLE IF NOT EXISTS assets (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    asset_type TEXT NOT NULL,
    created_on DATE NOT NULL,
    current_balance NUMERIC NOT NULL,
    last_updated DATE
)
"""

CREATE_ASSET_SNAPSHOTS_SQL = """
CREATE TABLE IF NOT EXISTS asset_balance_snapshots (
    id TEXT PRIMARY KEY,
    asset_id TEXT NOT NULL REFERENCES assets (id),
    amount NUMERIC NOT NULL,
    recorded_on DATE NOT NULL,
    position INTEGER NOT NULL
)
"""

CREATE_BUDGETS_SQL = """
CREATE TABLE IF NOT EXISTS budgets (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL UNIQUE,
    name TEXT NOT NULL,
    description TEXT
)
"""

CREATE_BUDGET_LINES_SQL = """
CREATE TABLE IF NOT EXISTS budget_category_lines (
    id TEXT PRIMARY KEY,
    budget_id TEXT NOT NULL REFERENCES budgets (id),
    name TEXT NOT NULL,
    kind TEXT NOT NULL,
    planned_amount NUMERIC NOT NULL,
    frequency TEXT NOT NULL DEFAULT 'monthly',
    category_id TEXT,
    description TEXT,
    position INTEGER NOT NULL
)
"""

CREATE_CATEGORIES_SQL = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    kind TEXT NOT NULL,
    is_default BOOLEAN NOT NULL DEFAULT FALSE,
    sort_order INTEGER NOT NULL,
    UNIQUE (user_id, name)
)
"""

CREATE_MONTHLY_BANK_BALANCES_SQL = """
CREATE TABLE IF NOT EXISTS monthly_bank_balances (
    user_id TEXT NOT NULL,
    year INTEGER NOT NULL,
    month INTEGER NOT NULL CHECK (month BETWEEN 1 AND 12),
    balance NUMERIC NOT NULL,
    PRIMARY KEY (user_id, year, month)
)
"""

SCHEMA_STATEMENTS = (
    CREATE_TRANSACTIONS_SQL,
    CREATE_TRANSACTIONS_INDEX_SQL,
    CREATE_ASSETS_SQL,
    CREATE_ASSET_SNAPSHOTS_SQL,
    CREATE_BUDGETS_SQL,
    CREATE_BUDGET_LINES_SQL,
    CREATE_CATEGORIES_SQL,
    CREATE_MONTHLY_BANK_BALANCES_SQL,
)


def ensure_schema(engine: Engine) -> None:
    """Create the finance tables if they do not exist.

    Args:
        engine: SQLAlchemy engine for the finance database.
    """
    with engine.begin() as conn:
        for statement in SCHEMA_STATEMENTS:
            conn.exec_driver_sql(statement)


__all__ = ["SCHEMA_STATEMENTS", "ensure_schema"]

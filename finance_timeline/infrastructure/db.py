"""Engine management for the finance database.

The engine is created lazily from ``FINANCE_DB_URL`` (a ``.env`` file in the
working directory is honored) and shared by every repository in the
process. PostgreSQL URLs get a small bounded pool; SQLite URLs keep the
pool SQLAlchemy selects for the dialect.
"""

import os
from typing import Any, Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from finance_timeline.application.ports.database import DatabaseEnginePort


FINANCE_DB_URL_VAR = "FINANCE_DB_URL"


def _get_env_var(name: str) -> str:
    """Return a required setting from the environment or ``.env``.

    Raises:
        RuntimeError: If the variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name, "").strip()
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _engine_options(db_url: str) -> dict[str, Any]:
    """Return ``create_engine`` keyword arguments for a database URL."""
    options: dict[str, Any] = {"pool_pre_ping": True, "future": True}
    if make_url(db_url).get_backend_name() == "sqlite":
        return options
    options.update(poolclass=QueuePool, pool_size=5, max_overflow=5)
    return options


def _create_engine(db_url: str) -> Engine:
    return create_engine(db_url, **_engine_options(db_url))


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _finance_engine
    if _finance_engine is None:
        _finance_engine = _create_engine(_get_env_var(FINANCE_DB_URL_VAR))
    return _finance_engine


def dispose_finance_engine() -> None:
    """Close pooled connections and forget the shared engine."""
    global _finance_engine
    if _finance_engine is not None:
        _finance_engine.dispose()
        _finance_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the shared SQLAlchemy engine."""

    def get_finance_engine(self) -> Engine:
        return get_finance_engine()


__all__ = [
    "FINANCE_DB_URL_VAR",
    "get_finance_engine",
    "dispose_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]

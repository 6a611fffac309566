"""SQLAlchemy-backed repository for user categories."""

from uuid import uuid4

from sqlalchemy import text

from finance_timeline.application.ports.categories_repository import (
    CategoriesRepositoryPort,
)
from finance_timeline.application.ports.database import DatabaseEnginePort
from finance_timeline.domain.models import Category


COUNT_CATEGORIES_SQL = text(
    """
    SELECT COUNT(*) AS category_count
    FROM categories
    WHERE user_id = :user_id
    """
)

INSERT_CATEGORY_SQL = text(
    """
    INSERT INTO categories (
        id,
        user_id,
        name,
        kind,
        is_default,
        sort_order
    )
    VALUES (:id, :user_id, :name, :kind, :is_default, :sort_order)
    """
)


class SqlAlchemyCategoriesRepository(CategoriesRepositoryPort):
    """Category storage backed by SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
        """
        self._db_port = db_port

    def has_categories(self, user_id: str) -> bool:
        engine = self._db_port.get_finance_engine()
        with engine.connect() as conn:
            row = conn.execute(COUNT_CATEGORIES_SQL, {"user_id": user_id}).first()
        return bool(row and row.category_count)

    def insert_categories(
        self,
        user_id: str,
        categories: list[Category],
    ) -> int:
        payload = [
            {
                "id": uuid4().hex,
                "user_id": user_id,
                "name": category.name,
                "kind": category.kind,
                "is_default": category.is_default,
                "sort_order": category.sort_order,
            }
            for category in categories
        ]
        engine = self._db_port.get_finance_engine()
        with engine.begin() as conn:
            if payload:
                conn.execute(INSERT_CATEGORY_SQL, payload)
        return len(payload)


__all__ = ["SqlAlchemyCategoriesRepository"]

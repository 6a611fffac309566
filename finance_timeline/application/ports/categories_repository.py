"""Application port for category storage."""

from typing import Protocol

from finance_timeline.domain.models import Category


class CategoriesRepositoryPort(Protocol):
    """Port exposing read and write access to user categories."""

    def has_categories(self, user_id: str) -> bool:
        """Return True when the user already owns at least one category."""

    def insert_categories(
        self,
        user_id: str,
        categories: list[Category],
    ) -> int:
        """Insert categories for the user and return how many were written."""


__all__ = ["CategoriesRepositoryPort"]

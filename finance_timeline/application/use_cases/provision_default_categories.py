"""Use case seeding default categories for a user.

The routine is idempotent: it runs on first access and does nothing when the
user already owns categories.
"""

from dataclasses import dataclass

from finance_timeline.application.ports.categories_repository import (
    CategoriesRepositoryPort,
)
from finance_timeline.domain.services.categories import build_default_categories
from finance_timeline.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class ProvisionCategoriesResult:
    """Result of a provisioning run.

    Attributes:
        inserted_count: Number of categories written.
        already_provisioned: True when the user already had categories.
    """

    inserted_count: int
    already_provisioned: bool


class ProvisionDefaultCategoriesUseCase:
    """Give a user the default income and expense categories once."""

    def __init__(
        self,
        categories_repository: CategoriesRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            categories_repository: Port providing category storage.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._categories_repository = categories_repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str) -> ProvisionCategoriesResult:
        """Insert default categories unless the user already has some."""
        if self._categories_repository.has_categories(user_id):
            self._logger.info(
                f"User {user_id} already has categories; skipping defaults"
            )
            return ProvisionCategoriesResult(
                inserted_count=0,
                already_provisioned=True,
            )
        inserted = self._categories_repository.insert_categories(
            user_id,
            build_default_categories(),
        )
        self._logger.info(
            f"Inserted {inserted} default categories for user {user_id}"
        )
        return ProvisionCategoriesResult(
            inserted_count=inserted,
            already_provisioned=False,
        )


__all__ = ["ProvisionDefaultCategoriesUseCase", "ProvisionCategoriesResult"]

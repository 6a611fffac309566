"""Application ports package."""

from .categories_repository import CategoriesRepositoryPort
from .database import DatabaseEnginePort
from .ledger_repository import LedgerRepositoryPort

__all__ = [
    "CategoriesRepositoryPort",
    "DatabaseEnginePort",
    "LedgerRepositoryPort",
]

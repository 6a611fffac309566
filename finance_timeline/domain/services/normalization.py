"""Domain normalization helpers for boundary inputs."""

from decimal import Decimal

from finance_timeline.domain.constants import (
    ASSET_TYPE_OTHER,
    ASSET_TYPES,
    KIND_EXPENSE,
    KIND_INCOME,
    SOURCE_MANUAL,
    TRANSACTION_SOURCES,
)
from finance_timeline.utils.decimal_utils import coerce_decimal


def normalize_granularity(granularity: str | None) -> str | None:
    """Normalize granularity literals from configuration or CLI input.

    Args:
        granularity: Raw granularity value.

    Returns:
        str | None: Lower-cased, stripped value, or None when empty.
    """
    if not granularity:
        return None
    cleaned = granularity.strip()
    return cleaned.lower() if cleaned else None


def normalize_signed_amount(amount) -> tuple[Decimal, str]:
    """Split a signed amount into an unsigned amount and a kind.

    Args:
        amount: Signed amount where negative values are expenses.

    Returns:
        tuple[Decimal, str]: Absolute amount and its kind.

    Raises:
        ValueError: If the amount is not a finite number.
    """
    value = coerce_decimal(amount)
    if value < 0:
        return -value, KIND_EXPENSE
    return value, KIND_INCOME


def normalize_source(source: str | None) -> str:
    """Return a known transaction source, defaulting to manual."""
    cleaned = (source or "").strip().lower()
    return cleaned if cleaned in TRANSACTION_SOURCES else SOURCE_MANUAL


def normalize_asset_type(asset_type: str | None) -> str:
    """Return a known asset type, defaulting to other."""
    cleaned = (asset_type or "").strip().lower()
    return cleaned if cleaned in ASSET_TYPES else ASSET_TYPE_OTHER


__all__ = [
    "normalize_granularity",
    "normalize_signed_amount",
    "normalize_source",
    "normalize_asset_type",
]

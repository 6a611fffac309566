"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to a finite Decimal.

    ``None`` counts as zero so missing SQL aggregates sum cleanly.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not a number, or is NaN or infinite.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount {value!r}: not a number") from exc
    if not result.is_finite():
        raise ValueError(f"Invalid amount {value!r}: must be finite")
    return result


__all__ = ["coerce_decimal"]

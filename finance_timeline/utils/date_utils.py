"""Helpers for calendar date normalization."""

from datetime import date, datetime


def coerce_date(value) -> date:
    """Normalize date-like values to a calendar date.

    SQLite returns dates as ISO strings while PostgreSQL drivers return
    ``date`` or ``datetime`` objects.

    Args:
        value: Raw date value from SQL or adapters.

    Returns:
        date: Calendar date.

    Raises:
        ValueError: If the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip()[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


__all__ = ["coerce_date"]

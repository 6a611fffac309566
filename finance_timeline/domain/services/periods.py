"""Period key generation and calendar alignment.

Period keys are canonical strings used as grouping and merge keys:

* ``week``: ISO date of the Monday starting the week (``YYYY-MM-DD``);
* ``month``: ``YYYY-MM``;
* ``year``: ``YYYY``.
"""

import calendar
from collections.abc import Iterable, Iterator
from datetime import date, timedelta

from finance_timeline.domain.constants import (
    GRANULARITY_MONTH,
    GRANULARITY_WEEK,
)
from finance_timeline.domain.services.validation import validate_granularity
from finance_timeline.utils.date_utils import coerce_date


def align_period_start(value: date, granularity: str) -> date:
    """Return the first day of the period containing ``value``.

    Args:
        value: Any calendar date; datetimes are truncated to their date.
        granularity: Bucket size (week, month, or year).

    Returns:
        date: Monday of the week, first of the month, or January 1st.
    """
    validate_granularity(granularity)
    value = coerce_date(value)
    if granularity == GRANULARITY_WEEK:
        return value - timedelta(days=value.weekday())
    if granularity == GRANULARITY_MONTH:
        return value.replace(day=1)
    return date(value.year, 1, 1)


def advance_period(start: date, granularity: str) -> date:
    """Return the start of the period following the one at ``start``."""
    validate_granularity(granularity)
    if granularity == GRANULARITY_WEEK:
        return start + timedelta(days=7)
    if granularity == GRANULARITY_MONTH:
        if start.month == 12:
            return date(start.year + 1, 1, 1)
        return date(start.year, start.month + 1, 1)
    return date(start.year + 1, 1, 1)


def format_period_key(start: date, granularity: str) -> str:
    """Format an aligned period start as its canonical key."""
    validate_granularity(granularity)
    if granularity == GRANULARITY_WEEK:
        return start.isoformat()
    if granularity == GRANULARITY_MONTH:
        return f"{start.year:04d}-{start.month:02d}"
    return f"{start.year:04d}"


def period_key_for(value: date, granularity: str) -> str:
    """Return the key of the period containing ``value``."""
    return format_period_key(align_period_start(value, granularity), granularity)


def parse_period_key(key: str, granularity: str) -> date:
    """Return the start date of the period identified by ``key``.

    Raises:
        ValueError: If the key does not match the granularity's format.
    """
    validate_granularity(granularity)
    try:
        if granularity == GRANULARITY_WEEK:
            return date.fromisoformat(key)
        if granularity == GRANULARITY_MONTH:
            year, month = key.split("-")
            return date(int(year), int(month), 1)
        return date(int(key), 1, 1)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"Invalid {granularity} period key: {key!r}"
        ) from exc


def period_end(key: str, granularity: str) -> date:
    """Return the last calendar day of the period identified by ``key``."""
    start = parse_period_key(key, granularity)
    if granularity == GRANULARITY_WEEK:
        return start + timedelta(days=6)
    if granularity == GRANULARITY_MONTH:
        last_day = calendar.monthrange(start.year, start.month)[1]
        return start.replace(day=last_day)
    return date(start.year, 12, 31)


def iter_period_keys(
    start_date: date,
    end_date: date,
    granularity: str,
) -> Iterator[str]:
    """Yield period keys covering ``start_date`` through ``end_date``.

    The first key is the period containing ``start_date``; keys advance one
    unit at a time until the cursor passes ``end_date``. Nothing is yielded
    when ``start_date`` is after ``end_date``.

    Args:
        start_date: First date to cover.
        end_date: Last date to cover.
        granularity: Bucket size (week, month, or year).

    Returns:
        Iterator[str]: Consecutive period keys in chronological order.

    Raises:
        ValueError: If the granularity is not supported. Raised eagerly,
            before iteration starts.
    """
    validate_granularity(granularity)
    return _generate_period_keys(
        coerce_date(start_date),
        coerce_date(end_date),
        granularity,
    )


def _generate_period_keys(
    start_date: date,
    end_date: date,
    granularity: str,
) -> Iterator[str]:
    if start_date > end_date:
        return
    cursor = align_period_start(start_date, granularity)
    while cursor <= end_date:
        yield format_period_key(cursor, granularity)
        cursor = advance_period(cursor, granularity)


def period_keys(
    start_date: date,
    end_date: date,
    granularity: str,
) -> list[str]:
    """Return the period keys covering a date range as a list."""
    return list(iter_period_keys(start_date, end_date, granularity))


def sort_period_keys(keys: Iterable[str], granularity: str) -> list[str]:
    """Sort period keys chronologically by their parsed start date."""
    return sorted(keys, key=lambda key: parse_period_key(key, granularity))


__all__ = [
    "align_period_start",
    "advance_period",
    "format_period_key",
    "period_key_for",
    "parse_period_key",
    "period_end",
    "iter_period_keys",
    "period_keys",
    "sort_period_keys",
]

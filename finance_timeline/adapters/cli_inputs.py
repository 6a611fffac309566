"""Environment-driven inputs shared by the command-line adapters."""

from datetime import date
import os


def read_user_id(logger) -> str | None:
    """Return FINANCE_USER_ID, logging a warning when it is missing."""
    user_id = os.getenv("FINANCE_USER_ID", "").strip()
    if not user_id:
        logger.warning("FINANCE_USER_ID is required.")
        return None
    return user_id


def parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when missing or invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def parse_month(value: str | None, logger) -> tuple[int, int] | None:
    """Parse a YYYY-MM string into a (year, month) pair."""
    if not value:
        return None
    try:
        year, month = (int(part) for part in value.split("-"))
    except ValueError:
        logger.warning(f"Invalid month '{value}'. Expected format YYYY-MM.")
        return None
    return year, month


def format_amount(value) -> str:
    """Format an optional amount for plain-text reports."""
    if value is None:
        return "-"
    return f"{value:,.2f}"


__all__ = ["read_user_id", "parse_date", "parse_month", "format_amount"]

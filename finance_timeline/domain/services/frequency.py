"""Frequency normalization for recurring budget amounts."""

from decimal import Decimal
from logging import Logger

from finance_timeline.domain.constants import (
    FREQUENCY_FORTNIGHTLY,
    FREQUENCY_MONTHLY,
    FREQUENCY_ONCE,
    FREQUENCY_WEEKLY,
    FREQUENCY_YEARLY,
)
from finance_timeline.domain.models import FrequencyAmounts
from finance_timeline.utils.decimal_utils import coerce_decimal


# Occurrences per year for each frequency. One-time amounts are spread over
# a year like yearly ones.
OCCURRENCES_PER_YEAR = {
    FREQUENCY_WEEKLY: Decimal("52"),
    FREQUENCY_FORTNIGHTLY: Decimal("26"),
    FREQUENCY_MONTHLY: Decimal("12"),
    FREQUENCY_YEARLY: Decimal("1"),
    FREQUENCY_ONCE: Decimal("1"),
}

MONTHS_PER_YEAR = Decimal("12")


def normalize_frequency(
    amount,
    frequency: str,
    *,
    logger: Logger | None = None,
) -> FrequencyAmounts:
    """Convert a recurring amount into monthly and annual equivalents.

    Args:
        amount: Amount paid or received once per ``frequency``.
        frequency: One of weekly, fortnightly, monthly, yearly, once.
        logger: Optional logger used to report unknown frequencies.

    Returns:
        FrequencyAmounts: Monthly and annual equivalents. Both are zero for
        an unknown frequency.
    """
    value = coerce_decimal(amount)
    occurrences = OCCURRENCES_PER_YEAR.get(frequency)
    if occurrences is None:
        if logger is not None:
            logger.warning(
                f"Unknown frequency '{frequency}', counting amount {value} as 0"
            )
        return FrequencyAmounts(monthly=Decimal("0"), annual=Decimal("0"))
    if frequency == FREQUENCY_MONTHLY:
        return FrequencyAmounts(monthly=value, annual=value * MONTHS_PER_YEAR)
    annual = value * occurrences
    return FrequencyAmounts(monthly=annual / MONTHS_PER_YEAR, annual=annual)


def monthly_equivalent(
    amount,
    frequency: str,
    *,
    logger: Logger | None = None,
) -> Decimal:
    """Return the monthly equivalent of a recurring amount."""
    return normalize_frequency(amount, frequency, logger=logger).monthly


def annual_equivalent(
    amount,
    frequency: str,
    *,
    logger: Logger | None = None,
) -> Decimal:
    """Return the annual equivalent of a recurring amount."""
    return normalize_frequency(amount, frequency, logger=logger).annual


__all__ = [
    "OCCURRENCES_PER_YEAR",
    "normalize_frequency",
    "monthly_equivalent",
    "annual_equivalent",
]

"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

from finance_timeline.domain.constants import (
    GRANULARITIES,
    GRANULARITY_MONTH,
    MAX_SCENARIO_MONTHS,
)
from finance_timeline.domain.services.normalization import normalize_granularity
from finance_timeline.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class TimelineSettings:
    """Settings for timeline and projection defaults.

    Attributes:
        default_granularity: Granularity used when a request names none.
        scenario_months: Default projection length in months.
    """

    default_granularity: str = GRANULARITY_MONTH
    scenario_months: int = 12

    @classmethod
    def from_env(cls) -> "TimelineSettings":
        """Build settings from environment variables.

        Returns:
            TimelineSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        granularity = cls._parse_granularity(
            os.getenv("TIMELINE_GRANULARITY"),
            logger=logger,
        )
        months = cls._parse_months(os.getenv("SCENARIO_MONTHS"), logger=logger)
        return cls(default_granularity=granularity, scenario_months=months)

    @staticmethod
    def _parse_granularity(raw_value: str | None, logger) -> str:
        """Return a supported granularity, falling back to month.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            str: Normalized granularity.
        """
        granularity = normalize_granularity(raw_value)
        if granularity is None:
            return GRANULARITY_MONTH
        if granularity not in GRANULARITIES:
            logger.warning(
                f"Unsupported TIMELINE_GRANULARITY '{raw_value}'; using month"
            )
            return GRANULARITY_MONTH
        return granularity

    @staticmethod
    def _parse_months(raw_value: str | None, logger) -> int:
        """Return a projection length within 1-120, defaulting to 12."""
        if not raw_value:
            return 12
        try:
            months = int(raw_value)
        except ValueError:
            logger.warning(f"Invalid SCENARIO_MONTHS '{raw_value}'; using 12")
            return 12
        if not 1 <= months <= MAX_SCENARIO_MONTHS:
            logger.warning(
                f"SCENARIO_MONTHS {months} outside 1-{MAX_SCENARIO_MONTHS}; "
                "using 12"
            )
            return 12
        return months


__all__ = ["TimelineSettings"]

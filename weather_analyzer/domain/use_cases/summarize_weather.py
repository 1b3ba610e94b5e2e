"""Use case for rendering the weather summary report."""

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from ..entities.weather_record import WeatherRecord
from .weather_statistics import (
    days_above_temperature,
    rainy_day_count,
    temperature_category_counts,
    temperature_stats,
)

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = "No weather data available."

TENTH = Decimal("0.1")

SUMMARY_TEMPLATE = """Weather Data Summary
===================

Total Records: {count}
Temperature Range: {minimum}°F to {maximum}°F
Average Temperature: {mean}°F
Rainy Days: {rainy_days}

Temperature Categories:
{categories}
"""


def format_tenths(value: float) -> str:
    """Render a finite value with one decimal place, ties rounded away from zero."""
    return str(Decimal(repr(value)).quantize(TENTH, rounding=ROUND_HALF_UP))


class SummarizeWeatherUseCase:
    """Use case to build the fixed-format text summary of a dataset."""

    def execute(self, records: Sequence[WeatherRecord]) -> str:
        """
        Execute summarization.

        Args:
            records: Loaded weather records

        Returns:
            Multi-line report, or NO_DATA_MESSAGE for an empty dataset
        """
        if not records:
            return NO_DATA_MESSAGE

        logger.info(f"Summarizing {len(records)} weather records")
        stats = temperature_stats(records)
        categories = "\n".join(
            f"  {category.value}: {count} days"
            for category, count in temperature_category_counts(records).items()
        )

        return SUMMARY_TEMPLATE.format(
            count=stats.count,
            minimum=format_tenths(stats.minimum),
            maximum=format_tenths(stats.maximum),
            mean=format_tenths(stats.mean),
            rainy_days=rainy_day_count(records),
            categories=categories,
        )


def summarize(records: Sequence[WeatherRecord]) -> str:
    """Shortcut for SummarizeWeatherUseCase().execute(records)."""
    return SummarizeWeatherUseCase().execute(records)


def render_additional_analysis(
    records: Sequence[WeatherRecord], threshold: float, limit: int = 5
) -> str:
    """
    Render the days-above-threshold section shown after the summary.

    Args:
        records: Loaded weather records
        threshold: Temperature threshold in Fahrenheit (strict)
        limit: Maximum number of dates to list

    Returns:
        Section text; the date listing is omitted when no day qualifies

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    days = days_above_temperature(records, threshold)
    lines = [
        "Additional Analysis:",
        "-------------------",
        f"Days above {threshold:g}°F: {len(days)}",
    ]
    if days:
        lines.append(f"First {limit} days above {threshold:g}°F: " + ", ".join(days[:limit]))
    return "\n".join(lines)

"""Aggregations over weather records.

Every function here is pure: it takes the loaded records as a read-only
sequence and returns a new value.
"""

import math
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from ..entities.temperature_category import TemperatureCategory
from ..entities.temperature_stats import TemperatureStats
from ..entities.weather_record import WeatherRecord

CATEGORY_WIDTH = 20


def _temperatures(records: Sequence[WeatherRecord]) -> pd.Series:
    return pd.Series([r.temperature for r in records], dtype=float)


def average_temperature_for_month(
    records: Sequence[WeatherRecord], year_month: str
) -> float:
    """
    Average temperature of the records in one month.

    Args:
        records: Weather records
        year_month: Month key in format YYYY-MM

    Returns:
        Mean temperature, or NaN if no record falls in that month
    """
    matching = [r for r in records if r.year_month == year_month]
    if not matching:
        return np.nan
    return float(_temperatures(matching).mean())


def monthly_average_temperatures(records: Sequence[WeatherRecord]) -> Dict[str, float]:
    """Average temperature per YYYY-MM key, in first-seen month order."""
    if not records:
        return {}
    df = pd.DataFrame(
        {
            "year_month": [r.year_month for r in records],
            "temperature": [r.temperature for r in records],
        }
    )
    means = df.groupby("year_month", sort=False)["temperature"].mean()
    return {month: float(value) for month, value in means.items()}


def days_above_temperature(
    records: Sequence[WeatherRecord], threshold: float
) -> List[str]:
    """Dates of records strictly warmer than threshold, in input order."""
    return [r.date for r in records if r.temperature > threshold]


def rainy_day_count(records: Sequence[WeatherRecord]) -> int:
    return sum(1 for r in records if r.is_rainy)


def categorize_temperature(temperature: float) -> TemperatureCategory:
    """
    Bucket a temperature by floor(temperature / 20).

    <0 Freezing, 0 Very Cold, 1 Cold, 2-3 Mild, 4 Warm, >=5 Hot.
    """
    return TemperatureCategory.from_bucket(math.floor(temperature / CATEGORY_WIDTH))


def temperature_category_counts(
    records: Sequence[WeatherRecord],
) -> Dict[TemperatureCategory, int]:
    """
    Count records per temperature category.

    Categories without records are absent. Keys are in first-seen order.
    """
    counts: Dict[TemperatureCategory, int] = {}
    for record in records:
        category = categorize_temperature(record.temperature)
        counts[category] = counts.get(category, 0) + 1
    return counts


def temperature_stats(records: Sequence[WeatherRecord]) -> TemperatureStats:
    """Count, min, max and mean temperature; NaN fields when empty."""
    temps = _temperatures(records)
    if temps.empty:
        return TemperatureStats(count=0, minimum=np.nan, maximum=np.nan, mean=np.nan)
    return TemperatureStats(
        count=int(temps.size),
        minimum=float(temps.min()),
        maximum=float(temps.max()),
        mean=float(temps.mean()),
    )

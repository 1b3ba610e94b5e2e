"""Use cases - core business operations."""

from .load_weather_data import LoadWeatherDataUseCase
from .summarize_weather import (
    NO_DATA_MESSAGE,
    SummarizeWeatherUseCase,
    format_tenths,
    render_additional_analysis,
    summarize,
)
from .weather_statistics import (
    average_temperature_for_month,
    categorize_temperature,
    days_above_temperature,
    monthly_average_temperatures,
    rainy_day_count,
    temperature_category_counts,
    temperature_stats,
)

__all__ = [
    "LoadWeatherDataUseCase",
    "SummarizeWeatherUseCase",
    "NO_DATA_MESSAGE",
    "format_tenths",
    "render_additional_analysis",
    "summarize",
    "average_temperature_for_month",
    "categorize_temperature",
    "days_above_temperature",
    "monthly_average_temperatures",
    "rainy_day_count",
    "temperature_category_counts",
    "temperature_stats",
]

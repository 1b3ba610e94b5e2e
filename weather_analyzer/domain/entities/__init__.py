"""Domain entities."""

from .weather_record import WeatherRecord
from .temperature_category import TemperatureCategory
from .temperature_stats import TemperatureStats

__all__ = [
    "WeatherRecord",
    "TemperatureCategory",
    "TemperatureStats",
]

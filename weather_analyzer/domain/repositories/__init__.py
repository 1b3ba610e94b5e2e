"""Repository interfaces."""

from .weather_repository import LoadResult, WeatherRepository

__all__ = [
    "LoadResult",
    "WeatherRepository",
]

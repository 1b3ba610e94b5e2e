"""Application services orchestrating the use cases."""

from .weather_analyzer_service import WeatherAnalyzerService

__all__ = ["WeatherAnalyzerService"]

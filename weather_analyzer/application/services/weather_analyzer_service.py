"""Service orchestrating the weather analysis workflow."""

import logging
import math
from typing import Any, Dict, List, Optional

from ...domain.entities.weather_record import WeatherRecord
from ...domain.repositories.weather_repository import WeatherRepository
from ...domain.use_cases.load_weather_data import LoadWeatherDataUseCase
from ...domain.use_cases.summarize_weather import (
    SummarizeWeatherUseCase,
    format_tenths,
    render_additional_analysis,
)
from ...domain.use_cases.weather_statistics import (
    average_temperature_for_month,
    monthly_average_temperatures,
)

logger = logging.getLogger(__name__)


class WeatherAnalyzerService:
    """Loads weather records once and builds the report sections from them."""

    def __init__(
        self,
        weather_repo: WeatherRepository,
        analysis_settings: Optional[Dict[str, Any]] = None,
    ):
        settings = analysis_settings or {}
        self.weather_repo = weather_repo
        self.threshold = float(settings.get("temperature_threshold", 29.0))
        self.preview_limit = int(settings.get("preview_limit", 5))

        self.load_uc = LoadWeatherDataUseCase(weather_repo)
        self.summarize_uc = SummarizeWeatherUseCase()

    def load_records(self) -> List[WeatherRecord]:
        return self.load_uc.execute()

    def build_report(self, records: List[WeatherRecord]) -> str:
        """Summary followed by the days-above-threshold section."""
        summary = self.summarize_uc.execute(records)
        additional = render_additional_analysis(records, self.threshold, self.preview_limit)
        return f"{summary}\n\n{additional}"

    def month_report(self, records: List[WeatherRecord], year_month: str) -> str:
        average = average_temperature_for_month(records, year_month)
        if math.isnan(average):
            return f"No records for {year_month}"
        return f"Average Temperature for {year_month}: {format_tenths(average)}°F"

    def monthly_report(self, records: List[WeatherRecord]) -> str:
        """Table of average temperature per month."""
        lines = ["Monthly Averages:", "-----------------"]
        for month, average in monthly_average_temperatures(records).items():
            lines.append(f"  {month}: {format_tenths(average)}°F")
        return "\n".join(lines)

"""Tests for WeatherAnalyzerService."""

from typing import List

import pytest
from weather_analyzer.application.services.weather_analyzer_service import WeatherAnalyzerService
from weather_analyzer.domain.entities.weather_record import WeatherRecord
from weather_analyzer.domain.repositories.weather_repository import LoadResult, WeatherRepository


class InMemoryWeatherRepository(WeatherRepository):
    """Repository serving a fixed list of records."""

    def __init__(self, records: List[WeatherRecord], error: str = None):
        self.records = records
        self.error = error

    def load(self) -> LoadResult:
        return LoadResult(records=list(self.records), error=self.error)


@pytest.fixture
def records():
    return [
        WeatherRecord("2024-01-01", 28.0, 60.0, 0.0),
        WeatherRecord("2024-01-02", 34.0, 60.0, 0.2),
        WeatherRecord("2024-02-01", 50.0, 60.0, 0.0),
    ]


def test_build_report(records):
    """Summary and additional analysis are joined."""
    service = WeatherAnalyzerService(InMemoryWeatherRepository(records))

    report = service.build_report(service.load_records())

    assert report.startswith("Weather Data Summary\n")
    assert "Total Records: 3" in report
    assert "  Mild: 1 days\n\n\nAdditional Analysis:\n" in report
    assert "Days above 29°F: 2" in report
    assert report.endswith("First 5 days above 29°F: 2024-01-02, 2024-02-01")


def test_analysis_settings(records):
    """Threshold and listing limit come from the settings."""
    service = WeatherAnalyzerService(
        InMemoryWeatherRepository(records),
        analysis_settings={"temperature_threshold": 20.0, "preview_limit": 1},
    )

    report = service.build_report(records)

    assert "Days above 20°F: 3" in report
    assert report.endswith("First 1 days above 20°F: 2024-01-01")


def test_load_records_failure_is_empty():
    """Read errors reach the service as an empty list."""
    service = WeatherAnalyzerService(InMemoryWeatherRepository([], error="permission denied"))

    assert service.load_records() == []


def test_month_report(records):
    """Average for one month, or a notice when the month has no records."""
    service = WeatherAnalyzerService(InMemoryWeatherRepository(records))

    assert service.month_report(records, "2024-01") == "Average Temperature for 2024-01: 31.0°F"
    assert service.month_report(records, "2025-06") == "No records for 2025-06"


def test_monthly_report(records):
    """One line per month, first-seen order."""
    service = WeatherAnalyzerService(InMemoryWeatherRepository(records))

    assert service.monthly_report(records) == (
        "Monthly Averages:\n"
        "-----------------\n"
        "  2024-01: 31.0°F\n"
        "  2024-02: 50.0°F"
    )


def test_month_sections_round_half_up():
    """Monthly averages use the same half-up rounding as the summary."""
    records = [
        WeatherRecord("2024-03-01", 31.0, 60.0, 0.0),
        WeatherRecord("2024-03-02", 31.5, 60.0, 0.0),
    ]
    service = WeatherAnalyzerService(InMemoryWeatherRepository(records))

    assert service.month_report(records, "2024-03") == "Average Temperature for 2024-03: 31.3°F"
    assert service.monthly_report(records).endswith("  2024-03: 31.3°F")

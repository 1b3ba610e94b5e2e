"""Weather record entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherRecord:
    """Represents one daily weather observation."""

    date: str  # YYYY-MM-DD, kept verbatim
    temperature: float  # Fahrenheit
    humidity: float  # percentage
    precipitation: float  # inches

    @property
    def is_rainy(self) -> bool:
        """True if any precipitation was recorded."""
        return self.precipitation > 0

    @property
    def year_month(self) -> str:
        """Monthly grouping key (YYYY-MM)."""
        return self.date[:7]

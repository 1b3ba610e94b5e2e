"""Weather repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional
from ..entities.weather_record import WeatherRecord


@dataclass(frozen=True)
class LoadResult:
    """Outcome of a load: the records read, or the reason nothing was read."""

    records: List[WeatherRecord] = field(default_factory=list)
    error: Optional[str] = None
    skipped_rows: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None


class WeatherRepository(ABC):
    """Abstract repository for weather observation access."""

    @abstractmethod
    def load(self) -> LoadResult:
        """
        Read all observations from the underlying source.

        Must not raise for read failures; the failure reason is reported
        through LoadResult.error instead.

        Returns:
            LoadResult with records in source order
        """
        pass

    def get_weather_data(self) -> List[WeatherRecord]:
        """
        Retrieve all weather records.

        Returns:
            List of WeatherRecord entities, empty if the source could not be read
        """
        return self.load().records

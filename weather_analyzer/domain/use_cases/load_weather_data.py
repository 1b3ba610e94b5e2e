"""Use case for loading weather data."""

import logging
from typing import List
from ..entities.weather_record import WeatherRecord
from ..repositories.weather_repository import WeatherRepository

logger = logging.getLogger(__name__)


class LoadWeatherDataUseCase:
    """Use case to load weather records from a repository."""

    def __init__(self, repository: WeatherRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for weather data access
        """
        self.repository = repository

    def execute(self) -> List[WeatherRecord]:
        """
        Execute the use case.

        Returns:
            List of WeatherRecord entities in source order; empty when the
            source is empty or could not be read
        """
        result = self.repository.load()
        if not result.ok:
            logger.debug(f"No usable data: {result.error}")
        logger.info(f"Collected {len(result.records)} weather records")
        return result.records

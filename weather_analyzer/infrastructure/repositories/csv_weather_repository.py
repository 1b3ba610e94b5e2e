"""CSV file weather repository implementation."""

import logging
import math
import re
from pathlib import Path
from typing import List, Optional, Sequence
from ...domain.entities.weather_record import WeatherRecord
from ...domain.repositories.weather_repository import LoadResult, WeatherRepository

logger = logging.getLogger(__name__)

MIN_FIELDS = 4
DECIMAL_PATTERN = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


def parse_row(fields: Sequence[str]) -> Optional[WeatherRecord]:
    """
    Build a record from split CSV fields.

    Args:
        fields: Fields of one line, already split on commas

    Returns:
        WeatherRecord, or None if the row is too short or a numeric field
        is not a plain finite decimal number
    """
    if len(fields) < MIN_FIELDS:
        return None
    if not all(DECIMAL_PATTERN.fullmatch(v) for v in fields[1:MIN_FIELDS]):
        return None
    temperature, humidity, precipitation = (float(v) for v in fields[1:MIN_FIELDS])
    if not all(math.isfinite(v) for v in (temperature, humidity, precipitation)):
        return None
    return WeatherRecord(
        date=fields[0],
        temperature=temperature,
        humidity=humidity,
        precipitation=precipitation,
    )


class CsvWeatherRepository(WeatherRepository):
    """Repository for daily weather observations stored as plain CSV."""

    def __init__(self, data_file: str, encoding: str = "utf-8"):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV file; the first line is a header
            encoding: Text encoding of the file
        """
        self.data_file = Path(data_file)
        self.encoding = encoding

    def load(self) -> LoadResult:
        """Read the CSV file, skipping the header and malformed rows."""
        logger.info(f"Loading weather data from {self.data_file}")

        try:
            with open(self.data_file, "r", encoding=self.encoding) as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading file: {e}")
            return LoadResult(error=str(e))

        records: List[WeatherRecord] = []
        skipped = 0
        for line in lines[1:]:
            fields = line.split(",")
            record = parse_row(fields)
            if record is not None:
                records.append(record)
            elif len(fields) >= MIN_FIELDS:
                skipped += 1

        if skipped:
            logger.warning(f"Skipped {skipped} rows with non-numeric values")
        logger.info(f"Loaded {len(records)} weather records")
        return LoadResult(records=records, skipped_rows=skipped)

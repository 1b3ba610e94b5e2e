"""Application settings and configuration."""

import os
from pathlib import Path

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
WEATHER_DATA_FILE = Path(os.getenv("WEATHER_DATA_FILE", DATA_DIR / "weather_data.csv"))

# Analysis settings
ANALYSIS_SETTINGS = {
    "temperature_threshold": 29.0,  # Fahrenheit, strict
    "preview_limit": 5,  # dates listed in the additional analysis
}

# Logging settings
LOGGING_SETTINGS = {
    "level": os.getenv("WEATHER_LOG_LEVEL", "INFO").upper(),
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}

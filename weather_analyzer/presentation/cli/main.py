"""CLI interface for weather data analysis."""

import argparse
import logging
import sys

from ...application.services.weather_analyzer_service import WeatherAnalyzerService
from ...infrastructure.repositories.csv_weather_repository import CsvWeatherRepository

from config.settings import (
    WEATHER_DATA_FILE,
    ANALYSIS_SETTINGS,
    LOGGING_SETTINGS,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_DATA = 1
EXIT_ERROR = 2


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Weather Data Analyzer")
    parser.add_argument(
        "--data-file",
        type=str,
        default=str(WEATHER_DATA_FILE),
        help="CSV file with a header line and date,temperature,humidity,precipitation rows",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=ANALYSIS_SETTINGS["temperature_threshold"],
        help="Report days strictly above this temperature (°F)",
    )
    parser.add_argument(
        "--limit",
        type=non_negative_int,
        default=ANALYSIS_SETTINGS["preview_limit"],
        help="Number of matching dates to list",
    )
    parser.add_argument("--month", type=str, default=None, help="Average for one month, e.g. '2024-01'")
    parser.add_argument("--monthly", action="store_true", help="Print average temperature per month")
    parser.add_argument(
        "--log-level",
        type=str,
        default=LOGGING_SETTINGS["level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (logs go to stderr)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=LOGGING_SETTINGS["format"],
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    service = WeatherAnalyzerService(
        weather_repo=CsvWeatherRepository(args.data_file),
        analysis_settings={
            "temperature_threshold": args.threshold,
            "preview_limit": args.limit,
        },
    )

    try:
        records = service.load_records()
        if not records:
            print(f"No data found. Please check the file path: {args.data_file}")
            return EXIT_NO_DATA

        print(service.build_report(records))

        if args.month:
            print()
            print(service.month_report(records, args.month))

        if args.monthly:
            print()
            print(service.monthly_report(records))

    except Exception as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        return EXIT_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())

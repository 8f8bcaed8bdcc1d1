"""CLI: bulk-refresh AWC snapshots or look up a single station's METAR/TAF."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table

from .config import Settings, load_settings
from .exceptions import ConfigError, HTTPStatusError, WeatherProviderError
from .log_setup import setup_logger
from .weather.awc import AviationWeatherProvider
from .weather.models import StationWeather
from .weather.service import WeatherService


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        prog="aviation-weather",
        description="Fetch METAR/TAF reports from aviationweather.gov.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    update = commands.add_parser("update", help="Download the all-station METAR/TAF snapshots.")
    update.add_argument(
        "--max-print",
        type=int,
        default=None,
        help="Number of stations to print from each snapshot.",
    )

    for name, help_text in (
        ("metar", "Print the latest METAR for a station."),
        ("taf", "Print the latest TAF for a station."),
        ("station", "Print the latest METAR and TAF for a station."),
    ):
        command = commands.add_parser(name, help=help_text)
        command.add_argument("station", help="ICAO station identifier, e.g. PAFA.")

    return parser.parse_args(argv)


def _print_update_summary(
    console: Console,
    metars: dict[str, str],
    tafs: dict[str, str],
    max_print: int,
) -> None:
    console.print(f"Fetched {len(metars)} METARs | {len(tafs)} TAFs")

    for title, reports in (("METARs", metars), ("TAFs", tafs)):
        if not reports:
            console.print(f"No {title} found.")
            continue
        table = Table(title=f"{title} (first {min(max_print, len(reports))})")
        table.add_column("Station")
        table.add_column("Raw Text", overflow="fold")
        for station_id in sorted(reports)[:max_print]:
            table.add_row(station_id, reports[station_id])
        console.print(table)


def _print_station_weather(console: Console, weather: StationWeather) -> None:
    table = Table(title=f"Station {weather.station_id}")
    table.add_column("Report")
    table.add_column("Raw Text", overflow="fold")
    table.add_row("METAR", weather.metar)
    table.add_row("TAF", weather.taf)
    console.print(table)


def _run(args: argparse.Namespace, service: WeatherService, settings: Settings) -> None:
    console = Console()
    if args.command == "update":
        if args.max_print is not None and args.max_print <= 0:
            raise WeatherProviderError("--max-print must be > 0 when provided.")
        metars, tafs = service.update()
        max_print = args.max_print or settings.weather_max_print
        _print_update_summary(console, metars=metars, tafs=tafs, max_print=max_print)
    elif args.command == "metar":
        console.print(service.get_metar(args.station))
    elif args.command == "taf":
        console.print(service.get_taf(args.station))
    elif args.command == "station":
        _print_station_weather(console, service.get_station_weather(args.station))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the requested command and return a process exit code."""
    args = parse_args(argv)
    logger = setup_logger()

    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Configuration failure: %s", exc)
        return 2

    logger.setLevel(settings.logging_level)
    logger.debug("Loaded settings: %s", settings.safe_summary())

    try:
        with AviationWeatherProvider.from_settings(settings, logger=logger) as provider:
            _run(args, WeatherService(provider), settings)
    except HTTPStatusError as exc:
        logger.error(
            "Weather request rejected (HTTP %s): %s", exc.status_code, exc, exc_info=exc
        )
        return 4
    except WeatherProviderError as exc:
        logger.error("Weather request failure: %s", exc, exc_info=exc)
        return 4
    except Exception as exc:  # pragma: no cover - catch-all for CLI runtime
        logger.exception("Unexpected CLI failure: %s", exc)
        return 99
    return 0


if __name__ == "__main__":
    sys.exit(main())

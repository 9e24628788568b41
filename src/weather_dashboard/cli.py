# Project: weather-dashboard
# Owner: GreenUnicorn
"""
cli.py — Command-line front end for weather-dashboard.

Commands:
  weather-dashboard search QUERY               — list matching places
  weather-dashboard current CITY               — current conditions + 7-day forecast
  weather-dashboard history CITY --period P    — historical statistics
"""

import argparse
from pathlib import Path

from weather_dashboard.analysis import daily_points, historical_stats
from weather_dashboard.config import DEFAULT_CONFIG_PATH, default_config, load_config
from weather_dashboard.formatting import format_city_name
from weather_dashboard.geocode import search_cities
from weather_dashboard.history import (
    HISTORICAL_PERIODS,
    HistoricalPeriod,
    get_period_weather,
)
from weather_dashboard.render import (
    render_current,
    render_forecast_table,
    render_history,
    render_search_results,
)
from weather_dashboard.utils import configure_log
from weather_dashboard.weather import current_summary, forecast_days, get_current_weather


def _load(args) -> dict:
    """Load the config named on the command line, or the default file if present."""
    try:
        if args.config:
            config = load_config(Path(args.config))
        elif DEFAULT_CONFIG_PATH.exists():
            config = load_config(DEFAULT_CONFIG_PATH)
        else:
            config = default_config()
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    configure_log(Path(config["log"]["path"]))
    return config


def _resolve_location(args, config: dict) -> tuple[float, float, str]:
    """Turn CITY or --lat/--lon into (latitude, longitude, display name)."""
    if args.lat is not None and args.lon is not None:
        return args.lat, args.lon, f"{args.lat:.4f}, {args.lon:.4f}"

    if not args.city:
        print("[error] Give a city name or both --lat and --lon.")
        raise SystemExit(1)

    api = config["api"]
    results = search_cities(args.city, base_url=api["geocoding_url"], timeout=api["timeout"])
    if not results:
        print(f'[error] Location "{args.city}" not found (or the lookup failed). Try a more specific name.')
        raise SystemExit(1)

    loc = results[0]
    return loc["latitude"], loc["longitude"], format_city_name(loc)


def cmd_search(args) -> None:
    """Print the places matching a query."""
    config = _load(args)
    api = config["api"]
    results = search_cities(args.query, base_url=api["geocoding_url"], timeout=api["timeout"])
    print(render_search_results(results))


def cmd_current(args) -> None:
    """Print current conditions and the 7-day forecast."""
    config = _load(args)
    latitude, longitude, display_name = _resolve_location(args, config)
    api = config["api"]

    print(f"Fetching weather for {display_name}...")
    data = get_current_weather(latitude, longitude, base_url=api["forecast_url"], timeout=api["timeout"])
    if data is None:
        print("[error] Could not load weather data. Check your connection and try again.")
        raise SystemExit(1)

    print()
    print(render_current(current_summary(data), display_name))
    print()
    print(render_forecast_table(forecast_days(data), display_name))


def cmd_history(args) -> None:
    """Print historical statistics for a fixed period ending yesterday."""
    config = _load(args)
    latitude, longitude, display_name = _resolve_location(args, config)
    api = config["api"]
    period = HistoricalPeriod(args.period)
    label = HISTORICAL_PERIODS[period]["label"]

    print(f"Fetching {label.lower()} of weather for {display_name}...")
    data = get_period_weather(
        latitude,
        longitude,
        period,
        base_url=api["historical_url"],
        timeout=api["timeout"],
    )
    if data is None:
        print("[error] Could not load historical data. Check your connection and try again.")
        raise SystemExit(1)

    daily = data.get("daily")
    print()
    print(render_history(historical_stats(daily), daily_points(daily), display_name, label))


def _add_location_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("city", nargs="?", default=None, help='Place name, e.g. "Tokyo"')
    p.add_argument("--lat", type=float, default=None, help="Latitude in decimal degrees")
    p.add_argument("--lon", type=float, default=None, help="Longitude in decimal degrees")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-dashboard",
        description="Current, forecast and historical weather from Open-Meteo",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help=f"TOML config file (default: {DEFAULT_CONFIG_PATH} if it exists)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    p_search = subparsers.add_parser("search", help="Search for a city by name")
    p_search.add_argument("query", help="Place name to look up")

    p_current = subparsers.add_parser("current", help="Current conditions and 7-day forecast")
    _add_location_args(p_current)

    p_history = subparsers.add_parser("history", help="Historical weather statistics")
    _add_location_args(p_history)
    p_history.add_argument(
        "--period",
        choices=[p.value for p in HistoricalPeriod],
        default=HistoricalPeriod.SEVEN_DAYS.value,
        help="Lookback window ending yesterday (default: 7days)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    commands = {
        "search": cmd_search,
        "current": cmd_current,
        "history": cmd_history,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()

# Project: weather-dashboard
# Owner: GreenUnicorn
"""
formatting.py — Turn raw API numbers into display strings.

Missing values (None) are shown as 0, except wind direction which is shown
as "N/A". Rounding is half-up: 2.5 becomes 3 and -2.5 becomes -2.
"""

import math
from datetime import datetime

COMPASS = [
    "N", "NNE", "NE", "ENE",
    "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW",
    "W", "WNW", "NW", "NNW",
]


def round_half_up(value: float | None) -> int:
    """Round to the nearest integer, halves towards +infinity.

    None, NaN and infinities count as 0.
    """
    if value is None or not math.isfinite(value):
        return 0
    return math.floor(value + 0.5)


def format_temperature(value: float | None, unit: str = "°C") -> str:
    return f"{round_half_up(value)}{unit}"


def format_wind_direction(degrees: float | None) -> str:
    """Convert a wind bearing in degrees to a 16-point compass label.

    Args:
        degrees: Wind direction in degrees (0–360, where 0 = North).

    Returns:
        Compass label such as 'N', 'NNE', 'NW', or 'N/A' when degrees is None.
        Negative or non-finite bearings give 'N'.
    """
    if degrees is None:
        return "N/A"
    if not math.isfinite(degrees) or degrees < 0:
        return "N"
    # Each segment is 360/16 = 22.5 degrees wide
    index = round_half_up(degrees / 22.5) % 16
    return COMPASS[index]


def format_wind_speed(value: float | None, unit: str = "km/h") -> str:
    return f"{round_half_up(value)} {unit}"


def format_humidity(value: float | None, unit: str = "%") -> str:
    return f"{round_half_up(value)}{unit}"


def format_pressure(value: float | None, unit: str = "hPa") -> str:
    return f"{round_half_up(value)} {unit}"


def format_visibility(value: float | None, unit: str = "km") -> str:
    return f"{round_half_up(value)} {unit}"


def format_precipitation(value: float | None, unit: str = "mm") -> str:
    return f"{round_half_up(value)} {unit}"


def format_uv_index(value: float | None) -> str:
    return str(round_half_up(value))


def format_city_name(location: dict) -> str:
    """Build a 'City, Region, Country' label from a geocoding result.

    Empty or missing parts are skipped.
    """
    parts = [location.get("name"), location.get("admin1"), location.get("country")]
    return ", ".join(p for p in parts if p)


def format_day_label(date_str: str, index: int) -> str:
    """Label a forecast day: 'Today' for the first entry, short weekday otherwise."""
    if index == 0:
        return "Today"
    try:
        return datetime.strptime(date_str, "%Y-%m-%d").strftime("%a")
    except (TypeError, ValueError):
        return str(date_str)

# Project: weather-dashboard
# Owner: GreenUnicorn
"""
weather.py — Fetch current conditions and the 7-day forecast from Open-Meteo.

Open-Meteo is free and requires no API key. One request returns the current
snapshot, the daily forecast and the hourly forecast. The response is handed
back as-is; forecast_days() and current_summary() turn it into display rows.

API docs: https://open-meteo.com/en/docs
"""

from weather_dashboard.formatting import (
    format_day_label,
    format_humidity,
    format_precipitation,
    format_pressure,
    format_temperature,
    format_uv_index,
    format_visibility,
    format_wind_direction,
    format_wind_speed,
)
from weather_dashboard.utils import DEFAULT_TIMEOUT_SECONDS, check_series, fetch_json
from weather_dashboard.weather_codes import classify

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
FORECAST_DAYS = 7

CURRENT_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "surface_pressure",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
    "visibility",
    "uv_index",
]

DAILY_VARIABLES = [
    "temperature_2m_max",
    "temperature_2m_min",
    "weather_code",
    "precipitation_sum",
    "wind_speed_10m_max",
    "wind_direction_10m_dominant",
    "uv_index_max",
]

HOURLY_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
]


def forecast_params(latitude: float, longitude: float) -> dict:
    """Build the forecast query parameters for a coordinate pair."""
    return {
        "latitude": latitude,
        "longitude": longitude,
        "current": ",".join(CURRENT_VARIABLES),
        "daily": ",".join(DAILY_VARIABLES),
        "hourly": ",".join(HOURLY_VARIABLES),
        "timezone": "auto",
        "forecast_days": FORECAST_DAYS,
    }


def _check_forecast(data) -> None:
    if not isinstance(data, dict) or not isinstance(data.get("current"), dict):
        raise ValueError("Unexpected API response structure: missing 'current'")
    check_series(data, "daily")
    check_series(data, "hourly", required=False)


def get_current_weather(
    latitude: float,
    longitude: float,
    base_url: str = FORECAST_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict | None:
    """Fetch current conditions plus the daily and hourly forecast.

    Args:
        latitude: Location latitude in decimal degrees.
        longitude: Location longitude in decimal degrees.
        base_url: Forecast endpoint.
        timeout: Request timeout in seconds.

    Returns:
        The parsed response (keys 'current', 'current_units', 'daily',
        'daily_units', 'hourly', ...), or None if the request failed or the
        response was malformed.
    """
    return fetch_json(
        base_url,
        forecast_params(latitude, longitude),
        label="Open-Meteo forecast API",
        timeout=timeout,
        validate=_check_forecast,
    )


def forecast_days(data: dict) -> list[dict]:
    """Turn the parallel daily lists into one display dict per day.

    Args:
        data: Response from get_current_weather.

    Returns:
        List of dicts with date, label, description, icon, temp_max, temp_min,
        precipitation, wind and uv_index (all display strings except date).
    """
    daily = data.get("daily") or {}
    dates = daily.get("time") or []

    def value(name: str, i: int):
        values = daily.get(name) or []
        return values[i] if i < len(values) else None

    result = []
    for i, date_str in enumerate(dates):
        entry = classify(value("weather_code", i) or 0)
        result.append({
            "date": date_str,
            "label": format_day_label(date_str, i),
            "description": entry.description,
            "icon": entry.icon,
            "temp_max": format_temperature(value("temperature_2m_max", i)),
            "temp_min": format_temperature(value("temperature_2m_min", i)),
            "precipitation": format_precipitation(value("precipitation_sum", i)),
            "wind": (
                f"{format_wind_speed(value('wind_speed_10m_max', i))} "
                f"{format_wind_direction(value('wind_direction_10m_dominant', i))}"
            ),
            "uv_index": format_uv_index(value("uv_index_max", i)),
        })
    return result


def current_summary(data: dict) -> dict:
    """Map the 'current' block (plus today's max/min) onto display strings."""
    current = data.get("current") or {}
    daily = data.get("daily") or {}
    entry = classify(current.get("weather_code"))

    today_max = (daily.get("temperature_2m_max") or [None])[0]
    today_min = (daily.get("temperature_2m_min") or [None])[0]

    return {
        "time": current.get("time"),
        "description": entry.description,
        "icon": entry.icon,
        "temperature": format_temperature(current.get("temperature_2m")),
        "feels_like": format_temperature(current.get("apparent_temperature")),
        "today_max": format_temperature(today_max),
        "today_min": format_temperature(today_min),
        "humidity": format_humidity(current.get("relative_humidity_2m")),
        "wind": (
            f"{format_wind_speed(current.get('wind_speed_10m'))} "
            f"{format_wind_direction(current.get('wind_direction_10m'))}"
        ),
        "wind_gusts": format_wind_speed(current.get("wind_gusts_10m")),
        "visibility": format_visibility(current.get("visibility")),
        "pressure": format_pressure(current.get("surface_pressure")),
        "precipitation": format_precipitation(current.get("precipitation")),
        "uv_index": format_uv_index(current.get("uv_index")),
    }

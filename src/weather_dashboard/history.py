# Project: weather-dashboard
# Owner: GreenUnicorn
"""
history.py — Fetch historical daily and hourly weather from Open-Meteo.

Ranges always end yesterday: today's data may still be incomplete upstream.
API docs: https://open-meteo.com/en/docs/historical-weather-api
"""

from datetime import date, timedelta
from enum import StrEnum

from weather_dashboard.utils import DEFAULT_TIMEOUT_SECONDS, check_series, fetch_json

HISTORICAL_URL = "https://api.open-meteo.com/v1/historical-weather"

HOURLY_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
    "surface_pressure",
]

DAILY_VARIABLES = [
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "weather_code",
]


class HistoricalPeriod(StrEnum):
    SEVEN_DAYS = "7days"
    ONE_MONTH = "1month"
    THREE_MONTHS = "3months"
    ONE_YEAR = "1year"


HISTORICAL_PERIODS = {
    HistoricalPeriod.SEVEN_DAYS: {
        "label": "Past 7 Days",
        "days": 7,
        "description": "Last week weather data",
    },
    HistoricalPeriod.ONE_MONTH: {
        "label": "Past Month",
        "days": 30,
        "description": "Last 30 days weather data",
    },
    HistoricalPeriod.THREE_MONTHS: {
        "label": "Past 3 Months",
        "days": 90,
        "description": "Last 90 days weather data",
    },
    HistoricalPeriod.ONE_YEAR: {
        "label": "Past Year",
        "days": 365,
        "description": "Last 365 days weather data",
    },
}


def historical_date_range(days_back: int, today: date | None = None) -> dict:
    """Return {'start_date', 'end_date'} as 'YYYY-MM-DD' strings.

    end_date is yesterday and start_date is days_back days before that, using
    plain calendar arithmetic on the local date.
    """
    end = (today or date.today()) - timedelta(days=1)
    start = end - timedelta(days=days_back)
    return {"start_date": start.isoformat(), "end_date": end.isoformat()}


def period_range(period: HistoricalPeriod | str, today: date | None = None) -> dict:
    """Date range for one of the fixed historical periods.

    Raises:
        ValueError: If period is not a known HistoricalPeriod value.
    """
    days = HISTORICAL_PERIODS[HistoricalPeriod(period)]["days"]
    return historical_date_range(days, today=today)


def historical_params(
    latitude: float,
    longitude: float,
    start_date: str,
    end_date: str,
) -> dict:
    """Build the historical-weather query parameters."""
    return {
        "latitude": latitude,
        "longitude": longitude,
        "start_date": start_date,
        "end_date": end_date,
        "hourly": ",".join(HOURLY_VARIABLES),
        "daily": ",".join(DAILY_VARIABLES),
        "timezone": "auto",
    }


def _check_historical(data) -> None:
    check_series(data, "daily")
    check_series(data, "hourly", required=False)


def get_historical_weather(
    latitude: float,
    longitude: float,
    start_date: str,
    end_date: str,
    base_url: str = HISTORICAL_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict | None:
    """Fetch daily and hourly weather between two dates (inclusive).

    Returns the parsed response (keys 'daily', 'daily_units', 'hourly',
    'hourly_units', ...), or None if the request failed or the response was
    malformed. For a one-year range the hourly block holds ~8,760 entries.
    """
    return fetch_json(
        base_url,
        historical_params(latitude, longitude, start_date, end_date),
        label="Open-Meteo historical weather API",
        timeout=timeout,
        validate=_check_historical,
    )


def get_period_weather(
    latitude: float,
    longitude: float,
    period: HistoricalPeriod | str,
    today: date | None = None,
    base_url: str = HISTORICAL_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> dict | None:
    """Fetch historical weather for one of the fixed periods ending yesterday."""
    dates = period_range(period, today=today)
    return get_historical_weather(
        latitude,
        longitude,
        dates["start_date"],
        dates["end_date"],
        base_url=base_url,
        timeout=timeout,
    )

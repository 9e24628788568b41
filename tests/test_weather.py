# Project: weather-dashboard
# Owner: GreenUnicorn
"""
test_weather.py — Unit tests for weather.py.

All tests use in-memory fake API payloads — no network calls.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from weather_dashboard.weather import (
    CURRENT_VARIABLES,
    DAILY_VARIABLES,
    FORECAST_URL,
    HOURLY_VARIABLES,
    current_summary,
    forecast_days,
    forecast_params,
    get_current_weather,
)
from weather_dashboard.weather_codes import IconCategory


def _make_forecast_payload(n: int = 7) -> dict:
    """Build a minimal Open-Meteo forecast response with n days."""
    from datetime import date, timedelta

    base = date(2024, 1, 1)
    dates = [(base + timedelta(days=i)).isoformat() for i in range(n)]
    hours = [f"2024-01-01T{h:02d}:00" for h in range(3)]

    return {
        "latitude": 51.5,
        "longitude": -0.12,
        "timezone": "Europe/London",
        "current": {
            "time": "2024-01-01T12:00",
            "interval": 900,
            "temperature_2m": 8.6,
            "relative_humidity_2m": 81,
            "apparent_temperature": 5.2,
            "precipitation": 0.4,
            "weather_code": 61,
            "surface_pressure": 1008.4,
            "wind_speed_10m": 18.5,
            "wind_direction_10m": 225,
            "wind_gusts_10m": 34.2,
            "visibility": 24140.0,
            "uv_index": 0.85,
        },
        "current_units": {"temperature_2m": "°C", "wind_speed_10m": "km/h"},
        "daily": {
            "time": dates,
            "temperature_2m_max": [10.5] * n,
            "temperature_2m_min": [2.4] * n,
            "weather_code": [3] * n,
            "precipitation_sum": [1.2] * n,
            "wind_speed_10m_max": [20.0] * n,
            "wind_direction_10m_dominant": [90.0] * n,  # East
            "uv_index_max": [1.5] * n,
        },
        "daily_units": {"temperature_2m_max": "°C"},
        "hourly": {
            "time": hours,
            "temperature_2m": [7.0, 7.5, 8.0],
            "relative_humidity_2m": [85, 84, 82],
            "precipitation": [0.0, 0.1, 0.4],
            "weather_code": [3, 61, 61],
            "wind_speed_10m": [15.0, 16.2, 18.5],
        },
    }


def _response(payload) -> MagicMock:
    mock_response = MagicMock()
    mock_response.json.return_value = payload
    mock_response.raise_for_status.return_value = None
    return mock_response


# ---------------------------------------------------------------------------
# forecast_params
# ---------------------------------------------------------------------------

def test_forecast_params_field_lists():
    params = forecast_params(51.5, -0.12)
    assert params["latitude"] == 51.5
    assert params["longitude"] == -0.12
    assert params["current"] == (
        "temperature_2m,relative_humidity_2m,apparent_temperature,precipitation,"
        "weather_code,surface_pressure,wind_speed_10m,wind_direction_10m,"
        "wind_gusts_10m,visibility,uv_index"
    )
    assert params["daily"] == (
        "temperature_2m_max,temperature_2m_min,weather_code,precipitation_sum,"
        "wind_speed_10m_max,wind_direction_10m_dominant,uv_index_max"
    )
    assert params["hourly"] == (
        "temperature_2m,relative_humidity_2m,precipitation,weather_code,wind_speed_10m"
    )
    assert params["timezone"] == "auto"
    assert params["forecast_days"] == 7


def test_variable_list_sizes():
    assert len(CURRENT_VARIABLES) == 11
    assert len(DAILY_VARIABLES) == 7
    assert len(HOURLY_VARIABLES) == 5


# ---------------------------------------------------------------------------
# get_current_weather
# ---------------------------------------------------------------------------

@patch("weather_dashboard.utils.requests.get")
def test_returns_response_unchanged(mock_get):
    payload = _make_forecast_payload()
    mock_get.return_value = _response(payload)

    result = get_current_weather(51.5, -0.12)

    assert result == payload
    args, kwargs = mock_get.call_args
    assert args[0] == FORECAST_URL
    assert kwargs["params"] == forecast_params(51.5, -0.12)


@patch("weather_dashboard.utils.requests.get")
def test_http_500_returns_none(mock_get, _tmp_log):
    mock_response = MagicMock()
    mock_response.raise_for_status.side_effect = requests.HTTPError("500 Server Error: Internal Server Error")
    mock_get.return_value = mock_response

    assert get_current_weather(51.5, -0.12) is None
    assert "[ERROR] Open-Meteo forecast API failed" in _tmp_log.read_text()


@patch("weather_dashboard.utils.requests.get")
def test_timeout_returns_none(mock_get):
    mock_get.side_effect = requests.Timeout("read timed out")
    assert get_current_weather(51.5, -0.12) is None


@patch("weather_dashboard.utils.requests.get")
def test_missing_current_block_returns_none(mock_get):
    payload = _make_forecast_payload()
    del payload["current"]
    mock_get.return_value = _response(payload)

    assert get_current_weather(51.5, -0.12) is None


@patch("weather_dashboard.utils.requests.get")
def test_misaligned_daily_lists_return_none(mock_get):
    payload = _make_forecast_payload(n=7)
    payload["daily"]["temperature_2m_min"] = payload["daily"]["temperature_2m_min"][:6]
    mock_get.return_value = _response(payload)

    assert get_current_weather(51.5, -0.12) is None


@patch("weather_dashboard.utils.requests.get")
def test_missing_hourly_block_is_accepted(mock_get):
    payload = _make_forecast_payload()
    del payload["hourly"]
    mock_get.return_value = _response(payload)

    assert get_current_weather(51.5, -0.12) == payload


@patch("weather_dashboard.utils.requests.get")
def test_each_call_fetches_again(mock_get):
    mock_get.return_value = _response(_make_forecast_payload())
    get_current_weather(51.5, -0.12)
    get_current_weather(51.5, -0.12)
    assert mock_get.call_count == 2


# ---------------------------------------------------------------------------
# forecast_days
# ---------------------------------------------------------------------------

def test_forecast_days_one_row_per_day():
    rows = forecast_days(_make_forecast_payload(n=7))
    assert len(rows) == 7
    assert [r["date"] for r in rows][:2] == ["2024-01-01", "2024-01-02"]


def test_forecast_days_labels():
    rows = forecast_days(_make_forecast_payload(n=3))
    assert [r["label"] for r in rows] == ["Today", "Tue", "Wed"]


def test_forecast_days_formatted_values():
    row = forecast_days(_make_forecast_payload(n=1))[0]
    assert row["temp_max"] == "11°C"
    assert row["temp_min"] == "2°C"
    assert row["precipitation"] == "1 mm"
    assert row["wind"] == "20 km/h E"
    assert row["uv_index"] == "2"
    assert row["description"] == "Overcast"
    assert row["icon"] == IconCategory.OVERCAST


def test_forecast_days_missing_values_use_defaults():
    payload = {"daily": {"time": ["2024-01-01"], "weather_code": [None],
                         "wind_direction_10m_dominant": [None]}}
    row = forecast_days(payload)[0]
    assert row["temp_max"] == "0°C"
    assert row["wind"] == "0 km/h N/A"
    assert row["description"] == "Clear sky"


def test_forecast_days_without_daily_block():
    assert forecast_days({}) == []


# ---------------------------------------------------------------------------
# current_summary
# ---------------------------------------------------------------------------

def test_current_summary_display_strings():
    summary = current_summary(_make_forecast_payload())
    assert summary["time"] == "2024-01-01T12:00"
    assert summary["description"] == "Rain: Slight"
    assert summary["icon"] == IconCategory.RAIN
    assert summary["temperature"] == "9°C"
    assert summary["feels_like"] == "5°C"
    assert summary["today_max"] == "11°C"
    assert summary["today_min"] == "2°C"
    assert summary["humidity"] == "81%"
    assert summary["wind"] == "19 km/h SW"
    assert summary["wind_gusts"] == "34 km/h"
    assert summary["visibility"] == "24140 km"
    assert summary["pressure"] == "1008 hPa"
    assert summary["uv_index"] == "1"


def test_current_summary_empty_current_block():
    summary = current_summary({"current": {}, "daily": {"time": []}})
    assert summary["temperature"] == "0°C"
    assert summary["wind"] == "0 km/h N/A"
    assert summary["today_max"] == "0°C"
    assert summary["description"] == "Clear sky"


@patch("weather_dashboard.utils.requests.get")
def test_nan_in_current_block_still_formats(mock_get):
    payload = _make_forecast_payload()
    payload["current"]["temperature_2m"] = float("nan")
    payload["current"]["wind_direction_10m"] = float("nan")
    mock_get.return_value = _response(payload)

    data = get_current_weather(51.5, -0.12)
    summary = current_summary(data)

    assert summary["temperature"] == "0°C"
    assert summary["wind"] == "19 km/h N"

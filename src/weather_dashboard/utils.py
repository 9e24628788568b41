# Project: weather-dashboard
# Owner: GreenUnicorn
"""
utils.py — Shared utilities: the HTTP JSON boundary and failure logging.

Every remote call in the package goes through fetch_json(). It never raises:
transport errors, bad HTTP statuses and undecodable or malformed JSON are
logged and turned into None, and each caller maps None onto its own
"no data" value.
"""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

import requests

DEFAULT_LOG_PATH = Path("logs/weather_dashboard.log")
DEFAULT_TIMEOUT_SECONDS = 10

_log_path = DEFAULT_LOG_PATH


def configure_log(path: Path) -> None:
    """Set the file that fetch failures are appended to."""
    global _log_path
    _log_path = Path(path)


def fetch_json(
    url: str,
    params: dict,
    label: str = "API call",
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    validate: Callable[[Any], None] | None = None,
) -> Any | None:
    """GET a JSON document, returning None instead of raising on failure.

    Args:
        url: Endpoint URL.
        params: Query parameters, encoded by requests.
        label: Human-readable name for the call, used in log messages.
        timeout: Request timeout in seconds.
        validate: Optional callable run on the decoded body. It should raise
            ValueError (or KeyError/TypeError) when the shape is unexpected.

    Returns:
        The decoded JSON body, or None if the request failed.
    """
    try:
        r = requests.get(url, params=params, timeout=timeout)
        r.raise_for_status()
        data = r.json()
        if validate is not None:
            validate(data)
        return data
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        print(f"[weather] {label} failed: {e}")
        log_error(f"{label} failed: {e}")
        return None


def check_series(data: dict, key: str, required: bool = True) -> None:
    """Check that data[key] is a block of index-aligned lists.

    Open-Meteo returns daily/hourly data as parallel lists keyed by variable
    name, all the same length as the 'time' list.

    Raises:
        ValueError: If the block is missing (when required) or misaligned.
    """
    if not isinstance(data, dict):
        raise ValueError("Unexpected API response structure: expected a JSON object")
    if key not in data:
        if required:
            raise ValueError(f"Unexpected API response structure: missing '{key}'")
        return
    series = data[key]
    if not isinstance(series, dict) or not isinstance(series.get("time"), list):
        raise ValueError(f"Unexpected API response structure: '{key}' has no 'time' list")
    n = len(series["time"])
    for name, values in series.items():
        if not isinstance(values, list) or len(values) != n:
            raise ValueError(
                f"Unexpected API response structure: '{key}.{name}' is not aligned "
                f"with '{key}.time' ({n} entries)"
            )


def log_error(message: str, log_path: Path | None = None) -> None:
    """Append a timestamped ERROR line to the log file.

    Args:
        message: Error description to log.
        log_path: Destination log file path. Defaults to the configured one.
    """
    path = log_path or _log_path
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(path, "a") as f:
            f.write(f"{timestamp} [ERROR] {message}\n")
    except OSError:
        pass  # Never crash on logging failure


def fmt_day(date_str: str) -> str:
    """Format a date string as a short human-readable label.

    Args:
        date_str: Date in 'YYYY-MM-DD' format.

    Returns:
        Formatted string like 'Mon 24 Feb'.
    """
    dt = datetime.strptime(date_str, "%Y-%m-%d")
    return dt.strftime("%a %d %b")


def fmt_time(time_str: str) -> str:
    """Format an ISO datetime string ('YYYY-MM-DDTHH:MM') as 'Mon 24 Feb, 14:00'.

    Strings that do not parse are returned unchanged.
    """
    try:
        dt = datetime.strptime(time_str, "%Y-%m-%dT%H:%M")
    except (TypeError, ValueError):
        return str(time_str)
    return dt.strftime("%a %d %b, %H:%M")

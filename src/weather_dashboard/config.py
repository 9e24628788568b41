# Project: weather-dashboard
# Owner: GreenUnicorn
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
The config file is optional: without one, default_config() is used.
"""

import tomllib
from pathlib import Path

from weather_dashboard.geocode import GEOCODING_URL
from weather_dashboard.history import HISTORICAL_URL
from weather_dashboard.utils import DEFAULT_LOG_PATH, DEFAULT_TIMEOUT_SECONDS
from weather_dashboard.weather import FORECAST_URL

DEFAULT_CONFIG_PATH = Path("config.toml")

API_DEFAULTS = {
    "geocoding_url": GEOCODING_URL,
    "forecast_url": FORECAST_URL,
    "historical_url": HISTORICAL_URL,
    "timeout": DEFAULT_TIMEOUT_SECONDS,
}


def default_config() -> dict:
    """Configuration used when no config file is present."""
    return {
        "api": dict(API_DEFAULTS),
        "log": {"path": str(DEFAULT_LOG_PATH)},
    }


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load and validate a TOML configuration file.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values, with missing [api] keys filled
        in from the defaults.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If required keys or sections are missing or invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and adjust it."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    config["api"] = {**API_DEFAULTS, **config["api"]}
    return config


def _validate(config: dict) -> None:
    """Validate that all required config sections and keys are present.

    Expected config schema::

        [api]
        geocoding_url  = <str>    # optional, Open-Meteo geocoding search URL
        forecast_url   = <str>    # optional, Open-Meteo forecast URL
        historical_url = <str>    # optional, Open-Meteo historical-weather URL
        timeout        = <float>  # optional, seconds, > 0

        [log]
        path = <str>     # relative or absolute path to the log file

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If any required section or key is absent or invalid.
    """
    for section in ("api", "log"):
        if section not in config:
            raise ValueError(f"Missing required config section: [{section}]")
        if not isinstance(config[section], dict):
            raise ValueError(f"Config section [{section}] must be a table")

    if "path" not in config["log"]:
        raise ValueError("Missing required config key: [log].path")

    api = config["api"]
    for key in ("geocoding_url", "forecast_url", "historical_url"):
        if key in api and not str(api[key]).startswith(("http://", "https://")):
            raise ValueError(f"Invalid config value: [api].{key} must be an http(s) URL")

    timeout = api.get("timeout", DEFAULT_TIMEOUT_SECONDS)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("Invalid config value: [api].timeout must be a positive number")

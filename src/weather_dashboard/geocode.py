# Project: weather-dashboard
# Owner: GreenUnicorn
"""
geocode.py — Search for cities by name using the Open-Meteo Geocoding API.

Free, no API key required.
API docs: https://open-meteo.com/en/docs/geocoding-api
"""

from weather_dashboard.utils import DEFAULT_TIMEOUT_SECONDS, fetch_json

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
MAX_RESULTS = 10


def search_params(query: str) -> dict:
    """Build the geocoding query parameters for a place name."""
    return {
        "name": query.strip(),
        "count": MAX_RESULTS,
        "language": "en",
        "format": "json",
    }


def _check_results(data) -> None:
    if not isinstance(data, dict):
        raise ValueError("Unexpected API response structure: expected a JSON object")
    results = data.get("results")
    if results is not None and not isinstance(results, list):
        raise ValueError("Unexpected API response structure: 'results' is not a list")


def search_cities(
    query: str | None,
    base_url: str = GEOCODING_URL,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict]:
    """Look up places matching a name.

    Args:
        query: Free text such as 'Tokyo' or 'Paris'. Blank queries are not
            sent to the API.
        base_url: Geocoding endpoint.
        timeout: Request timeout in seconds.

    Returns:
        Up to 10 location dicts (id, name, latitude, longitude, country_code,
        country, and optionally admin1, admin2, timezone, population). An
        empty list means no matches OR that the lookup failed; failures are
        logged, never raised.
    """
    if not query or not query.strip():
        return []

    data = fetch_json(
        base_url,
        search_params(query),
        label=f"Geocoding API for '{query.strip()}'",
        timeout=timeout,
        validate=_check_results,
    )
    if data is None:
        return []
    return data.get("results") or []

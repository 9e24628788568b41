# Project: weather-dashboard
# Owner: GreenUnicorn
"""
weather_codes.py — WMO weather interpretation codes used by Open-Meteo.

API docs: https://open-meteo.com/en/docs (section "Weather variable documentation")
"""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType


class IconCategory(StrEnum):
    CLEAR = "clear"
    PARTLY_CLOUDY = "partly-cloudy"
    OVERCAST = "overcast"
    FOG = "fog"
    DRIZZLE = "drizzle"
    RAIN = "rain"
    FREEZING = "freezing"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"


@dataclass(frozen=True)
class WeatherCodeEntry:
    code: int
    description: str
    icon: IconCategory


_TABLE = [
    (0, "Clear sky", IconCategory.CLEAR),
    (1, "Mainly clear", IconCategory.CLEAR),
    (2, "Partly cloudy", IconCategory.PARTLY_CLOUDY),
    (3, "Overcast", IconCategory.OVERCAST),
    (45, "Fog", IconCategory.FOG),
    (48, "Depositing rime fog", IconCategory.FOG),
    (51, "Drizzle: Light", IconCategory.DRIZZLE),
    (53, "Drizzle: Moderate", IconCategory.DRIZZLE),
    (55, "Drizzle: Dense", IconCategory.DRIZZLE),
    (56, "Freezing Drizzle: Light", IconCategory.FREEZING),
    (57, "Freezing Drizzle: Dense", IconCategory.FREEZING),
    (61, "Rain: Slight", IconCategory.RAIN),
    (63, "Rain: Moderate", IconCategory.RAIN),
    (65, "Rain: Heavy", IconCategory.RAIN),
    (66, "Freezing Rain: Light", IconCategory.FREEZING),
    (67, "Freezing Rain: Heavy", IconCategory.FREEZING),
    (71, "Snow fall: Slight", IconCategory.SNOW),
    (73, "Snow fall: Moderate", IconCategory.SNOW),
    (75, "Snow fall: Heavy", IconCategory.SNOW),
    (77, "Snow grains", IconCategory.SNOW),
    (80, "Rain showers: Slight", IconCategory.RAIN),
    (81, "Rain showers: Moderate", IconCategory.RAIN),
    (82, "Rain showers: Violent", IconCategory.RAIN),
    (85, "Snow showers: Slight", IconCategory.SNOW),
    (86, "Snow showers: Heavy", IconCategory.SNOW),
    (95, "Thunderstorm: Slight or moderate", IconCategory.THUNDERSTORM),
    (96, "Thunderstorm with slight hail", IconCategory.THUNDERSTORM),
    (99, "Thunderstorm with heavy hail", IconCategory.THUNDERSTORM),
]

WEATHER_CODES = MappingProxyType(
    {code: WeatherCodeEntry(code, description, icon) for code, description, icon in _TABLE}
)


def classify(code) -> WeatherCodeEntry:
    """Look up a weather code, falling back to 'Clear sky' for anything unknown.

    Args:
        code: Weather code from the API. Any value is accepted, including None
            and codes outside 0-99.

    Returns:
        The matching WeatherCodeEntry, or the entry for code 0.
    """
    try:
        return WEATHER_CODES.get(code, WEATHER_CODES[0])
    except TypeError:
        # unhashable input
        return WEATHER_CODES[0]

# Project: weather-dashboard
# Owner: GreenUnicorn
"""
analysis.py — Summary statistics over a historical daily series.

All calculations use the Python standard library only.
"""

from __future__ import annotations

from weather_dashboard.formatting import round_half_up

RAIN_DAY_THRESHOLD_MM = 0.1


def historical_stats(daily: dict | None) -> dict | None:
    """Summarise the 'daily' block of a historical response.

    Missing values count as 0 in averages and totals, but are ignored when
    looking for the extremes.

    Returns dict with keys:
        avg_max_temp, avg_min_temp, total_precipitation,
        max_temp, min_temp (None when there are no values), rainy_days
    or None when daily is missing.
    """
    if not daily:
        return None

    temps_max = daily.get("temperature_2m_max") or []
    temps_min = daily.get("temperature_2m_min") or []
    precip    = daily.get("precipitation_sum") or []

    known_max = [t for t in temps_max if t is not None]
    known_min = [t for t in temps_min if t is not None]

    return {
        "avg_max_temp":        sum(t or 0 for t in temps_max) / len(temps_max) if temps_max else 0.0,
        "avg_min_temp":        sum(t or 0 for t in temps_min) / len(temps_min) if temps_min else 0.0,
        "total_precipitation": sum(p or 0 for p in precip),
        "max_temp":            max(known_max) if known_max else None,
        "min_temp":            min(known_min) if known_min else None,
        "rainy_days":          sum(1 for p in precip if (p or 0) > RAIN_DAY_THRESHOLD_MM),
    }


def daily_points(daily: dict | None) -> list[dict]:
    """Per-day rows for plotting: whole-degree temperatures, precipitation to 0.1 mm."""
    if not daily:
        return []

    def at(name: str, i: int):
        values = daily.get(name) or []
        return values[i] if i < len(values) else None

    points = []
    for i, date_str in enumerate(daily.get("time") or []):
        points.append({
            "date":          date_str,
            "max_temp":      round_half_up(at("temperature_2m_max", i)),
            "min_temp":      round_half_up(at("temperature_2m_min", i)),
            "precipitation": round_half_up((at("precipitation_sum", i) or 0) * 10) / 10,
        })
    return points

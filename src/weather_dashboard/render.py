# Project: weather-dashboard
# Owner: GreenUnicorn
"""
render.py — Plain-text tables for the terminal front end.

Uses only the Python standard library.
All rendering functions return strings ready to print.
"""

from weather_dashboard.formatting import (
    format_city_name,
    format_precipitation,
    format_temperature,
)
from weather_dashboard.utils import fmt_day, fmt_time


def render_search_results(results: list[dict]) -> str:
    """Numbered list of geocoding matches with their coordinates."""
    if not results:
        return "No matching places found."
    lines = []
    for i, loc in enumerate(results, start=1):
        lines.append(
            f"{i:>2}. {format_city_name(loc)}  "
            f"({loc.get('latitude') or 0:.4f}, {loc.get('longitude') or 0:.4f})"
        )
    return "\n".join(lines)


def render_current(summary: dict, location_line: str) -> str:
    """Render current_summary() output as a short report."""
    return "\n".join([
        f"📍 {location_line} — {fmt_time(summary['time'])}",
        f"   {summary['description']}",
        f"🌡  Temperature:  {summary['temperature']}  (feels like {summary['feels_like']})",
        f"   Today:        H {summary['today_max']}  L {summary['today_min']}",
        f"💧 Humidity:     {summary['humidity']}",
        f"💨 Wind:         {summary['wind']}  (gusts up to {summary['wind_gusts']})",
        f"🌧  Precip:       {summary['precipitation']}",
        f"👁  Visibility:   {summary['visibility']}",
        f"   Pressure:     {summary['pressure']}",
        f"☀️  UV index:     {summary['uv_index']}",
    ])


def render_forecast_table(days: list[dict], location_line: str) -> str:
    """Render forecast_days() output as a fixed-width table.

    Args:
        days: List of daily display dicts from forecast_days.
        location_line: Display name for the location header.

    Returns:
        Multi-line string containing the formatted table.
    """
    header_label = f"📍 {location_line} — {len(days)}-day forecast"
    sep = "─" * 78
    header_row = f"{'Day':<6}  {'Max':>5}  {'Min':>5}  {'Rain':>6}  {'Wind':<12}  {'UV':>2}  Conditions"

    lines = [header_label, sep, header_row, sep]
    for d in days:
        lines.append(
            f"{d['label']:<6}  {d['temp_max']:>5}  {d['temp_min']:>5}  "
            f"{d['precipitation']:>6}  {d['wind']:<12}  {d['uv_index']:>2}  {d['description']}"
        )
    lines.append(sep)
    return "\n".join(lines)


def render_history(
    stats: dict | None,
    points: list[dict],
    location_line: str,
    period_label: str,
) -> str:
    """Render historical_stats() and daily_points() as a summary plus table."""
    if stats is None or not points:
        return f"📍 {location_line} — No historical data available."

    sep = "─" * 50
    max_temp = format_temperature(stats["max_temp"]) if stats["max_temp"] is not None else "N/A"
    min_temp = format_temperature(stats["min_temp"]) if stats["min_temp"] is not None else "N/A"

    lines = [
        f"📍 {location_line} — {period_label} ({points[0]['date']} to {points[-1]['date']})",
        sep,
        f"🌡  Avg high:        {format_temperature(stats['avg_max_temp'])}",
        f"🌡  Avg low:         {format_temperature(stats['avg_min_temp'])}",
        f"🔥  Highest:         {max_temp}",
        f"🥶  Lowest:          {min_temp}",
        f"🌧  Precipitation:   {format_precipitation(stats['total_precipitation'])}",
        f"☔  Rainy days:      {stats['rainy_days']}",
        sep,
        f"{'Day':<11}  {'Max':>5}  {'Min':>5}  {'Rain mm':>7}",
    ]
    for p in points:
        lines.append(
            f"{fmt_day(p['date']):<11}  {p['max_temp']:>4}°  {p['min_temp']:>4}°  {p['precipitation']:>7.1f}"
        )
    lines.append(sep)
    return "\n".join(lines)

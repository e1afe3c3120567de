# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
typical.py — "Typical day" averages for one calendar day across the window.

Works on matched, unit-normalized samples and is independent of the
threshold classifier. Nulls are skipped per metric; a metric with no
readings at all is reported as None and listed under coverage.unavailable
so it can't be mistaken for a genuine zero.
"""

import math

from weather_odds.dates import month_abbr, seasonal_emoji
from weather_odds.utils import round_half_up

# summary key -> (record field, decimals)
AVERAGED_FIELDS = {
    "high_f":       ("temperature_max",   0),
    "low_f":        ("temperature_min",   0),
    "precip_in":    ("precipitation",     2),
    "wind_mph":     ("windspeed_max",     0),
    "humidity_pct": ("relative_humidity", 0),
}

SUMMARY_UNITS = {
    "high":     "°F",
    "low":      "°F",
    "precip":   "in",
    "wind":     "mph",
    "humidity": "%",
}


def mean_ignore_null(values: list[float | None]) -> float | None:
    """Arithmetic mean of the non-null, non-NaN values, or None if there are none."""
    valid = [v for v in values if v is not None and not math.isnan(v)]
    if not valid:
        return None
    return sum(valid) / len(valid)


def typical_day(
    samples: list[dict],
    latitude: float,
    longitude: float,
    month: int,
    day: int,
    start_year: int,
    end_year: int,
    missing_years: int = 0,
    leap_handled: bool = False,
) -> dict:
    """Average each metric over the yearly samples.

    Args:
        samples: Normalized yearly samples (°F, in, mph, %).
        latitude, longitude: Clamped location, echoed in the summary.
        month, day: Target calendar day.
        start_year, end_year: Window bounds (inclusive).
        missing_years: Years in the window with no sample.
        leap_handled: Whether Feb 28 stood in for Feb 29 in any year.

    Returns:
        Dict with keys location, dateOfYear, period, averages, units, coverage.
    """
    averages = {}
    unavailable = []
    for key, (field, decimals) in AVERAGED_FIELDS.items():
        mean = mean_ignore_null([s.get(field) for s in samples])
        if mean is None:
            averages[key] = None
            unavailable.append(key)
        else:
            averages[key] = round_half_up(mean, decimals)

    return {
        "location":  {"lat": latitude, "lon": longitude},
        "dateOfYear": {"month": month, "day": day},
        "period":    {"start": start_year, "end": end_year, "years": len(samples)},
        "averages":  averages,
        "units":     dict(SUMMARY_UNITS),
        "coverage":  {
            "missingYears": missing_years,
            "leapHandled":  leap_handled,
            "unavailable":  unavailable,
        },
    }


def format_typical_day(summary: dict, location_name: str | None = None) -> str:
    """Render a typical-day summary for the terminal."""
    month = summary["dateOfYear"]["month"]
    day = summary["dateOfYear"]["day"]
    period = summary["period"]
    avg = summary["averages"]
    units = summary["units"]
    name = location_name or f"{summary['location']['lat']}, {summary['location']['lon']}"

    def fmt(key: str, unit_key: str, spec: str = ".0f") -> str:
        value = avg[key]
        if value is None:
            return "no data"
        return f"{value:{spec}}{units[unit_key]}"

    sep = "─" * 50
    lines = [
        f"{seasonal_emoji(month)} {name} — typical {month_abbr(month)} {day}",
        f"   {period['years']} years of data ({period['start']}–{period['end']})",
        sep,
        f"🌡  High / Low:  {fmt('high_f', 'high')} / {fmt('low_f', 'low')}",
        f"🌧  Precip:      {fmt('precip_in', 'precip', '.2f')}",
        f"💨 Wind:         {fmt('wind_mph', 'wind')}",
        f"💧 Humidity:     {fmt('humidity_pct', 'humidity')}",
        sep,
    ]
    coverage = summary["coverage"]
    if coverage["missingYears"]:
        lines.append(f"⚠️  {coverage['missingYears']} year(s) missing from the window.")
    if coverage["leapHandled"]:
        lines.append("ℹ️  Feb 28 used for years without Feb 29.")
    return "\n".join(lines)

# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
units.py — Normalize archive values to imperial units (°F, inches, mph).

Open-Meteo reports metric units by default and declares them per field in
``daily_units``. Everything downstream of the matcher works in imperial, so
each value is converted once, using the unit the archive declared for it.
Values already in the target unit pass through unchanged.
"""

import math

TARGET_UNITS = {
    "temperature":   "°F",
    "precipitation": "in",
    "wind":          "mph",
    "humidity":      "%",
}

# Which conversion applies to each record field
FIELD_KINDS = {
    "temperature_max":   "temperature",
    "temperature_min":   "temperature",
    "precipitation":     "precipitation",
    "windspeed_max":     "wind",
    "relative_humidity": "humidity",
}

_CELSIUS = {"°C", "celsius"}
_MILLIMETRES = {"mm"}
_METRES_PER_SECOND = {"m/s", "ms⁻¹"}
_KILOMETRES_PER_HOUR = {"km/h", "kmh"}


def c_to_f(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def f_to_c(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def mm_to_in(mm: float) -> float:
    return mm / 25.4


def ms_to_mph(metres_per_second: float) -> float:
    return metres_per_second * 2.237


def kmh_to_mph(kmh: float) -> float:
    return kmh * 0.621371


def to_imperial(value: float | None, unit: str | None, kind: str) -> float | None:
    """Convert a single archive value to its imperial target unit.

    Args:
        value: Raw value, or None for a sensor gap.
        unit: Unit string declared by the archive, e.g. '°C', 'mm', 'km/h'.
            Unknown or missing units are treated as already imperial.
        kind: One of 'temperature', 'precipitation', 'wind', 'humidity'.

    Returns:
        The converted value, or None if the input was None or NaN.

    Raises:
        ValueError: If kind is not a known conversion kind.
    """
    if kind not in TARGET_UNITS:
        raise ValueError(f"Unknown conversion kind: {kind!r}")
    if value is None or math.isnan(value):
        return None

    value = float(value)
    if kind == "temperature" and unit in _CELSIUS:
        return c_to_f(value)
    if kind == "precipitation" and unit in _MILLIMETRES:
        return mm_to_in(value)
    if kind == "wind":
        if unit in _METRES_PER_SECOND:
            return ms_to_mph(value)
        if unit in _KILOMETRES_PER_HOUR:
            return kmh_to_mph(value)
    # Humidity is a percentage in every unit system
    return value


def normalize_record(record: dict, units: dict[str, str]) -> dict:
    """Return a copy of a daily record with every metric in imperial units.

    Args:
        record: Daily record dict (see history._parse_daily).
        units: Mapping of record field -> unit string declared by the archive.

    Returns:
        New dict; the input record is left untouched.
    """
    normalized = dict(record)
    for field, kind in FIELD_KINDS.items():
        if field in record:
            normalized[field] = to_imperial(record[field], units.get(field), kind)
    return normalized


def imperial_units() -> dict[str, str]:
    """Units dict describing records that have been through normalize_record."""
    return {field: TARGET_UNITS[kind] for field, kind in FIELD_KINDS.items()}

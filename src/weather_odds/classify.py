"""
classify.py — Tag each daily record with the extreme-weather categories it meets.

Each category maps to a predicate over one record's values and the active
Thresholds. Comparisons are strict: a day at exactly 25 mph is not windy.
A predicate whose fields are missing is "not evaluable": the flag is False
and the aggregator leaves that record out of the category's total.
"""

from dataclasses import dataclass, fields
from enum import Enum


@dataclass(frozen=True)
class Thresholds:
    """Threshold constants, all in imperial units.

    Defaults follow NOAA / NWS guidance. Pass a custom instance to the
    classifier and aggregator instead of changing module state.
    """

    hot: float = 90.0                      # °F, daily max temperature
    cold: float = 32.0                     # °F, daily min temperature
    windy: float = 25.0                    # mph, daily max wind
    wet: float = 0.5                       # inches, daily precipitation sum
    uncomfortable_temp: float = 85.0       # °F, heat half of the composite
    uncomfortable_humidity: float = 70.0   # %, humidity half of the composite

    @classmethod
    def from_config(cls, config: dict) -> "Thresholds":
        """Build from the optional [thresholds] table of a loaded config."""
        table = config.get("thresholds", {})
        known = {f.name for f in fields(cls)}
        return cls(**{k: float(v) for k, v in table.items() if k in known})


class Category(Enum):
    """Extreme-weather categories, keyed by their response name."""

    HOT = ("veryHot", "Very Hot", "meetsHot", "°F",
           "Days where daily max temperature exceeds {hot:g}°F",
           "NOAA Heat Index Guidelines")
    COLD = ("veryCold", "Very Cold", "meetsCold", "°F",
            "Days where daily min temperature falls below {cold:g}°F",
            "NOAA Freeze Warning Criteria")
    WINDY = ("veryWindy", "Very Windy", "meetsWindy", "mph",
             "Days where max wind exceeds {windy:g} mph",
             "National Weather Service Wind Advisory")
    WET = ("veryWet", "Very Wet", "meetsWet", "in",
           "Days with total precipitation exceeding {wet:g} inches",
           "NOAA Heavy Rain Criteria")
    UNCOMFORTABLE = ("veryUncomfortable", "Very Uncomfortable", "meetsUncomfortable", "index",
                     "Days with max temp > {uncomfortable_temp:g}°F and humidity > "
                     "{uncomfortable_humidity:g}%, or wind > {windy:g} mph with rain > {wet:g} in",
                     "NOAA Heat Index & Comfort Guidelines")

    def __init__(self, key, label, flag, unit, description, source):
        self.key = key
        self.label = label
        self.flag = flag
        self.unit = unit
        self.description = description
        self.source = source

    def describe(self, thresholds: Thresholds) -> str:
        return self.description.format(**_as_dict(thresholds))


def _as_dict(thresholds: Thresholds) -> dict:
    return {f.name: getattr(thresholds, f.name) for f in fields(thresholds)}


def _above(value: float | None, limit: float) -> bool | None:
    if value is None:
        return None
    return value > limit


def _below(value: float | None, limit: float) -> bool | None:
    if value is None:
        return None
    return value < limit


def _both(a: bool | None, b: bool | None) -> bool | None:
    """AND of two comparisons; None if either side could not be evaluated."""
    if a is None or b is None:
        return None
    return a and b


def evaluate(record: dict, category: Category, thresholds: Thresholds) -> bool | None:
    """Evaluate one category predicate against one record.

    Returns:
        True or False, or None when the fields the predicate needs are null.
    """
    t = thresholds
    if category is Category.HOT:
        return _above(record.get("temperature_max"), t.hot)
    if category is Category.COLD:
        return _below(record.get("temperature_min"), t.cold)
    if category is Category.WINDY:
        return _above(record.get("windspeed_max"), t.windy)
    if category is Category.WET:
        return _above(record.get("precipitation"), t.wet)

    # Composite: (hot-ish AND humid) OR (windy AND wet)
    heat_humidity = _both(
        _above(record.get("temperature_max"), t.uncomfortable_temp),
        _above(record.get("relative_humidity"), t.uncomfortable_humidity),
    )
    wind_rain = _both(
        _above(record.get("windspeed_max"), t.windy),
        _above(record.get("precipitation"), t.wet),
    )
    if heat_humidity or wind_rain:
        return True
    if heat_humidity is None and wind_rain is None:
        return None
    return False


def classify_record(record: dict, thresholds: Thresholds | None = None) -> dict:
    """Return a copy of `record` with a meets* flag for every category."""
    thresholds = thresholds or Thresholds()
    classified = dict(record)
    for category in Category:
        classified[category.flag] = evaluate(record, category, thresholds) is True
    return classified


def classify_series(records: list[dict], thresholds: Thresholds | None = None) -> list[dict]:
    thresholds = thresholds or Thresholds()
    return [classify_record(r, thresholds) for r in records]


def describe_threshold(category: Category, thresholds: Thresholds | None = None) -> str:
    """Short display form of a threshold, e.g. '> 90°F' or '< 32°F'."""
    t = thresholds or Thresholds()
    if category is Category.HOT:
        return f"> {t.hot:g}°F"
    if category is Category.COLD:
        return f"< {t.cold:g}°F"
    if category is Category.WINDY:
        return f"> {t.windy:g} mph"
    if category is Category.WET:
        return f"> {t.wet:g} in"
    return "Multiple criteria"

# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for typical.py — null-aware means and the typical-day summary."""

import json
import math

import pytest

from weather_odds.typical import format_typical_day, mean_ignore_null, typical_day


def make_sample(year, tmax=70.0, tmin=50.0, precip=0.1, wind=10.0, rh=60.0) -> dict:
    return {
        "year": year,
        "temperature_max": tmax,
        "temperature_min": tmin,
        "precipitation": precip,
        "windspeed_max": wind,
        "relative_humidity": rh,
    }


def summarize(samples, **kwargs) -> dict:
    args = dict(latitude=39.74, longitude=-104.99, month=7, day=4,
                start_year=2005, end_year=2024)
    args.update(kwargs)
    return typical_day(samples, **args)


# ---------------------------------------------------------------------------
# mean_ignore_null
# ---------------------------------------------------------------------------

def test_mean_of_plain_values():
    assert mean_ignore_null([1.0, 2.0, 3.0]) == 2.0


def test_mean_skips_none():
    assert mean_ignore_null([1.0, None, 3.0]) == 2.0


def test_mean_skips_nan():
    assert mean_ignore_null([math.nan, 4.0]) == 4.0


def test_mean_of_nothing_is_none():
    assert mean_ignore_null([]) is None
    assert mean_ignore_null([None, None]) is None


def test_mean_of_zeros_is_zero_not_none():
    assert mean_ignore_null([0.0, 0.0]) == 0.0


# ---------------------------------------------------------------------------
# typical_day
# ---------------------------------------------------------------------------

class TestTypicalDay:

    def setup_method(self):
        self.samples = [
            make_sample(2020, tmax=70.0, tmin=49.6, precip=0.125, wind=10.0, rh=61.0),
            make_sample(2021, tmax=71.0, tmin=50.2, precip=0.125, wind=None, rh=62.0),
            make_sample(2022, tmax=None, tmin=50.0, precip=0.125, wind=20.0, rh=63.0),
        ]
        self.summary = summarize(self.samples, missing_years=17, leap_handled=False)
        self.avg = self.summary["averages"]

    def test_half_rounds_up(self):
        """(70 + 71) / 2 = 70.5 rounds to 71, not to 70."""
        assert self.avg["high_f"] == 71.0

    def test_low_rounded_to_whole_degrees(self):
        assert self.avg["low_f"] == 50.0

    def test_precip_two_decimals(self):
        assert self.avg["precip_in"] == pytest.approx(0.13)

    def test_null_wind_not_counted_as_zero(self):
        """Mean over the two readings (10, 20), not over three years."""
        assert self.avg["wind_mph"] == 15.0

    def test_humidity(self):
        assert self.avg["humidity_pct"] == 62.0

    def test_period(self):
        assert self.summary["period"] == {"start": 2005, "end": 2024, "years": 3}

    def test_location_and_date(self):
        assert self.summary["location"] == {"lat": 39.74, "lon": -104.99}
        assert self.summary["dateOfYear"] == {"month": 7, "day": 4}

    def test_units(self):
        assert self.summary["units"] == {
            "high": "°F", "low": "°F", "precip": "in", "wind": "mph", "humidity": "%",
        }

    def test_coverage(self):
        assert self.summary["coverage"] == {
            "missingYears": 17, "leapHandled": False, "unavailable": [],
        }

    def test_json_serializable(self):
        json.dumps(self.summary, ensure_ascii=False)


def test_metric_with_no_readings_is_unavailable():
    samples = [make_sample(2020, rh=None), make_sample(2021, rh=None)]
    summary = summarize(samples)
    assert summary["averages"]["humidity_pct"] is None
    assert summary["coverage"]["unavailable"] == ["humidity_pct"]


def test_genuine_zero_precip_is_available():
    samples = [make_sample(2020, precip=0.0), make_sample(2021, precip=0.0)]
    summary = summarize(samples)
    assert summary["averages"]["precip_in"] == 0.0
    assert "precip_in" not in summary["coverage"]["unavailable"]


def test_leap_flag_passed_through():
    summary = summarize([make_sample(2023)], month=2, day=29, leap_handled=True)
    assert summary["coverage"]["leapHandled"] is True


# ---------------------------------------------------------------------------
# format_typical_day
# ---------------------------------------------------------------------------

def test_format_includes_name_and_day():
    text = format_typical_day(summarize([make_sample(2020)]), "Denver, CO")
    assert "Denver, CO" in text
    assert "typical Jul 4" in text


def test_format_marks_unavailable_metric():
    text = format_typical_day(summarize([make_sample(2020, rh=None)]))
    assert "no data" in text


def test_format_defaults_to_coordinates():
    text = format_typical_day(summarize([make_sample(2020)]))
    assert "39.74, -104.99" in text


def test_format_mentions_missing_and_leap():
    summary = summarize([make_sample(2023)], month=2, day=29, missing_years=2, leap_handled=True)
    text = format_typical_day(summary)
    assert "2 year(s) missing" in text
    assert "Feb 28" in text

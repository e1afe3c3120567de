# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for dates.py — target day, year window, leap years, clamping."""

import pytest
from datetime import date, datetime

from weather_odds.dates import (
    clamp_coordinates,
    is_leap,
    month_abbr,
    needs_leap_fallback,
    seasonal_emoji,
    to_month_day,
    year_window,
)


# ---------------------------------------------------------------------------
# to_month_day
# ---------------------------------------------------------------------------

def test_month_day_from_iso_string():
    assert to_month_day("2024-07-04") == (7, 4)


def test_month_day_from_iso_datetime_string():
    assert to_month_day("2024-02-29T10:30:00") == (2, 29)


def test_month_day_from_date():
    assert to_month_day(date(1999, 12, 31)) == (12, 31)


def test_month_day_from_datetime():
    assert to_month_day(datetime(2021, 3, 9, 23, 59)) == (3, 9)


def test_month_day_ignores_surrounding_whitespace():
    assert to_month_day("  2024-01-15 ") == (1, 15)


def test_month_day_rejects_garbage():
    with pytest.raises(ValueError, match="Unrecognised date"):
        to_month_day("next tuesday")


# ---------------------------------------------------------------------------
# year_window
# ---------------------------------------------------------------------------

class TestYearWindow:

    def test_default_is_last_twenty_full_years(self):
        assert year_window(today=date(2025, 6, 1)) == (2005, 2024)

    def test_window_length_matches_years(self):
        start, end = year_window(10, today=date(2025, 1, 1))
        assert end - start + 1 == 10

    def test_current_year_excluded(self):
        _, end = year_window(5, today=date(2030, 12, 31))
        assert end == 2029

    def test_defaults_to_today(self):
        _, end = year_window(3)
        assert end == date.today().year - 1

    def test_zero_years_rejected(self):
        with pytest.raises(ValueError):
            year_window(0)


# ---------------------------------------------------------------------------
# Leap years
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("year,expected", [
    (2024, True),
    (2023, False),
    (2000, True),
    (1900, False),
    (2100, False),
])
def test_is_leap(year, expected):
    assert is_leap(year) is expected


def test_fallback_needed_for_feb_29_in_common_year():
    assert needs_leap_fallback(2, 29, 2023) is True


def test_fallback_not_needed_in_leap_year():
    assert needs_leap_fallback(2, 29, 2024) is False


def test_fallback_not_needed_for_other_days():
    assert needs_leap_fallback(2, 28, 2023) is False
    assert needs_leap_fallback(3, 1, 2023) is False


# ---------------------------------------------------------------------------
# clamp_coordinates
# ---------------------------------------------------------------------------

def test_valid_coordinates_unchanged():
    assert clamp_coordinates(39.74, -104.99) == (39.74, -104.99)


def test_out_of_range_coordinates_clamped():
    assert clamp_coordinates(95, -200) == (90.0, -180.0)
    assert clamp_coordinates(-91.5, 181) == (-90.0, 180.0)


# ---------------------------------------------------------------------------
# Display helpers
# ---------------------------------------------------------------------------

def test_month_abbr():
    assert month_abbr(1) == "Jan"
    assert month_abbr(12) == "Dec"
    assert month_abbr(13) == "Unknown"


@pytest.mark.parametrize("month,emoji", [
    (1, "❄️"), (12, "❄️"), (4, "🌦️"), (7, "☀️"), (10, "🍂"),
])
def test_seasonal_emoji(month, emoji):
    assert seasonal_emoji(month) == emoji

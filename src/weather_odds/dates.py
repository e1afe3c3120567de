# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
dates.py — Calendar helpers: target day, trailing year window, leap years.
"""

from datetime import date, datetime

DEFAULT_WINDOW_YEARS = 20

_MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def to_month_day(value: date | datetime | str) -> tuple[int, int]:
    """Reduce a date to the (month, day) pair analysed across every year.

    Args:
        value: A date, a datetime, or an ISO string such as '2024-07-04'
            or '2024-07-04T12:00:00'.

    Returns:
        (month, day) tuple.

    Raises:
        ValueError: If a string cannot be parsed as an ISO date.
    """
    if isinstance(value, str):
        raw = value.strip()
        try:
            value = date.fromisoformat(raw[:10])
        except ValueError:
            raise ValueError(f"Unrecognised date: '{raw}'. Use 'YYYY-MM-DD'.") from None
    return value.month, value.day


def year_window(years: int = DEFAULT_WINDOW_YEARS, today: date | None = None) -> tuple[int, int]:
    """Return (start_year, end_year) for the last N full calendar years.

    For today in 2025 and years=20 this is (2005, 2024). The current year is
    never included because it is not complete.
    """
    if years < 1:
        raise ValueError(f"Window must cover at least one year, got {years}")
    today = today or date.today()
    return today.year - years, today.year - 1


def is_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def needs_leap_fallback(month: int, day: int, year: int) -> bool:
    """True when the target is Feb 29 and `year` has no such day."""
    return month == 2 and day == 29 and not is_leap(year)


def clamp_coordinates(latitude: float, longitude: float) -> tuple[float, float]:
    """Clamp a coordinate pair into the valid geographic range.

    Out-of-range input is clamped, never rejected.
    """
    lat = max(-90.0, min(90.0, float(latitude)))
    lon = max(-180.0, min(180.0, float(longitude)))
    return lat, lon


def month_abbr(month: int) -> str:
    if 1 <= month <= 12:
        return _MONTH_ABBR[month - 1]
    return "Unknown"


def seasonal_emoji(month: int) -> str:
    """Northern-hemisphere season marker used in terminal headers."""
    if month == 12 or month <= 2:
        return "❄️"
    if month <= 5:
        return "🌦️"
    if month <= 8:
        return "☀️"
    return "🍂"

# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
matcher.py — Pick the target calendar day out of each year in the window.

Given the flat daily series from the archive, find the record for
(month, day) in every year from start_year to end_year. When the target is
Feb 29 and a year has none, that year's Feb 28 stands in for it.
"""

from collections import defaultdict

from weather_odds.dates import needs_leap_fallback


def group_by_year(records: list[dict]) -> dict[int, list[dict]]:
    """Bucket daily records by calendar year, preserving input order."""
    by_year: dict[int, list[dict]] = defaultdict(list)
    for r in records:
        by_year[r["date"].year].append(r)
    return dict(by_year)


def _find_day(days: list[dict], month: int, day: int) -> dict | None:
    for r in days:
        if r["date"].month == month and r["date"].day == day:
            return r
    return None


def match_years(
    records: list[dict],
    month: int,
    day: int,
    start_year: int,
    end_year: int,
) -> dict:
    """Select one record per year for the target (month, day).

    Args:
        records: Daily records spanning the window (any order).
        month: Target month, 1-12.
        day: Target day of month.
        start_year: First year of the window (inclusive).
        end_year: Last year of the window (inclusive).

    Returns:
        Dict with keys:
            samples (list[dict], ascending by year, at most one per year),
            missing_years (int, years in the window without a sample),
            leap_handled (bool, True if any Feb 28 substitution was used).

        An empty samples list is returned rather than raised; the caller
        decides how to report it.
    """
    by_year = group_by_year(records)
    samples = []
    missing_years = 0
    leap_handled = False

    for year in range(start_year, end_year + 1):
        days = by_year.get(year, [])
        match = _find_day(days, month, day)

        if match is None and needs_leap_fallback(month, day, year):
            match = _find_day(days, 2, 28)
            if match is not None:
                leap_handled = True

        if match is None:
            missing_years += 1
            continue
        samples.append(match)

    return {
        "samples": samples,
        "missing_years": missing_years,
        "leap_handled": leap_handled,
    }

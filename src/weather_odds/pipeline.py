# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
pipeline.py — Run an analysis from location + date to response dict.

    resolve window → fetch archive → match years → normalize units
        → classify → probabilities / trends
        → typical-day averages

analyze_records() and summarize_records() are pure and take an already
fetched series; run_analysis() and run_typical_day() add the archive fetch.
"""

from datetime import date
from pathlib import Path

from weather_odds.analysis import analyze_series
from weather_odds.classify import Thresholds, classify_series
from weather_odds.dates import DEFAULT_WINDOW_YEARS, clamp_coordinates, to_month_day, year_window
from weather_odds.errors import NoDataError
from weather_odds.history import fetch_archive
from weather_odds.matcher import match_years
from weather_odds.typical import typical_day
from weather_odds.units import normalize_record
from weather_odds.utils import DEFAULT_LOG_PATH


def _matched_samples(
    records: list[dict],
    units: dict[str, str],
    month: int,
    day: int,
    start_year: int,
    end_year: int,
) -> dict:
    """Match one record per year and normalize it; raise if nothing matched."""
    matched = match_years(records, month, day, start_year, end_year)
    if not matched["samples"]:
        raise NoDataError(
            f"No valid data found for {month}/{day} in {start_year}–{end_year}",
            missing_years=matched["missing_years"],
            hint="Data may not be available for this specific date",
        )
    matched["samples"] = [normalize_record(s, units) for s in matched["samples"]]
    return matched


def analyze_records(
    records: list[dict],
    units: dict[str, str],
    month: int,
    day: int,
    start_year: int,
    end_year: int,
    thresholds: Thresholds | None = None,
) -> dict:
    """Probability and trend analysis over an already-fetched daily series.

    Returns:
        The analysis response (probability, probabilityDetails,
        trendAnalysis, yearlyTrends, historicalData, dataPoints) plus a
        coverage block with missingYears and leapHandled.

    Raises:
        NoDataError: If no year in the window has the target day.
    """
    thresholds = thresholds or Thresholds()
    matched = _matched_samples(records, units, month, day, start_year, end_year)
    response = analyze_series(classify_series(matched["samples"], thresholds), thresholds)
    response["coverage"] = {
        "missingYears": matched["missing_years"],
        "leapHandled":  matched["leap_handled"],
    }
    return response


def summarize_records(
    records: list[dict],
    units: dict[str, str],
    latitude: float,
    longitude: float,
    month: int,
    day: int,
    start_year: int,
    end_year: int,
) -> dict:
    """Typical-day summary over an already-fetched daily series.

    Raises:
        NoDataError: If no year in the window has the target day.
    """
    matched = _matched_samples(records, units, month, day, start_year, end_year)
    return typical_day(
        matched["samples"],
        latitude=latitude,
        longitude=longitude,
        month=month,
        day=day,
        start_year=start_year,
        end_year=end_year,
        missing_years=matched["missing_years"],
        leap_handled=matched["leap_handled"],
    )


def run_analysis(
    latitude: float,
    longitude: float,
    target: date | str,
    years: int = DEFAULT_WINDOW_YEARS,
    today: date | None = None,
    thresholds: Thresholds | None = None,
    timezone: str = "UTC",
    log_path: Path = DEFAULT_LOG_PATH,
) -> dict:
    """Fetch the archive and run the probability/trend analysis.

    Raises:
        NoDataError: If no year matched.
        RuntimeError: If the archive fetch fails after retries.
    """
    lat, lon = clamp_coordinates(latitude, longitude)
    month, day = to_month_day(target)
    start_year, end_year = year_window(years, today)
    records, units = fetch_archive(
        lat, lon, start_year, end_year, timezone=timezone, log_path=log_path
    )
    return analyze_records(records, units, month, day, start_year, end_year, thresholds)


def run_typical_day(
    latitude: float,
    longitude: float,
    target: date | str,
    years: int = DEFAULT_WINDOW_YEARS,
    today: date | None = None,
    timezone: str = "UTC",
    log_path: Path = DEFAULT_LOG_PATH,
) -> dict:
    """Fetch the archive and compute the typical-day summary.

    Raises:
        NoDataError: If no year matched.
        RuntimeError: If the archive fetch fails after retries.
    """
    lat, lon = clamp_coordinates(latitude, longitude)
    month, day = to_month_day(target)
    start_year, end_year = year_window(years, today)
    records, units = fetch_archive(
        lat, lon, start_year, end_year, timezone=timezone, log_path=log_path
    )
    return summarize_records(records, units, lat, lon, month, day, start_year, end_year)

# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
analysis.py — Exceedance probabilities and trends over classified records.

Input is one classified record per matched year, ascending by year (the
matcher's output order). Everything here is threshold counting; there is
no regression and no confidence interval.
"""

from __future__ import annotations
from collections import defaultdict

from weather_odds.classify import Category, Thresholds, describe_threshold, evaluate
from weather_odds.errors import NoDataError

# Percentage-point change below which a category counts as stable
TREND_THRESHOLD = 5.0


def probability_detail(
    records: list[dict],
    category: Category,
    thresholds: Thresholds | None = None,
) -> dict:
    """Count how often one category occurred across the records.

    A record whose fields for this category are null is left out of both
    count and total, so a year with no precipitation reading does not
    lower the chance of a wet day.

    Returns:
        Dict with keys percentage (float, or None if no record could be
        evaluated), count (int), total (int), threshold (str).

    Raises:
        NoDataError: If records is empty.
    """
    if not records:
        raise NoDataError("No matched years to compute probabilities from")
    thresholds = thresholds or Thresholds()

    count = 0
    total = 0
    for r in records:
        outcome = evaluate(r, category, thresholds)
        if outcome is None:
            continue
        total += 1
        if outcome:
            count += 1

    return {
        "percentage": 100 * count / total if total else None,
        "count":      count,
        "total":      total,
        "threshold":  describe_threshold(category, thresholds),
    }


def calculate_probabilities(
    records: list[dict],
    thresholds: Thresholds | None = None,
) -> tuple[dict, dict]:
    """Return (probability, details) keyed by category response name.

    probability maps key -> percentage; details maps key -> probability_detail.
    """
    details = {c.key: probability_detail(records, c, thresholds) for c in Category}
    probability = {key: d["percentage"] for key, d in details.items()}
    return probability, details


def split_halves(samples: list, split: int | None = None) -> tuple[list, list]:
    """Split an ordered list into (first, second) at `split`.

    The default split is len // 2, so with an odd length the later half
    gets the extra sample.
    """
    if split is None:
        split = len(samples) // 2
    return samples[:split], samples[split:]


def trend_direction(change: float | None, threshold: float = TREND_THRESHOLD) -> str:
    """Classify a percentage-point change as increasing, decreasing or stable."""
    if change is None or abs(change) < threshold:
        return "stable"
    return "increasing" if change > 0 else "decreasing"


def _half_percentage(half: list[dict], category: Category, thresholds: Thresholds) -> float | None:
    if not half:
        return None
    return probability_detail(half, category, thresholds)["percentage"]


def trend_analysis(
    records: list[dict],
    thresholds: Thresholds | None = None,
    split: int | None = None,
) -> list[dict]:
    """Compare each category's probability between the two halves of the window.

    Returns:
        One dict per category with keys category (label), trend
        ('increasing' | 'decreasing' | 'stable') and changePercent
        (second-half minus first-half percentage points, or None when a
        half has nothing to compare).
    """
    thresholds = thresholds or Thresholds()
    first, second = split_halves(records, split)

    trends = []
    for category in Category:
        before = _half_percentage(first, category, thresholds)
        after = _half_percentage(second, category, thresholds)
        change = after - before if before is not None and after is not None else None
        trends.append({
            "category":      category.label,
            "trend":         trend_direction(change),
            "changePercent": change,
        })
    return trends


def yearly_trends(records: list[dict], thresholds: Thresholds | None = None) -> list[dict]:
    """Per-year percentage for each category, sorted by year.

    With one record per year each value is 0 or 100. A category that could
    not be evaluated in a year is None.
    """
    thresholds = thresholds or Thresholds()
    by_year: dict[int, list[dict]] = defaultdict(list)
    for r in records:
        by_year[r["year"]].append(r)

    series = []
    for year in sorted(by_year):
        entry: dict = {"year": year}
        for category in Category:
            entry[category.key] = probability_detail(by_year[year], category, thresholds)["percentage"]
        series.append(entry)
    return series


def analyze_series(classified: list[dict], thresholds: Thresholds | None = None) -> dict:
    """Build the full analysis response from classified records.

    Raises:
        NoDataError: If classified is empty.
    """
    thresholds = thresholds or Thresholds()
    probability, details = calculate_probabilities(classified, thresholds)
    return {
        "probability":        probability,
        "probabilityDetails": details,
        "trendAnalysis":      trend_analysis(classified, thresholds),
        "yearlyTrends":       yearly_trends(classified, thresholds),
        "historicalData":     [_serializable(r) for r in classified],
        "dataPoints":         len(classified),
    }


def _serializable(record: dict) -> dict:
    """Copy of a record with its date as an ISO string, ready for JSON."""
    out = dict(record)
    if "date" in out:
        out["date"] = out["date"].isoformat()
    return out


def terminal_summary(
    location_name: str,
    month_day: str,
    response: dict,
    coverage: dict,
) -> str:
    """Return a formatted multi-line terminal summary string.

    Example:
        📍 Denver, CO — Jul 4 over 20 years (2005–2024)
        ──────────────────────────────────────────────────────────────
        🔥  Very Hot             45.0%   (9/20)   > 90°F   stable
        ...
    """
    years = [r["year"] for r in response["historicalData"]]
    if not years:
        return f"📍 {location_name} — No historical data available."

    sep = "─" * 62
    lines = [
        f"📍 {location_name} — {month_day} over {len(years)} years ({years[0]}–{years[-1]})",
        sep,
    ]

    icons = {"veryHot": "🔥", "veryCold": "❄️", "veryWindy": "💨",
             "veryWet": "🌧", "veryUncomfortable": "😰"}
    trend_by_label = {t["category"]: t for t in response["trendAnalysis"]}
    for category in Category:
        detail = response["probabilityDetails"][category.key]
        trend = trend_by_label[category.label]
        pct = "  n/a" if detail["percentage"] is None else f"{detail['percentage']:5.1f}%"
        change = trend["changePercent"]
        change_str = "" if change is None else f" ({change:+.1f} pts)"
        lines.append(
            f"{icons[category.key]}  {category.label:<19} {pct}  "
            f"({detail['count']}/{detail['total']})  {detail['threshold']:<18} "
            f"{trend['trend']}{change_str}"
        )

    lines.append(sep)
    yearly = response.get("yearlyTrends") or []
    if yearly:
        lines.append("  Year   " + "".join(f"{icons[c.key]:<6}" for c in Category))
        for entry in yearly:
            marks = []
            for category in Category:
                value = entry.get(category.key)
                # ✔ met, · not met, – no reading
                marks.append("–" if value is None else ("✔" if value else "·"))
            lines.append(f"  {entry['year']}   " + "".join(f"{m:<6}" for m in marks))
        lines.append(sep)
    if coverage.get("missingYears"):
        lines.append(f"⚠️  {coverage['missingYears']} year(s) in the window had no data for this date.")
    if coverage.get("leapHandled"):
        lines.append("ℹ️  Feb 28 used for years without Feb 29.")
    return "\n".join(lines)

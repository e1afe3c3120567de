# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line interface for weather-odds.

Commands:
  weather-odds analyze       — chance of very hot/cold/windy/wet/uncomfortable
                               weather on a date, with split-half trends
  weather-odds typical-day   — average conditions on that date
  weather-odds thresholds    — show the thresholds in effect
"""

import argparse
import json
from datetime import date
from pathlib import Path

from weather_odds.analysis import terminal_summary
from weather_odds.classify import Category, Thresholds, describe_threshold
from weather_odds.config import MAX_WINDOW_YEARS, load_config
from weather_odds.dates import month_abbr, to_month_day
from weather_odds.errors import NoDataError
from weather_odds.pipeline import run_analysis, run_typical_day
from weather_odds.typical import format_typical_day


def _resolve_location(args, config: dict) -> tuple[float, float, str]:
    """Coordinates from --lat/--lon, falling back to the [location] config."""
    if args.lat is not None and args.lon is not None:
        return args.lat, args.lon, f"{args.lat}, {args.lon}"
    location = config.get("location")
    if location is None:
        print("[error] No location given. Pass --lat and --lon or set [location] in config.toml.")
        raise SystemExit(1)
    return location["latitude"], location["longitude"], location["name"]


def _resolve_date(raw: str | None) -> tuple[str, int, int]:
    target = raw or date.today().isoformat()
    try:
        month, day = to_month_day(target)
    except ValueError as e:
        print(f"[error] {e}")
        raise SystemExit(1)
    return target, month, day


def _load(args) -> dict:
    try:
        return load_config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)


def cmd_analyze(args) -> None:
    """Fetch 20 years for the date and print probabilities and trends."""
    config = _load(args)
    latitude, longitude, name = _resolve_location(args, config)
    target, month, day = _resolve_date(args.date)
    years = args.years if args.years is not None else config["analysis"]["years"]

    try:
        response = run_analysis(
            latitude,
            longitude,
            target,
            years=years,
            thresholds=Thresholds.from_config(config),
            timezone=args.tz or config["analysis"]["timezone"],
            log_path=Path(config["log"]["path"]),
        )
    except NoDataError as e:
        print(f"[error] {e}. {e.hint}.")
        raise SystemExit(1)
    except RuntimeError as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    if args.json:
        print(json.dumps(response, indent=2, ensure_ascii=False))
        return

    print()
    print(terminal_summary(name, f"{month_abbr(month)} {day}", response, response["coverage"]))


def cmd_typical_day(args) -> None:
    """Fetch 20 years for the date and print the typical-day averages."""
    config = _load(args)
    latitude, longitude, name = _resolve_location(args, config)
    target, _, _ = _resolve_date(args.date)
    years = args.years if args.years is not None else config["analysis"]["years"]

    try:
        summary = run_typical_day(
            latitude,
            longitude,
            target,
            years=years,
            timezone=args.tz or config["analysis"]["timezone"],
            log_path=Path(config["log"]["path"]),
        )
    except NoDataError as e:
        print(f"[error] {e}. {e.hint}.")
        raise SystemExit(1)
    except RuntimeError as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    if args.json:
        print(json.dumps(summary, indent=2, ensure_ascii=False))
        return

    print()
    print(format_typical_day(summary, name))


def cmd_thresholds(args) -> None:
    """Print each category's threshold, description and source."""
    config = _load(args)
    thresholds = Thresholds.from_config(config)
    sep = "─" * 62
    print(f"\n📏 Thresholds in effect")
    print(sep)
    for category in Category:
        print(f"  {category.label:<19} {describe_threshold(category, thresholds)}")
        print(f"      {category.describe(thresholds)}")
        print(f"      Source: {category.source}")
    print(sep)


def _window_years(raw: str) -> int:
    """argparse type for --years: an int in 1..MAX_WINDOW_YEARS."""
    try:
        years = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a whole number of years, got {raw!r}")
    if not 1 <= years <= MAX_WINDOW_YEARS:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_WINDOW_YEARS}, got {years}")
    return years


def _add_query_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=None, help="Latitude in decimal degrees")
    parser.add_argument("--lon", type=float, default=None, help="Longitude in decimal degrees")
    parser.add_argument(
        "--date",
        metavar="YYYY-MM-DD",
        default=None,
        help="Date whose calendar day is analysed (year is ignored). Default: today.",
    )
    parser.add_argument(
        "--years",
        metavar="N",
        type=_window_years,
        default=None,
        help=f"Number of past full years to analyse (1-{MAX_WINDOW_YEARS}). Default: 20.",
    )
    parser.add_argument("--tz", metavar="TZ", default=None, help='Archive timezone, e.g. "America/Denver"')
    parser.add_argument("--json", action="store_true", help="Print the raw JSON response")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="weather-odds",
        description="Historical odds of extreme weather on any calendar day, using Open-Meteo",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        default=None,
        help="Path to config.toml (default: ./config.toml if present)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    p_analyze = subparsers.add_parser("analyze", help="Probabilities and trends for a date")
    _add_query_args(p_analyze)

    p_typical = subparsers.add_parser("typical-day", help="Average conditions for a date")
    _add_query_args(p_typical)

    subparsers.add_parser("thresholds", help="Show the thresholds in effect")

    args = parser.parse_args(argv)

    commands = {
        "analyze": cmd_analyze,
        "typical-day": cmd_typical_day,
        "thresholds": cmd_thresholds,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()

# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
Every section is optional: without a config file the CLI runs on the
built-in defaults and needs --lat/--lon on the command line.
"""

import tomllib
from pathlib import Path

from weather_odds.classify import Thresholds

DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS = {
    "analysis": {"years": 20, "timezone": "UTC"},
    "thresholds": {},
    "log": {"path": "logs/weather_odds.log"},
}

MAX_WINDOW_YEARS = 80


def load_config(path: Path | None = None) -> dict:
    """Load and validate a TOML configuration file, filling in defaults.

    Args:
        path: Path to the TOML config file. If None, config.toml in the
            working directory is used when present, defaults otherwise.

    Returns:
        Nested dict of configuration values.

    Raises:
        FileNotFoundError: If an explicitly given path does not exist.
        ValueError: If a section or key is invalid.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return _with_defaults({})
        path = DEFAULT_CONFIG_PATH
    elif not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml and adjust it."
        )

    with open(path, "rb") as f:
        config = tomllib.load(f)

    _validate(config)
    return _with_defaults(config)


def _with_defaults(config: dict) -> dict:
    merged = {section: dict(values) for section, values in DEFAULTS.items()}
    for section, values in config.items():
        merged.setdefault(section, {}).update(values)
    return merged


def _validate(config: dict) -> None:
    """Validate the optional config sections.

    Expected config schema::

        [location]                 # optional; all three keys if present
        latitude  = <float>
        longitude = <float>
        name      = <str>

        [analysis]
        years    = <int>           # 1-80 trailing full years
        timezone = <str>           # passed to the archive, e.g. "UTC"

        [thresholds]               # any subset of Thresholds fields
        hot = <float>              # °F

        [log]
        path = <str>               # file receiving fetch failures

    Args:
        config: Parsed TOML config dict.

    Raises:
        ValueError: If a section or key is invalid.
    """
    for section, values in config.items():
        if not isinstance(values, dict):
            raise ValueError(f"Config key {section!r} must be a [table], not a bare value")

    location = config.get("location")
    if location is not None:
        for key in ("latitude", "longitude", "name"):
            if key not in location:
                raise ValueError(f"Missing required config key: [location].{key}")

    years = config.get("analysis", {}).get("years")
    if years is not None:
        if isinstance(years, bool) or not isinstance(years, int) or not 1 <= years <= MAX_WINDOW_YEARS:
            raise ValueError(f"[analysis].years must be an integer from 1 to {MAX_WINDOW_YEARS}")

    known = set(Thresholds.__dataclass_fields__)
    for key, value in config.get("thresholds", {}).items():
        if key not in known:
            raise ValueError(f"Unknown threshold: [thresholds].{key}")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"Threshold [thresholds].{key} must be a number")

# Project: weather-odds
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
history.py — Fetch historical daily weather data from Open-Meteo Archive API.
API docs: https://open-meteo.com/en/docs/historical-weather-api

Values are returned in the units the archive declares (metric by default);
units.normalize_record converts them. Sensor gaps stay None.
"""

import requests
from datetime import date
from pathlib import Path

from weather_odds.utils import DEFAULT_LOG_PATH, with_retry

ARCHIVE_API_URL = "https://archive-api.open-meteo.com/v1/archive"

DAILY_VARIABLES = [
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "wind_speed_10m_max",
    "relative_humidity_2m_mean",
]

# Archive field -> record field. Older responses spell wind "windspeed".
FIELD_MAP = {
    "temperature_2m_max":        "temperature_max",
    "temperature_2m_min":        "temperature_min",
    "precipitation_sum":         "precipitation",
    "wind_speed_10m_max":        "windspeed_max",
    "windspeed_10m_max":         "windspeed_max",
    "relative_humidity_2m_mean": "relative_humidity",
}

RECORD_FIELDS = [
    "temperature_max",
    "temperature_min",
    "precipitation",
    "windspeed_max",
    "relative_humidity",
]


def fetch_archive(
    latitude: float,
    longitude: float,
    start_year: int,
    end_year: int,
    timezone: str = "UTC",
    log_path: Path = DEFAULT_LOG_PATH,
) -> tuple[list[dict], dict[str, str]]:
    """Fetch daily records for whole calendar years from the archive.

    One request covers Jan 1 of start_year through Dec 31 of end_year;
    for a 20-year window that is ~7,300 rows in a single response.

    Returns:
        (records, units) — see _parse_daily.

    Raises:
        RuntimeError: If all retries fail or the response is malformed.
    """
    params = {
        "latitude": latitude,
        "longitude": longitude,
        "start_date": date(start_year, 1, 1).isoformat(),
        "end_date": date(end_year, 12, 31).isoformat(),
        "daily": ",".join(DAILY_VARIABLES),
        "timezone": timezone,
    }

    print(f"[archive] Fetching {start_year}–{end_year} at {latitude}, {longitude}")

    def _call() -> dict:
        r = requests.get(ARCHIVE_API_URL, params=params, timeout=60)
        r.raise_for_status()
        return r.json()

    data = with_retry(_call, label="Open-Meteo historical archive API", log_path=log_path)
    return _parse_daily(data)


def _parse_daily(data: dict) -> tuple[list[dict], dict[str, str]]:
    """Parse an archive response into daily records and their units.

    Each record has keys: date (datetime.date), year (int), temperature_max,
    temperature_min, precipitation, windspeed_max, relative_humidity
    (float, or None where the archive has a gap).

    The units dict maps the same record keys to the unit strings from
    ``daily_units``; fields the response omits are absent from it.

    Raises:
        RuntimeError: If the response has no daily/time block.
    """
    try:
        daily = data["daily"]
        dates = daily["time"]
    except (KeyError, TypeError):
        raise RuntimeError(
            "Unexpected API response structure: missing 'daily' time series."
        ) from None

    columns: dict[str, list] = {}
    for api_field, field in FIELD_MAP.items():
        if api_field in daily and field not in columns:
            columns[field] = daily[api_field]

    raw_units = data.get("daily_units") or {}
    units = {
        FIELD_MAP[api_field]: unit
        for api_field, unit in raw_units.items()
        if api_field in FIELD_MAP
    }

    records = []
    for i, date_str in enumerate(dates):
        day = date.fromisoformat(date_str[:10])
        record = {"date": day, "year": day.year}
        for field in RECORD_FIELDS:
            column = columns.get(field)
            value = column[i] if column is not None and i < len(column) else None
            record[field] = float(value) if value is not None else None
        records.append(record)
    return records, units

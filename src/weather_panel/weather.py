# Project: weather-panel
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
weather.py — Fetch daily temperature statistics for a date range from Open-Meteo.

Open-Meteo is free and requires no API key. We make a single request for the
requested days and turn the columnar "daily" block of the response into a
list of row dicts, one per day.

API docs: https://open-meteo.com/en/docs
"""

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

import requests

from weather_panel.utils import call_once, DEFAULT_LOG_PATH


OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
REQUEST_TIMEOUT_SECONDS = 10

VALIDATION_MESSAGE = "Please fill out all fields correctly."
FETCH_FAILED_MESSAGE = "Failed to fetch weather data. Please try again."

# Row key -> Open-Meteo daily column. Order is the canonical measurement order
# used everywhere (request, rows, chart series).
MEASUREMENTS: dict[str, str] = {
    "temp_max": "temperature_2m_max",
    "temp_min": "temperature_2m_min",
    "temp_mean": "temperature_2m_mean",
    "apparent_temp_max": "apparent_temperature_max",
    "apparent_temp_min": "apparent_temperature_min",
    "apparent_temp_mean": "apparent_temperature_mean",
}

DAILY_VARIABLES = list(MEASUREMENTS.values())


class PanelError(Exception):
    """Base class for errors shown to the user as a message."""


class ValidationError(PanelError):
    """Required input is missing or unparseable. Raised before any request."""


class FetchError(PanelError):
    """The request failed, returned a bad status, or the body was unusable."""


@dataclass
class Query:
    """Outbound request parameters, read once per fetch."""

    latitude: float | None
    longitude: float | None
    start_date: date | datetime | str | None
    end_date: date | datetime | str | None


def _is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def format_date(value: date | datetime | str) -> str:
    """Return the calendar-day part of a date-like value as 'YYYY-MM-DD'.

    Time of day and any timezone offset are dropped, not converted.

    Raises:
        ValidationError: If a string value is not an ISO 8601 date or datetime.
    """
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text).date().isoformat()
    except ValueError as e:
        raise ValidationError(VALIDATION_MESSAGE) from e


def build_params(query: Query) -> dict:
    """Build the Open-Meteo query parameters for a complete Query.

    Raises:
        ValidationError: If any of the four inputs is missing.
    """
    fields = (query.latitude, query.longitude, query.start_date, query.end_date)
    if any(_is_missing(v) for v in fields):
        raise ValidationError(VALIDATION_MESSAGE)

    return {
        "latitude": query.latitude,
        "longitude": query.longitude,
        "start_date": format_date(query.start_date),
        "end_date": format_date(query.end_date),
        "daily": ",".join(DAILY_VARIABLES),
        "temperature_unit": "celsius",
    }


def fetch_weather(
    query: Query,
    url: str = OPEN_METEO_URL,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
    log_path: Path = DEFAULT_LOG_PATH,
) -> list[dict]:
    """Fetch daily temperature rows for the query's coordinate and date range.

    Args:
        query: Coordinate and date range to request.
        url: Forecast endpoint.
        timeout: Request timeout in seconds.
        log_path: Where request failures are recorded.

    Returns:
        List of dicts, one per day in provider order, each with 'date' and the
        six MEASUREMENTS keys (None where the provider sent no value).

    Raises:
        ValidationError: If the query is incomplete. No request is made.
        FetchError: On network failure, non-success status or a malformed body.
    """
    params = build_params(query)

    def _call():
        r = requests.get(url, params=params, timeout=timeout)
        r.raise_for_status()
        return r.json()

    try:
        data = call_once(_call, label="Open-Meteo daily forecast API", log_path=log_path)
    except (requests.RequestException, ValueError) as e:
        raise FetchError(FETCH_FAILED_MESSAGE) from e

    return _parse_daily(data)


def _parse_daily(data) -> list[dict]:
    """Transpose the columnar 'daily' block into one dict per day.

    A measurement column absent from the response, or shorter than 'time',
    gives None for the affected rows.

    Raises:
        FetchError: If the response has no usable 'daily.time' array.
    """
    try:
        daily = data["daily"]
        dates = daily["time"]
    except (KeyError, TypeError) as e:
        raise FetchError(FETCH_FAILED_MESSAGE) from e
    if not isinstance(dates, list) or not isinstance(daily, dict):
        raise FetchError(FETCH_FAILED_MESSAGE)

    columns = {}
    for key, column in MEASUREMENTS.items():
        values = daily.get(column)
        columns[key] = list(values) if isinstance(values, list) else []

    rows = []
    for i, date_str in enumerate(dates):
        row = {"date": date_str}
        for key, values in columns.items():
            row[key] = values[i] if i < len(values) else None
        rows.append(row)
    return rows

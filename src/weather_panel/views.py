# Project: weather-panel
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
views.py — Derived views over fetched rows: chart series, table pages, columns.

Everything here is a pure function of its arguments. Rows are never sorted
or mutated; the provider's date order is kept as-is.
"""

import math

from weather_panel.weather import MEASUREMENTS


PAGE_SIZES = (10, 20, 50)
DEFAULT_PAGE_SIZE = 10

# Display label and (line, fill) colours per measurement. A measurement keeps
# its colour whatever else is selected.
SERIES_STYLE: dict[str, tuple[str, str, str]] = {
    "temp_max":           ("Max Temperature (°C)",           "rgb(255, 99, 132)",  "rgba(255, 99, 132, 0.2)"),
    "temp_min":           ("Min Temperature (°C)",           "rgb(54, 162, 235)",  "rgba(54, 162, 235, 0.2)"),
    "temp_mean":          ("Mean Temperature (°C)",          "rgb(75, 192, 192)",  "rgba(75, 192, 192, 0.2)"),
    "apparent_temp_max":  ("Apparent Max Temperature (°C)",  "rgb(255, 159, 64)",  "rgba(255, 159, 64, 0.2)"),
    "apparent_temp_min":  ("Apparent Min Temperature (°C)",  "rgb(153, 102, 255)", "rgba(153, 102, 255, 0.2)"),
    "apparent_temp_mean": ("Apparent Mean Temperature (°C)", "rgb(201, 203, 207)", "rgba(201, 203, 207, 0.2)"),
}

COLUMN_HEADERS: dict[str, str] = {
    "date": "Date",
    "temp_max": "Max Temp (°C)",
    "temp_min": "Min Temp (°C)",
    "temp_mean": "Mean Temp (°C)",
    "apparent_temp_max": "Feels Max (°C)",
    "apparent_temp_min": "Feels Min (°C)",
    "apparent_temp_mean": "Feels Mean (°C)",
}

DEFAULT_COLUMNS = ["date", "temp_max", "temp_min", "temp_mean"]
DEFAULT_SERIES = ["temp_max", "temp_min", "temp_mean"]


def default_selection(visible: list[str] | None = None) -> dict[str, bool]:
    """Return a selection dict covering all six measurements."""
    visible = DEFAULT_SERIES if visible is None else visible
    return {key: key in visible for key in MEASUREMENTS}


def build_chart_series(rows: list[dict] | None, selection: dict[str, bool]) -> dict:
    """Build the line-chart data for the selected measurements.

    Args:
        rows: Daily rows from fetch_weather, or None before any fetch.
        selection: Measurement key -> visible flag. Missing keys count as hidden.

    Returns:
        Dict with 'labels' (list of dates) and 'series', a list of dicts with
        keys key, label, values, color, background, in canonical measurement
        order regardless of the order of the selection dict.
    """
    if not rows:
        return {"labels": [], "series": []}
    labels = [row["date"] for row in rows]

    series = []
    for key in MEASUREMENTS:
        if not selection.get(key, False):
            continue
        label, color, background = SERIES_STYLE[key]
        series.append({
            "key": key,
            "label": label,
            "values": [row.get(key) for row in rows],
            "color": color,
            "background": background,
        })

    return {"labels": labels, "series": series}


def total_pages(row_count: int, page_size: int) -> int:
    """Number of table pages; always at least 1, even with no rows."""
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(row_count / page_size))


def paginate(
    rows: list[dict] | None,
    page_size: int,
    page_index: int,
) -> tuple[list[dict], int]:
    """Slice out one 1-based page of rows.

    An out-of-range page_index gives an empty page rather than an error.
    Resetting page_index when page_size changes is the caller's job.

    Returns:
        (page_rows, total_pages)
    """
    rows = rows or []
    pages = total_pages(len(rows), page_size)
    if page_index < 1:
        return [], pages
    start = (page_index - 1) * page_size
    return rows[start:start + page_size], pages


def has_previous(page_index: int) -> bool:
    return page_index > 1


def has_next(page_index: int, pages: int) -> bool:
    return page_index < pages


def table_columns(columns: list[str] | None = None) -> list[tuple[str, str]]:
    """Return (row key, header) pairs for the enabled table columns."""
    columns = DEFAULT_COLUMNS if columns is None else columns
    return [(key, COLUMN_HEADERS[key]) for key in columns]


def series_summary(chart: dict) -> list[dict]:
    """Min/max per plotted series, skipping days with no value.

    Returns:
        List of dicts with keys label, min, max (None when a series is empty).
    """
    summary = []
    for s in chart["series"]:
        values = [v for v in s["values"] if v is not None]
        summary.append({
            "label": s["label"],
            "min": min(values) if values else None,
            "max": max(values) if values else None,
        })
    return summary

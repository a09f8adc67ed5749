# Project: weather-panel
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""Tests for chart.py — ASCII table and bar chart rendering."""

from weather_panel.chart import (
    _bar,
    render_page_table,
    render_series_chart,
    render_series_summary,
)
from weather_panel.views import table_columns


ROWS = [
    {"date": "2024-01-01", "temp_max": 4.25, "temp_min": -3.0, "temp_mean": 0.5},
    {"date": "2024-01-02", "temp_max": None, "temp_min": -1.0, "temp_mean": 1.0},
]


def test_page_table_has_header_rows_and_footer():
    out = render_page_table(ROWS, table_columns(), page_index=2, pages=3,
                            location_line="52.5200°, 13.4100°")
    lines = out.splitlines()
    assert lines[0] == "📍 52.5200°, 13.4100°"
    assert "Max Temp (°C)" in out
    assert "2024-01-01" in out
    assert lines[-1] == "Page 2 of 3"


def test_page_table_formats_numbers_and_missing():
    out = render_page_table(ROWS, table_columns(), page_index=1, pages=1)
    assert "4.2" in out or "4.3" in out
    assert "-3.0" in out
    assert "—" in out


def test_page_table_without_location_line():
    out = render_page_table([], table_columns(), page_index=1, pages=1)
    assert not out.startswith("📍")
    assert out.endswith("Page 1 of 1")


def test_series_summary_text():
    out = render_series_summary([
        {"label": "Max Temperature (°C)", "min": 1.0, "max": 9.5},
        {"label": "Min Temperature (°C)", "min": None, "max": None},
    ])
    assert "Max Temperature (°C): 1.0 … 9.5" in out
    assert "Min Temperature (°C): no data" in out


def test_series_summary_nothing_selected():
    assert render_series_summary([]) == "No series selected."


def test_bar_bounds():
    assert _bar(5, 10, 10) == "█████░░░░░"
    assert _bar(20, 10, 4) == "████"
    assert _bar(3, 0, 4) == "░░░░"


def test_series_chart_shifts_negative_values():
    series = {"label": "Min Temperature (°C)", "values": [-5.0, 5.0, None]}
    out = render_series_chart(["2024-01-01", "2024-01-02", "2024-01-03"], series, bar_width=10)
    lines = out.splitlines()
    assert lines[0] == "Min Temperature (°C)"
    assert "░" * 10 in lines[1]          # coldest day: empty bar
    assert "█" * 10 in lines[2]          # warmest day: full bar
    assert "-5.0°C" in lines[1]
    assert lines[3].rstrip().endswith("—")

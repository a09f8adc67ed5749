# Project: weather-panel
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
chart.py — ASCII chart and table rendering for terminal output.

Uses only the Python standard library (os).
All rendering functions return strings ready to print.
"""

import os

from weather_panel.utils import fmt_day

FALLBACK_TERMINAL_WIDTH: int = 80
BAR_LABEL_RESERVE: int = 30  # characters reserved for label + value outside the bar
MISSING: str = "—"


def _cell(value, width: int) -> str:
    if value is None:
        return f"{MISSING:>{width}}"
    if isinstance(value, (int, float)):
        return f"{value:>{width}.1f}"
    return f"{value:<{width}}"


def render_page_table(
    rows: list[dict],
    columns: list[tuple[str, str]],
    page_index: int,
    pages: int,
    location_line: str = "",
) -> str:
    """Render one page of daily rows as a fixed-width ASCII table.

    Args:
        rows: The rows on this page.
        columns: (row key, header) pairs from views.table_columns.
        page_index: 1-based current page.
        pages: Total number of pages.
        location_line: Optional header text, e.g. the coordinate.

    Returns:
        Multi-line string containing the formatted table.
    """
    widths = [max(len(header), 10) for _, header in columns]
    sep = "─" * (sum(widths) + 2 * (len(widths) - 1))

    lines = []
    if location_line:
        lines.append(f"📍 {location_line}")
    lines += [sep, "  ".join(f"{h:<{w}}" for (_, h), w in zip(columns, widths)), sep]

    for row in rows:
        lines.append("  ".join(_cell(row.get(key), w) for (key, _), w in zip(columns, widths)))

    lines.append(sep)
    lines.append(f"Page {page_index} of {pages}")
    return "\n".join(lines)


def render_series_summary(summary: list[dict]) -> str:
    """Render per-series min/max lines, e.g. 'Max Temperature (°C): 3.1 … 12.4'."""
    if not summary:
        return "No series selected."
    lines = []
    for s in summary:
        if s["min"] is None:
            lines.append(f"{s['label']}: no data")
        else:
            lines.append(f"{s['label']}: {s['min']:.1f} … {s['max']:.1f}")
    return "\n".join(lines)


# ─────────────────────────────────────────────────────────────
# Bar chart helpers
# ─────────────────────────────────────────────────────────────

def _bar(value: float, max_value: float, bar_width: int) -> str:
    """Render a single filled/empty bar scaled to bar_width.

    Args:
        value: The data value to represent.
        max_value: The maximum value (maps to full bar width).
        bar_width: Total character width of the bar.

    Returns:
        String of '█' and '░' characters of length bar_width.
    """
    if max_value == 0:
        filled = 0
    else:
        filled = round((value / max_value) * bar_width)
    filled = max(0, min(filled, bar_width))
    return "█" * filled + "░" * (bar_width - filled)


def render_series_chart(
    labels: list[str],
    series: dict,
    bar_width: int | None = None,
) -> str:
    """Render one temperature series as horizontal bars, one per day.

    Values are shifted so the coldest day maps to an empty bar; the printed
    number is the real temperature. Days without a value get a blank bar.

    Args:
        labels: Dates ('YYYY-MM-DD') from the chart's label axis.
        series: One entry of build_chart_series(...)["series"].
        bar_width: Width of the bar in characters. Auto-detected from terminal if None.

    Returns:
        Multi-line string containing the chart.
    """
    if bar_width is None:
        try:
            terminal_width = os.get_terminal_size().columns
        except OSError:
            terminal_width = FALLBACK_TERMINAL_WIDTH
        bar_width = max(10, terminal_width - BAR_LABEL_RESERVE)

    present = [v for v in series["values"] if v is not None]
    lowest = min(present) if present else 0
    max_shifted = (max(present) - lowest) if present else 0

    day_labels = [fmt_day(d) for d in labels]
    label_w = max((len(lbl) for lbl in day_labels), default=3)

    lines = [series["label"]]
    for label, value in zip(day_labels, series["values"]):
        if value is None:
            lines.append(f"  {label:<{label_w}} │{' ' * bar_width}│ {MISSING:>6}")
            continue
        bar = _bar(value - lowest, max_shifted, bar_width)
        lines.append(f"  {label:<{label_w}} │{bar}│ {value:>4.1f}°C")
    return "\n".join(lines)

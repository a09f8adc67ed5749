# Project: weather-panel
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
cli.py — Command-line front end for weather-panel.

We use argparse (stdlib) rather than click: one subcommand does not need more.

Commands:
  weather-panel fetch --lat 52.52 --lon 13.41 --start 2024-06-01 --end 2024-06-30
"""

import argparse
from pathlib import Path

from weather_panel.chart import render_page_table, render_series_chart, render_series_summary
from weather_panel.config import DEFAULT_CONFIG_PATH, load_config_or_default
from weather_panel.panel import PanelStatus, WeatherPanel
from weather_panel.views import series_summary
from weather_panel.weather import MEASUREMENTS, PanelError


def cmd_fetch(args) -> None:
    """Fetch the date range, then print one table page and the series summary."""
    try:
        config = load_config_or_default(Path(args.config))
    except ValueError as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    panel = WeatherPanel(config)
    try:
        panel.set_field("latitude", args.lat)
        panel.set_field("longitude", args.lon)
        panel.set_field("start_date", args.start)
        panel.set_field("end_date", args.end)
        if args.series:
            for key in MEASUREMENTS:
                panel.toggle_series(key, key in args.series)
        if args.page_size is not None:
            panel.set_page_size(args.page_size)
    except (PanelError, ValueError) as e:
        print(f"[error] {e}")
        raise SystemExit(1)

    if args.page < 1:
        print(f"[error] --page must be 1 or more, got {args.page}")
        raise SystemExit(1)

    print(f"[weather] Fetching {args.start} → {args.end} for {args.lat}, {args.lon}...")
    panel.submit()

    if panel.status is not PanelStatus.LOADED:
        print(f"[error] {panel.error}")
        raise SystemExit(1)

    for _ in range(args.page - 1):
        panel.next_page()

    rows, pages = panel.page()
    print()
    print(render_page_table(
        rows,
        panel.table_columns(),
        panel.page_index,
        pages,
        location_line=f"{panel.latitude:.4f}°, {panel.longitude:.4f}°",
    ))

    chart = panel.chart()
    print()
    print(render_series_summary(series_summary(chart)))
    if args.chart:
        for series in chart["series"]:
            print()
            print(render_series_chart(chart["labels"], series))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="weather-panel",
        description="Daily temperature statistics from Open-Meteo",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True

    p_fetch = subparsers.add_parser("fetch", help="Fetch a date range and print the table")
    p_fetch.add_argument("--lat", required=True, help="Latitude in decimal degrees (-90 to 90)")
    p_fetch.add_argument("--lon", required=True, help="Longitude in decimal degrees (-180 to 180)")
    p_fetch.add_argument("--start", required=True, metavar="YYYY-MM-DD", help="First day")
    p_fetch.add_argument("--end", required=True, metavar="YYYY-MM-DD", help="Last day")
    p_fetch.add_argument("--page-size", type=int, default=None, help="Rows per page (default from config)")
    p_fetch.add_argument("--page", type=int, default=1, help="1-based page to print; a page past the end prints the last page. Default: 1")
    p_fetch.add_argument(
        "--series",
        nargs="+",
        choices=list(MEASUREMENTS),
        default=None,
        help="Series to summarise. Default from config.",
    )
    p_fetch.add_argument("--chart", action="store_true", help="Also draw a bar chart per series")
    p_fetch.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help="Path to config.toml. Built-in defaults are used if it does not exist.",
    )

    args = parser.parse_args(argv)

    commands = {
        "fetch": cmd_fetch,
    }
    commands[args.command](args)


if __name__ == "__main__":
    main()

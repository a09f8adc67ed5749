# Project: weather-panel
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
app.py — Streamlit weather dashboard: daily temperatures for a coordinate and date range.

Run with: streamlit run app/app.py
Requires: pip install -e ".[ui]"
"""

import sys
from pathlib import Path

# Ensure the src/ package is importable when running from the project root
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from datetime import date

import plotly.graph_objects as go
import streamlit as st

from weather_panel.config import load_config_or_default
from weather_panel.panel import LOADING_MESSAGE, PanelStatus, WeatherPanel
from weather_panel.views import SERIES_STYLE
from weather_panel.weather import MEASUREMENTS, ValidationError


# ─────────────────────────────────────────────────────────────
# Page config — must be first Streamlit call
# ─────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Weather Dashboard",
    page_icon="🌡",
    layout="wide",
    initial_sidebar_state="collapsed",
)


# ─────────────────────────────────────────────────────────────
# CSS injection
# ─────────────────────────────────────────────────────────────

CUSTOM_CSS = """
<style>
  #MainMenu, footer, header { visibility: hidden; }
  .block-container { padding-top: 2rem; padding-bottom: 4rem; max-width: 1080px; }

  html, body, [class*="css"] {
    font-family: -apple-system, BlinkMacSystemFont, "SF Pro Display",
                 "SF Pro Text", "Segoe UI", Roboto, sans-serif;
    background-color: #0a0a0a;
    color: #f5f5f7;
  }

  .stButton > button {
    background: #0a84ff !important;
    color: #ffffff !important;
    border: none !important;
    border-radius: 980px !important;
    font-weight: 600 !important;
  }
  .stButton > button:disabled { opacity: 0.35; }

  .wa-card {
    background: #1c1c1e;
    border: 1px solid #2c2c2e;
    border-radius: 16px;
    padding: 24px 28px;
    margin-bottom: 1.5rem;
  }

  .error-card {
    background: rgba(255, 69, 58, 0.1);
    border: 1px solid rgba(255, 69, 58, 0.3);
    border-radius: 12px;
    color: #ff453a;
    padding: 16px 24px;
    text-align: center;
    margin: 1rem 0;
  }

  .section-label {
    font-size: 0.72rem;
    text-transform: uppercase;
    letter-spacing: 0.1em;
    color: #636366;
    font-weight: 600;
    margin-bottom: 0.75rem;
  }

  .wa-table { width: 100%; border-collapse: collapse; font-size: 0.95rem; }
  .wa-table th {
    font-size: 0.65rem;
    text-transform: uppercase;
    letter-spacing: 0.1em;
    color: #636366;
    padding: 8px 12px;
    text-align: right;
    border-bottom: 1px solid #2c2c2e;
  }
  .wa-table th:first-child, .wa-table td:first-child { text-align: left; }
  .wa-table td {
    padding: 10px 12px;
    text-align: right;
    border-bottom: 1px solid #1c1c1e;
    font-variant-numeric: tabular-nums;
  }
  .wa-table tr:hover td { background: #2c2c2e; }

  .page-line { color: #8e8e93; font-size: 0.85rem; text-align: center; padding-top: 0.5rem; }

  .wa-footer {
    text-align: center;
    color: #48484a;
    font-size: 0.8rem;
    padding: 3rem 0 1rem;
  }
</style>
"""

st.markdown(CUSTOM_CSS, unsafe_allow_html=True)


# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────

PLOTLY_LAYOUT = dict(
    paper_bgcolor="rgba(0,0,0,0)",
    plot_bgcolor="rgba(0,0,0,0)",
    font=dict(family="-apple-system, BlinkMacSystemFont, 'SF Pro Display', sans-serif",
              color="#8e8e93", size=12),
    margin=dict(l=8, r=8, t=32, b=8),
    legend=dict(bgcolor="rgba(0,0,0,0)", font=dict(color="#8e8e93")),
    xaxis=dict(showgrid=False, zeroline=False, tickfont=dict(color="#636366")),
    yaxis=dict(gridcolor="#2c2c2e", zeroline=False, tickfont=dict(color="#636366"), ticksuffix="°"),
)


def fmt_cell(value) -> str:
    if value is None:
        return "—"
    if isinstance(value, (int, float)):
        return f"{value:.1f}"
    return str(value)


def chart_figure(chart: dict) -> go.Figure:
    """Turn build_chart_series output into a Plotly line chart."""
    fig = go.Figure()
    for s in chart["series"]:
        fig.add_trace(go.Scatter(
            x=chart["labels"],
            y=s["values"],
            name=s["label"],
            mode="lines",
            line=dict(color=s["color"], width=2),
            connectgaps=False,
        ))
    fig.update_layout(
        **PLOTLY_LAYOUT,
        title=dict(text="Daily Temperature (°C)", font=dict(color="#8e8e93", size=13)),
        height=360,
    )
    return fig


def table_html(rows: list[dict], columns: list[tuple[str, str]]) -> str:
    head = "".join(f"<th>{header}</th>" for _, header in columns)
    body = ""
    for row in rows:
        cells = "".join(f"<td>{fmt_cell(row.get(key))}</td>" for key, _ in columns)
        body += f"<tr>{cells}</tr>"
    return f'<table class="wa-table"><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>'


# ─────────────────────────────────────────────────────────────
# Session state initialisation
# ─────────────────────────────────────────────────────────────

if "panel" not in st.session_state:
    try:
        st.session_state.panel = WeatherPanel(load_config_or_default())
    except ValueError as e:
        st.markdown(f'<div class="error-card">⚠️ Config error: {e}</div>', unsafe_allow_html=True)
        st.stop()

panel: WeatherPanel = st.session_state.panel


def _on_page_size_change() -> None:
    panel.set_page_size(st.session_state.page_size)


# ─────────────────────────────────────────────────────────────
# SECTION 1: Inputs
# ─────────────────────────────────────────────────────────────

st.markdown("<h1 style='text-align:center'>Weather Dashboard</h1>", unsafe_allow_html=True)

lat_col, lon_col = st.columns(2)
with lat_col:
    lat_text = st.text_input("Latitude", placeholder="Enter latitude (-90 to 90)")
with lon_col:
    lon_text = st.text_input("Longitude", placeholder="Enter longitude (-180 to 180)")

start_col, end_col = st.columns(2)
with start_col:
    start_value = st.date_input("Start Date", value=date.today())
with end_col:
    end_value = st.date_input("End Date", value=date.today())

input_error = None
try:
    panel.set_field("latitude", lat_text)
    panel.set_field("longitude", lon_text)
except ValidationError as e:
    input_error = str(e)
panel.set_field("start_date", start_value)
panel.set_field("end_date", end_value)

if panel.series_filters:
    st.markdown('<div class="section-label">Series</div>', unsafe_allow_html=True)
    filter_cols = st.columns(len(MEASUREMENTS))
    for col, key in zip(filter_cols, MEASUREMENTS):
        with col:
            visible = st.checkbox(
                SERIES_STYLE[key][0].replace(" (°C)", ""),
                value=panel.selection[key],
                key=f"series_{key}",
            )
        panel.toggle_series(key, visible)

_, btn_col, _ = st.columns([2, 1, 2])
with btn_col:
    get_weather = st.button("Get Weather Data", use_container_width=True)

if get_weather:
    if input_error:
        panel.error = input_error
    else:
        with st.spinner(LOADING_MESSAGE):
            panel.submit()

if panel.status_message():
    st.markdown(f'<div class="page-line">{panel.status_message()}</div>', unsafe_allow_html=True)

if panel.error:
    st.markdown(f'<div class="error-card">⚠️ {panel.error}</div>', unsafe_allow_html=True)

# ─────────────────────────────────────────────────────────────
# SECTION 2: Chart
# ─────────────────────────────────────────────────────────────

if panel.status is PanelStatus.LOADED:
    chart = panel.chart()
    st.plotly_chart(chart_figure(chart), use_container_width=True, config={"displayModeBar": False})

# ─────────────────────────────────────────────────────────────
# SECTION 3: Paginated table
# ─────────────────────────────────────────────────────────────

if panel.status is PanelStatus.LOADED:
    rows, pages = panel.page()

    st.markdown('<div class="wa-card">', unsafe_allow_html=True)
    st.markdown(table_html(rows, panel.table_columns()), unsafe_allow_html=True)
    st.markdown("</div>", unsafe_allow_html=True)

    size_col, prev_col, page_col, next_col = st.columns([1, 1, 1, 1])
    with size_col:
        st.selectbox(
            "Rows per page",
            options=panel.page_sizes,
            index=panel.page_sizes.index(panel.page_size),
            key="page_size",
            on_change=_on_page_size_change,
        )
    with prev_col:
        st.button("Previous", on_click=panel.previous_page, disabled=not panel.has_previous(),
                  use_container_width=True)
    with page_col:
        st.markdown(f'<div class="page-line">Page {panel.page_index} of {pages}</div>',
                    unsafe_allow_html=True)
    with next_col:
        st.button("Next", on_click=panel.next_page, disabled=not panel.has_next(),
                  use_container_width=True)

# ─────────────────────────────────────────────────────────────
# Footer
# ─────────────────────────────────────────────────────────────

st.markdown(
    '<div class="wa-footer">'
    'Powered by <a href="https://open-meteo.com" style="color:#0a84ff;text-decoration:none;">Open-Meteo</a>'
    ' &nbsp;·&nbsp; No API key required'
    '</div>',
    unsafe_allow_html=True,
)

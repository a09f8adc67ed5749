# Project: weather-panel
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
panel.py — State behind the weather dashboard.

WeatherPanel holds the user's inputs, the fetched rows, the fetch status and
the table position. Front ends (the Streamlit page, the CLI) read its derived
views and call its methods; they never touch the rows directly.

Each fetch attempt gets a token. A result is applied only if its token is the
latest one issued, so a slow response can never overwrite a newer attempt.
"""

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from weather_panel.config import DEFAULT_CONFIG
from weather_panel.utils import DEFAULT_LOG_PATH
from weather_panel.views import (
    build_chart_series,
    default_selection,
    has_next,
    has_previous,
    paginate,
    table_columns,
    total_pages,
)
from weather_panel.weather import (
    PanelError,
    Query,
    ValidationError,
    VALIDATION_MESSAGE,
    build_params,
    fetch_weather,
)


INPUT_FIELDS = ("latitude", "longitude", "start_date", "end_date")
LOADING_MESSAGE = "Loading..."


class PanelStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


def coerce_coordinate(value) -> float | None:
    """Parse a coordinate typed into a form field.

    Blank input means "not entered yet" and gives None.

    Raises:
        ValidationError: If the value is not a number.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    text = str(value).strip()
    if not text:
        return None
    try:
        return float(text)
    except ValueError as e:
        raise ValidationError(VALIDATION_MESSAGE) from e


class WeatherPanel:
    """Inputs, fetched rows and view state for one dashboard."""

    def __init__(self, config: dict | None = None):
        config = config or DEFAULT_CONFIG
        self.api_url: str = config["api"]["url"]
        self.timeout: float = config["api"]["timeout"]
        self.log_path = Path(config["log"]["path"]) if config["log"].get("path") else DEFAULT_LOG_PATH
        self.page_sizes: list[int] = list(config["table"]["page_sizes"])
        self.columns: list[str] = list(config["table"]["columns"])
        self.series_filters: bool = config["features"]["series_filters"]

        self.latitude: float | None = None
        self.longitude: float | None = None
        self.start_date = None
        self.end_date = None
        self.selection = default_selection(config["features"]["default_series"])

        self.page_size: int = config["table"]["default_page_size"]
        self.page_index = 1

        self.status = PanelStatus.IDLE
        self.error: str | None = None
        self.rows: list[dict] | None = None
        self._token = 0

    # ── Input model ──────────────────────────────────────────

    def set_field(self, name: str, value) -> None:
        """Update one input field; coordinates are parsed from text."""
        if name not in INPUT_FIELDS:
            raise KeyError(f"Unknown input field: {name}")
        if name in ("latitude", "longitude"):
            value = coerce_coordinate(value)
        setattr(self, name, value)

    def toggle_series(self, key: str, visible: bool | None = None) -> None:
        """Flip a series' visibility, or set it when visible is given."""
        if key not in self.selection:
            raise KeyError(f"Unknown series: {key}")
        self.selection[key] = (not self.selection[key]) if visible is None else visible

    def to_query(self) -> Query:
        return Query(
            latitude=self.latitude,
            longitude=self.longitude,
            start_date=self.start_date,
            end_date=self.end_date,
        )

    # ── Fetch lifecycle ──────────────────────────────────────

    def begin_fetch(self) -> int:
        """Enter LOADING, clear old rows and error, return the attempt token."""
        self._token += 1
        self.status = PanelStatus.LOADING
        self.error = None
        self.rows = None
        self.page_index = 1
        return self._token

    def complete_fetch(self, token: int, rows: list[dict]) -> bool:
        """Apply a successful result. Returns False if the token is stale."""
        if token != self._token:
            return False
        self.rows = rows
        self.page_index = 1
        self.status = PanelStatus.LOADED
        return True

    def fail_fetch(self, token: int, message: str) -> bool:
        """Apply a failed result. Returns False if the token is stale."""
        if token != self._token:
            return False
        self.rows = None
        self.error = message
        self.status = PanelStatus.FAILED
        return True

    def submit(self, fetcher: Callable[..., list[dict]] = fetch_weather) -> PanelStatus:
        """Validate inputs, fetch, and record the outcome.

        A ValidationError only sets the error message: status, rows and page
        are left alone and no request is made. Errors never propagate.
        """
        query = self.to_query()
        try:
            build_params(query)
        except ValidationError as e:
            self.error = str(e)
            return self.status

        token = self.begin_fetch()
        try:
            rows = fetcher(query, url=self.api_url, timeout=self.timeout, log_path=self.log_path)
        except PanelError as e:
            self.fail_fetch(token, str(e))
        else:
            self.complete_fetch(token, rows)
        return self.status

    # ── Derived views ────────────────────────────────────────

    def status_message(self) -> str | None:
        """Loading indicator while a fetch is pending, otherwise None."""
        if self.status is PanelStatus.LOADING:
            return LOADING_MESSAGE
        return None

    def chart(self) -> dict:
        return build_chart_series(self.rows, self.selection)

    def total_pages(self) -> int:
        return total_pages(len(self.rows or []), self.page_size)

    def page(self) -> tuple[list[dict], int]:
        """Current table page as (rows, total_pages)."""
        return paginate(self.rows, self.page_size, self.page_index)

    def table_columns(self) -> list[tuple[str, str]]:
        return table_columns(self.columns)

    def set_page_size(self, page_size: int) -> None:
        """Change rows per page; always returns to the first page."""
        page_size = int(page_size)
        if page_size not in self.page_sizes:
            raise ValueError(f"Page size must be one of {self.page_sizes}, got {page_size}")
        self.page_size = page_size
        self.page_index = 1

    def has_previous(self) -> bool:
        return has_previous(self.page_index)

    def has_next(self) -> bool:
        return has_next(self.page_index, self.total_pages())

    def previous_page(self) -> None:
        if self.has_previous():
            self.page_index -= 1

    def next_page(self) -> None:
        if self.has_next():
            self.page_index += 1

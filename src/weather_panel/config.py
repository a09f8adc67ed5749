# Project: weather-panel
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
config.py — Load and validate the TOML configuration file.

We use tomllib (Python 3.11+ stdlib) so no extra install is needed.
Every section is optional: anything left out falls back to DEFAULT_CONFIG.
The path defaults to "config.toml" in the current working directory.
"""

import copy
import tomllib
from pathlib import Path

from weather_panel.utils import DEFAULT_LOG_PATH
from weather_panel.views import (
    COLUMN_HEADERS,
    DEFAULT_COLUMNS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_SERIES,
    PAGE_SIZES,
)
from weather_panel.weather import MEASUREMENTS, OPEN_METEO_URL, REQUEST_TIMEOUT_SECONDS


DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULT_CONFIG: dict = {
    "api": {
        "url": OPEN_METEO_URL,
        "timeout": REQUEST_TIMEOUT_SECONDS,
    },
    "table": {
        "page_sizes": list(PAGE_SIZES),
        "default_page_size": DEFAULT_PAGE_SIZE,
        "columns": list(DEFAULT_COLUMNS),
    },
    "features": {
        "series_filters": True,
        "default_series": list(DEFAULT_SERIES),
    },
    "log": {
        "path": str(DEFAULT_LOG_PATH),
    },
}


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Load a TOML configuration file and merge it over the defaults.

    Args:
        path: Path to the TOML config file.

    Returns:
        Nested dict of configuration values with every section present.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If a value is of the wrong type or out of range.
    """
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {path}\n"
            "Copy config.toml.example to config.toml to customise the panel."
        )

    with open(path, "rb") as f:
        user_config = tomllib.load(f)

    config = _merge(user_config)
    _validate(config)
    return config


def load_config_or_default(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    """Like load_config, but a missing file gives the built-in defaults."""
    try:
        return load_config(path)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)


def _merge(user_config: dict) -> dict:
    config = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in user_config.items():
        if section not in config:
            raise ValueError(f"Unknown config section: [{section}]")
        if not isinstance(values, dict):
            raise ValueError(f"Config section [{section}] must be a table")
        config[section].update(values)
    return config


def _validate(config: dict) -> None:
    """Validate a merged config.

    Expected config schema::

        [api]
        url     = <str>        # forecast endpoint
        timeout = <number>     # seconds, > 0

        [table]
        page_sizes        = [<int>, ...]  # allowed rows-per-page choices
        default_page_size = <int>         # one of page_sizes
        columns           = [<str>, ...]  # "date" and/or measurement keys

        [features]
        series_filters = <bool>           # show the series checkboxes
        default_series = [<str>, ...]     # measurement keys plotted initially

        [log]
        path = <str>   # relative or absolute path to the log file

    Args:
        config: Merged config dict.

    Raises:
        ValueError: If any value is invalid.
    """
    api = config["api"]
    if not isinstance(api["url"], str) or not api["url"]:
        raise ValueError("Invalid config key: [api].url must be a non-empty string")
    timeout = api["timeout"]
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("Invalid config key: [api].timeout must be a positive number")

    table = config["table"]
    sizes = table["page_sizes"]
    if not isinstance(sizes, list) or not sizes or not all(
        isinstance(s, int) and not isinstance(s, bool) and s > 0 for s in sizes
    ):
        raise ValueError("Invalid config key: [table].page_sizes must be positive integers")
    default_size = table["default_page_size"]
    if isinstance(default_size, bool) or default_size not in sizes:
        raise ValueError("Invalid config key: [table].default_page_size must be one of page_sizes")
    if not isinstance(table["columns"], list):
        raise ValueError("Invalid config key: [table].columns must be a list")
    for key in table["columns"]:
        if not isinstance(key, str) or key not in COLUMN_HEADERS:
            raise ValueError(f"Invalid config key: [table].columns has unknown column '{key}'")

    features = config["features"]
    if not isinstance(features["series_filters"], bool):
        raise ValueError("Invalid config key: [features].series_filters must be true or false")
    if not isinstance(features["default_series"], list):
        raise ValueError("Invalid config key: [features].default_series must be a list")
    for key in features["default_series"]:
        if not isinstance(key, str) or key not in MEASUREMENTS:
            raise ValueError(f"Invalid config key: [features].default_series has unknown series '{key}'")

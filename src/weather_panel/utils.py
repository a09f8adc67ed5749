# Project: weather-panel
# Owner: GreenUnicorn
# Built with: Claude (Anthropic)
"""
utils.py — Shared utilities: single-attempt API calls, failure logging, date labels.
"""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any


DEFAULT_LOG_PATH = Path("logs/weather_panel.log")


def fmt_day(date_str: str) -> str:
    """Format a date string as a short human-readable label.

    Args:
        date_str: Date in 'YYYY-MM-DD' format.

    Returns:
        Formatted string like 'Mon 24 Feb'.
    """
    dt = datetime.strptime(date_str, "%Y-%m-%d")
    return dt.strftime("%a %d %b")


def call_once(
    fn: Callable[..., Any],
    *args: Any,
    label: str = "API call",
    log_path: Path = DEFAULT_LOG_PATH,
    **kwargs: Any,
) -> Any:
    """Call a function exactly once, logging the failure if it raises.

    There is no retry: the caller decides what a failure means and the user
    resubmits.

    Args:
        fn: Callable to invoke (usually a zero-argument closure).
        *args: Positional arguments forwarded to fn.
        label: Human-readable name for the call, used in log messages.
        log_path: Path to the log file for recording failures.
        **kwargs: Keyword arguments forwarded to fn.

    Returns:
        The return value of fn.

    Raises:
        Exception: Whatever fn raised, unchanged.
    """
    try:
        return fn(*args, **kwargs)
    except Exception as e:
        print(f"[weather] {label} failed: {e}")
        _log_error(f"{label} failed: {e}", log_path=log_path)
        raise


def _log_error(message: str, log_path: Path = DEFAULT_LOG_PATH) -> None:
    """Append a timestamped ERROR line to the log file.

    Args:
        message: Error description to log.
        log_path: Destination log file path.
    """
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(log_path, "a") as f:
            f.write(f"{timestamp} [ERROR] {message}\n")
    except OSError:
        pass  # Never crash on logging failure

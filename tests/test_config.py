"""
test_config.py — Tests for config loading and validation.

We write a temporary TOML file in each test so we don't depend on
a real config.toml existing in the project.
"""

import pytest
from pathlib import Path
from weather_panel.config import DEFAULT_CONFIG, load_config, load_config_or_default


VALID_TOML = """
[api]
url = "https://api.open-meteo.com/v1/forecast"
timeout = 5

[table]
page_sizes = [10, 25]
default_page_size = 25
columns = ["date", "temp_max", "apparent_temp_max"]

[features]
series_filters = false
default_series = ["temp_mean"]

[log]
path = "logs/weather_panel.log"
"""


def _write(tmp_path: Path, text: str) -> Path:
    config_file = tmp_path / "config.toml"
    config_file.write_text(text)
    return config_file


def test_load_valid_config(tmp_path):
    """A valid config file should load without error."""
    config = load_config(_write(tmp_path, VALID_TOML))

    assert config["api"]["timeout"] == 5
    assert config["table"]["default_page_size"] == 25
    assert config["features"]["series_filters"] is False
    assert config["table"]["columns"] == ["date", "temp_max", "apparent_temp_max"]


def test_partial_config_uses_defaults(tmp_path):
    """Sections and keys left out fall back to the built-in defaults."""
    config = load_config(_write(tmp_path, "[table]\ndefault_page_size = 20\n"))

    assert config["table"]["default_page_size"] == 20
    assert config["table"]["page_sizes"] == [10, 20, 50]
    assert config["api"]["url"] == DEFAULT_CONFIG["api"]["url"]


def test_defaults_are_not_mutated(tmp_path):
    load_config(_write(tmp_path, "[api]\ntimeout = 2\n"))
    assert DEFAULT_CONFIG["api"]["timeout"] == 10


def test_missing_file_raises(tmp_path):
    """A missing config file should raise FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nonexistent.toml")


def test_missing_file_falls_back_to_defaults(tmp_path):
    config = load_config_or_default(tmp_path / "nonexistent.toml")
    assert config == DEFAULT_CONFIG
    assert config is not DEFAULT_CONFIG


def test_unknown_section_raises(tmp_path):
    with pytest.raises(ValueError, match="Unknown config section"):
        load_config(_write(tmp_path, "[alerts]\nwind = 3\n"))


def test_default_page_size_must_be_allowed(tmp_path):
    bad = "[table]\npage_sizes = [10, 20]\ndefault_page_size = 50\n"
    with pytest.raises(ValueError, match="default_page_size"):
        load_config(_write(tmp_path, bad))


def test_page_sizes_must_be_positive(tmp_path):
    bad = "[table]\npage_sizes = [0, 10]\ndefault_page_size = 10\n"
    with pytest.raises(ValueError, match="page_sizes"):
        load_config(_write(tmp_path, bad))


def test_unknown_column_raises(tmp_path):
    with pytest.raises(ValueError, match="humidity"):
        load_config(_write(tmp_path, '[table]\ncolumns = ["date", "humidity"]\n'))


def test_unknown_default_series_raises(tmp_path):
    with pytest.raises(ValueError, match="date"):
        load_config(_write(tmp_path, '[features]\ndefault_series = ["date"]\n'))


def test_bad_timeout_raises(tmp_path):
    with pytest.raises(ValueError, match="timeout"):
        load_config(_write(tmp_path, "[api]\ntimeout = 0\n"))


def test_invalid_file_falls_through_default_loader(tmp_path):
    """load_config_or_default only forgives a missing file, not a bad one."""
    with pytest.raises(ValueError):
        load_config_or_default(_write(tmp_path, "[api]\ntimeout = -1\n"))


@pytest.mark.parametrize("toml_text,key", [
    ("[table]\npage_sizes = 10\n", "page_sizes"),
    ("[table]\npage_sizes = [true]\ndefault_page_size = true\n", "page_sizes"),
    ("[table]\ncolumns = 5\n", "columns"),
    ("[table]\ncolumns = [[\"date\"]]\n", "columns"),
    ("[features]\ndefault_series = 5\n", "default_series"),
    ("[api]\ntimeout = true\n", "timeout"),
])
def test_wrong_value_types_raise_value_error(tmp_path, toml_text, key):
    """Scalars where lists belong, or booleans where numbers belong, are bad content."""
    with pytest.raises(ValueError, match=key):
        load_config(_write(tmp_path, toml_text))


def test_boolean_default_page_size_rejected(tmp_path):
    bad = "[table]\npage_sizes = [1, 10]\ndefault_page_size = true\n"
    with pytest.raises(ValueError, match="default_page_size"):
        load_config(_write(tmp_path, bad))

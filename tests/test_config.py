import pathlib

import pytest

import midiascii.config


def test_load_missing_config_returns_empty (tmp_path: pathlib.Path) -> None:

	"""A missing config file is not an error."""

	assert midiascii.config.load_config(str(tmp_path / "missing.yaml")) == {}


def test_load_config_reads_yaml (tmp_path: pathlib.Path) -> None:

	"""Nested display and midi settings are read from YAML."""

	path = tmp_path / "config.yaml"
	path.write_text("display:\n  columns: 64\n  color: cyan\nmidi:\n  device_name: Keys\n")

	assert midiascii.config.load_config(str(path)) == {
		"display": {"columns": 64, "color": "cyan"},
		"midi": {"device_name": "Keys"},
	}


def test_load_empty_config (tmp_path: pathlib.Path) -> None:

	"""An empty file is treated as no settings."""

	path = tmp_path / "config.yaml"
	path.write_text("")

	assert midiascii.config.load_config(str(path)) == {}


def test_load_non_mapping_config_raises (tmp_path: pathlib.Path) -> None:

	"""A YAML list at the top level is rejected."""

	path = tmp_path / "config.yaml"
	path.write_text("- 1\n- 2\n")

	with pytest.raises(midiascii.config.ConfigError):
		midiascii.config.load_config(str(path))


def test_build_config_defaults (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Without file or flags the terminal size and white are used."""

	monkeypatch.setattr(midiascii.config, "default_dimensions", lambda: (100, 30))

	config = midiascii.config.build_config()

	assert config == midiascii.config.AppConfig(columns=100, rows=30, color="white", device_name=None)


def test_build_config_file_then_overrides (monkeypatch: pytest.MonkeyPatch) -> None:

	"""CLI values win over file values, which win over defaults."""

	monkeypatch.setattr(midiascii.config, "default_dimensions", lambda: (100, 30))

	file_config = {"display": {"columns": 64, "rows": 16, "color": "cyan"}, "midi": {"device_name": "Keys"}}
	config = midiascii.config.build_config(file_config, rows="12", color="random")

	assert config.columns == 64
	assert config.rows == 12
	assert config.color == "random"
	assert config.device_name == "Keys"


@pytest.mark.parametrize("value", ["0", "-3", "abc", "", "2.5", 0, -1, True, 2.5, None])
def test_positive_int_rejects (value: object) -> None:

	"""Zero, negative, non-numeric and fractional values are rejected."""

	with pytest.raises(midiascii.config.ConfigError):
		midiascii.config.positive_int(value, "columns")


def test_positive_int_accepts () -> None:

	"""Positive ints and integer strings are accepted."""

	assert midiascii.config.positive_int("42", "rows") == 42
	assert midiascii.config.positive_int(1, "rows") == 1
	assert midiascii.config.positive_int(8.0, "rows") == 8


def test_build_config_invalid_columns () -> None:

	"""Invalid columns raise ConfigError naming the field."""

	with pytest.raises(midiascii.config.ConfigError, match="columns"):
		midiascii.config.build_config(columns="wide")


def test_default_dimensions_leave_room_for_header (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Rows default to the terminal height minus the two header lines."""

	import os
	import shutil

	monkeypatch.setattr(shutil, "get_terminal_size", lambda fallback: os.terminal_size((120, 40)))

	assert midiascii.config.default_dimensions() == (120, 38)


@pytest.mark.parametrize("file_config", [{"display": 5}, {"midi": "Keys"}, {"display": ["columns", 80]}])
def test_build_config_non_mapping_section_raises (file_config: dict) -> None:

	"""A display or midi section that is not a mapping raises ConfigError."""

	with pytest.raises(midiascii.config.ConfigError, match="must be a mapping"):
		midiascii.config.build_config(file_config, columns=10, rows=5)

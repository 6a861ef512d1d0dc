"""Application configuration.

Settings come from three layers, later layers winning:

1. Built-in defaults (terminal size, white, first MIDI input).
2. An optional YAML file.
3. Command-line flags.

The YAML file looks like::

	display:
	  columns: 80
	  rows: 20
	  color: cyan
	midi:
	  device_name: "Launchkey Mini"

Every key is optional.
"""

import dataclasses
import logging
import os
import shutil
import typing

import yaml

import midiascii.colors


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config.yaml"

# Header line plus blank line above the art.
_HEADER_ROWS = 2


class ConfigError (ValueError):

	"""Raised when a configuration value is unusable."""


@dataclasses.dataclass
class AppConfig:

	"""
	Resolved settings for one run of the app.
	"""

	columns: int
	rows: int
	color: str = midiascii.colors.DEFAULT_COLOR
	device_name: typing.Optional[str] = None


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.

	A missing file is not an error: a warning is logged and an empty mapping
	returned.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return {}

	if not isinstance(data, dict):
		raise ConfigError(f"Config file {config_path} must contain a mapping, got {type(data).__name__}")

	return data


def default_dimensions () -> typing.Tuple[int, int]:

	"""Columns and rows that fill the current terminal, leaving room for the header."""

	size = shutil.get_terminal_size(fallback=(80, 20 + _HEADER_ROWS))

	return size.columns, max(1, size.lines - _HEADER_ROWS)


def positive_int (value: typing.Any, name: str) -> int:

	"""
	Validate *value* as a positive integer.

	Accepts ints and integer strings; rejects booleans, floats and anything
	non-numeric.
	"""

	if isinstance(value, bool):
		raise ConfigError(f"Invalid {name} value: {value!r}")

	try:
		number = int(value)
	except (TypeError, ValueError):
		raise ConfigError(f"Invalid {name} value: {value!r}") from None

	if isinstance(value, float) and value != number:
		raise ConfigError(f"Invalid {name} value: {value!r}")

	if number <= 0:
		raise ConfigError(f"Invalid {name} value: {value!r} (must be positive)")

	return number


def build_config (
	file_config: typing.Optional[dict] = None,
	columns: typing.Optional[typing.Any] = None,
	rows: typing.Optional[typing.Any] = None,
	color: typing.Optional[str] = None,
	device_name: typing.Optional[str] = None,
) -> AppConfig:

	"""
	Merge defaults, file settings and explicit overrides into an ``AppConfig``.

	Parameters:
		file_config: Mapping as returned by ``load_config()``.
		columns: Overrides ``display.columns`` when not None.
		rows: Overrides ``display.rows`` when not None.
		color: Overrides ``display.color`` when not None.
		device_name: Overrides ``midi.device_name`` when not None.

	Raises:
		ConfigError: If columns or rows are not positive integers, or a
			config section is not a mapping.
	"""

	file_config = file_config or {}
	display = file_config.get('display') or {}
	midi = file_config.get('midi') or {}

	for section, value in (('display', display), ('midi', midi)):
		if not isinstance(value, dict):
			raise ConfigError(f"Config section '{section}' must be a mapping, got {type(value).__name__}")

	default_columns, default_rows = default_dimensions()

	if columns is None:
		columns = display.get('columns', default_columns)

	if rows is None:
		rows = display.get('rows', default_rows)

	if color is None:
		color = display.get('color') or midiascii.colors.DEFAULT_COLOR

	if device_name is None:
		device_name = midi.get('device_name')

	if color != midiascii.colors.RANDOM and color not in midiascii.colors.COLOR_CODES:
		logger.warning(f"Unknown color '{color}', using {midiascii.colors.DEFAULT_COLOR}")

	return AppConfig(
		columns = positive_int(columns, "columns"),
		rows = positive_int(rows, "rows"),
		color = str(color),
		device_name = device_name,
	)

import pathlib

import pytest

import midiascii.__main__
import midiascii.app


def test_list_devices (patch_midi: None, capsys: pytest.CaptureFixture[str]) -> None:

	"""--list-devices prints inputs and exits 0."""

	assert midiascii.__main__.main(["--list-devices"]) == 0
	assert "1. Dummy MIDI" in capsys.readouterr().out


def test_list_devices_none_available (no_midi: None) -> None:

	"""--list-devices exits 1 when there are no inputs."""

	assert midiascii.__main__.main(["--list-devices"]) == 1


@pytest.mark.parametrize("flag", ["--columns", "--rows"])
@pytest.mark.parametrize("value", ["0", "-5", "many"])
def test_invalid_dimensions_exit_1 (patch_midi: None, tmp_path: pathlib.Path, flag: str, value: str) -> None:

	"""Non-numeric or non-positive dimensions are rejected with exit status 1."""

	config = str(tmp_path / "none.yaml")

	assert midiascii.__main__.main([flag, value, "--config", config]) == 1


def test_no_midi_input_exit_1 (no_midi: None, tmp_path: pathlib.Path, capsys: pytest.CaptureFixture[str]) -> None:

	"""Without a MIDI input the program exits with status 1."""

	config = str(tmp_path / "none.yaml")

	assert midiascii.__main__.main(["-c", "20", "-r", "10", "--config", config]) == 1


def test_runs_app_with_merged_config (patch_midi: None, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:

	"""Flags and file settings reach the app, which then runs."""

	path = tmp_path / "config.yaml"
	path.write_text("display:\n  columns: 30\n  color: magenta\nmidi:\n  device_name: Second Keyboard\n")

	ran: list[midiascii.app.NoteArtApp] = []

	def _fake_run (self: midiascii.app.NoteArtApp) -> None:
		ran.append(self)
		self.stop()

	monkeypatch.setattr(midiascii.app.NoteArtApp, "run", _fake_run)

	assert midiascii.__main__.main(["--rows", "8", "--config", str(path)]) == 0

	app = ran[0]

	assert app.config.columns == 30
	assert app.config.rows == 8
	assert app.config.color == "magenta"
	assert app.device_name == "Second Keyboard"


def test_non_mapping_config_section_exit_1 (patch_midi: None, tmp_path: pathlib.Path) -> None:

	"""A malformed config section is reported with exit status 1, not a traceback."""

	path = tmp_path / "config.yaml"
	path.write_text("display: 5\n")

	assert midiascii.__main__.main(["--config", str(path)]) == 1

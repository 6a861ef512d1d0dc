import typing

import mido
import pytest


class FakeMidiIn:

	"""Minimal MIDI input stub for tests."""

	def __init__ (self, name: str, callback: typing.Optional[typing.Callable] = None) -> None:

		"""Store the port name and callback for injecting test messages."""

		self.name = name
		self.callback = callback
		self.closed = False

	def close (self) -> None:

		"""Record that the port was closed."""

		self.closed = True

	def inject (self, message: mido.Message) -> None:

		"""Simulate receiving a MIDI message by calling the stored callback."""

		if self.callback is not None:
			self.callback(message)


FAKE_INPUT_NAMES = ["Dummy MIDI", "Second Keyboard"]

# Module-level reference so tests can access the most recently created FakeMidiIn.
_current_fake_input: typing.Optional[FakeMidiIn] = None


def _fake_get_input_names () -> list[str]:

	"""Return a fixed list of MIDI input names for tests."""

	return list(FAKE_INPUT_NAMES)


def _fake_open_input (name: str, callback: typing.Optional[typing.Callable] = None) -> FakeMidiIn:

	"""Return a fake MIDI input regardless of the name."""

	global _current_fake_input
	fake = FakeMidiIn(name, callback=callback)
	_current_fake_input = fake
	return fake


def current_fake_input () -> typing.Optional[FakeMidiIn]:

	"""The most recently opened fake input, if any."""

	return _current_fake_input


@pytest.fixture
def patch_midi (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Patch mido to use fake MIDI inputs for all tests that need it."""

	global _current_fake_input
	_current_fake_input = None

	monkeypatch.setattr(mido, "get_input_names", _fake_get_input_names)
	monkeypatch.setattr(mido, "open_input", _fake_open_input)


@pytest.fixture
def no_midi (monkeypatch: pytest.MonkeyPatch) -> None:

	"""Patch mido so that no MIDI inputs are available."""

	monkeypatch.setattr(mido, "get_input_names", lambda: [])

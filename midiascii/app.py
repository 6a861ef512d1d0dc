"""Live MIDI-to-ASCII display.

``NoteArtApp`` listens on a MIDI input and redraws the terminal every time a
key is pressed.  The note number picks the pattern (note modulo the pattern
count) and, through a ``NoteSaltTable``, a salt that stays fixed for that key
for as long as the app runs - pressing the same key twice shows the same art.

Messages arrive on mido's backend thread.  The callback only queues them; the
main thread handles them one at a time in arrival order, so the salt table and
stdout are only ever touched from one thread.
"""

import logging
import queue
import random
import sys
import typing

import mido

import midiascii.colors
import midiascii.config
import midiascii.midi_utils
import midiascii.registry
import midiascii.salts
import midiascii.terminal


logger = logging.getLogger(__name__)

# Short enough for Ctrl+C to feel immediate.
_POLL_INTERVAL = 0.1


class NoteArtApp:

	"""
	Turns note-on messages into full-screen coloured patterns.

	Example:
		```python
		config = midiascii.config.build_config(columns=80, rows=20, color="cyan")
		app = midiascii.app.NoteArtApp(config)

		if app.start():
			app.run()
		```
	"""

	def __init__ (
		self,
		config: midiascii.config.AppConfig,
		salts: typing.Optional[midiascii.salts.NoteSaltTable] = None,
		stream: typing.Optional[typing.TextIO] = None,
		rng: typing.Optional[random.Random] = None,
	) -> None:

		"""
		Parameters:
			config: Resolved dimensions, colour and device name.
			salts: Note-to-salt table; a fresh one is created if omitted.
			stream: Where frames are written. Defaults to stdout.
			rng: Random source for ``color="random"``.
		"""

		self.config = config
		self.salts = salts if salts is not None else midiascii.salts.NoteSaltTable()
		self.stream = stream or sys.stdout
		self.rng = rng or random.Random()

		self.device_name: typing.Optional[str] = None
		self.midi_in: typing.Any = None
		self.running: bool = False

		self._queue: queue.Queue[mido.Message] = queue.Queue()

	# ------------------------------------------------------------------
	# Message handling
	# ------------------------------------------------------------------

	def on_midi_message (self, message: mido.Message) -> None:

		"""mido callback: queue the message for the main thread."""

		self._queue.put(message)

	def handle_message (self, message: mido.Message) -> bool:

		"""
		Display art for a pressed key; ignore everything else.

		A ``note_on`` with velocity 0 is a note-off by MIDI convention and is
		ignored.

		Returns:
			True if a frame was drawn.
		"""

		if message.type != "note_on" or message.velocity <= 0:
			return False

		self.display_note(message.note, message.velocity)
		return True

	def process_pending (self, timeout: typing.Optional[float] = None) -> int:

		"""
		Handle every queued message, waiting up to *timeout* for the first one.

		Returns:
			The number of messages taken off the queue.
		"""

		handled = 0

		try:
			message = self._queue.get(timeout=timeout) if timeout else self._queue.get_nowait()
		except queue.Empty:
			return handled

		while True:
			self.handle_message(message)
			handled += 1

			try:
				message = self._queue.get_nowait()
			except queue.Empty:
				return handled

	# ------------------------------------------------------------------
	# Rendering
	# ------------------------------------------------------------------

	def build_frame (self, note: int, velocity: int) -> str:

		"""Header line, blank line and coloured art for one key press."""

		salt = self.salts.salt_for(note)
		pattern = midiascii.registry.select_by_index(note)

		grid = pattern.generate(self.config.columns, self.config.rows, salt)
		art = midiascii.colors.render_with_color(grid, self.config.color, self.rng)

		logger.debug(f"note={note} velocity={velocity} pattern={pattern.name} salt={salt}")

		return f"Note: {note} | Velocity: {velocity} | Pattern: {pattern.name}\n\n{art}"

	def display_note (self, note: int, velocity: int) -> None:

		"""Clear the screen and draw the frame for *note*."""

		frame = self.build_frame(note, velocity)

		midiascii.terminal.clear_screen(self.stream)
		self.stream.write(frame)
		self.stream.flush()

	# ------------------------------------------------------------------
	# Lifecycle
	# ------------------------------------------------------------------

	def start (self) -> bool:

		"""
		Open the MIDI input and print the startup banner.

		Returns:
			False if no input could be opened.
		"""

		inputs = midiascii.midi_utils.list_input_devices()

		print("Available MIDI inputs:", file=self.stream)
		for i, name in enumerate(inputs, 1):
			print(f"  {i}. {name}", file=self.stream)
		print(file=self.stream)

		device_name, midi_in = midiascii.midi_utils.select_input_device(self.config.device_name, self.on_midi_message)

		if midi_in is None:
			return False

		self.device_name = device_name
		self.midi_in = midi_in
		self.running = True

		print(f"Connected to: {device_name}", file=self.stream)
		midiascii.terminal.hide_cursor(self.stream)

		print("Listening for MIDI notes...", file=self.stream)
		print(f"Pattern assignment: each key is assigned one of {len(midiascii.registry.PATTERNS)} patterns", file=self.stream)
		print("Press any MIDI key to generate ASCII art", file=self.stream)
		print("Press Ctrl+C to exit", file=self.stream)
		self.stream.flush()

		return True

	def run (self) -> None:

		"""Handle messages until stopped or interrupted, then shut down cleanly."""

		try:
			while self.running:
				self.process_pending(timeout=_POLL_INTERVAL)

		except KeyboardInterrupt:
			logger.info("Stopping...")

		finally:
			self.stop()

	def stop (self) -> None:

		"""Restore the cursor and close the MIDI input."""

		self.running = False
		midiascii.terminal.show_cursor(self.stream)

		if self.midi_in is not None:
			print("\nClosing MIDI connection...", file=self.stream)
			self.midi_in.close()
			self.midi_in = None
			self.stream.flush()

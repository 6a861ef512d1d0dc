"""Print every pattern once, without a MIDI device.

Each pattern is drawn for the same salt so you can compare them side by side,
then the frame a key press would show is printed for middle C.
"""

import logging

import midiascii
import midiascii.app
import midiascii.colors
import midiascii.config
import midiascii.salts

logging.basicConfig(level=logging.INFO)

COLUMNS = 60
ROWS = 12
SALT = 42


for index, pattern in enumerate(midiascii.PATTERNS):
	grid = midiascii.generate(index, COLUMNS, ROWS, SALT)
	print(f"{index}. {pattern.name}")
	print(midiascii.colors.render_with_color(grid, "cyan"))
	print()

# What pressing middle C (note 60) would draw, with a fixed clock.
config = midiascii.config.AppConfig(columns=COLUMNS, rows=ROWS, color="random")
app = midiascii.app.NoteArtApp(config, salts=midiascii.salts.NoteSaltTable(clock=lambda: 0))
print(app.build_frame(60, 100))
print()

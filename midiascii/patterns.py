"""Procedural pattern generators.

Each generator maps ``(columns, rows, salt)`` to a rectangular grid of
single-character cells, where ``" "`` means an empty cell.  Generators are pure:
they build one ``SeededRandom`` from the salt, draw their global parameters
(frequencies, spacings, centres) first, then visit every cell in row-major
order.  Per-cell glyph draws happen in that same order, so the same inputs
always produce the same grid.

Circle and spiral scale the vertical distance by 2 because terminal cells are
roughly twice as tall as they are wide.
"""

import math
import typing

import midiascii.seeded_random


Grid = typing.List[typing.List[str]]

EMPTY = " "

WAVE_GLYPHS = ("~", "≈", "∼", "⌇", "≋")
DIAGONAL_GLYPHS = ("/", "\\", "│", "─", "┼", "┤", "├", "┴", "┬")
CIRCLE_GLYPHS = ("○", "◎", "●", "◉", "◌", "⊙", "⊚")
GRID_GLYPHS = ("┼", "│", "─", "┤", "├", "┴", "┬", "╬", "║", "═")
NOISE_GLYPHS = ("·", "•", "∘", "○", "◦", "⋅", "∙")
CHEVRON_GLYPHS = ("˄", "˅", "˂", "˃", "∧", "∨", "⌃", "⌄")
SPIRAL_GLYPHS = ("◦", "◌", "○", "◎", "●", "⊙", "⊚", "⊛")

_TWO_PI = math.pi * 2


def generate_wave (columns: int, rows: int, salt: int = 0) -> Grid:

	"""
	A single sine wave across the grid, drawn as a band two cells thick.

	Cells within one row of the curve get a random wave glyph; cells one to two
	rows away get the plain ``~``.
	"""

	rng = midiascii.seeded_random.SeededRandom(salt)
	frequency = 0.3 + rng.next() * 0.5
	amplitude = rows * (0.2 + rng.next() * 0.3)
	phase = rng.next() * _TWO_PI

	grid: Grid = []

	for y in range(rows):
		row = []
		for x in range(columns):
			wave = math.sin(x * frequency + phase) * amplitude + rows / 2
			distance = abs(y - wave)

			if distance < 1:
				row.append(rng.choice(WAVE_GLYPHS))
			elif distance < 2:
				row.append(WAVE_GLYPHS[0])
			else:
				row.append(EMPTY)
		grid.append(row)

	return grid


def generate_diagonal (columns: int, rows: int, salt: int = 0) -> Grid:

	"""
	Evenly spaced diagonal lines leaning left or right.
	"""

	rng = midiascii.seeded_random.SeededRandom(salt)
	spacing = int(3 + rng.next() * 5)
	direction = 1 if rng.next() > 0.5 else -1

	grid: Grid = []

	for y in range(rows):
		row = []
		for x in range(columns):
			if (x * direction + y) % spacing == 0:
				row.append(rng.choice(DIAGONAL_GLYPHS))
			else:
				row.append(EMPTY)
		grid.append(row)

	return grid


def generate_circle (columns: int, rows: int, salt: int = 0) -> Grid:

	"""
	Concentric rings around a centre jittered up to 15% from the middle.

	Each ring uses the glyph at its ring index, cycling through the alphabet.
	"""

	rng = midiascii.seeded_random.SeededRandom(salt)
	center_x = columns / 2 + (rng.next() - 0.5) * columns * 0.3
	center_y = rows / 2 + (rng.next() - 0.5) * rows * 0.3
	radius_step = 2 + rng.next() * 3

	grid: Grid = []

	for y in range(rows):
		row = []
		for x in range(columns):
			dx = x - center_x
			dy = (y - center_y) * 2
			distance = math.hypot(dx, dy)
			ring = math.floor(distance / radius_step) % len(CIRCLE_GLYPHS)

			if distance % radius_step < 0.5:
				row.append(CIRCLE_GLYPHS[ring])
			else:
				row.append(EMPTY)
		grid.append(row)

	return grid


def generate_grid (columns: int, rows: int, salt: int = 0) -> Grid:

	"""
	A lattice of box-drawing lines with crosses at the intersections.
	"""

	rng = midiascii.seeded_random.SeededRandom(salt)
	spacing_x = int(4 + rng.next() * 6)
	spacing_y = int(2 + rng.next() * 4)

	intersection, vertical, horizontal = GRID_GLYPHS[0], GRID_GLYPHS[1], GRID_GLYPHS[2]

	grid: Grid = []

	for y in range(rows):
		row = []
		is_horizontal = y % spacing_y == 0
		for x in range(columns):
			is_vertical = x % spacing_x == 0

			if is_vertical and is_horizontal:
				row.append(intersection)
			elif is_vertical:
				row.append(vertical)
			elif is_horizontal:
				row.append(horizontal)
			else:
				row.append(EMPTY)
		grid.append(row)

	return grid


def generate_noise (columns: int, rows: int, salt: int = 0) -> Grid:

	"""Scattered dots, each cell lit independently with a salt-derived density."""

	rng = midiascii.seeded_random.SeededRandom(salt)
	density = 0.1 + rng.next() * 0.3

	grid: Grid = []

	for _ in range(rows):
		row = []
		for _ in range(columns):
			if rng.next() < density:
				row.append(rng.choice(NOISE_GLYPHS))
			else:
				row.append(EMPTY)
		grid.append(row)

	return grid


def generate_chevron (columns: int, rows: int, salt: int = 0) -> Grid:

	"""
	Repeating zigzag stripes.

	A cell is drawn when its horizontal position within a ``2 * width`` period
	mirrors its vertical position within a ``width`` period.
	"""

	rng = midiascii.seeded_random.SeededRandom(salt)
	width = int(4 + rng.next() * 8)
	offset = int(rng.next() * width)

	grid: Grid = []

	for y in range(rows):
		row = []
		for x in range(columns):
			pattern = ((x + offset) % (width * 2)) - width

			if abs(pattern) == abs((y % width) - width / 2):
				row.append(rng.choice(CHEVRON_GLYPHS))
			else:
				row.append(EMPTY)
		grid.append(row)

	return grid


def generate_spiral (columns: int, rows: int, salt: int = 0) -> Grid:

	"""
	A single spiral arm around the centre of the grid.

	The glyph changes with the arm's angular segment, so the arm shades as it
	winds outward.
	"""

	rng = midiascii.seeded_random.SeededRandom(salt)
	center_x = columns / 2
	center_y = rows / 2
	rotation = rng.next() * _TWO_PI
	tightness = 0.2 + rng.next() * 0.5

	grid: Grid = []

	for y in range(rows):
		row = []
		for x in range(columns):
			dx = x - center_x
			dy = (y - center_y) * 2
			distance = math.hypot(dx, dy)
			angle = math.atan2(dy, dx) + rotation

			# Negative sums stay negative and fall outside the drawn band.
			spiral = math.fmod(angle + distance * tightness, _TWO_PI)

			if abs(spiral - math.pi) < 0.3:
				segment = math.floor((spiral / _TWO_PI) * len(SPIRAL_GLYPHS))
				row.append(SPIRAL_GLYPHS[segment % len(SPIRAL_GLYPHS)])
			else:
				row.append(EMPTY)
		grid.append(row)

	return grid

import dataclasses
import typing

import midiascii.patterns


GeneratorType = typing.Callable[[int, int, int], midiascii.patterns.Grid]


@dataclasses.dataclass(frozen=True)
class PatternDescriptor:

	"""
	A named pattern generator and the glyphs it may emit.
	"""

	name: str
	generate: GeneratorType
	glyphs: typing.Tuple[str, ...]


# Order matters: callers select by note number modulo the pattern count.
PATTERNS: typing.Tuple[PatternDescriptor, ...] = (
	PatternDescriptor("wave", midiascii.patterns.generate_wave, midiascii.patterns.WAVE_GLYPHS),
	PatternDescriptor("diagonal", midiascii.patterns.generate_diagonal, midiascii.patterns.DIAGONAL_GLYPHS),
	PatternDescriptor("circle", midiascii.patterns.generate_circle, midiascii.patterns.CIRCLE_GLYPHS),
	PatternDescriptor("grid", midiascii.patterns.generate_grid, midiascii.patterns.GRID_GLYPHS),
	PatternDescriptor("noise", midiascii.patterns.generate_noise, midiascii.patterns.NOISE_GLYPHS),
	PatternDescriptor("chevron", midiascii.patterns.generate_chevron, midiascii.patterns.CHEVRON_GLYPHS),
	PatternDescriptor("spiral", midiascii.patterns.generate_spiral, midiascii.patterns.SPIRAL_GLYPHS),
)


def select_by_index (index: int) -> PatternDescriptor:

	"""Return the pattern at *index*, wrapping around the registry length."""

	return PATTERNS[index % len(PATTERNS)]


def by_name (name: str) -> PatternDescriptor:

	"""
	Look up a pattern by name.

	Raises ``KeyError`` if no pattern has that name.
	"""

	for descriptor in PATTERNS:
		if descriptor.name == name:
			return descriptor

	raise KeyError(f"Unknown pattern {name!r}. Available: {[d.name for d in PATTERNS]}")


def generate (pattern_index: int, columns: int, rows: int, salt: int) -> midiascii.patterns.Grid:

	"""
	Select a pattern by index and generate its grid.

	Parameters:
		pattern_index: Any integer; wraps modulo the pattern count.
		columns: Grid width, must be positive.
		rows: Grid height, must be positive.
		salt: Seed for the pattern's random stream.

	Example:
		```python
		grid = midiascii.registry.generate(note, 80, 20, salt)
		print(midiascii.render(grid))
		```
	"""

	return select_by_index(pattern_index).generate(columns, rows, salt)

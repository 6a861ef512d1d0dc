"""ANSI foreground colouring for rendered patterns.

Colours are applied line by line, so each line opens and closes its own escape
sequence and no colour leaks across a newline into log output or the next
frame.
"""

import random
import typing

import midiascii.patterns
import midiascii.rendering


RANDOM = "random"
DEFAULT_COLOR = "white"

_RESET_FOREGROUND = "\033[39m"

COLOR_CODES: typing.Dict[str, int] = {
	"black": 30,
	"red": 31,
	"green": 32,
	"yellow": 33,
	"blue": 34,
	"magenta": 35,
	"cyan": 36,
	"white": 37,
	"gray": 90,
	"red_bright": 91,
	"green_bright": 92,
	"yellow_bright": 93,
	"blue_bright": 94,
	"magenta_bright": 95,
	"cyan_bright": 96,
	"white_bright": 97,
}

COLOR_NAMES: typing.List[str] = list(COLOR_CODES)


def random_color (rng: typing.Optional[random.Random] = None) -> str:

	"""Pick one colour name at random."""

	rng = rng or random.Random()

	return rng.choice(COLOR_NAMES)


def resolve_color (color: str, rng: typing.Optional[random.Random] = None) -> str:

	"""
	Turn a requested colour into a concrete colour name.

	``"random"`` picks a fresh colour on every call; unknown names fall back to
	white.
	"""

	if color == RANDOM:
		return random_color(rng)

	if color in COLOR_CODES:
		return color

	return DEFAULT_COLOR


def apply_color (text: str, color: str, rng: typing.Optional[random.Random] = None) -> str:

	"""Wrap every line of *text* in the ANSI code for *color*."""

	code = COLOR_CODES[resolve_color(color, rng)]
	opening = f"\033[{code}m"

	return "\n".join(f"{opening}{line}{_RESET_FOREGROUND}" for line in text.split("\n"))


def render_with_color (grid: midiascii.patterns.Grid, color: str, rng: typing.Optional[random.Random] = None) -> str:

	"""Render *grid* to text and colour it."""

	return apply_color(midiascii.rendering.render(grid), color, rng)

"""Terminal control sequences for the live art display.

Art goes to stdout; logging stays on stderr so the two never interleave
inside a frame.
"""

import sys
import typing


HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
CLEAR_SCREEN = "\033[2J\033[3J\033[H"


def hide_cursor (stream: typing.Optional[typing.TextIO] = None) -> None:

	"""Hide the terminal cursor."""

	stream = stream or sys.stdout
	stream.write(HIDE_CURSOR)
	stream.flush()


def show_cursor (stream: typing.Optional[typing.TextIO] = None) -> None:

	"""Show the terminal cursor again."""

	stream = stream or sys.stdout
	stream.write(SHOW_CURSOR)
	stream.flush()


def clear_screen (stream: typing.Optional[typing.TextIO] = None) -> None:

	"""Clear the screen and scrollback and move the cursor to the top left."""

	stream = stream or sys.stdout
	stream.write(CLEAR_SCREEN)
	stream.flush()

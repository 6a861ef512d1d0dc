import typing


def render (grid: typing.Sequence[typing.Sequence[str]]) -> str:

	"""Join a grid into lines separated by newlines, with no trailing newline."""

	return "\n".join("".join(row) for row in grid)

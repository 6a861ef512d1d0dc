import time
import typing


def _now_ms () -> int:

	"""Current wall-clock time in whole milliseconds."""

	return int(time.time() * 1000)


class NoteSaltTable:

	"""
	Lazily assigned, stable salts keyed by MIDI note number.

	The first time a note is seen it gets ``note * 1000 + now_ms``; every later
	lookup for that note returns the same salt, so a key keeps its picture for
	the life of the table. There is no eviction.

	Example:
		```python
		salts = midiascii.salts.NoteSaltTable()
		salt = salts.salt_for(60)
		assert salts.salt_for(60) == salt
		```
	"""

	def __init__ (self, clock: typing.Optional[typing.Callable[[], int]] = None) -> None:

		"""
		Parameters:
			clock: Returns the current time in milliseconds. Defaults to the
				wall clock; inject a fixed function for reproducible salts.
		"""

		self._clock = clock or _now_ms
		self._salts: typing.Dict[int, int] = {}


	def salt_for (self, note: int) -> int:

		"""Return the salt for *note*, assigning one on first use."""

		if note not in self._salts:
			self._salts[note] = note * 1000 + self._clock()

		return self._salts[note]


	def __contains__ (self, note: int) -> bool:

		return note in self._salts


	def __len__ (self) -> int:

		return len(self._salts)


	def clear (self) -> None:

		"""Forget every assigned salt."""

		self._salts.clear()

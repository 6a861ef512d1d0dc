import typing

T = typing.TypeVar("T")


_MULTIPLIER = 9301
_INCREMENT = 49297
_MODULUS = 233280


class SeededRandom:

	"""
	Deterministic linear congruential random stream keyed by an integer seed.

	Two instances built from the same seed and drawn from the same number of
	times return identical values. Each pattern call owns exactly one instance,
	so the same salt always yields the same art.

	Example:
		```python
		rng = midiascii.seeded_random.SeededRandom(42)
		rng.next()  # 0.8858838...
		```
	"""

	def __init__ (self, seed: int) -> None:

		"""Start the stream from *seed* (any integer, including negative)."""

		self.value = seed


	def next (self) -> float:

		"""
		Advance the state and return a float in ``[0, 1)``.
		"""

		# Floor modulo keeps the state non-negative even for negative seeds.
		self.value = (self.value * _MULTIPLIER + _INCREMENT) % _MODULUS

		return self.value / _MODULUS


	def choice (self, options: typing.Sequence[T]) -> T:

		"""Pick one item from *options*, consuming exactly one draw."""

		return options[int(self.next() * len(options))]

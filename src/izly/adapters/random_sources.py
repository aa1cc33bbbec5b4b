"""Random sources for IZLY."""

import random
from collections.abc import Iterable

from izly.interfaces.random_source import RandomSource

# pylint: disable=too-few-public-methods


class ScriptExhaustedError(LookupError):
    """Raised when a scripted random source has no value left to replay."""

    def __init__(self, consumed: int) -> None:
        super().__init__(f"Scripted random source exhausted after {consumed} draws.")
        self.consumed = consumed


def _check_bound(bound: int) -> None:
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")


class SystemRandomSource(RandomSource):
    """Random source backed by a private `random.Random` instance.

    Passing a `seed` makes the sequence of draws reproducible, which is handy
    for demos. The generator is not suitable for cryptographic use.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def next_int(self, bound: int) -> int:
        """Draw an integer from ``[0, bound)``."""
        _check_bound(bound)
        return self._random.randrange(bound)


class ScriptedRandomSource(RandomSource):
    """A random source that replays a fixed sequence of values.

    Every requested bound is recorded in `calls`.

    Note:
        Not suitable for production use; primarily for testing and demos.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self._values = list(values)
        self._position = 0
        self.calls: list[int] = []

    def next_int(self, bound: int) -> int:
        """Return the next scripted value.

        Raises:
            ValueError: If `bound` is not positive or the scripted value is
                outside ``[0, bound)``.
            ScriptExhaustedError: If every scripted value has been used.
        """
        _check_bound(bound)
        if self._position >= len(self._values):
            raise ScriptExhaustedError(self._position)
        value = self._values[self._position]
        if not 0 <= value < bound:
            raise ValueError(f"scripted value {value} is outside [0, {bound})")
        self._position += 1
        self.calls.append(bound)
        return value

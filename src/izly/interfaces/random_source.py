"""Interface for random sources."""

import abc

# pylint: disable=too-few-public-methods


class RandomSource(abc.ABC):
    """Contract for a bounded random integer source."""

    @abc.abstractmethod
    def next_int(self, bound: int) -> int:
        """Return an integer drawn uniformly from ``[0, bound)``.

        Raises:
            ValueError: If `bound` is not strictly positive.
        """

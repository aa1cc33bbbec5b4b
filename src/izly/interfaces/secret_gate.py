"""Interface for the secret code gate a purse validates debits against."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SecretGate(Protocol):
    """Contract for a PIN verifier with a lock state.

    Any object exposing these two methods qualifies; `SecretCode` is the
    production implementation.
    """

    def verify(self, candidate: str) -> bool:
        """Return True when `candidate` matches the secret code."""
        ...  # pylint: disable=unnecessary-ellipsis

    def is_blocked(self) -> bool:
        """Return True when the gate refuses every verification."""
        ...  # pylint: disable=unnecessary-ellipsis

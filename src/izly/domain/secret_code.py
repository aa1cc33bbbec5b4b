"""Secret code gate.

A `SecretCode` holds a 4-digit PIN. The clear code can be read exactly once
through `reveal_code`; afterwards only a masked value is returned. Each failed
verification increments a counter which is reset by a successful one. Once
the counter reaches `LOCK_THRESHOLD` the code is blocked and every further
verification is refused without being compared or counted. There is no way
to unblock a code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from izly.interfaces.random_source import RandomSource

CODE_LENGTH = 4
DIGIT_BOUND = 10
LOCK_THRESHOLD = 3
MASKED_CODE = "xxxx"


class SecretCode:
    """A 4-digit PIN with reveal-once and lockout semantics.

    Args:
        code: The literal code. It is stored as is and never changes.
    """

    def __init__(self, code: str) -> None:
        self._code = code
        self._revealed = False
        self._failed_attempts = 0

    # --- Construction Paths ---

    @classmethod
    def create_code(cls, random_source: RandomSource) -> SecretCode:
        """Generate a new code from `CODE_LENGTH` draws of `random_source`.

        Each draw is in ``[0, 10)`` and the digits are concatenated in draw
        order, so draws of 5, 4, 3 and 2 give ``"5432"``.

        Args:
            random_source: Source asked for exactly `CODE_LENGTH` digits.

        Returns:
            A new, unrevealed and unblocked `SecretCode`.
        """
        digits = [str(random_source.next_int(DIGIT_BOUND)) for _ in range(CODE_LENGTH)]
        return cls("".join(digits))

    # --- Queries ---

    def reveal_code(self) -> str:
        """Return the clear code on the first call, `MASKED_CODE` afterwards."""
        if not self._revealed:
            self._revealed = True
            return self._code
        return MASKED_CODE

    def is_blocked(self) -> bool:
        """Whether too many consecutive verifications have failed."""
        return self._failed_attempts >= LOCK_THRESHOLD

    @property
    def revealed(self) -> bool:
        """Whether the clear code has already been handed out."""
        return self._revealed

    @property
    def failed_attempts(self) -> int:
        """Number of consecutive failed verifications."""
        return self._failed_attempts

    # --- Commands ---

    def verify(self, candidate: str) -> bool:
        """Check `candidate` against the code.

        A blocked code refuses the candidate without comparing it and without
        counting the attempt. Otherwise a match resets the failure counter and
        a mismatch increments it, possibly blocking the code.

        Args:
            candidate: The code typed by the user.

        Returns:
            True if the code is not blocked and `candidate` matches exactly.
        """
        if self.is_blocked():
            return False

        matches = candidate == self._code
        if matches:
            self._failed_attempts = 0
        else:
            self._failed_attempts += 1
        return matches

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(revealed={self._revealed}, "
            f"failed_attempts={self._failed_attempts}, blocked={self.is_blocked()})"
        )

"""Electronic purse.

A `Purse` holds a balance that can never exceed its cap nor drop below zero.
It accepts a limited number of successful operations over its lifetime, and
every debit must be validated by a secret code gate. Each operation is
all-or-nothing: a rejected credit or debit raises a
`TransactionRejectedError` subclass and leaves the purse unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from izly.domain.errors import (
    CapExceededError,
    CodeBlockedError,
    NegativeAmountError,
    NegativeBalanceForbiddenError,
    OperationBudgetExhaustedError,
    WrongCodeError,
)

if TYPE_CHECKING:
    from izly.interfaces.secret_gate import SecretGate


class Purse:
    """A capped balance with an operation budget and a PIN-gated debit.

    Args:
        cap: Maximum balance the purse may ever hold.
        operation_budget: Maximum number of successful credits and debits.
        secret_gate: Gate used to validate debits. The purse only calls its
            `is_blocked` and `verify` methods and does not own it.

    Note:
        Neither `cap` nor `operation_budget` is validated. A negative cap
        rejects every positive credit and a non-positive budget rejects every
        operation.
    """

    def __init__(
        self, cap: float, operation_budget: int, secret_gate: SecretGate
    ) -> None:
        self._cap = cap
        self._operation_budget = operation_budget
        self._secret_gate = secret_gate
        self._balance: float = 0
        self._operations_used = 0

    # --- Queries ---

    @property
    def balance(self) -> float:
        """The current balance."""
        return self._balance

    @property
    def cap(self) -> float:
        """The maximum balance."""
        return self._cap

    @property
    def operation_budget(self) -> int:
        """The number of operations allowed over the purse lifetime."""
        return self._operation_budget

    @property
    def operations_used(self) -> int:
        """The number of successful operations performed so far."""
        return self._operations_used

    @property
    def remaining_operations(self) -> int:
        """How many more operations the purse will accept."""
        return max(0, self._operation_budget - self._operations_used)

    # --- Operations ---

    def credit(self, amount: float) -> None:
        """Add `amount` to the balance.

        Raises:
            OperationBudgetExhaustedError: If no operation is left.
            NegativeAmountError: If `amount` is negative.
            CodeBlockedError: If the secret gate is blocked.
            CapExceededError: If the new balance would exceed the cap.
        """
        self._check_pre_operation(amount)
        if self._balance + amount > self._cap:
            raise CapExceededError(amount, self._balance, self._cap)
        self._balance += amount
        self._operations_used += 1

    def debit(self, amount: float, code: str) -> None:
        """Remove `amount` from the balance once `code` has been verified.

        The gate is asked to verify `code` only after the amount, the budget
        and the lock state have been checked. A failed verification may block
        the gate; the debit that triggers the lock still reports a wrong code.

        Raises:
            OperationBudgetExhaustedError: If no operation is left.
            NegativeAmountError: If `amount` is negative.
            CodeBlockedError: If the secret gate is blocked.
            WrongCodeError: If the gate rejects `code`.
            NegativeBalanceForbiddenError: If `amount` exceeds the balance.
        """
        self._check_pre_operation(amount)
        if self._secret_gate.is_blocked():
            raise CodeBlockedError()
        if not self._secret_gate.verify(code):
            raise WrongCodeError()
        if amount > self._balance:
            raise NegativeBalanceForbiddenError(amount, self._balance)
        self._balance -= amount
        self._operations_used += 1

    # --- Plumbing ---

    def _check_pre_operation(self, amount: float) -> None:
        """Checks shared by credit and debit, in order."""
        if self._operations_used >= self._operation_budget:
            raise OperationBudgetExhaustedError(self._operation_budget)
        if amount < 0:
            raise NegativeAmountError(amount)
        if self._secret_gate.is_blocked():
            raise CodeBlockedError()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(balance={self._balance}, cap={self._cap}, "
            f"operations={self._operations_used}/{self._operation_budget})"
        )

"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class TransactionRejectedError(DomainError):
    """Raised when a purse refuses a credit or a debit.

    The purse state is left untouched whenever this error (or a subclass) is
    raised.
    """


# ============================================================================
#                       Amount and balance related errors
# ============================================================================


class NegativeAmountError(TransactionRejectedError):
    """Raised when a credit or a debit is attempted with a negative amount."""

    def __init__(self, amount: float) -> None:
        super().__init__(f"Amount {amount} is negative.")
        self.amount = amount


class CapExceededError(TransactionRejectedError):
    """Raised when a credit would push the balance above the purse cap."""

    def __init__(self, amount: float, balance: float, cap: float) -> None:
        super().__init__(
            f"Crediting {amount} on a balance of {balance} would exceed the cap of {cap}."
        )
        self.amount = amount
        self.balance = balance
        self.cap = cap


class NegativeBalanceForbiddenError(TransactionRejectedError):
    """Raised when a debit would push the balance below zero."""

    def __init__(self, amount: float, balance: float) -> None:
        super().__init__(
            f"Debiting {amount} from a balance of {balance} would make it negative."
        )
        self.amount = amount
        self.balance = balance


class OperationBudgetExhaustedError(TransactionRejectedError):
    """Raised when the purse has already performed all its allowed operations."""

    def __init__(self, operation_budget: int) -> None:
        super().__init__(
            f"The operation budget of {operation_budget} has been exhausted."
        )
        self.operation_budget = operation_budget


# ============================================================================
#                           Secret code related errors
# ============================================================================


class CodeBlockedError(TransactionRejectedError):
    """Raised when the secret code is locked after too many failed attempts."""

    def __init__(self) -> None:
        super().__init__("The secret code is blocked.")


class WrongCodeError(TransactionRejectedError):
    """Raised when the code given for a debit does not match the secret code."""

    def __init__(self) -> None:
        super().__init__("The secret code is wrong.")

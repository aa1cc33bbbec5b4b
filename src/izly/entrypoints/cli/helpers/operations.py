"""Parsing of purse operations given on the command line.

Operations are written ``credit:AMOUNT`` or ``debit:AMOUNT:CODE``, e.g.
``credit:10 debit:2.5:1234``. The kind is case-insensitive; amounts are
finite floats and may be negative (the purse itself rejects negative amounts).
"""

import math
from dataclasses import dataclass
from enum import Enum

import click

from izly.config import finite_float


class OperationKind(Enum):
    """Kinds of purse operations accepted by ``izly purse run``."""

    CREDIT = "credit"
    DEBIT = "debit"


@dataclass(frozen=True)
class Operation:
    """A single purse operation parsed from the command line."""

    kind: OperationKind
    amount: float
    code: str | None = None

    def __str__(self) -> str:
        return f"{self.kind.value} {self.amount}"


def parse_operation(text: str) -> Operation:
    """Parse one ``KIND:AMOUNT[:CODE]`` token.

    Raises:
        click.BadParameter: If the kind is unknown, the amount is not a
            finite number, or the code is missing (debit) or unexpected (credit).
    """
    kind_str, _, rest = text.partition(":")
    try:
        kind = OperationKind(kind_str.strip().lower())
    except ValueError as e:
        raise click.BadParameter(
            f"Unknown operation {kind_str!r} in {text!r}; expected credit or debit"
        ) from e

    parts = rest.split(":") if rest else []
    expected = 2 if kind is OperationKind.DEBIT else 1
    if len(parts) != expected:
        usage = "debit:AMOUNT:CODE" if expected == 2 else "credit:AMOUNT"
        raise click.BadParameter(f"Expected {usage}, got {text!r}")

    try:
        amount = finite_float(parts[0])
    except ValueError as e:
        raise click.BadParameter(f"Invalid amount {parts[0]!r} in {text!r}") from e

    return Operation(kind, amount, parts[1] if expected == 2 else None)


def parse_operations(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> list[Operation]:
    """Click callback turning the raw OPERATION arguments into `Operation` objects."""
    return [parse_operation(item) for item in value]


def reject_non_finite(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: float | None,
) -> float | None:
    """Click callback refusing NaN and infinite values for a float option."""
    if value is not None and not math.isfinite(value):
        raise click.BadParameter(f"Expected a finite number, got {value}")
    return value

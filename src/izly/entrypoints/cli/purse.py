"""IZLY purse CLI: replay operations against a fresh purse.

Commands
- `run` : Create a purse gated by a known secret code and replay credit/debit
          operations in order, printing the balance after each accepted one.

Operations are written ``credit:AMOUNT`` or ``debit:AMOUNT:CODE``. A rejected
operation stops the run with exit status 1, unless ``--keep-going`` is given
(the exit status is then 1 if any operation was rejected).

Cap and operation budget default to ``IZLY_PURSE_CAP`` and
``IZLY_PURSE_OPERATIONS`` (see `izly.config`).

Examples
    $ izly purse run --code 1234 credit:40 debit:15:1234
    $ izly purse run --cap 50 --operations 2 --code 1234 credit:51
"""

import logging

import click
import click_extra as clickx

from izly import config
from izly.domain.errors import TransactionRejectedError
from izly.domain.purse import Purse
from izly.domain.secret_code import SecretCode
from izly.logging import purse_in_logs

from .code import validate_code
from .helpers.messages import error, success, warn
from .helpers.operations import (
    Operation,
    OperationKind,
    parse_operations,
    reject_non_finite,
)

logger = logging.getLogger(__name__)


def _apply(purse: Purse, operation: Operation) -> None:
    if operation.kind is OperationKind.CREDIT:
        purse.credit(operation.amount)
    else:
        purse.debit(operation.amount, operation.code or "")


@click.group(cls=clickx.ExtraGroup)
def purse() -> None:
    """Drive an electronic purse."""


@purse.command()
@click.option(
    "--cap",
    type=click.FloatRange(min=0),
    default=None,
    callback=reject_non_finite,
    help="Maximum balance of the purse [default: IZLY_PURSE_CAP or 100].",
)
@click.option(
    "--operations",
    "operation_budget",
    type=click.IntRange(min=0),
    default=None,
    help="Number of operations the purse accepts [default: IZLY_PURSE_OPERATIONS or 10].",
)
@click.option(
    "--code",
    "secret",
    required=True,
    callback=validate_code,
    help="The 4-digit secret code guarding debits.",
)
@click.option(
    "--keep-going/--stop-on-reject",
    default=False,
    show_default=True,
    help="Continue with the next operation after a rejection.",
)
@click.argument("operations", nargs=-1, required=True, callback=parse_operations)
@clickx.pass_context
def run(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    cap: float | None,
    operation_budget: int | None,
    secret: str,
    keep_going: bool,
    operations: list[Operation],
) -> None:
    """Replay OPERATIONS (credit:AMOUNT or debit:AMOUNT:CODE) on a new purse."""
    try:
        settings = config.get_purse_settings()
    except config.InvalidSettingError as e:
        raise click.ClickException(str(e)) from e

    gate = SecretCode(secret)
    wallet = Purse(
        cap if cap is not None else settings.cap,
        operation_budget if operation_budget is not None else settings.operations,
        gate,
    )
    logger.info("Created %r", wallet)

    rejected = 0
    with purse_in_logs(wallet):
        for operation in operations:
            was_blocked = gate.is_blocked()
            try:
                _apply(wallet, operation)
            except TransactionRejectedError as e:
                rejected += 1
                logger.warning("Rejected %s: %s", operation, e)
                error(f"{operation} rejected: {e}")
                if gate.is_blocked() and not was_blocked:
                    warn("The secret code is now blocked.")
                if not keep_going:
                    break
                continue
            logger.debug("Accepted %s", operation)
            click.echo(f"{operation} -> balance {wallet.balance:.2f}")

    click.echo(
        f"Final balance: {wallet.balance:.2f} "
        f"({wallet.operations_used}/{wallet.operation_budget} operations used)"
    )
    if rejected:
        ctx.exit(1)
    success("All operations accepted.")

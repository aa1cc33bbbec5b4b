"""IZLY code CLI: secret code generation and verification.

Commands
- `new`   : Generate a 4-digit code and reveal it (once).
- `check` : Replay verification attempts against a known code and report the
            failure counter and lock state after each attempt.

Examples
    $ izly code new
    $ izly code new --seed 7
    $ izly code check 1234 0000 1111 1234
"""

import logging

import click
import click_extra as clickx

from izly.adapters.random_sources import SystemRandomSource
from izly.domain.secret_code import CODE_LENGTH, SecretCode

from .helpers.messages import success, warn

logger = logging.getLogger(__name__)


def validate_code(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str,
) -> str:
    """Click callback accepting only codes made of exactly 4 decimal digits."""
    if len(value) != CODE_LENGTH or not value.isdecimal():
        raise click.BadParameter(f"Expected {CODE_LENGTH} digits, got {value!r}")
    return value


@click.group(cls=clickx.ExtraGroup)
def code() -> None:
    """Generate and check secret codes."""


@code.command()
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed the random source for a reproducible code.",
)
def new(seed: int | None) -> None:
    """Generate a new secret code and print it."""
    secret = SecretCode.create_code(SystemRandomSource(seed))
    logger.debug("Generated secret code (seeded=%s)", seed is not None)
    click.echo(secret.reveal_code())


@code.command()
@click.argument("secret", callback=validate_code)
@click.argument("attempts", nargs=-1, required=True)
def check(secret: str, attempts: tuple[str, ...]) -> None:
    """Verify ATTEMPTS, in order, against the SECRET code."""
    gate = SecretCode(secret)
    for attempt in attempts:
        accepted = gate.verify(attempt)
        logger.debug("Attempt %r accepted=%s %r", attempt, accepted, gate)
        click.echo(
            f"{attempt}: {'accepted' if accepted else 'refused'} "
            f"(failed attempts: {gate.failed_attempts}, "
            f"blocked: {'yes' if gate.is_blocked() else 'no'})"
        )
    if gate.is_blocked():
        logger.warning("Secret code blocked after %d attempts", len(attempts))
        warn("The secret code is blocked.")
    else:
        success("The secret code is not blocked.")

"""Configuration utilities for IZLY.

This module centralizes small helpers and constants related to application configuration.
"""

import math
import os
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

T = TypeVar("T")

CAP_ENV_VAR = "IZLY_PURSE_CAP"  # pragma: no mutate
OPERATIONS_ENV_VAR = "IZLY_PURSE_OPERATIONS"  # pragma: no mutate

DEFAULT_CAP = 100.0
DEFAULT_OPERATIONS = 10


class InvalidSettingError(Exception):
    """Raised when an IZLY environment variable holds an unparsable value."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Invalid value for {name}: {value!r}")
        self.name = name
        self.value = value


@dataclass(frozen=True)
class PurseSettings:
    """Defaults used when the CLI creates a new purse."""

    cap: float = DEFAULT_CAP
    operations: int = DEFAULT_OPERATIONS


def finite_float(raw: str) -> float:
    """Parse `raw` as a float, refusing NaN and infinities.

    Raises:
        ValueError: If `raw` is not a number or is not finite.
    """
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"{raw!r} is not a finite number")
    return value


def _read(name: str, cast: Callable[[str], T], default: T) -> T:
    if not (raw := os.environ.get(name)):
        return default
    try:
        return cast(raw)
    except ValueError as e:
        raise InvalidSettingError(name, raw) from e


def get_purse_settings() -> PurseSettings:
    """Get the purse defaults from the environment.

    Returns:
        Settings built from `IZLY_PURSE_CAP` and `IZLY_PURSE_OPERATIONS`, each
        falling back to its default when unset or empty.

    Raises:
        InvalidSettingError: If a variable is set but cannot be parsed, or the
            cap is not a finite number.
    """
    return PurseSettings(
        cap=_read(CAP_ENV_VAR, finite_float, DEFAULT_CAP),
        operations=_read(OPERATIONS_ENV_VAR, int, DEFAULT_OPERATIONS),
    )

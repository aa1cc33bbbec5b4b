"""Interfaces (application boundary) for IZLY.

Defines framework-free contracts the domain depends on: the random source used
to generate secret codes and the secret gate a purse validates debits against.
Business rules stay out of this package.

Dependency rule: this package is independent; do not import from any other
`izly.*` modules.
"""

from .random_source import RandomSource
from .secret_gate import SecretGate

__all__ = ["RandomSource", "SecretGate"]

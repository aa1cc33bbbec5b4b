"""CLI helpers for IZLY.

Utilities used by the command-line interface: logger-level option parsing,
purse operation parsing, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error, success, warn
from .operations import Operation, parse_operations

__all__ = [
    "Operation",
    "error",
    "parse_log_level",
    "parse_operations",
    "success",
    "warn",
]

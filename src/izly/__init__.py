"""IZLY

An electronic purse with a deposit cap, a lifetime operation budget and
PIN-gated debits. The PIN lives in a secret code that can be revealed once
and locks itself after repeated failed verifications.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"

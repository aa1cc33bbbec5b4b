"""Domain layer for IZLY.

Contains business rules: the secret code gate, the purse and the errors they
raise. This package is deliberately technology-agnostic.

Dependency rule: do not import from `izly.adapters` or `izly.entrypoints`.
"""

"""Adapters (infrastructure) for IZLY.

Provide concrete implementations of the ports declared in `izly.interfaces`
(currently random sources used to generate secret codes).

Dependency rule: may import `izly.interfaces` and `izly.domain`; the domain
must not import this package.
"""

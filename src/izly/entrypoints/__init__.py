"""Entrypoints (inbound adapters) for IZLY.

Expose the purse and the secret code to the outside world through the `izly`
command line. Parse and validate inputs, drive the domain objects, and present
results.
"""

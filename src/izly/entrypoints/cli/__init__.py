"""Command-line entry point for IZLY (``izly``)."""

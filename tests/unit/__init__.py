"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O and no real randomness; use mocks/fakes at boundaries.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""

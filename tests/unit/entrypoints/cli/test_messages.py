"""Unit tests for :mod:`izly.entrypoints.cli.helpers.messages`.

Covers glyph selection against the *current* stderr encoding, the absence of
stream caching, and the styling/stream of ``warn``/``success``/``error``.
"""

import io
import sys

import click
import pytest

from izly.entrypoints.cli.helpers.messages import (
    _supports_character,
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

SET_YELLOW = "\x1b[33m"
SET_GREEN = "\x1b[32m"
SET_RED = "\x1b[31m"
SET_BOLD = "\x1b[1m"
RESET = "\x1b[0m"


class FakeTTY(io.StringIO):
    """A TTY-like text stream with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        """Declared character encoding (e.g., ``'ascii'`` or ``'utf-8'``)."""
        return self._encoding

    def isatty(self) -> bool:
        """Report a TTY so Click keeps ANSI styling."""
        return True


@pytest.fixture
def fake_stderr(monkeypatch):
    """Return a factory pointing Click's stderr probe and sys.stderr at a FakeTTY."""

    def _install(encoding: str) -> FakeTTY:
        stream = FakeTTY(encoding)
        monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
        monkeypatch.setattr(sys, "stderr", stream, raising=False)
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("CLICOLOR", "1")
        return stream

    return _install


@pytest.mark.parametrize(
    ("encoding", "expected_caution", "expected_success", "expected_error"),
    [
        ("ascii", "[!]", "[OK]", "[X]"),
        ("utf-8", "⚠️", "✅", "❌"),
    ],
)
def test_glyphs_respect_stream_encoding(
    fake_stderr, encoding, expected_caution, expected_success, expected_error
):
    """Glyph helpers choose emoji or ASCII according to the stderr encoding."""
    fake_stderr(encoding)
    assert caution_glyph() == expected_caution
    assert success_glyph() == expected_success
    assert error_glyph() == expected_error


def test_supports_character_requeries_stream_each_call(monkeypatch):
    """The stderr stream is looked up again on every probe."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(click, "get_text_stream", lambda name: FakeTTY(next(encodings)))

    assert _supports_character("❌") is False
    assert _supports_character("❌") is True


@pytest.mark.parametrize(
    ("encoding", "glyph", "color_code", "func"),
    [
        ("ascii", "[!]", SET_YELLOW, warn),
        ("utf-8", "⚠️", SET_YELLOW, warn),
        ("ascii", "[OK]", SET_GREEN, success),
        ("utf-8", "✅", SET_GREEN, success),
        ("ascii", "[X]", SET_RED, error),
        ("utf-8", "❌", SET_RED, error),
    ],
)
def test_messages_emit_styled_stderr(fake_stderr, encoding, glyph, color_code, func):
    """warn/success/error write bold, colored lines with the right glyph."""
    stream = fake_stderr(encoding)

    func("debit 20.0 rejected")

    out = stream.getvalue()
    assert "debit 20.0 rejected" in out
    assert glyph in out
    assert SET_BOLD in out
    assert color_code in out
    assert RESET in out


@pytest.mark.parametrize("func", [warn, success, error])
def test_messages_leave_stdout_untouched(capsys, func):
    """Status lines never pollute stdout, which carries balances and codes."""
    func("status line")
    captured = capsys.readouterr()
    assert "status line" in captured.err
    assert captured.out == ""

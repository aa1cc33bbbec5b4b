"""Unit tests for the CLI log level parser.

These tests exercise izly.entrypoints.cli.helpers.log_level_parser.parse_log_level,
covering default behavior, override semantics, input normalization (commas/spaces),
case-insensitivity, and error handling for malformed input.
"""

import logging
import types

import click
import pytest

from izly.entrypoints.cli.helpers.log_level_parser import (
    DEFAULT_LIB_LEVELS,
    parse_log_level,
)


@pytest.fixture
def ctx():
    """A minimal Click context stub; the callback ignores it."""
    return types.SimpleNamespace()


def test_empty_uses_defaults(ctx):
    """When no levels are provided, return the default library logger levels."""
    assert parse_log_level(ctx, None, ()) == DEFAULT_LIB_LEVELS


def test_defaults_are_not_mutated(ctx):
    """Overrides are applied to a copy of the defaults."""
    parse_log_level(ctx, None, ("markdown_it=DEBUG",))
    assert DEFAULT_LIB_LEVELS["markdown_it"] == logging.WARNING


def test_repeated_flags_override_order(ctx):
    """Later repeated CLI flags override earlier ones for the same logger."""
    value = ("izly=INFO", "izly.entrypoints=ERROR", "izly=WARNING")
    out = parse_log_level(ctx, None, value)
    assert out["izly"] == logging.WARNING
    assert out["izly.entrypoints"] == logging.ERROR


def test_envvar_string_with_commas_and_spaces(ctx):
    """Accept a plain string (e.g. from an env var) with commas and spaces."""
    out = parse_log_level(ctx, None, "izly=INFO,  urllib3=WARNING rich=ERROR")
    assert out["izly"] == logging.INFO
    assert out["urllib3"] == logging.WARNING
    assert out["rich"] == logging.ERROR


def test_case_insensitive_levels(ctx):
    """Level names should be parsed case-insensitively."""
    out = parse_log_level(ctx, None, ("izly=debug", "rich=WaRnInG"))
    assert out["izly"] == logging.DEBUG
    assert out["rich"] == logging.WARNING


@pytest.mark.parametrize("item", ["not-a-pair", "=INFO"])
def test_invalid_pair_raises(ctx, item):
    """Malformed NAME=LEVEL pairs should raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match="Expected NAME=LEVEL"):
        parse_log_level(ctx, None, (item,))


def test_invalid_level_raises(ctx):
    """Unknown level names should raise click.BadParameter."""
    with pytest.raises(click.BadParameter, match="Invalid log level"):
        parse_log_level(ctx, None, ("izly=LOUD",))

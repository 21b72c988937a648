"""Tests for minyaml.errors and minyaml.options."""

import pytest

from minyaml import (
    AmbiguousIndent,
    ErrorKind,
    MinYAMLError,
    ParseOptions,
    UnterminatedQuote,
)
from minyaml.lines import Line


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def test_error_is_value_error():
    assert issubclass(MinYAMLError, ValueError)


def test_kind_per_subclass():
    assert UnterminatedQuote("x").kind is ErrorKind.UnterminatedQuote
    assert AmbiguousIndent("x").kind is ErrorKind.AmbiguousIndent


def test_unlocated_message():
    err = UnterminatedQuote("unterminated double quote")
    assert err.line is None
    assert str(err) == "unterminated double quote"


def test_located_copy():
    err = UnterminatedQuote("unterminated double quote")
    located = err.located(Line(indent=2, content='foo: "bar', index=4))
    assert isinstance(located, UnterminatedQuote)
    assert located.line == 4
    assert located.text == 'foo: "bar'
    assert str(located) == "unterminated double quote (line 5: 'foo: \"bar')"
    assert err.line is None


# ---------------------------------------------------------------------------
# ParseOptions
# ---------------------------------------------------------------------------

def test_default_options():
    options = ParseOptions()
    assert options.duplicate_keys == "last"
    assert options.empty_document == "mapping"
    assert options.overwrite_duplicates


def test_strict_duplicates():
    assert not ParseOptions(duplicate_keys="error").overwrite_duplicates


def test_invalid_duplicate_policy():
    with pytest.raises(ValueError, match="duplicate_keys"):
        ParseOptions(duplicate_keys="first")


def test_invalid_empty_policy():
    with pytest.raises(ValueError, match="empty_document"):
        ParseOptions(empty_document="list")

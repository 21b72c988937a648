"""Tests for minyaml.scalars."""

import pytest

from minyaml.scalars import coerce, is_wrapped, unescape, unquote_key
from minyaml.values import VBool, VFloat, VInt, VStr


@pytest.mark.parametrize(
    "token, expected",
    [
        ("1", VInt(1)),
        ("-42", VInt(-42)),
        ("007", VInt(7)),
        ("1.5", VFloat(1.5)),
        ("-0.25", VFloat(-0.25)),
        ('"bar\\n"', VStr("bar\n")),
        ("'bar'", VStr("bar")),
        ("'bar\\n'", VStr("bar\\n")),
        ("true", VBool(True)),
        ("yes", VBool(True)),
        ("on", VBool(True)),
        ("TRUE", VBool(True)),
        ("Yes", VBool(True)),
        ("false", VBool(False)),
        ("off", VBool(False)),
        ("no", VBool(False)),
        ("No", VBool(False)),
        ("foo.spec.js", VStr("foo.spec.js")),
        ("1.5.3", VStr("1.5.3")),
        (".5", VStr(".5")),
        ("12abc", VStr("12abc")),
        ("null", VStr("null")),
        ("", VStr("")),
    ],
)
def test_coerce(token, expected):
    assert coerce(token) == expected


def test_coerce_trims_first():
    assert coerce("   12  ") == VInt(12)
    assert coerce("  hello world ") == VStr("hello world")


def test_quoted_numbers_stay_strings():
    assert coerce('"1"') == VStr("1")
    assert coerce("'true'") == VStr("true")


def test_unbalanced_quote_falls_back_to_string():
    assert coerce('"bar') == VStr('"bar')


def test_two_quoted_spans_are_not_one_string():
    assert coerce('"a" "b"') == VStr('"a" "b"')


# ---------------------------------------------------------------------------
# unescape
# ---------------------------------------------------------------------------

def test_unescape_common():
    assert unescape(r"a\tb\nc\\d\"e") == 'a\tb\nc\\d"e'


def test_unescape_hex_and_unicode():
    assert unescape(r"\x41\u00e9\U0001F600") == "A\u00e9\U0001F600"


def test_unescape_unknown_kept():
    assert unescape(r"\q") == r"\q"


def test_unescape_out_of_range_kept():
    assert unescape(r"\UFFFFFFFF") == r"\UFFFFFFFF"


# ---------------------------------------------------------------------------
# keys
# ---------------------------------------------------------------------------

def test_is_wrapped():
    assert is_wrapped('"x"', '"')
    assert not is_wrapped('"x"', "'")
    assert not is_wrapped('"', '"')


def test_unquote_key():
    assert unquote_key("  foo bar   ") == "foo bar"
    assert unquote_key('"a:b"') == "a:b"
    assert unquote_key("'it'") == "it"
    assert unquote_key('"tab\\t"') == "tab\t"

"""Scalar coercion: bare text token to a typed Value."""

from __future__ import annotations

import re
from collections.abc import Callable

from .scanner import quoted_span_end
from .values import Value, VBool, VFloat, VInt, VStr

_INT_RE = re.compile(r"-?\d+")
_FLOAT_RE = re.compile(r"-?\d+\.\d+")
_ESCAPE_RE = re.compile(r"\\(x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8}|.)", re.DOTALL)

_TRUE_WORDS = frozenset({"true", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "off", "no"})

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
    "/": "/",
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "v": "\v",
    " ": " ",
}


# ---------------------------------------------------------------------------
# Quote handling
# ---------------------------------------------------------------------------

def _replace_escape(match: re.Match[str]) -> str:
    seq = match.group(1)
    if len(seq) > 1:
        code = int(seq[1:], 16)
        return chr(code) if code <= 0x10FFFF else match.group(0)
    # Unknown escapes keep their backslash.
    return _ESCAPES.get(seq, match.group(0))


def unescape(text: str) -> str:
    """Process backslash escapes as found inside a double-quoted span."""
    return _ESCAPE_RE.sub(_replace_escape, text)


def is_wrapped(token: str, quote: str) -> bool:
    """True when *token* is exactly one span quoted with *quote*."""
    return token[:1] == quote and quoted_span_end(token) == len(token) - 1


def unquote_key(text: str) -> str:
    """Trim a mapping key and strip one pair of surrounding quotes."""
    key = text.strip()
    if is_wrapped(key, '"'):
        return unescape(key[1:-1])
    if is_wrapped(key, "'"):
        return key[1:-1]
    return key


# ---------------------------------------------------------------------------
# Coercion rules, first match wins
# ---------------------------------------------------------------------------

Rule = tuple[Callable[[str], object], Callable[[str], Value]]

RULES: tuple[Rule, ...] = (
    (_INT_RE.fullmatch, lambda t: VInt(int(t))),
    (_FLOAT_RE.fullmatch, lambda t: VFloat(float(t))),
    (lambda t: is_wrapped(t, '"'), lambda t: VStr(unescape(t[1:-1]))),
    (lambda t: is_wrapped(t, "'"), lambda t: VStr(t[1:-1])),
    (lambda t: t.lower() in _TRUE_WORDS, lambda t: VBool(True)),
    (lambda t: t.lower() in _FALSE_WORDS, lambda t: VBool(False)),
)


def coerce(token: str) -> Value:
    """Convert a raw token to a scalar Value.  Total: falls back to VStr."""
    text = token.strip()
    for matches, build in RULES:
        if matches(text):
            return build(text)
    return VStr(text)

"""Flow collections: inline ``[...]`` sequences and ``{...}`` mappings."""

from __future__ import annotations

from .errors import UnclassifiableLine, UnterminatedBracket
from .options import DEFAULT_OPTIONS, ParseOptions
from .scalars import coerce, unquote_key
from .scanner import check_quotes, partition_top_level, scan, split_top_level
from .values import Null, Value, VMap, VSeq

_PAIRS = {"[": "]", "{": "}"}


def is_flow(token: str) -> bool:
    return token.lstrip()[:1] in _PAIRS


def parse_value(token: str, options: ParseOptions | None = None) -> Value:
    """Evaluate a value token: flow collection, scalar, or Null when blank."""
    text = token.strip()
    if not text:
        return Null
    if is_flow(text):
        return parse_flow(text, options)
    check_quotes(text)
    return coerce(text)


def parse_flow(token: str, options: ParseOptions | None = None) -> Value:
    """Parse an inline collection, recursing into nested collections.

    >>> parse_flow("[1, [2, 3]]")
    VSeq(items=[VInt(value=1), VSeq(items=[VInt(value=2), VInt(value=3)])])
    """
    options = options or DEFAULT_OPTIONS
    text = token.strip()
    _check_brackets(text)
    body = text[1:-1]

    if text[0] == "[":
        return VSeq([parse_value(piece, options) for piece in _elements(body)])

    mapping = VMap()
    for piece in _elements(body):
        key_text, sep, rest = partition_top_level(piece, ":")
        if not key_text.strip():
            raise UnclassifiableLine(f"flow mapping entry without a key: {piece.strip()!r}")
        value = parse_value(rest, options) if sep else Null
        mapping.assign(unquote_key(key_text), value, overwrite=options.overwrite_duplicates)
    return mapping


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _check_brackets(text: str) -> None:
    """Ensure *text* is exactly one balanced collection."""
    if text[:1] not in _PAIRS:
        raise UnterminatedBracket(f"flow collection must start with '[' or '{{': {text!r}")

    open_stack: list[str] = []
    for i, ch, _ in scan(text):
        if ch in _PAIRS:
            open_stack.append(ch)
        elif ch in ("]", "}"):
            if not open_stack or _PAIRS[open_stack.pop()] != ch:
                raise UnterminatedBracket(f"unexpected {ch!r} at column {i + 1}")
            if not open_stack and i != len(text) - 1:
                raise UnterminatedBracket(
                    f"unexpected text after closing {ch!r}: {text[i + 1:].strip()!r}"
                )

    if open_stack:
        raise UnterminatedBracket(f"unclosed {open_stack[-1]!r}")


def _elements(body: str) -> list[str]:
    """Split a collection body on top-level commas.

    An empty body gives no elements and one trailing comma is ignored.
    """
    if not body.strip():
        return []
    pieces = split_top_level(body, ",")
    if len(pieces) > 1 and not pieces[-1].strip():
        pieces.pop()
    return pieces

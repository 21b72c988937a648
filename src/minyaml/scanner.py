"""Quote- and bracket-aware character scanning shared by every layer."""

from __future__ import annotations

from collections.abc import Iterator

from .errors import UnterminatedQuote

_OPENERS = frozenset("[{")
_CLOSERS = frozenset("]}")
_QUOTES = frozenset("\"'")

# A quote only opens a quoted span at the start of a token, so the
# apostrophe in ``it's`` stays literal.
_QUOTE_LEADS = frozenset(" \t[{,:")


def _opens_quote(text: str, i: int) -> bool:
    return text[i] in _QUOTES and (i == 0 or text[i - 1] in _QUOTE_LEADS)


def scan(text: str, strict: bool = True) -> Iterator[tuple[int, str, int]]:
    """Yield ``(index, char, depth)`` for each character outside quoted spans.

    ``depth`` counts the ``[``/``{`` collections enclosing the character;
    an opening bracket is reported at its outer depth and a closing bracket
    at the depth it returns to, so both brackets of a top-level collection
    appear at depth 0.  Quote characters themselves are never yielded.

    With ``strict`` set, a quoted span still open at the end of *text*
    raises :class:`UnterminatedQuote` once the scan is exhausted.
    """
    depth = 0
    quote: str | None = None
    quote_start = 0
    escaped = False

    for i, ch in enumerate(text):
        if quote is not None:
            if escaped:
                escaped = False
            elif quote == '"' and ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue

        if _opens_quote(text, i):
            quote = ch
            quote_start = i
            continue

        if ch in _CLOSERS:
            depth -= 1
        yield i, ch, depth
        if ch in _OPENERS:
            depth += 1

    if quote is not None and strict:
        kind = "double" if quote == '"' else "single"
        raise UnterminatedQuote(
            f"unterminated {kind} quote starting at column {quote_start + 1}"
        )


def check_quotes(text: str) -> None:
    """Raise :class:`UnterminatedQuote` if *text* leaves a quote open."""
    for _ in scan(text):
        pass


def partition_top_level(text: str, sep: str) -> tuple[str, str, str]:
    """Like ``str.partition`` but ignores *sep* inside quotes or brackets."""
    for i, ch, depth in scan(text):
        if ch == sep and depth == 0:
            return text[:i], sep, text[i + 1:]
    return text, "", ""


def split_top_level(text: str, sep: str) -> list[str]:
    """Split *text* on every *sep* outside quotes and nested brackets."""
    pieces: list[str] = []
    start = 0
    for i, ch, depth in scan(text):
        if ch == sep and depth == 0:
            pieces.append(text[start:i])
            start = i + 1
    pieces.append(text[start:])
    return pieces


def quoted_span_end(text: str) -> int:
    """Return the index closing the quoted span that opens *text*, or -1."""
    if not text or text[0] not in _QUOTES:
        return -1
    quote = text[0]
    escaped = False
    for i in range(1, len(text)):
        ch = text[i]
        if escaped:
            escaped = False
        elif quote == '"' and ch == "\\":
            escaped = True
        elif ch == quote:
            return i
    return -1

"""Line preprocessing: raw text to indented, comment-free content lines."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .scanner import scan

_DOCUMENT_MARKER = "---"
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(slots=True)
class Line:
    indent: int
    content: str
    index: int  # 0-based position in the original text


def strip_comment(text: str) -> str:
    """Drop a trailing ``# ...`` comment.

    Only a ``#`` preceded by whitespace and outside any quoted span starts
    a comment, so ``color: "#fff"`` and ``issue#12`` are left alone.
    """
    for i, ch, _ in scan(text, strict=False):
        if ch == "#" and i > 0 and text[i - 1].isspace():
            return text[:i]
    return text


def indent_width(text: str) -> int:
    """Count leading whitespace; a tab is one column like a space."""
    return len(text) - len(text.lstrip())


def preprocess(text: str) -> list[Line]:
    """Turn *text* into the list of lines the block parser consumes.

    Blank lines, comment-only lines and a leading ``---`` document marker
    are dropped; trailing comments are cut off.  Never fails.
    """
    lines: list[Line] = []
    seen_content = False

    # Only CR/LF end a line; str.splitlines would also split on \f, \x85, U+2028.
    for index, raw in enumerate(_LINE_BREAK_RE.split(text)):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue

        content = strip_comment(raw).strip()
        if not content:
            continue

        if not seen_content:
            seen_content = True
            if content == _DOCUMENT_MARKER:
                continue

        lines.append(Line(indent=indent_width(raw), content=content, index=index))

    return lines

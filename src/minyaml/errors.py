"""Error types raised while evaluating a document."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lines import Line


class ErrorKind(Enum):
    UnterminatedQuote = auto()
    UnterminatedBracket = auto()
    AmbiguousIndent = auto()
    UnclassifiableLine = auto()
    DuplicateKey = auto()


class MinYAMLError(ValueError):
    """Base class for every evaluation failure.

    ``line`` is the 0-based index of the offending line in the original
    text and ``text`` its trimmed content.  Both are ``None`` while the
    error travels through the scalar and flow layers; the block parser
    attaches them before the error reaches the caller.
    """

    kind: ErrorKind

    def __init__(self, detail: str, line: int | None = None, text: str | None = None) -> None:
        self.detail = detail
        self.line = line
        self.text = text
        super().__init__(str(self))

    def located(self, line: Line) -> MinYAMLError:
        """Return a copy of this error pointing at *line*."""
        return type(self)(self.detail, line=line.index, text=line.content)

    def __str__(self) -> str:
        if self.line is None:
            return self.detail
        return f"{self.detail} (line {self.line + 1}: {self.text!r})"


class UnterminatedQuote(MinYAMLError):
    kind = ErrorKind.UnterminatedQuote


class UnterminatedBracket(MinYAMLError):
    kind = ErrorKind.UnterminatedBracket


class AmbiguousIndent(MinYAMLError):
    kind = ErrorKind.AmbiguousIndent


class UnclassifiableLine(MinYAMLError):
    kind = ErrorKind.UnclassifiableLine


class DuplicateKey(MinYAMLError):
    kind = ErrorKind.DuplicateKey

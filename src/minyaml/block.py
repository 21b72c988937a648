"""Block parser: indentation-driven state machine over preprocessed lines.

Each line is fed to :func:`step`, which mutates a :class:`ParserState`
holding the stack of open containers and the slot (mapping key or sequence
index) still waiting for a value from deeper lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from .errors import AmbiguousIndent, MinYAMLError, UnclassifiableLine
from .flow import parse_value
from .lines import Line
from .options import DEFAULT_OPTIONS, ParseOptions
from .scalars import unquote_key
from .scanner import partition_top_level
from .values import Null, Value, VMap, VSeq

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

class Kind(Enum):
    SEQUENCE = auto()
    MAPPING = auto()


class LineType(Enum):
    ITEM = auto()     # - value
    ENTRY = auto()    # key: value
    SCALAR = auto()   # anything else


@dataclass(slots=True)
class Frame:
    indent: int
    container: VSeq | VMap
    kind: Kind


@dataclass
class ParserState:
    options: ParseOptions = DEFAULT_OPTIONS
    stack: list[Frame] = field(default_factory=list)
    pending_key: str | None = None
    pending_index: int | None = None
    root: Value | None = None
    scalar_root: bool = False

    @property
    def has_pending(self) -> bool:
        return self.pending_key is not None or self.pending_index is not None

    def clear_pending(self) -> None:
        self.pending_key = None
        self.pending_index = None


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def parse_block(lines: list[Line], options: ParseOptions | None = None) -> Value:
    """Build the document value from preprocessed *lines*."""
    state = ParserState(options=options or DEFAULT_OPTIONS)
    for line in lines:
        step(state, line)
    return finish(state)


def step(state: ParserState, line: Line) -> None:
    """Apply one line to *state*.  Errors carry the line's position."""
    try:
        _step(state, line)
    except MinYAMLError as exc:
        if exc.line is not None:
            raise
        raise exc.located(line) from exc


def finish(state: ParserState) -> Value:
    """Close every open container and return the document root."""
    if state.has_pending:
        logger.debug("pending slot resolved to Null at end of document")
    state.clear_pending()
    state.stack.clear()
    if state.root is None:
        if state.options.empty_document == "null":
            return Null
        return VMap()
    return state.root


def classify(content: str) -> tuple[LineType, str | None, str]:
    """Split a line's content into ``(type, key, remainder)``.

    ``key`` is only set for mapping entries.  For scalar lines the
    remainder is the whole content.
    """
    if content == "-" or content.startswith("- "):
        return LineType.ITEM, None, content[1:].strip()

    key_text, sep, rest = partition_top_level(content, ":")
    if sep:
        if not key_text.strip():
            raise UnclassifiableLine("mapping entry without a key")
        return LineType.ENTRY, unquote_key(key_text), rest.strip()

    return LineType.SCALAR, None, content


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def _step(state: ParserState, line: Line) -> None:
    if state.scalar_root:
        raise UnclassifiableLine("unexpected content after a scalar document")

    _dedent(state, line.indent)
    line_type, key, remainder = classify(line.content)

    if line_type is LineType.SCALAR:
        if state.root is not None:
            raise UnclassifiableLine("expected a mapping entry or a sequence item")
        state.root = parse_value(remainder, state.options)
        state.scalar_root = True
        return

    kind = Kind.SEQUENCE if line_type is LineType.ITEM else Kind.MAPPING
    frame = _container_for(state, line.indent, kind)

    value = parse_value(remainder, state.options) if remainder else Null
    if kind is Kind.MAPPING:
        frame.container.assign(key, value, overwrite=state.options.overwrite_duplicates)
        if not remainder:
            state.pending_key = key
    else:
        frame.container.items.append(value)
        if not remainder:
            state.pending_index = len(frame.container.items) - 1


def _dedent(state: ParserState, indent: int) -> None:
    """Pop containers deeper than *indent*."""
    popped = False
    while state.stack and state.stack[-1].indent > indent:
        frame = state.stack.pop()
        logger.debug("closed %s at indent %d", frame.kind.name.lower(), frame.indent)
        popped = True

    if not state.stack and state.root is not None:
        raise AmbiguousIndent("line is indented less than the document root")
    if popped and state.stack[-1].indent != indent:
        raise AmbiguousIndent(
            f"indent {indent} does not match any open block "
            f"(nearest is {state.stack[-1].indent})"
        )


def _container_for(state: ParserState, indent: int, kind: Kind) -> Frame:
    """Reuse the container at *indent* or open a new one below the pending slot."""
    pending_key, pending_index = state.pending_key, state.pending_index
    had_pending = state.has_pending
    state.clear_pending()

    if not state.stack:
        frame = _push(state, indent, kind)
        state.root = frame.container
        return frame

    top = state.stack[-1]
    if top.indent == indent:
        if top.kind is not kind:
            raise AmbiguousIndent(
                f"{kind.name.lower()} line at the indent of an open {top.kind.name.lower()}"
            )
        if had_pending:
            logger.debug("pending slot resolved to Null at indent %d", indent)
        return top

    if not had_pending:
        raise AmbiguousIndent(f"unexpected indentation at indent {indent}")

    frame = _push(state, indent, kind)
    if top.kind is Kind.MAPPING:
        top.container.entries[pending_key] = frame.container
    else:
        top.container.items[pending_index] = frame.container
    return frame


def _push(state: ParserState, indent: int, kind: Kind) -> Frame:
    container: VSeq | VMap = VSeq() if kind is Kind.SEQUENCE else VMap()
    frame = Frame(indent=indent, container=container, kind=kind)
    state.stack.append(frame)
    logger.debug("opened %s at indent %d", kind.name.lower(), indent)
    return frame

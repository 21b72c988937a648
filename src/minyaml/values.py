"""Value types for minyaml documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from .errors import DuplicateKey


# ---------------------------------------------------------------------------
# Null — singleton for absent values
# ---------------------------------------------------------------------------

class VNull:
    """Sentinel for keys and sequence slots that never received a value."""

    _instance: VNull | None = None

    def __new__(cls) -> VNull:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = VNull()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VBool:
    value: bool

    def __str__(self) -> str:
        return str(self.value).lower()


@dataclass(slots=True)
class VInt:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(slots=True)
class VFloat:
    value: float

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(slots=True)
class VStr:
    value: str

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VSeq:
    items: list[Value] = field(default_factory=list)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass(slots=True)
class VMap:
    """Mapping whose iteration order is the order keys were first seen."""

    entries: dict[str, Value] = field(default_factory=dict)

    def assign(self, key: str, value: Value, *, overwrite: bool = True) -> None:
        """Store *value* under *key*.

        A repeated key keeps its original position.  With ``overwrite=False``
        a repeated key raises :class:`DuplicateKey` instead.
        """
        if not overwrite and key in self.entries:
            raise DuplicateKey(f"duplicate key {key!r}")
        self.entries[key] = value

    def keys(self) -> list[str]:
        return list(self.entries)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"


Value = Union[VNull, VBool, VInt, VFloat, VStr, VSeq, VMap]


def to_python(value: Value) -> Any:
    """Convert a Value tree to plain Python objects."""
    if isinstance(value, VNull):
        return None
    if isinstance(value, VSeq):
        return [to_python(v) for v in value.items]
    if isinstance(value, VMap):
        return {k: to_python(v) for k, v in value.entries.items()}
    return value.value

"""ParseOptions — the knobs callers may turn on a single evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DuplicateKeyPolicy = Literal["last", "error"]
EmptyDocumentPolicy = Literal["mapping", "null"]

_DUPLICATE_KEY_POLICIES = ("last", "error")
_EMPTY_DOCUMENT_POLICIES = ("mapping", "null")


@dataclass(frozen=True, slots=True)
class ParseOptions:
    duplicate_keys: DuplicateKeyPolicy = "last"  # "error" raises DuplicateKey
    empty_document: EmptyDocumentPolicy = "mapping"  # "null" returns Null

    def __post_init__(self) -> None:
        if self.duplicate_keys not in _DUPLICATE_KEY_POLICIES:
            raise ValueError(
                f"duplicate_keys must be one of {_DUPLICATE_KEY_POLICIES}, "
                f"got {self.duplicate_keys!r}"
            )
        if self.empty_document not in _EMPTY_DOCUMENT_POLICIES:
            raise ValueError(
                f"empty_document must be one of {_EMPTY_DOCUMENT_POLICIES}, "
                f"got {self.empty_document!r}"
            )

    @property
    def overwrite_duplicates(self) -> bool:
        return self.duplicate_keys == "last"


DEFAULT_OPTIONS = ParseOptions()

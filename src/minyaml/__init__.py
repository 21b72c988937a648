"""minyaml — evaluator for a restricted, configuration-oriented YAML dialect."""

from .errors import (
    AmbiguousIndent,
    DuplicateKey,
    ErrorKind,
    MinYAMLError,
    UnclassifiableLine,
    UnterminatedBracket,
    UnterminatedQuote,
)
from .evaluator import evaluate, load, strip
from .options import ParseOptions
from .values import (
    Null,
    Value,
    VBool,
    VFloat,
    VInt,
    VMap,
    VNull,
    VSeq,
    VStr,
    to_python,
)

eval = evaluate

__all__ = [
    "evaluate",
    "eval",
    "load",
    "strip",
    "to_python",
    "ParseOptions",
    "Null",
    "Value",
    "VBool",
    "VFloat",
    "VInt",
    "VMap",
    "VNull",
    "VSeq",
    "VStr",
    "ErrorKind",
    "MinYAMLError",
    "AmbiguousIndent",
    "DuplicateKey",
    "UnclassifiableLine",
    "UnterminatedBracket",
    "UnterminatedQuote",
]

"""Evaluator: public entry points running the whole text-to-value pipeline."""

from __future__ import annotations

import logging
from typing import Any

from .block import parse_block
from .lines import preprocess
from .options import ParseOptions
from .values import Value, to_python

logger = logging.getLogger(__name__)


def strip(text: str) -> str:
    """Remove leading and trailing whitespace.  Idempotent."""
    return text.strip()


def evaluate(text: str, options: ParseOptions | None = None) -> Value:
    """Evaluate YAML *text* and return the document Value.

    Raises a :class:`~minyaml.errors.MinYAMLError` subclass pointing at the
    offending line when the text cannot be evaluated.
    """
    lines = preprocess(text)
    logger.debug("evaluating %d content line(s)", len(lines))
    return parse_block(lines, options)


def load(text: str, options: ParseOptions | None = None) -> Any:
    """Evaluate *text* and return plain Python objects (dict, list, ...)."""
    return to_python(evaluate(text, options))

"""Command-line entry point: ``minyaml FILE`` prints the evaluated document.

Also runnable as ``python -m minyaml``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import IO

from .errors import MinYAMLError
from .evaluator import evaluate
from .options import ParseOptions
from .values import Value, VMap, VSeq, VStr, to_python


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VStr):
        return json.dumps(value.value, ensure_ascii=False)
    if isinstance(value, VSeq):
        return "[" + ", ".join(_fmt_inline(v) for v in value.items) + "]"
    if isinstance(value, VMap):
        return "{" + ", ".join(f"{k}: {_fmt_inline(v)}" for k, v in value.entries.items()) + "}"
    return str(value)


def _fmt_inspect(value: Value, depth: int = 0) -> str:
    """Pretty-print a value, one entry per line, nesting by indentation."""
    pad = "  " * (depth + 1)

    if isinstance(value, VMap):
        if not value.entries:
            return "VMap {}"
        width = max(len(k) for k in value.entries)
        lines = ["VMap {"]
        for k, v in value.entries.items():
            lines.append(f"{pad}{k:<{width}}: {_fmt_inspect(v, depth + 1)}")
        lines.append("  " * depth + "}")
        return "\n".join(lines)

    if isinstance(value, VSeq):
        if not value.items:
            return "VSeq []"
        lines = ["VSeq ["]
        for i, v in enumerate(value.items, 1):
            lines.append(f"{pad}{i}: {_fmt_inspect(v, depth + 1)}")
        lines.append("  " * depth + "]")
        return "\n".join(lines)

    return _fmt_inline(value)


def _fmt_json(value: Value) -> str:
    return json.dumps(to_python(value), indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minyaml",
        description="Evaluate a restricted YAML document and print the result",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="YAML file to evaluate (default: read standard input)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the document as JSON instead of the inspect format",
    )
    parser.add_argument(
        "--strict-keys",
        action="store_true",
        help="Fail on duplicate mapping keys instead of keeping the last one",
    )
    parser.add_argument(
        "--empty-null",
        action="store_true",
        help="Evaluate an empty document to null instead of an empty mapping",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _read_source(path: str | None, stdin: IO[str]) -> str:
    if path is None or path == "-":
        return stdin.read()
    return Path(path).read_text(encoding="utf-8")


def main(argv: list[str] | None = None, stdin: IO[str] | None = None,
         dest: IO[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    dest = dest or sys.stdout

    if args.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(name)s] %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    options = ParseOptions(
        duplicate_keys="error" if args.strict_keys else "last",
        empty_document="null" if args.empty_null else "mapping",
    )

    try:
        text = _read_source(args.file, stdin)
    except OSError as exc:
        print(f"Error reading '{args.file}': {exc}", file=sys.stderr)
        return 2

    try:
        value = evaluate(text, options)
    except MinYAMLError as exc:
        print(f"{args.file or '<stdin>'}: {exc}", file=sys.stderr)
        return 1

    print(_fmt_json(value) if args.json else _fmt_inspect(value), file=dest)
    return 0


if __name__ == "__main__":
    sys.exit(main())

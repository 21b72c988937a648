"""Tests for CLI helpers and the ``minyaml`` entry point."""

import io
import json

import pytest

from minyaml.cli import _fmt_inline, _fmt_inspect, build_parser, main
from minyaml.values import Null, VBool, VFloat, VInt, VMap, VSeq, VStr


# ---------------------------------------------------------------------------
# _fmt_inline
# ---------------------------------------------------------------------------

def test_fmt_inline_str():
    assert _fmt_inline(VStr("hello")) == '"hello"'

def test_fmt_inline_scalars():
    assert _fmt_inline(VInt(42)) == "42"
    assert _fmt_inline(VFloat(3.14)) == "3.14"
    assert _fmt_inline(VBool(False)) == "false"
    assert _fmt_inline(Null) == "null"

def test_fmt_inline_collections():
    value = VMap({"a": VSeq([VInt(1), VStr("x")])})
    assert _fmt_inline(value) == '{a: [1, "x"]}'


# ---------------------------------------------------------------------------
# _fmt_inspect
# ---------------------------------------------------------------------------

def test_fmt_inspect_scalar():
    assert _fmt_inspect(VStr("hi")) == '"hi"'

def test_fmt_inspect_empty_collections():
    assert _fmt_inspect(VMap()) == "VMap {}"
    assert _fmt_inspect(VSeq()) == "VSeq []"

def test_fmt_inspect_nested():
    value = VMap({"boot": VBool(False), "modules": VSeq([VStr("panels")])})
    assert _fmt_inspect(value) == (
        "VMap {\n"
        "  boot   : false\n"
        "  modules: VSeq [\n"
        '    1: "panels"\n'
        "  ]\n"
        "}"
    )


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.file is None
    assert not args.json

def test_main_reads_stdin():
    out = io.StringIO()
    code = main([], stdin=io.StringIO("foo: bar\n"), dest=out)
    assert code == 0
    assert out.getvalue() == 'VMap {\n  foo: "bar"\n}\n'

def test_main_json(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("modules:\n  - panels\n  - token\nboot: off\n", encoding="utf-8")
    out = io.StringIO()
    assert main([str(path), "--json"], dest=out) == 0
    assert json.loads(out.getvalue()) == {"modules": ["panels", "token"], "boot": False}

def test_main_empty_null(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("# nothing\n", encoding="utf-8")
    out = io.StringIO()
    assert main([str(path), "--json", "--empty-null"], dest=out) == 0
    assert out.getvalue() == "null\n"

def test_main_strict_keys(capsys):
    code = main(["--strict-keys"], stdin=io.StringIO("a: 1\na: 2\n"), dest=io.StringIO())
    assert code == 1
    assert "duplicate key 'a'" in capsys.readouterr().err

def test_main_parse_error(capsys):
    code = main([], stdin=io.StringIO('foo: "bar\n'), dest=io.StringIO())
    assert code == 1
    err = capsys.readouterr().err
    assert err.startswith("<stdin>: unterminated double quote")
    assert "line 1" in err

def test_main_missing_file(tmp_path, capsys):
    code = main([str(tmp_path / "missing.yml")], dest=io.StringIO())
    assert code == 2
    assert "Error reading" in capsys.readouterr().err

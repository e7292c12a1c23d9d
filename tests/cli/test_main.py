# Copyright 2026 MiniLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the MiniLang CLI entry point."""

import json
import sys
from pathlib import Path

import pytest

from minilang.cli.main import main

VALID = 'program {\n    int x;\n    x = 1 + 2 * 3;\n    write(x, "done");\n}\n'


def _write_source(tmp_path: Path, content: str, name: str = "prog.ml") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    """Run main() with the given arguments and return its exit code."""
    monkeypatch.setattr(sys, "argv", ["minilang", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


# ###############
# Public Interface
# ###############


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- tokens tests --------


def test_tokens_prints_stream(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """tokens prints one (kind,payload) line per token and a closing message."""
    path = _write_source(tmp_path, "program{ int a; }")
    assert _run(monkeypatch, "tokens", str(path)) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "(keyword,14);\tprogram",
        "(delimiter,14);\t{",
        "(keyword,1);\tint",
        "(identifier,0);\ta",
        "(delimiter,1);\t;",
        "(delimiter,15);\t}",
        "(final,0);\tend of input",
        "End of program.",
    ]


def test_tokens_does_not_check_syntax(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    """tokens succeeds on lexically valid but syntactically invalid input."""
    path = _write_source(tmp_path, "} } int")
    assert _run(monkeypatch, "tokens", str(path)) == 0
    assert "End of program." in capsys.readouterr().out


def test_tokens_lexical_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """tokens exits with 1 and reports the position of a lexical error."""
    path = _write_source(tmp_path, "int a;\n@ open")
    assert _run(monkeypatch, "tokens", str(path)) == 1
    captured = capsys.readouterr()
    assert "(keyword,1);\tint" in captured.out
    assert "Unterminated comment" in captured.err
    assert "Line 2, column 1" in captured.err


# -------- check tests --------


def test_check_valid_program(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """check exits with 0 and prints OK for a valid program."""
    path = _write_source(tmp_path, VALID)
    assert _run(monkeypatch, "check", str(path)) == 0
    assert f"OK: {path}" in capsys.readouterr().out


def test_check_invalid_program(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """check exits with 1 and prints the diagnostic on stderr."""
    path = _write_source(tmp_path, "program{ int x x=1; }")
    assert _run(monkeypatch, "check", str(path)) == 1
    err = capsys.readouterr().err
    assert "Line 1, column 16" in err
    assert "Expected" in err


def test_check_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """check exits with 1 when the source file does not exist."""
    assert _run(monkeypatch, "check", str(tmp_path / "missing.ml")) == 1
    assert "Cannot open source file" in capsys.readouterr().err


def test_check_uses_config_next_to_source(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """A .minilang.yaml beside the source file is picked up automatically."""
    path = _write_source(tmp_path, VALID)
    assert _run(monkeypatch, "check", str(path)) == 0
    (tmp_path / ".minilang.yaml").write_text("legacy-constants: true\n", encoding="utf-8")
    assert _run(monkeypatch, "check", str(path)) == 1


def test_check_explicit_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """--config selects a configuration file explicitly."""
    path = _write_source(tmp_path, VALID)
    config = tmp_path / "legacy.yaml"
    config.write_text("legacy-constants: true\n", encoding="utf-8")
    assert _run(monkeypatch, "check", str(path), "--config", str(config)) == 1


def test_check_invalid_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """An invalid configuration file makes the command fail."""
    path = _write_source(tmp_path, VALID)
    config = tmp_path / "bad.yaml"
    config.write_text("unknown-key: 1\n", encoding="utf-8")
    assert _run(monkeypatch, "check", str(path), "--config", str(config)) == 1
    assert "unknown configuration key" in capsys.readouterr().err


def test_check_verbose(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """--verbose does not change the verdict."""
    path = _write_source(tmp_path, VALID)
    assert _run(monkeypatch, "--verbose", "check", str(path)) == 0


def test_verbose_logs_config_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """--verbose reports which configuration file was picked up."""
    path = _write_source(tmp_path, VALID)
    (tmp_path / ".minilang.yaml").write_text("log-level: error\n", encoding="utf-8")
    assert _run(monkeypatch, "--verbose", "check", str(path)) == 0
    assert "Using configuration file" in caplog.text
    assert ".minilang.yaml" in caplog.text


# -------- tables tests --------


def test_tables_prints_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """tables prints the identifier and string tables as JSON."""
    path = _write_source(tmp_path, 'a b a "s" "s"')
    assert _run(monkeypatch, "tables", str(path)) == 0
    data = json.loads(capsys.readouterr().out)
    assert [entry["name"] for entry in data["identifiers"]] == ["a", "b"]
    assert [entry["id"] for entry in data["identifiers"]] == [0, 1]
    assert data["strings"] == ["s", "s"]


def test_tables_lexical_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    """tables exits with 1 on a lexical error."""
    path = _write_source(tmp_path, 'a "open')
    assert _run(monkeypatch, "tables", str(path)) == 1
    assert "Unterminated string literal" in capsys.readouterr().err

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the toolroute command-line interface."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from toolroute.cli.app import app

runner = CliRunner()


def _write(path: Path, payload: dict[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")


def _python_tool(name: str, code: str) -> dict[str, object]:
    return {"command": sys.executable, "args": ["-c", code, "{filepath}"], "enabled": True, "description": name}


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "cfg"
    _write(
        directory / "formatters.jsonc",
        {
            "formatters": {
                "text": {"primary": "upper", "tools": {"upper": _python_tool("upper", "import sys")}},
            },
            "extensions": {".txt": "text"},
        },
    )
    _write(
        directory / "validators.jsonc",
        {
            "validators": {
                "text": {
                    "primary": "nonempty",
                    "validators": {
                        "nonempty": _python_tool(
                            "nonempty",
                            "import sys; d = open(sys.argv[1]).read(); "
                            "print(sys.argv[1] + ':1: empty file') if not d.strip() else None; "
                            "sys.exit(0 if d.strip() else 1)",
                        )
                    },
                }
            },
            "extensions": {".txt": "text"},
        },
    )
    return directory


def _invoke(config_dir: Path, *args: str):
    return runner.invoke(app, ["--config-dir", str(config_dir), "--no-emoji", "--no-color", *args])


def test_format_reports_success(config_dir: Path, tmp_path: Path) -> None:
    target = tmp_path / "note.txt"
    target.write_text("hello\n", encoding="utf-8")

    result = _invoke(config_dir, "format", str(target))

    assert result.exit_code == 0
    assert "Formatted with upper" in result.stdout


def test_validate_strict_fails_on_findings(config_dir: Path, tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"
    target.write_text("", encoding="utf-8")

    lenient = _invoke(config_dir, "validate", str(target))
    strict = _invoke(config_dir, "validate", str(target), "--strict")

    assert lenient.exit_code == 0
    assert "Validation warnings (text / nonempty)" in lenient.stdout
    assert "empty file" in lenient.stdout
    assert strict.exit_code == 1


def test_check_runs_both_steps(config_dir: Path, tmp_path: Path) -> None:
    target = tmp_path / "note.txt"
    target.write_text("content\n", encoding="utf-8")

    result = _invoke(config_dir, "check", str(target), "--strict")

    assert result.exit_code == 0
    assert "Formatted with upper" in result.stdout
    assert "Validation warnings" not in result.stdout


def test_unknown_extension_is_silent(config_dir: Path, tmp_path: Path) -> None:
    target = tmp_path / "data.xyz123"
    target.write_text("x", encoding="utf-8")

    result = _invoke(config_dir, "check", str(target), "--strict")

    assert result.exit_code == 0
    assert result.stdout == ""


def test_which_shows_config_and_fallback(config_dir: Path) -> None:
    txt = _invoke(config_dir, "which", "txt")
    go = _invoke(config_dir, "which", ".go")

    assert txt.exit_code == 0
    assert "formatter: text -> upper" in txt.stdout
    assert "validator: text -> nonempty" in txt.stdout
    assert "formatter: go -> gofmt" in go.stdout
    assert "validator: go -> go_vet" in go.stdout


def test_directory_target_rejected(config_dir: Path, tmp_path: Path) -> None:
    result = _invoke(config_dir, "format", str(tmp_path))

    assert result.exit_code == 2


def test_hook_without_file_path_is_noop(config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FILE_PATH", raising=False)

    result = _invoke(config_dir, "hook")

    assert result.exit_code == 0
    assert result.stdout == ""


def test_hook_never_fails_caller(config_dir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    target = tmp_path / "empty.txt"
    target.write_text("", encoding="utf-8")
    monkeypatch.setenv("FILE_PATH", str(target))

    result = _invoke(config_dir, "hook")

    assert result.exit_code == 0
    assert "Formatted with upper" in result.stdout
    assert "empty file" in result.stdout


def test_format_fail_on_error_sets_exit_code(tmp_path: Path) -> None:
    directory = tmp_path / "strict-cfg"
    _write(
        directory / "formatters.jsonc",
        {
            "formatters": {"text": {"primary": "bad", "tools": {"bad": _python_tool("bad", "raise SystemExit(3)")}}},
            "extensions": {".txt": "text"},
            "config": {"fail_on_error": True},
        },
    )
    target = tmp_path / "note.txt"
    target.write_text("x", encoding="utf-8")

    result = _invoke(directory, "format", str(target))

    assert result.exit_code == 1
    assert "bad:" in result.stdout

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Behavioural tests for :mod:`toolroute.executor` and the subprocess wrapper."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess

import pytest

from toolroute.command import ToolCommand
from toolroute.executor import ToolExecutionError, execute, filter_for_file, parse_validator_output
from toolroute.process_utils import run_command


def _command(*args: str, cwd: Path | None = None) -> ToolCommand:
    return ToolCommand(tool_name="fake", executable="fake", args=args, cwd=cwd)


def test_execute_success(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def runner(cmd: Sequence[str], *, cwd=None, timeout=None, **_kwargs) -> CompletedProcess[str]:
        seen.update(cmd=tuple(cmd), cwd=cwd, timeout=timeout)
        return CompletedProcess(cmd, returncode=0, stdout="", stderr=None)

    monkeypatch.setattr("toolroute.executor.run_command", runner)

    outcome = execute(_command("-w", "/tmp/a.go", cwd=Path("/tmp")), timeout=5.0)

    assert outcome.succeeded
    assert outcome.error() is None
    assert seen == {"cmd": ("fake", "-w", "/tmp/a.go"), "cwd": Path("/tmp"), "timeout": 5.0}


def test_execute_nonzero_exit_records_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def runner(cmd: Sequence[str], **_kwargs) -> CompletedProcess[str]:
        return CompletedProcess(cmd, returncode=2, stdout="bad things\n", stderr=None)

    monkeypatch.setattr("toolroute.executor.run_command", runner)

    outcome = execute(_command())

    assert outcome.started
    assert not outcome.succeeded
    error = outcome.error()
    assert isinstance(error, ToolExecutionError)
    assert error.returncode == 2
    assert "bad things" in str(error)


def test_execute_start_failure_is_captured(monkeypatch: pytest.MonkeyPatch) -> None:
    def runner(cmd: Sequence[str], **_kwargs) -> CompletedProcess[str]:
        raise FileNotFoundError("Executable 'fake' was not found on PATH")

    monkeypatch.setattr("toolroute.executor.run_command", runner)

    outcome = execute(_command())

    assert not outcome.started
    assert outcome.returncode is None
    assert isinstance(outcome.error(), FileNotFoundError)


def test_execute_missing_executable_for_real() -> None:
    command = ToolCommand(tool_name="x", executable="definitely-not-a-real-tool-xyz", args=())

    outcome = execute(command)

    assert not outcome.started
    assert "definitely-not-a-real-tool-xyz" in str(outcome.error())


def test_run_command_merges_streams() -> None:
    script = "import sys; print('out'); sys.stdout.flush(); print('err', file=sys.stderr)"

    completed = run_command([sys.executable, "-c", script])

    assert completed.returncode == 0
    assert "out" in completed.stdout
    assert "err" in completed.stdout


def test_run_command_timeout_reports_exit_124() -> None:
    completed = run_command([sys.executable, "-c", "import time; time.sleep(5)"], timeout=0.2)

    assert completed.returncode == 124
    assert "timed out" in completed.stdout


def test_run_command_rejects_empty_args() -> None:
    with pytest.raises(ValueError):
        run_command([])


def test_parse_validator_output_trims_and_drops_blanks() -> None:
    output = "\n  main.go:10:2: unused variable  \n\n"

    assert parse_validator_output(output, "python") == ["main.go:10:2: unused variable"]


def test_parse_validator_output_drops_go_banner() -> None:
    output = "# example.com/pkg\nmain.go:10:2: unused variable\n"

    assert parse_validator_output(output, "go") == ["main.go:10:2: unused variable"]
    assert parse_validator_output(output, "shell") == ["# example.com/pkg", "main.go:10:2: unused variable"]


def test_filter_for_file_keeps_matching_lines() -> None:
    warnings = ["src/a.rs:1: oops", "src/b.rs:2: other"]

    assert filter_for_file(warnings, "/w/src/a.rs") == ["src/a.rs:1: oops"]
    assert filter_for_file(warnings, "/w/src/c.rs") == warnings


def test_execute_rejected_arguments_are_captured(monkeypatch: pytest.MonkeyPatch) -> None:
    def runner(cmd: Sequence[str], **_kwargs) -> CompletedProcess[str]:
        raise ValueError("embedded null byte")

    monkeypatch.setattr("toolroute.executor.run_command", runner)

    outcome = execute(_command("bad\x00arg"))

    assert not outcome.started
    assert not outcome.succeeded
    assert isinstance(outcome.error(), ValueError)

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run tool commands synchronously and normalise what they report."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .command import ToolCommand
from .constants import OUTPUT_NOISE_PREFIXES
from .process_utils import run_command

LOGGER = logging.getLogger(__name__)


class ToolExecutionError(RuntimeError):
    """Raised (or recorded) when a tool exits with a non-zero status."""

    def __init__(self, command: Sequence[str], returncode: int, output: str) -> None:
        detail = output.strip() or "<no output>"
        super().__init__(f"Command '{command[0]}' exited with status {returncode}. output: {detail}")
        self.command = tuple(command)
        self.returncode = returncode
        self.output = output


@dataclass(frozen=True, slots=True)
class ExecutionOutcome:
    """Raw result of running a tool: exit status, combined output, start failure."""

    command: ToolCommand
    returncode: int | None
    output: str = ""
    start_error: Exception | None = None

    @property
    def started(self) -> bool:
        return self.start_error is None

    @property
    def succeeded(self) -> bool:
        return self.started and self.returncode == 0

    def error(self) -> Exception | None:
        """Return the exception describing a failed run, ``None`` on success."""

        if self.start_error is not None:
            return self.start_error
        if self.returncode != 0:
            returncode = self.returncode if self.returncode is not None else -1
            return ToolExecutionError(self.command.argv, returncode, self.output)
        return None


def execute(command: ToolCommand, *, timeout: float | None = None) -> ExecutionOutcome:
    """Run ``command`` to completion and capture its combined output.

    The call blocks until the process exits or ``timeout`` elapses. A process
    that cannot be started, including one whose arguments or working directory
    the OS rejects, is recorded on the outcome rather than raised.

    Args:
        command: Invocation produced by :func:`toolroute.command.build_command`.
        timeout: Optional limit in seconds; ``None`` waits indefinitely.

    Returns:
        ExecutionOutcome: Exit status and captured text.
    """

    LOGGER.debug("running %s (cwd=%s)", command.display(), command.cwd)
    try:
        completed = run_command(command.argv, cwd=command.cwd, timeout=timeout)
    except (OSError, ValueError) as exc:
        LOGGER.debug("could not start %s: %s", command.executable, exc)
        return ExecutionOutcome(command=command, returncode=None, start_error=exc)
    output = completed.stdout or ""
    if completed.stderr:
        output = f"{output}{completed.stderr}"
    return ExecutionOutcome(command=command, returncode=completed.returncode, output=output)


def parse_validator_output(output: str, language: str) -> list[str]:
    """Split tool output into warning lines.

    Lines are trimmed, blanks dropped, and language-specific banner lines (for
    example Go's ``# package`` header) discarded.
    """

    noise = OUTPUT_NOISE_PREFIXES.get(language, ())
    warnings: list[str] = []
    for raw in output.splitlines():
        line = raw.strip()
        if not line:
            continue
        if noise and line.startswith(noise):
            continue
        warnings.append(line)
    return warnings


def filter_for_file(warnings: Sequence[str], file_path: Path | str) -> list[str]:
    """Keep warnings naming ``file_path``; return all of them when none do."""

    name = Path(file_path).name
    if not name:
        return list(warnings)
    matching = [line for line in warnings if name in line]
    return matching or list(warnings)


__all__ = [
    "ExecutionOutcome",
    "ToolExecutionError",
    "execute",
    "filter_for_file",
    "parse_validator_output",
]

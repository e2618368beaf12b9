# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn a resolved tool definition into a concrete process invocation."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from .config.models import ToolDefinition, WorkingDirPolicy
from .constants import PATH_PLACEHOLDER, PROJECT_MARKERS


@dataclass(frozen=True, slots=True)
class ToolCommand:
    """Executable, substituted arguments, and optional working directory."""

    tool_name: str
    executable: str
    args: tuple[str, ...]
    cwd: Path | None = None

    @property
    def argv(self) -> tuple[str, ...]:
        """Return the full argument vector starting with the executable."""

        return (self.executable, *self.args)

    def display(self) -> str:
        return " ".join(self.argv)


def substitute_path(args: Iterable[str], file_path: str) -> tuple[str, ...]:
    """Replace every placeholder occurrence in every argument with ``file_path``."""

    return tuple(arg.replace(PATH_PLACEHOLDER, file_path) for arg in args)


def find_project_root(
    file_path: Path,
    *,
    home: Path | None = None,
    markers: Sequence[str] = PROJECT_MARKERS,
) -> Path:
    """Return the nearest ancestor of ``file_path`` holding a project marker.

    The walk starts at the file's directory and climbs one level at a time. It
    stops before it would inspect the home directory or the filesystem root; in
    that case the file's own directory is returned.

    Args:
        file_path: File whose project should be located.
        home: Home directory bounding the search. Defaults to ``Path.home()``.
        markers: File names identifying a project directory.

    Returns:
        Path: Directory to use as the working directory for project-wide tools.
    """

    start = file_path.parent
    boundary = home if home is not None else _safe_home()
    directory = start
    while True:
        if any((directory / marker).exists() for marker in markers):
            return directory
        parent = directory.parent
        if parent == directory or parent == boundary or parent == Path(parent.anchor):
            break
        directory = parent
    return start


def build_command(tool: ToolDefinition, file_path: Path | str, *, home: Path | None = None) -> ToolCommand:
    """Build the invocation for ``tool`` acting on ``file_path``.

    Args:
        tool: Resolved tool definition.
        file_path: Absolute path of the file the tool should act on.
        home: Optional home directory bounding project-root discovery.

    Returns:
        ToolCommand: Invocation with placeholders substituted and cwd applied.
    """

    path = Path(file_path)
    args = substitute_path(tool.args, str(file_path))
    policy = tool.working_dir_policy
    cwd: Path | None = None
    if policy is WorkingDirPolicy.PROJECT_ROOT:
        cwd = find_project_root(path, home=home)
    elif policy is WorkingDirPolicy.EXPLICIT:
        cwd = tool.explicit_working_dir
    return ToolCommand(tool_name=tool.name, executable=tool.command, args=args, cwd=cwd)


def _safe_home() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


__all__ = ["ToolCommand", "build_command", "find_project_root", "substitute_path"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from toolroute.command import ToolCommand
from toolroute.console import get_console_manager
from toolroute.dispatch import default_format_dispatcher, default_validation_dispatcher
from toolroute.executor import ExecutionOutcome


@dataclass
class FakeExecutor:
    """Stand-in for :func:`toolroute.executor.execute` keyed by tool name."""

    outcomes: Mapping[str, tuple[int | None, str]] = field(default_factory=dict)
    calls: list[tuple[ToolCommand, float | None]] = field(default_factory=list)

    def __call__(self, command: ToolCommand, *, timeout: float | None = None) -> ExecutionOutcome:
        self.calls.append((command, timeout))
        returncode, output = self.outcomes.get(command.tool_name, (0, ""))
        if returncode is None:
            return ExecutionOutcome(
                command=command,
                returncode=None,
                start_error=FileNotFoundError(f"Executable '{command.executable}' was not found on PATH"),
            )
        return ExecutionOutcome(command=command, returncode=returncode, output=output)

    @property
    def commands(self) -> list[ToolCommand]:
        return [command for command, _ in self.calls]


@pytest.fixture
def fake_executor() -> Callable[..., FakeExecutor]:
    """Return a factory building :class:`FakeExecutor` instances."""

    def factory(outcomes: Mapping[str, tuple[int | None, str]] | None = None) -> FakeExecutor:
        return FakeExecutor(outcomes=dict(outcomes or {}))

    return factory


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a JSONC config document under ``tmp_path``."""

    def writer(payload: Mapping[str, object] | str, name: str = "config.jsonc") -> Path:
        path = tmp_path / name
        text = payload if isinstance(payload, str) else json.dumps(payload, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return writer


@pytest.fixture(autouse=True)
def _isolate_process_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point default config lookups at an empty directory and reset cached singletons."""

    monkeypatch.setenv("TOOLROUTE_CONFIG_DIR", str(tmp_path / "no-config"))
    default_format_dispatcher.cache_clear()
    default_validation_dispatcher.cache_clear()
    get_console_manager().clear()
    yield
    default_format_dispatcher.cache_clear()
    default_validation_dispatcher.cache_clear()
    get_console_manager().clear()

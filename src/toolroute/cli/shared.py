# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared state and helpers for CLI commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import typer

from ..config.loader import default_config_dir
from ..constants import FORMATTERS_CONFIG_NAME, VALIDATORS_CONFIG_NAME
from ..dispatch import FormatDispatcher, ValidationDispatcher

FILE_PATH_ENV = "FILE_PATH"

_DEBUG_HANDLER = logging.StreamHandler()
_DEBUG_HANDLER.setFormatter(logging.Formatter("[debug] %(name)s: %(message)s"))


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLIOptions:
    """Global options collected by the root callback."""

    config_dir: Path
    emoji: bool = True
    color: bool | None = None
    debug: bool = False
    timeout: float | None = None
    _formatter: FormatDispatcher | None = field(default=None, repr=False)
    _validator: ValidationDispatcher | None = field(default=None, repr=False)

    @property
    def formatters_path(self) -> Path:
        return self.config_dir / FORMATTERS_CONFIG_NAME

    @property
    def validators_path(self) -> Path:
        return self.config_dir / VALIDATORS_CONFIG_NAME

    def formatter(self) -> FormatDispatcher:
        """Return the formatter dispatcher, loading its config on first use."""

        if self._formatter is None:
            self._formatter = FormatDispatcher.from_path(self.formatters_path, timeout=self.timeout)
        return self._formatter

    def validator(self) -> ValidationDispatcher:
        """Return the validator dispatcher, loading its config on first use."""

        if self._validator is None:
            self._validator = ValidationDispatcher.from_path(self.validators_path, timeout=self.timeout)
        return self._validator


def build_options(
    *,
    config_dir: Path | None,
    emoji: bool,
    color: bool | None,
    debug: bool,
    timeout: float | None,
) -> CLIOptions:
    """Normalise root callback arguments into :class:`CLIOptions`."""

    if timeout is not None and timeout <= 0:
        raise typer.BadParameter("timeout must be positive", param_hint="--timeout")
    configure_logging(debug=debug)
    return CLIOptions(
        config_dir=(config_dir.expanduser() if config_dir is not None else default_config_dir()),
        emoji=emoji,
        color=color,
        debug=debug,
        timeout=timeout,
    )


def configure_logging(*, debug: bool) -> None:
    """Route library debug records to stderr when ``debug`` is requested."""

    logger = logging.getLogger("toolroute")
    if not debug:
        logger.setLevel(logging.WARNING)
        return
    logger.setLevel(logging.DEBUG)
    if _DEBUG_HANDLER not in logger.handlers:
        logger.addHandler(_DEBUG_HANDLER)


def resolve_target(path: Path) -> Path:
    """Return ``path`` as an absolute path, rejecting directories."""

    target = path.expanduser().absolute()
    if target.is_dir():
        raise CLIError(f"{target} is a directory; expected a file", exit_code=2)
    return target


__all__ = [
    "CLIError",
    "CLIOptions",
    "FILE_PATH_ENV",
    "build_options",
    "configure_logging",
    "resolve_target",
]

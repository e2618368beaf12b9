# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Format and validate single files: resolve, build, execute, normalise."""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path

from .command import build_command
from .config.loader import default_formatters_path, default_validators_path, load_config
from .config.models import DispatchConfig, DispatchSettings, ToolDefinition
from .constants import FALLBACK_BEHAVIOR_TRY_ALTERNATIVES
from .executor import ExecutionOutcome, execute, filter_for_file, parse_validator_output
from .fallbacks import FORMATTER_FALLBACKS, VALIDATOR_FALLBACKS, FallbackTable
from .resolver import Resolver
from .results import FormatResult, ValidationResult

LOGGER = logging.getLogger(__name__)

Executor = Callable[..., ExecutionOutcome]


def _extension_for(file_path: Path | str, extension: str | None) -> str:
    if extension is not None:
        return extension
    return Path(file_path).suffix


class _Dispatcher:
    """Shared wiring: configuration, resolver, timeout, and executor."""

    def __init__(
        self,
        config: DispatchConfig | None,
        *,
        fallback: FallbackTable,
        timeout: float | None = None,
        home: Path | None = None,
        executor: Executor = execute,
    ) -> None:
        self._config = config
        self._resolver = Resolver(config, fallback)
        self._timeout = timeout
        self._home = home
        self._execute = executor

    @property
    def config(self) -> DispatchConfig | None:
        return self._config

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    @property
    def settings(self) -> DispatchSettings:
        """Return configured settings, or defaults when no configuration loaded."""

        return self._config.settings if self._config is not None else DispatchSettings()

    @property
    def timeout(self) -> float | None:
        """Return the explicit timeout, falling back to ``timeout_seconds`` from config."""

        return self._timeout if self._timeout is not None else self.settings.timeout

    def language_for(self, extension: str) -> str:
        return self._resolver.resolve_language(extension)

    def primary_tool(self, language: str) -> str:
        return self._resolver.primary_tool_name(language)

    def _run(self, tool: ToolDefinition, file_path: Path | str) -> ExecutionOutcome:
        command = build_command(tool, file_path, home=self._home)
        return self._execute(command, timeout=self.timeout)


class FormatDispatcher(_Dispatcher):
    """Route files to their language's formatter."""

    def __init__(
        self,
        config: DispatchConfig | None = None,
        *,
        fallback: FallbackTable = FORMATTER_FALLBACKS,
        timeout: float | None = None,
        home: Path | None = None,
        executor: Executor = execute,
    ) -> None:
        super().__init__(config, fallback=fallback, timeout=timeout, home=home, executor=executor)

    @classmethod
    def from_path(
        cls,
        path: Path,
        *,
        timeout: float | None = None,
        home: Path | None = None,
        executor: Executor = execute,
    ) -> FormatDispatcher:
        """Build a dispatcher from the document at ``path``; missing files mean fallbacks only."""

        return cls(load_config(path), timeout=timeout, home=home, executor=executor)

    def format_file(self, file_path: Path | str, extension: str | None = None) -> FormatResult:
        """Format ``file_path`` in place with its language's primary formatter.

        Args:
            file_path: Absolute path of the file to format.
            extension: Extension including its leading dot; derived from the
                path when omitted.

        Returns:
            FormatResult: Always a result. Unknown languages yield an unformatted
            result without an error.
        """

        language = self.language_for(_extension_for(file_path, extension))
        if not language:
            return FormatResult()
        resolution = self._resolver.resolve(language)
        if resolution is None:
            return FormatResult()

        candidates = [resolution.tool]
        if self.settings.fallback_behavior == FALLBACK_BEHAVIOR_TRY_ALTERNATIVES:
            candidates.extend(self._resolver.alternatives(language, exclude=resolution.tool.name))

        result = FormatResult()
        for tool in candidates:
            outcome = self._run(tool, file_path)
            if outcome.succeeded:
                return FormatResult(formatted=True, formatter=tool.name)
            LOGGER.debug("formatter %s failed on %s", tool.name, file_path)
            result = FormatResult(formatted=False, formatter=tool.name, error=outcome.error())
        return result


class ValidationDispatcher(_Dispatcher):
    """Route files to their language's validator."""

    def __init__(
        self,
        config: DispatchConfig | None = None,
        *,
        fallback: FallbackTable = VALIDATOR_FALLBACKS,
        timeout: float | None = None,
        home: Path | None = None,
        executor: Executor = execute,
    ) -> None:
        super().__init__(config, fallback=fallback, timeout=timeout, home=home, executor=executor)

    @classmethod
    def from_path(
        cls,
        path: Path,
        *,
        timeout: float | None = None,
        home: Path | None = None,
        executor: Executor = execute,
    ) -> ValidationDispatcher:
        """Build a dispatcher from the document at ``path``; missing files mean fallbacks only."""

        return cls(load_config(path), timeout=timeout, home=home, executor=executor)

    def validate_file(self, file_path: Path | str, extension: str | None = None) -> ValidationResult:
        """Check ``file_path`` with its language's primary validator.

        With ``run_all_validators`` set, every enabled validator for the language
        runs (primary first) and their warnings are concatenated.

        Args:
            file_path: Absolute path of the file to validate.
            extension: Extension including its leading dot; derived from the
                path when omitted.

        Returns:
            ValidationResult: Always a result. Files without an applicable
            validator are valid with no warnings.
        """

        path_text = str(file_path)
        language = self.language_for(_extension_for(file_path, extension))
        if not language:
            return ValidationResult(file_path=path_text)
        resolution = self._resolver.resolve(language)
        if resolution is None:
            return ValidationResult(language=language, file_path=path_text)

        tools = [resolution.tool]
        if self.settings.run_all_validators:
            tools.extend(self._resolver.alternatives(language, exclude=resolution.tool.name))

        valid = True
        warnings: list[str] = []
        for tool in tools:
            outcome = self._run(tool, file_path)
            if outcome.succeeded:
                continue
            valid = False
            warnings.extend(self._warnings_from(outcome, language, file_path))

        return ValidationResult(
            valid=valid,
            warnings=tuple(warnings),
            validator=", ".join(tool.name for tool in tools),
            language=language,
            file_path=path_text,
        )

    def _warnings_from(self, outcome: ExecutionOutcome, language: str, file_path: Path | str) -> list[str]:
        if not outcome.started:
            return [str(outcome.start_error)]
        lines = parse_validator_output(outcome.output, language)
        if lines and self.settings.filter_by_file:
            lines = filter_for_file(lines, file_path)
        if not lines:
            return [str(outcome.error())]
        return lines


@lru_cache(maxsize=1)
def default_format_dispatcher() -> FormatDispatcher:
    """Return the process-wide formatter dispatcher, loading configuration once."""

    return FormatDispatcher.from_path(default_formatters_path())


@lru_cache(maxsize=1)
def default_validation_dispatcher() -> ValidationDispatcher:
    """Return the process-wide validator dispatcher, loading configuration once."""

    return ValidationDispatcher.from_path(default_validators_path())


def format_file(file_path: Path | str, extension: str | None = None) -> FormatResult:
    return default_format_dispatcher().format_file(file_path, extension)


def validate_file(file_path: Path | str, extension: str | None = None) -> ValidationResult:
    return default_validation_dispatcher().validate_file(file_path, extension)


def get_formatter_language(extension: str) -> str:
    return default_format_dispatcher().language_for(extension)


def get_validator_language(extension: str) -> str:
    return default_validation_dispatcher().language_for(extension)


def get_language_for_extension(extension: str) -> str:
    """Return the language for ``extension`` as seen by validators, then formatters."""

    return get_validator_language(extension) or get_formatter_language(extension)


def get_primary_formatter(language: str) -> str:
    """Return the name of the formatter selected for ``language``, or ``""``."""

    return default_format_dispatcher().primary_tool(language)


def get_primary_validator(language: str) -> str:
    """Return the name of the validator selected for ``language``, or ``""``."""

    return default_validation_dispatcher().primary_tool(language)


__all__ = [
    "FormatDispatcher",
    "ValidationDispatcher",
    "default_format_dispatcher",
    "default_validation_dispatcher",
    "format_file",
    "get_formatter_language",
    "get_language_for_extension",
    "get_primary_formatter",
    "get_primary_validator",
    "get_validator_language",
    "validate_file",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Immutable outcomes of formatting and validation, with console reporting."""

from __future__ import annotations

from dataclasses import dataclass, field

from .logging import detail, ok, warn


@dataclass(frozen=True, slots=True)
class FormatResult:
    """Outcome of a formatting attempt.

    ``formatted`` is ``False`` with ``error`` set to ``None`` when no formatter
    applies to the file; that is a skip, not a failure.
    """

    formatted: bool = False
    formatter: str = ""
    error: Exception | None = None

    @property
    def skipped(self) -> bool:
        return not self.formatted and self.error is None and not self.formatter

    def report(self, *, use_emoji: bool = True, use_color: bool | None = None) -> None:
        """Print a success line naming the formatter; print nothing otherwise."""

        if not self.formatted:
            return
        ok(f"Formatted with {self.formatter}", use_emoji=use_emoji, use_color=use_color)


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of a validation attempt.

    Files with no applicable validator are reported as valid: a missing checker
    is not a finding against the file.
    """

    valid: bool = True
    warnings: tuple[str, ...] = field(default_factory=tuple)
    validator: str = ""
    language: str = ""
    file_path: str = ""

    @property
    def header(self) -> str:
        if self.language and self.validator:
            return f"Validation warnings ({self.language} / {self.validator})"
        return "Validation warnings"

    def report(self, *, use_emoji: bool = True, use_color: bool | None = None) -> None:
        """Print a warning header and one indented line per warning when invalid."""

        if self.valid:
            return
        warn(self.header, use_emoji=use_emoji, use_color=use_color)
        for line in self.warnings:
            detail(line.strip(), use_color=use_color)


__all__ = ["FormatResult", "ValidationResult"]

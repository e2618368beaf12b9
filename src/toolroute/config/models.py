# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typed models describing formatter and validator dispatch configuration."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from pathlib import Path

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..constants import FALLBACK_BEHAVIOR_SKIP, PROJECT_ROOT_DIRECTIVE


class WorkingDirPolicy(str, Enum):
    """Describe where an external tool should be launched from."""

    NONE = "none"
    PROJECT_ROOT = "project_root"
    EXPLICIT = "explicit"


class ToolDefinition(BaseModel):
    """One external tool able to act on a single file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    command: str = ""
    args: tuple[str, ...] = Field(default_factory=tuple)
    enabled: bool = False
    type: str = ""
    severity: str = ""
    description: str = ""
    check_availability: str = ""
    working_dir: str = ""
    note: str = ""

    @field_validator("args", mode="before")
    @classmethod
    def _coerce_args(cls, value: object) -> tuple[str, ...]:
        """Return command arguments as a tuple of strings.

        Raises:
            ValueError: If ``value`` is neither ``None`` nor string data.
        """

        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (list, tuple)):
            return tuple(str(item) for item in value)
        raise ValueError("tool args must be a sequence of strings")

    @property
    def working_dir_policy(self) -> WorkingDirPolicy:
        """Return how the tool's working directory is chosen."""

        if not self.working_dir:
            return WorkingDirPolicy.NONE
        if self.working_dir == PROJECT_ROOT_DIRECTIVE:
            return WorkingDirPolicy.PROJECT_ROOT
        return WorkingDirPolicy.EXPLICIT

    @property
    def explicit_working_dir(self) -> Path | None:
        """Return the configured directory when the policy is explicit."""

        if self.working_dir_policy is not WorkingDirPolicy.EXPLICIT:
            return None
        return Path(self.working_dir).expanduser()

    @property
    def usable(self) -> bool:
        """Return ``True`` when the tool is enabled and names an executable."""

        return self.enabled and bool(self.command)


class LanguageEntry(BaseModel):
    """Set of tools available for one language with a designated primary."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    primary: str = ""
    description: str = ""
    tools: dict[str, ToolDefinition] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("tools", "validators"),
    )

    @field_validator("tools", mode="before")
    @classmethod
    def _name_tools(cls, value: object) -> object:
        """Copy each mapping key into the tool payload's ``name`` field."""

        if not isinstance(value, Mapping):
            return value
        named: dict[str, object] = {}
        for key, payload in value.items():
            if isinstance(payload, Mapping):
                named[key] = {**payload, "name": key}
            elif isinstance(payload, ToolDefinition):
                named[key] = payload.model_copy(update={"name": key})
            else:
                named[key] = payload
        return named

    def primary_tool(self) -> ToolDefinition | None:
        """Return the tool named by ``primary`` when it exists."""

        if not self.primary:
            return None
        return self.tools.get(self.primary)

    def enabled_tools(self) -> Iterator[ToolDefinition]:
        """Yield enabled tools, primary first, then in declaration order."""

        primary = self.primary_tool()
        if primary is not None and primary.usable:
            yield primary
        for name, tool in self.tools.items():
            if name == self.primary or not tool.usable:
                continue
            yield tool


class DispatchMetadata(BaseModel):
    """Descriptive header of a configuration document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    description: str = ""
    version: str = ""
    last_updated: str = ""
    author: str = ""
    note: str = ""


class DispatchSettings(BaseModel):
    """Global behaviour flags shared by formatter and validator documents."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    fallback_behavior: str = FALLBACK_BEHAVIOR_SKIP
    fail_on_error: bool = False
    respect_project_configs: bool = False
    strictness: str = ""
    fail_on_missing_validator: bool = False
    run_all_validators: bool = False
    filter_by_file: bool = False
    timeout_seconds: int = 0

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def _coerce_timeout(cls, value: object) -> object:
        if value is None:
            return 0
        return value

    @property
    def timeout(self) -> float | None:
        """Return the per-tool timeout in seconds, or ``None`` when unbounded."""

        return float(self.timeout_seconds) if self.timeout_seconds > 0 else None


class DispatchConfig(BaseModel):
    """Top-level document mapping extensions to languages and languages to tools."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    metadata: DispatchMetadata = Field(default_factory=DispatchMetadata)
    languages: dict[str, LanguageEntry] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("formatters", "validators", "languages"),
    )
    extensions: dict[str, str] = Field(default_factory=dict)
    settings: DispatchSettings = Field(
        default_factory=DispatchSettings,
        validation_alias=AliasChoices("config", "settings"),
    )

    def language_for(self, extension: str) -> str | None:
        """Return the language mapped to ``extension`` when present."""

        return self.extensions.get(extension)

    def entry_for(self, language: str) -> LanguageEntry | None:
        """Return the :class:`LanguageEntry` for ``language`` when present."""

        return self.languages.get(language)


__all__ = [
    "DispatchConfig",
    "DispatchMetadata",
    "DispatchSettings",
    "LanguageEntry",
    "ToolDefinition",
    "WorkingDirPolicy",
]

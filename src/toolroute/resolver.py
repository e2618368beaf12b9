# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Two-tier lookup of languages and tools: configuration first, fallback table second."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from .config.models import DispatchConfig, ToolDefinition
from .fallbacks import EMPTY_FALLBACKS, FallbackTable

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class ResolutionSource(str, Enum):
    """Identify which tier produced a resolution."""

    CONFIG = "config"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class ToolResolution:
    """A resolved tool together with the tier that supplied it."""

    tool: ToolDefinition
    language: str
    source: ResolutionSource


LanguageLookup = Callable[[str], str | None]
ToolLookup = Callable[[str], ToolResolution | None]


class Resolver:
    """Resolve extensions to languages and languages to primary tools.

    Each lookup walks an ordered chain of functions and returns the first
    present answer. Configuration always sits ahead of the fallback table, so
    the fallback is consulted only when configuration is absent or cannot
    produce a usable answer for the specific extension or language.
    """

    def __init__(self, config: DispatchConfig | None, fallback: FallbackTable = EMPTY_FALLBACKS) -> None:
        self._config = config
        self._fallback = fallback
        self._language_chain: tuple[LanguageLookup, ...] = (
            self._language_from_config,
            self._language_from_fallback,
        )
        self._tool_chain: tuple[ToolLookup, ...] = (
            self._tool_from_config,
            self._tool_from_fallback,
        )

    @property
    def config(self) -> DispatchConfig | None:
        return self._config

    @property
    def fallback(self) -> FallbackTable:
        return self._fallback

    def resolve_language(self, extension: str) -> str:
        """Return the language mapped to ``extension``, or ``""`` when none is known.

        Args:
            extension: File extension including its leading dot.

        Returns:
            str: Language name, empty when no tier maps the extension.
        """

        language = _first_present(self._language_chain, extension)
        return language or ""

    def resolve(self, language: str) -> ToolResolution | None:
        """Return the primary tool for ``language`` along with its source tier."""

        if not language:
            return None
        resolution = _first_present(self._tool_chain, language)
        if resolution is None:
            LOGGER.debug("no tool available for language %s", language)
        return resolution

    def resolve_tool(self, language: str) -> ToolDefinition | None:
        """Return the primary :class:`ToolDefinition` for ``language`` when one is usable."""

        resolution = self.resolve(language)
        return resolution.tool if resolution is not None else None

    def primary_tool_name(self, language: str) -> str:
        """Return the name of the tool :meth:`resolve_tool` would select."""

        tool = self.resolve_tool(language)
        return tool.name if tool is not None else ""

    def alternatives(self, language: str, *, exclude: str = "") -> tuple[ToolDefinition, ...]:
        """Return other enabled configured tools for ``language`` in preference order.

        Args:
            language: Language whose configured tools are listed.
            exclude: Tool name to omit, normally the one already attempted.

        Returns:
            tuple[ToolDefinition, ...]: Enabled tools other than ``exclude``.
        """

        if self._config is None:
            return ()
        entry = self._config.entry_for(language)
        if entry is None:
            return ()
        return tuple(tool for tool in entry.enabled_tools() if tool.name != exclude)

    def _language_from_config(self, extension: str) -> str | None:
        if self._config is None:
            return None
        return self._config.language_for(extension)

    def _language_from_fallback(self, extension: str) -> str | None:
        return self._fallback.language_for(extension)

    def _tool_from_config(self, language: str) -> ToolResolution | None:
        if self._config is None:
            return None
        entry = self._config.entry_for(language)
        if entry is None:
            return None
        tool = entry.primary_tool()
        if tool is None:
            LOGGER.debug("primary %r for %s not configured; falling back", entry.primary, language)
            return None
        if not tool.usable:
            LOGGER.debug("primary %s for %s is disabled; falling back", tool.name, language)
            return None
        return ToolResolution(tool=tool, language=language, source=ResolutionSource.CONFIG)

    def _tool_from_fallback(self, language: str) -> ToolResolution | None:
        tool = self._fallback.tool_for(language)
        if tool is None or not tool.usable:
            return None
        return ToolResolution(tool=tool, language=language, source=ResolutionSource.FALLBACK)


def _first_present(chain: Sequence[Callable[[str], T | None]], key: str) -> T | None:
    for lookup in chain:
        value = lookup(key)
        if value:
            return value
    return None


__all__ = ["LanguageLookup", "ResolutionSource", "Resolver", "ToolLookup", "ToolResolution"]

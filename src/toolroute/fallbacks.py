# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in tool tables used whenever configuration cannot answer a lookup."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from .config.models import ToolDefinition
from .constants import PROJECT_ROOT_DIRECTIVE


@dataclass(frozen=True, slots=True)
class FallbackTable:
    """Extension and tool mappings compiled into the package."""

    extensions: Mapping[str, str] = field(default_factory=dict)
    tools: Mapping[str, ToolDefinition] = field(default_factory=dict)

    def language_for(self, extension: str) -> str | None:
        return self.extensions.get(extension)

    def tool_for(self, language: str) -> ToolDefinition | None:
        return self.tools.get(language)


def _tool(name: str, command: str, *args: str, kind: str = "", working_dir: str = "") -> ToolDefinition:
    return ToolDefinition(
        name=name,
        command=command,
        args=args,
        enabled=True,
        type=kind,
        working_dir=working_dir,
    )


_FORMATTER_EXTENSIONS: Final[dict[str, str]] = {
    ".rs": "rust",
    ".go": "go",
    ".py": "python",
    ".pyw": "python",
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "javascript",
    ".tsx": "javascript",
    ".mjs": "javascript",
    ".c": "c_cpp",
    ".h": "c_cpp",
    ".cc": "c_cpp",
    ".cpp": "c_cpp",
    ".cxx": "c_cpp",
    ".hpp": "c_cpp",
    ".rb": "ruby",
    ".java": "java",
    ".sh": "shell",
    ".bash": "shell",
}

_FORMATTER_TOOLS: Final[dict[str, ToolDefinition]] = {
    "rust": _tool("rustfmt", "rustfmt", "{filepath}"),
    "go": _tool("gofmt", "gofmt", "-w", "{filepath}"),
    "python": _tool("black", "black", "{filepath}"),
    "javascript": _tool("prettier", "npx", "prettier", "--write", "{filepath}"),
    "c_cpp": _tool("clang-format", "clang-format", "-i", "{filepath}"),
    "ruby": _tool("rubocop", "rubocop", "--auto-correct", "{filepath}"),
    "java": _tool("google-java-format", "google-java-format", "--replace", "{filepath}"),
    "shell": _tool("shfmt", "shfmt", "-w", "{filepath}"),
}

_VALIDATOR_EXTENSIONS: Final[dict[str, str]] = {
    ".go": "go",
    ".rs": "rust",
    ".py": "python",
    ".pyw": "python",
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "javascript",
    ".tsx": "javascript",
    ".mjs": "javascript",
    ".sh": "shell",
    ".bash": "shell",
    ".zsh": "shell",
    ".json": "json",
    ".jsonc": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".toml": "toml",
}

_VALIDATOR_TOOLS: Final[dict[str, ToolDefinition]] = {
    "go": _tool("go_vet", "go", "vet", "{filepath}", kind="syntax"),
    # cargo checks the whole crate, so it runs from the manifest directory.
    "rust": _tool(
        "cargo_check",
        "cargo",
        "check",
        "--message-format=short",
        kind="syntax",
        working_dir=PROJECT_ROOT_DIRECTIVE,
    ),
    "python": _tool("py_compile", "python3", "-m", "py_compile", "{filepath}", kind="syntax"),
    "javascript": _tool("eslint", "npx", "eslint", "{filepath}", kind="linting"),
    "shell": _tool("shellcheck", "shellcheck", "{filepath}", kind="linting"),
    "json": _tool("jq", "jq", "empty", "{filepath}", kind="syntax"),
    "yaml": _tool("yamllint", "yamllint", "-f", "parsable", "{filepath}", kind="linting"),
    "toml": _tool("toml_test", "toml-test", "decode", "{filepath}", kind="syntax"),
}

FORMATTER_FALLBACKS: Final[FallbackTable] = FallbackTable(
    extensions=MappingProxyType(_FORMATTER_EXTENSIONS),
    tools=MappingProxyType(_FORMATTER_TOOLS),
)

VALIDATOR_FALLBACKS: Final[FallbackTable] = FallbackTable(
    extensions=MappingProxyType(_VALIDATOR_EXTENSIONS),
    tools=MappingProxyType(_VALIDATOR_TOOLS),
)

EMPTY_FALLBACKS: Final[FallbackTable] = FallbackTable()

__all__ = ["EMPTY_FALLBACKS", "FORMATTER_FALLBACKS", "FallbackTable", "VALIDATOR_FALLBACKS"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants used across toolroute modules."""

from __future__ import annotations

from typing import Final

PATH_PLACEHOLDER: Final[str] = "{filepath}"

CONFIG_DIR_ENV: Final[str] = "TOOLROUTE_CONFIG_DIR"
DEFAULT_CONFIG_SUBDIR: Final[tuple[str, ...]] = (".config", "toolroute")
FORMATTERS_CONFIG_NAME: Final[str] = "formatters.jsonc"
VALIDATORS_CONFIG_NAME: Final[str] = "validators.jsonc"

PROJECT_ROOT_DIRECTIVE: Final[str] = "project_root"

# Checked in order at each level while walking up from a file.
PROJECT_MARKERS: Final[tuple[str, ...]] = (
    "go.mod",
    "Cargo.toml",
    "package.json",
    "pyproject.toml",
)

# Lines beginning with these prefixes are build-system chatter, not findings.
OUTPUT_NOISE_PREFIXES: Final[dict[str, tuple[str, ...]]] = {
    "go": ("# ",),
}

TIMEOUT_EXIT_CODE: Final[int] = 124

FALLBACK_BEHAVIOR_SKIP: Final[str] = "skip"
FALLBACK_BEHAVIOR_TRY_ALTERNATIVES: Final[str] = "try_alternatives"

__all__ = [
    "CONFIG_DIR_ENV",
    "DEFAULT_CONFIG_SUBDIR",
    "FALLBACK_BEHAVIOR_SKIP",
    "FALLBACK_BEHAVIOR_TRY_ALTERNATIVES",
    "FORMATTERS_CONFIG_NAME",
    "OUTPUT_NOISE_PREFIXES",
    "PATH_PLACEHOLDER",
    "PROJECT_MARKERS",
    "PROJECT_ROOT_DIRECTIVE",
    "TIMEOUT_EXIT_CODE",
    "VALIDATORS_CONFIG_NAME",
]

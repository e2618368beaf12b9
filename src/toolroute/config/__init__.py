# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for tool dispatch."""

from __future__ import annotations

from .loader import (
    ConfigLoadResult,
    ConfigStatus,
    default_config_dir,
    default_formatters_path,
    default_validators_path,
    load_config,
    load_config_result,
)
from .models import (
    DispatchConfig,
    DispatchMetadata,
    DispatchSettings,
    LanguageEntry,
    ToolDefinition,
    WorkingDirPolicy,
)

__all__ = [
    "ConfigLoadResult",
    "ConfigStatus",
    "DispatchConfig",
    "DispatchMetadata",
    "DispatchSettings",
    "LanguageEntry",
    "ToolDefinition",
    "WorkingDirPolicy",
    "default_config_dir",
    "default_formatters_path",
    "default_validators_path",
    "load_config",
    "load_config_result",
]

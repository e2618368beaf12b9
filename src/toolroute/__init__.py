# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration-driven formatter and validator dispatch for single files."""

from __future__ import annotations

from importlib import metadata

from .dispatch import (
    FormatDispatcher,
    ValidationDispatcher,
    format_file,
    get_formatter_language,
    get_language_for_extension,
    get_primary_formatter,
    get_primary_validator,
    get_validator_language,
    validate_file,
)
from .results import FormatResult, ValidationResult

__all__ = [
    "FormatDispatcher",
    "FormatResult",
    "ValidationDispatcher",
    "ValidationResult",
    "__version__",
    "format_file",
    "get_formatter_language",
    "get_language_for_extension",
    "get_primary_formatter",
    "get_primary_validator",
    "get_validator_language",
    "validate_file",
]

try:
    __version__ = metadata.version("toolroute")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load dispatch configuration documents, collapsing every failure to absence."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from ..constants import CONFIG_DIR_ENV, DEFAULT_CONFIG_SUBDIR, FORMATTERS_CONFIG_NAME, VALIDATORS_CONFIG_NAME
from ..jsonc import JSONCDecodeError, load
from .models import DispatchConfig

LOGGER = logging.getLogger(__name__)


class ConfigStatus(str, Enum):
    """Outcome of a configuration load attempt."""

    LOADED = "loaded"
    MISSING = "missing"
    UNREADABLE = "unreadable"
    INVALID = "invalid"


class ConfigLoadResult(BaseModel):
    """Container bundling a loaded config with the reason it may be absent."""

    model_config = ConfigDict(frozen=True)

    path: Path
    status: ConfigStatus
    config: DispatchConfig | None = None
    detail: str = ""

    @property
    def loaded(self) -> bool:
        """Return ``True`` when a usable configuration was produced."""

        return self.status is ConfigStatus.LOADED and self.config is not None


def load_config_result(path: Path) -> ConfigLoadResult:
    """Attempt to load ``path`` and describe the outcome.

    Args:
        path: Location of a JSONC dispatch document.

    Returns:
        ConfigLoadResult: Loaded configuration or the category of failure.
    """

    try:
        payload = load(path)
    except FileNotFoundError:
        return ConfigLoadResult(path=path, status=ConfigStatus.MISSING)
    except (OSError, UnicodeDecodeError) as exc:
        return ConfigLoadResult(path=path, status=ConfigStatus.UNREADABLE, detail=str(exc))
    except JSONCDecodeError as exc:
        return ConfigLoadResult(path=path, status=ConfigStatus.INVALID, detail=str(exc))

    if not isinstance(payload, Mapping):
        return ConfigLoadResult(path=path, status=ConfigStatus.INVALID, detail="expected a JSON object")
    try:
        config = DispatchConfig.model_validate(payload)
    except ValidationError as exc:
        return ConfigLoadResult(path=path, status=ConfigStatus.INVALID, detail=str(exc))
    return ConfigLoadResult(path=path, status=ConfigStatus.LOADED, config=config)


def load_config(path: Path) -> DispatchConfig | None:
    """Return the configuration stored at ``path`` or ``None`` on any failure."""

    result = load_config_result(path)
    if result.loaded:
        LOGGER.debug("loaded dispatch config from %s", path)
    else:
        LOGGER.debug("dispatch config %s %s; using fallbacks %s", path, result.status.value, result.detail)
    return result.config


def default_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Return the directory holding dispatch documents.

    ``$TOOLROUTE_CONFIG_DIR`` wins when set; otherwise ``~/.config/toolroute``.
    """

    environ = os.environ if env is None else env
    override = environ.get(CONFIG_DIR_ENV, "")
    if override:
        return Path(override).expanduser()
    return Path.home().joinpath(*DEFAULT_CONFIG_SUBDIR)


def default_formatters_path(env: Mapping[str, str] | None = None) -> Path:
    return default_config_dir(env) / FORMATTERS_CONFIG_NAME


def default_validators_path(env: Mapping[str, str] | None = None) -> Path:
    return default_config_dir(env) / VALIDATORS_CONFIG_NAME


__all__ = [
    "ConfigLoadResult",
    "ConfigStatus",
    "default_config_dir",
    "default_formatters_path",
    "default_validators_path",
    "load_config",
    "load_config_result",
]

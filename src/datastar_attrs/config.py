# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for catalog construction."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .catalog.documentation import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "datastar-attrs"
ENV_PREFIX: Final[str] = "DATASTAR_ATTRS_"

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off", ""})


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class CatalogSettings(BaseModel):
    """Settings controlling how the catalog is built and verified."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    check_links: bool = False
    link_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    allowed_schemes: list[str] = Field(default_factory=lambda: ["http", "https"])

    @field_validator("allowed_schemes")
    @classmethod
    def _normalise_schemes(cls, value: list[str]) -> list[str]:
        schemes = [scheme.strip().lower() for scheme in value if scheme.strip()]
        if not schemes:
            raise ValueError("at least one URL scheme must be allowed")
        return schemes


def load_settings(root: Path | None = None, *, env: Mapping[str, str] | None = None) -> CatalogSettings:
    """Return settings merged from ``pyproject.toml`` and the environment.

    Environment variables (``DATASTAR_ATTRS_CHECK_LINKS`` and friends) take
    precedence over the ``[tool.datastar-attrs]`` table.

    Args:
        root: Directory whose ``pyproject.toml`` should be consulted.
        env: Environment mapping; defaults to ``os.environ``.

    Returns:
        CatalogSettings: Validated settings.

    Raises:
        ConfigError: If the TOML document or any value is invalid.
    """

    data: dict[str, Any] = {}
    if root is not None:
        data.update(_load_pyproject_section(root / PYPROJECT_FILENAME))
    data.update(_env_overrides(env if env is not None else os.environ))
    try:
        return CatalogSettings(**data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _load_pyproject_section(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"{path}: [tool.{PYPROJECT_SECTION_KEY}] must be a table")
    return {str(key).replace("-", "_"): value for key, value in section.items()}


def _env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name in CatalogSettings.model_fields:
        raw = env.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is None:
            continue
        if name == "check_links":
            overrides[name] = _parse_bool(raw, name)
        elif name == "allowed_schemes":
            overrides[name] = raw.split(",")
        else:
            overrides[name] = raw
    return overrides


def _parse_bool(raw: str, name: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{ENV_PREFIX}{name.upper()}: expected a boolean, got {raw!r}")


__all__ = [
    "ENV_PREFIX",
    "CatalogSettings",
    "ConfigError",
    "load_settings",
]

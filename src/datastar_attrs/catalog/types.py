# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the attribute catalog."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

CATALOG_SCHEMA_VERSION: Final[str] = "1.0.0"

WIRE_PREFIX: Final[str] = "data-"
KEY_NAMESPACE: Final[str] = "datastar-"
SUBKEY_SEPARATOR: Final[str] = ":"
MODIFIER_SEPARATOR: Final[str] = "__"


class ValueKind(str, Enum):
    """Enumerate the value kinds accepted by attributes and modifiers."""

    BOOL = "bool"
    STRING = "string"
    DURATION_MS = "duration_ms"
    DURATION_SEC = "duration_sec"

    @property
    def is_duration(self) -> bool:
        """Return ``True`` when the kind renders a duration."""

        return self in (ValueKind.DURATION_MS, ValueKind.DURATION_SEC)


__all__ = [
    "CATALOG_SCHEMA_VERSION",
    "KEY_NAMESPACE",
    "MODIFIER_SEPARATOR",
    "SUBKEY_SEPARATOR",
    "WIRE_PREFIX",
    "JSONPrimitive",
    "JSONValue",
    "ValueKind",
]

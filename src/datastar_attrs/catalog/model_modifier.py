# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Modifier descriptors shared by attribute definitions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import TypeAlias

from .types import JSONValue, ValueKind

ModifierValue: TypeAlias = str | int | float | timedelta | None


@dataclass(frozen=True, slots=True)
class ModifierType:
    """Value shape accepted by a modifier."""

    key: str
    customizable: bool
    value_kind: ValueKind


@dataclass(frozen=True, slots=True)
class ModifierDefinition:
    """Reusable modifier descriptor referenced by many attribute definitions.

    The rendered token is ``prefix`` followed by the formatted value and the
    optional ``suffix``. Boolean modifiers take no value and render as
    ``prefix + suffix``.
    """

    name: str
    description: str
    type: ModifierType | None
    prefix: str
    suffix: str = ""
    choices: tuple[str, ...] = ()

    @property
    def value_kind(self) -> ValueKind:
        """Return the value kind declared by the modifier type."""

        if self.type is None:
            raise ValueError(f"Modifier {self.name} has no type")
        return self.type.value_kind

    def token(self, value: ModifierValue = None) -> str:
        """Return the wire token for this modifier applied with ``value``.

        Args:
            value: Value supplied by the caller. Must be ``None`` for boolean
                modifiers, a string for string modifiers, and a
                ``timedelta`` or non-negative number for durations.

        Returns:
            str: Token rendered after the ``__`` separator.

        Raises:
            ValueError: If ``value`` does not match the modifier value kind.
        """

        return f"{self.prefix}{self._format_value(value)}{self.suffix}"

    def __call__(self, value: ModifierValue = None) -> AppliedModifier:
        """Bind ``value`` to the modifier, validating it eagerly."""

        self.token(value)
        return AppliedModifier(definition=self, value=value)

    def to_dict(self) -> dict[str, JSONValue]:
        """Return a JSON-compatible mapping describing the modifier."""

        return {
            "name": self.name,
            "description": self.description,
            "key": self.type.key if self.type is not None else None,
            "valueKind": self.value_kind.value,
            "prefix": self.prefix,
            "suffix": self.suffix,
            "choices": list(self.choices),
        }

    def _format_value(self, value: ModifierValue) -> str:
        kind = self.value_kind
        if kind.is_duration:
            return str(_duration_units(value, kind, name=self.name))
        if kind is ValueKind.BOOL:
            if value is not None:
                raise ValueError(f"Modifier {self.name} does not take a value")
            return ""
        if not isinstance(value, str) or not value:
            raise ValueError(f"Modifier {self.name} expects a non-empty string")
        if self.choices and value not in self.choices:
            allowed = ", ".join(self.choices)
            raise ValueError(f"Modifier {self.name} expects one of: {allowed}")
        return value


@dataclass(frozen=True, slots=True)
class AppliedModifier:
    """Modifier descriptor paired with the value supplied by the caller."""

    definition: ModifierDefinition
    value: ModifierValue = None

    @property
    def token(self) -> str:
        """Return the rendered wire token."""

        return self.definition.token(self.value)


def _duration_units(value: ModifierValue, kind: ValueKind, *, name: str) -> int:
    """Return ``value`` expressed as whole milliseconds or seconds.

    Numbers are read in the modifier's own unit. Integers pass through
    unchanged and fractions are truncated.
    """

    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise ValueError(f"Modifier {name} expects a non-negative duration")
        unit = timedelta(milliseconds=1) if kind is ValueKind.DURATION_MS else timedelta(seconds=1)
        return value // unit
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Modifier {name} expects a duration")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Modifier {name} expects a finite duration")
    if value < 0:
        raise ValueError(f"Modifier {name} expects a non-negative duration")
    return int(value)


__all__ = [
    "AppliedModifier",
    "ModifierDefinition",
    "ModifierType",
    "ModifierValue",
]

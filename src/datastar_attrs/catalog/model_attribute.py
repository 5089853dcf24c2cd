# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Attribute definitions describing a single Datastar data-attribute."""

from __future__ import annotations

from dataclasses import dataclass

from .model_modifier import ModifierDefinition
from .types import KEY_NAMESPACE, JSONValue, ValueKind


@dataclass(frozen=True, slots=True)
class AttributeType:
    """Value shape and modifier policy of an attribute."""

    customizable_by_suffix: bool
    value_kind: ValueKind
    modifiers: tuple[ModifierDefinition, ...] = ()


@dataclass(frozen=True, slots=True)
class AttributeDefinition:
    """Named, keyed specification of one generated data-attribute.

    Attributes:
        name: Identifier used to derive builder method names.
        key: Catalog key. A leading ``datastar-`` namespace is dropped on the
            wire so that ``datastar-class`` renders as ``data-class``.
        description: Human readable text, including the documentation footer
            once annotated.
        type: Value kind, sub-key policy and permitted modifiers.
        doc_url: Documentation link the description was annotated with.
    """

    name: str
    key: str
    description: str
    type: AttributeType
    doc_url: str | None = None

    @property
    def wire_key(self) -> str:
        """Return the key rendered after the ``data-`` prefix."""

        return self.key.removeprefix(KEY_NAMESPACE)

    @property
    def customizable_by_suffix(self) -> bool:
        """Return ``True`` when the attribute accepts a ``:subkey``."""

        return self.type.customizable_by_suffix

    @property
    def value_kind(self) -> ValueKind:
        """Return the value kind of the attribute expression."""

        return self.type.value_kind

    @property
    def modifiers(self) -> tuple[ModifierDefinition, ...]:
        """Return the permitted modifiers in declared order."""

        return self.type.modifiers

    def permits(self, modifier: ModifierDefinition) -> bool:
        """Return ``True`` when ``modifier`` may be applied to this attribute."""

        return modifier in self.type.modifiers

    def modifier(self, name: str) -> ModifierDefinition:
        """Return the permitted modifier called ``name``.

        Raises:
            KeyError: If the attribute does not permit a modifier with that name.
        """

        for candidate in self.type.modifiers:
            if candidate.name == name:
                return candidate
        raise KeyError(f"{self.name} does not permit modifier '{name}'")

    def to_dict(self) -> dict[str, JSONValue]:
        """Return a JSON-compatible mapping describing the attribute."""

        return {
            "name": self.name,
            "key": self.key,
            "wireKey": self.wire_key,
            "description": self.description,
            "docUrl": self.doc_url,
            "customizableBySuffix": self.customizable_by_suffix,
            "valueKind": self.value_kind.value,
            "modifiers": [modifier.name for modifier in self.type.modifiers],
        }


__all__ = ["AttributeDefinition", "AttributeType"]

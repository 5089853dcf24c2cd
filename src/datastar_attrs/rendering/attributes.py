# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Wire-format rendering of catalog attributes.

An attribute renders as
``data-<key>[:<subkey>][__<modifier token>]...="<expression>"``. Modifier
tokens appear in the order the caller supplied them. Boolean attributes have
no expression and render as a bare attribute name.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from ..catalog.model_attribute import AttributeDefinition
from ..catalog.model_modifier import AppliedModifier, ModifierDefinition, ModifierValue
from ..catalog.types import MODIFIER_SEPARATOR, SUBKEY_SEPARATOR, WIRE_PREFIX, ValueKind

ModifierArgument = AppliedModifier | ModifierDefinition


@dataclass(frozen=True, slots=True)
class RenderedAttribute:
    """Attribute name and optional value ready for HTML output."""

    name: str
    value: str | None = None

    def __str__(self) -> str:
        if self.value is None:
            return self.name
        return f'{self.name}="{escape_value(self.value)}"'


def escape_value(value: str) -> str:
    """Return ``value`` safe for a double-quoted attribute."""

    return value.replace('"', "&quot;")


def base_name(attribute: AttributeDefinition, subkey: str = "") -> str:
    """Return ``data-<key>[:<subkey>]`` for ``attribute``.

    Raises:
        ValueError: If a sub-key is given to an attribute that does not accept one.
    """

    name = f"{WIRE_PREFIX}{attribute.wire_key}"
    if not subkey:
        return name
    if not attribute.customizable_by_suffix:
        raise ValueError(f"{attribute.name} does not accept a sub-key")
    return f"{name}{SUBKEY_SEPARATOR}{subkey}"


def apply_modifier(attribute: AttributeDefinition, modifier: str, value: ModifierValue = None) -> AppliedModifier:
    """Bind ``value`` to the modifier called ``modifier`` on ``attribute``.

    Raises:
        KeyError: If ``attribute`` does not permit the modifier.
        ValueError: If ``value`` does not suit the modifier.
    """

    return attribute.modifier(modifier)(value)


def render_attribute_name(
    attribute: AttributeDefinition,
    subkey: str = "",
    modifiers: Iterable[ModifierArgument] = (),
) -> str:
    """Return the full attribute name including sub-key and modifier tokens.

    Args:
        attribute: Catalog entry being rendered.
        subkey: Optional sub-key placed after ``:``.
        modifiers: Applied modifiers, or bare boolean modifier definitions.

    Returns:
        str: Attribute name such as ``data-on:click__debounce.500ms.leading``.

    Raises:
        ValueError: If a modifier is not permitted by ``attribute`` or the
            sub-key is not accepted.
    """

    parts = [base_name(attribute, subkey)]
    for argument in modifiers:
        applied = argument if isinstance(argument, AppliedModifier) else argument()
        if not attribute.permits(applied.definition):
            raise ValueError(f"{attribute.name} does not permit modifier {applied.definition.name}")
        parts.append(applied.token)
    return MODIFIER_SEPARATOR.join(parts)


def render_attribute(
    attribute: AttributeDefinition,
    expression: str | None = None,
    *,
    subkey: str = "",
    modifiers: Iterable[ModifierArgument] = (),
) -> RenderedAttribute:
    """Return the rendered attribute for ``expression``.

    Raises:
        ValueError: If an expression is missing for a valued attribute or
            supplied for a boolean one.
    """

    name = render_attribute_name(attribute, subkey, modifiers)
    if attribute.value_kind is ValueKind.BOOL:
        if expression is not None:
            raise ValueError(f"{attribute.name} does not take an expression")
        return RenderedAttribute(name=name)
    if expression is None:
        raise ValueError(f"{attribute.name} requires an expression")
    return RenderedAttribute(name=name, value=expression)


__all__ = [
    "ModifierArgument",
    "RenderedAttribute",
    "apply_modifier",
    "base_name",
    "escape_value",
    "render_attribute",
    "render_attribute_name",
]

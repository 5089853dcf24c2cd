# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Minimal element builder exposing catalog-derived builder methods."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from ..catalog.loader import load_catalog
from ..catalog.model_attribute import AttributeDefinition
from ..catalog.model_catalog import Catalog
from ..catalog.model_modifier import ModifierDefinition
from ..catalog.types import ValueKind
from .attributes import ModifierArgument, RenderedAttribute, base_name, render_attribute
from .naming import BuilderForm, builder_index, modifier_helper_index


class Element:
    """Single HTML element holding plain and Datastar attributes.

    Builder methods are resolved from the catalog, so for the ``on`` entry
    the element answers ``datastar_on``, ``datastar_on_remove`` and
    ``if_datastar_on``; boolean entries also get ``<name>_set``. Every
    builder returns the element for chaining.

    Modifier helpers are named per tag, so a ``div`` element answers
    ``div_on_mod_debounce_ms(timedelta(milliseconds=500))`` with the applied
    modifier to pass to ``datastar_on``.
    """

    def __init__(self, tag: str, *, catalog: Catalog | None = None) -> None:
        self.tag = tag
        self.catalog = catalog if catalog is not None else load_catalog()
        self._builders: Mapping[str, tuple[BuilderForm, AttributeDefinition]] = builder_index(self.catalog)
        self._modifier_helpers: Mapping[str, ModifierDefinition] = modifier_helper_index(tag, self.catalog)
        self._attributes: dict[str, RenderedAttribute] = {}

    def attr(self, name: str, value: str | bool = True) -> Element:
        """Set a plain attribute; ``True`` renders it bare, ``False`` removes it."""

        if value is False:
            self._attributes.pop(name, None)
        elif value is True:
            self._attributes[name] = RenderedAttribute(name=name)
        else:
            self._attributes[name] = RenderedAttribute(name=name, value=value)
        return self

    def remove_attr(self, name: str) -> Element:
        """Remove the plain attribute ``name`` if present."""

        self._attributes.pop(name, None)
        return self

    def datastar(self, attribute: str | AttributeDefinition, *args: Any) -> Element:
        """Set a catalog attribute.

        Positional arguments follow the attribute shape: a sub-key when the
        attribute is customizable, an expression unless it is boolean, then
        any number of modifiers.

        Raises:
            KeyError: If ``attribute`` is not in the catalog.
            TypeError: If the positional arguments do not match the shape.
            ValueError: If a modifier or sub-key is rejected.
        """

        definition = self._definition(attribute)
        subkey, expression, modifiers = _split_arguments(definition, args)
        rendered = render_attribute(definition, expression, subkey=subkey, modifiers=modifiers)
        self._attributes[base_name(definition, subkey)] = rendered
        return self

    def datastar_remove(self, attribute: str | AttributeDefinition, subkey: str = "") -> Element:
        """Remove a catalog attribute regardless of the modifiers it carried."""

        definition = self._definition(attribute)
        self._attributes.pop(base_name(definition, subkey), None)
        return self

    def render(self) -> str:
        """Return the element as HTML with attributes sorted by name."""

        parts = [self.tag]
        parts.extend(str(attribute) for attribute in sorted(self._attributes.values(), key=lambda item: item.name))
        return f"<{' '.join(parts)}></{self.tag}>"

    def __str__(self) -> str:
        return self.render()

    def __getattr__(self, name: str) -> Callable[..., Any]:
        builders = self.__dict__.get("_builders")
        helpers = self.__dict__.get("_modifier_helpers")
        if helpers is not None and name in helpers:
            return helpers[name]
        if builders is None or name not in builders:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")
        form, definition = builders[name]
        if form is BuilderForm.SET:
            return lambda *args: self.datastar(definition, *args)
        if form is BuilderForm.REMOVE:
            return lambda subkey="": self.datastar_remove(definition, subkey)
        if form is BuilderForm.CONDITIONAL:
            return lambda condition, *args: self.datastar(definition, *args) if condition else self
        return lambda flag, *args: self.datastar(definition, *args) if flag else self.datastar_remove(definition)

    def _definition(self, attribute: str | AttributeDefinition) -> AttributeDefinition:
        if isinstance(attribute, AttributeDefinition):
            return attribute
        return self.catalog.attribute(attribute)


def _split_arguments(
    definition: AttributeDefinition,
    args: tuple[Any, ...],
) -> tuple[str, str | None, tuple[ModifierArgument, ...]]:
    expected = int(definition.customizable_by_suffix) + int(definition.value_kind is not ValueKind.BOOL)
    positional, modifiers = args[:expected], args[expected:]
    if len(positional) != expected or not all(isinstance(item, str) for item in positional):
        raise TypeError(f"{definition.name} expects {expected} string argument(s) before modifiers")
    values = list(positional)
    subkey = values.pop(0) if definition.customizable_by_suffix else ""
    expression = values.pop(0) if values else None
    return subkey, expression, tuple(modifiers)


__all__ = ["Element"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Builder method names derived from catalog entries."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Final

from ..catalog.model_attribute import AttributeDefinition
from ..catalog.model_catalog import Catalog
from ..catalog.model_modifier import ModifierDefinition
from ..catalog.types import ValueKind
from ..catalog.utils import snake_case

_NAME_PREFIX: Final[str] = "Datastar"


class BuilderForm(str, Enum):
    """Enumerate the builder method shapes generated per attribute."""

    SET = "set"
    REMOVE = "remove"
    CONDITIONAL = "conditional"
    TOGGLE = "toggle"


def builder_method_name(attribute: AttributeDefinition) -> str:
    """Return the setter name, e.g. ``datastar_on_intersect``."""

    return snake_case(attribute.name)


def remove_method_name(attribute: AttributeDefinition) -> str:
    """Return the removal form, e.g. ``datastar_attr_remove``."""

    return f"{builder_method_name(attribute)}_remove"


def conditional_method_name(attribute: AttributeDefinition) -> str:
    """Return the conditional form, e.g. ``if_datastar_bind``."""

    return f"if_{builder_method_name(attribute)}"


def set_method_name(attribute: AttributeDefinition) -> str:
    """Return the boolean toggle form, e.g. ``datastar_ignore_morph_set``."""

    return f"{builder_method_name(attribute)}_set"


def modifier_helper_name(tag: str, attribute: AttributeDefinition, modifier: ModifierDefinition) -> str:
    """Return the per-element modifier helper name.

    ``modifier_helper_name("div", on_intersect, debounce_sec)`` gives
    ``div_on_intersect_mod_debounce_sec``.
    """

    short_name = attribute.name.removeprefix(_NAME_PREFIX) or attribute.name
    return f"{tag.lower()}_{snake_case(short_name)}_mod_{snake_case(modifier.name)}"


def builder_names(attribute: AttributeDefinition) -> dict[BuilderForm, str]:
    """Return every builder method name generated for ``attribute``."""

    names = {
        BuilderForm.SET: builder_method_name(attribute),
        BuilderForm.REMOVE: remove_method_name(attribute),
        BuilderForm.CONDITIONAL: conditional_method_name(attribute),
    }
    if attribute.value_kind is ValueKind.BOOL:
        names[BuilderForm.TOGGLE] = set_method_name(attribute)
    return names


def builder_index(catalog: Catalog) -> Mapping[str, tuple[BuilderForm, AttributeDefinition]]:
    """Return a mapping of builder method names to their form and attribute."""

    index: dict[str, tuple[BuilderForm, AttributeDefinition]] = {}
    for attribute in catalog.attributes:
        for form, name in builder_names(attribute).items():
            index[name] = (form, attribute)
    return index


def modifier_helper_index(tag: str, catalog: Catalog) -> Mapping[str, ModifierDefinition]:
    """Return the modifier helper names available on a ``tag`` element."""

    return {
        modifier_helper_name(tag, attribute, modifier): modifier
        for attribute in catalog.attributes
        for modifier in attribute.modifiers
    }


__all__ = [
    "BuilderForm",
    "builder_index",
    "builder_method_name",
    "builder_names",
    "conditional_method_name",
    "modifier_helper_index",
    "modifier_helper_name",
    "remove_method_name",
    "set_method_name",
    "snake_case",
]

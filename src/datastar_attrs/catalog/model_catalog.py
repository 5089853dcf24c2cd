# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog aggregate produced by the catalog loader."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from .checksum import compute_catalog_checksum
from .errors import CatalogIntegrityError
from .model_attribute import AttributeDefinition
from .model_modifier import ModifierDefinition
from .registry import ModifierRegistry
from .types import JSONValue
from .utils import snake_case


@dataclass(frozen=True, slots=True)
class Catalog:
    """Complete ordered set of attribute definitions valid for code generation."""

    _attributes: tuple[AttributeDefinition, ...]
    modifiers: ModifierRegistry
    checksum: str = field(init=False)
    _index: Mapping[str, AttributeDefinition] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Enforce catalog invariants and index attributes by name, key and builder name."""

        index: dict[str, AttributeDefinition] = {}
        for definition in self._attributes:
            context = f"attribute {definition.name}"
            for alias in dict.fromkeys(
                (definition.name, definition.key, definition.wire_key, snake_case(definition.name)),
            ):
                if alias in index:
                    raise CatalogIntegrityError(f"{context}: duplicate name or key '{alias}'")
                index[alias] = definition
            seen: set[str] = set()
            for modifier in definition.modifiers:
                if modifier.name in seen:
                    raise CatalogIntegrityError(f"{context}: modifier '{modifier.name}' listed twice")
                seen.add(modifier.name)
                if not self.modifiers.includes(modifier):
                    raise CatalogIntegrityError(f"{context}: modifier '{modifier.name}' is not registered")
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "checksum", compute_catalog_checksum(self.to_payload()))

    @property
    def attributes(self) -> tuple[AttributeDefinition, ...]:
        """Return attribute definitions in catalog order."""

        return self._attributes

    def attribute(self, name: str) -> AttributeDefinition:
        """Return the attribute registered under ``name``.

        Args:
            name: Attribute name, catalog key, wire key or builder method
                name such as ``datastar_on``.

        Returns:
            AttributeDefinition: Matching attribute definition.

        Raises:
            KeyError: If ``name`` is not known to the catalog.
        """

        try:
            return self._index[name]
        except KeyError as exc:
            raise KeyError(name) from exc

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._index

    def __iter__(self) -> Iterator[AttributeDefinition]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def referenced_modifiers(self) -> tuple[ModifierDefinition, ...]:
        """Return every modifier used by at least one attribute, in registry order."""

        used = {id(modifier) for definition in self._attributes for modifier in definition.modifiers}
        return tuple(modifier for modifier in self.modifiers if id(modifier) in used)

    def to_payload(self) -> dict[str, JSONValue]:
        """Return the JSON-compatible catalog contents without metadata."""

        return {
            "modifiers": [modifier.to_dict() for modifier in self.modifiers],
            "attributes": [definition.to_dict() for definition in self._attributes],
        }


__all__ = ["Catalog"]

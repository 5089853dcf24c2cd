# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the modifier registry completeness check."""

from __future__ import annotations

from dataclasses import replace

import pytest

from datastar_attrs.catalog import MalformedModifierConfigError, ModifierRegistry, datastar_modifier_registry
from datastar_attrs.catalog.registry import datastar_modifier_entries


def test_datastar_registry_is_complete() -> None:
    """Every registered modifier should carry a prefix and a type."""
    registry = datastar_modifier_registry()
    assert len(registry) == 32
    for modifier in registry:
        assert modifier.prefix
        assert modifier.type is not None


def test_validate_returns_registry_for_chaining() -> None:
    registry = ModifierRegistry.from_entries(datastar_modifier_entries())
    assert registry.validate() is registry


def test_unset_entry_names_the_identifier() -> None:
    """An unset descriptor should fail fast and name the offending field."""
    entries = datastar_modifier_entries()
    entries[5] = (entries[5][0], None)
    with pytest.raises(MalformedModifierConfigError, match="Modifier DebounceSec is unset") as excinfo:
        ModifierRegistry.from_entries(entries).validate()
    assert excinfo.value.identifier == "DebounceSec"
    assert excinfo.value.field is None


@pytest.mark.parametrize("field", ["name", "description", "prefix"])
def test_empty_required_field_is_rejected(field: str) -> None:
    entries = datastar_modifier_entries()
    identifier, definition = entries[0]
    assert definition is not None
    entries[0] = (identifier, replace(definition, **{field: ""}))
    with pytest.raises(MalformedModifierConfigError) as excinfo:
        ModifierRegistry.from_entries(entries).validate()
    assert excinfo.value.field == field


def test_missing_type_is_rejected() -> None:
    entries = datastar_modifier_entries()
    identifier, definition = entries[1]
    assert definition is not None
    entries[1] = (identifier, replace(definition, type=None))
    with pytest.raises(MalformedModifierConfigError, match="Case has no type"):
        ModifierRegistry.from_entries(entries).validate()


def test_empty_suffix_is_allowed() -> None:
    registry = datastar_modifier_registry()
    assert registry["Window"].suffix == ""


def test_identifier_must_match_name() -> None:
    entries = datastar_modifier_entries()
    _, definition = entries[0]
    entries[0] = ("Capturing", definition)
    with pytest.raises(MalformedModifierConfigError, match="Capturing"):
        ModifierRegistry.from_entries(entries).validate()


def test_duplicate_identifier_is_rejected() -> None:
    entries = datastar_modifier_entries()
    entries.append(entries[0])
    with pytest.raises(MalformedModifierConfigError, match="unique identifier"):
        ModifierRegistry.from_entries(entries).validate()


def test_lookup_by_identifier() -> None:
    registry = datastar_modifier_registry()
    assert registry["DebounceMsLeading"].suffix == "ms.leading"
    assert "ThrottleSecTrailing" in registry
    assert "ThrotlleSec" not in registry
    with pytest.raises(KeyError):
        registry["Nope"]
    assert registry.identifiers[:2] == ("Capture", "Case")

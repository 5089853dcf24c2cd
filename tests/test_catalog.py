# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for catalog construction and lookups."""

from __future__ import annotations

from dataclasses import replace

import pytest

from datastar_attrs.catalog import (
    Catalog,
    CatalogIntegrityError,
    MalformedModifierConfigError,
    ModifierRegistry,
    UnreachableDocumentationError,
    ValueKind,
    build_catalog,
    load_catalog,
)
from datastar_attrs.catalog.definitions import DATASTAR_ATTRIBUTES, AttributeDraft
from datastar_attrs.catalog.loader import CatalogBuilder
from datastar_attrs.catalog.registry import datastar_modifier_entries, datastar_modifier_registry
from datastar_attrs.config import CatalogSettings


class _RejectingChecker:
    def __init__(self, bad_url: str) -> None:
        self.bad_url = bad_url
        self.checked: list[str] = []

    def check(self, url: str) -> None:
        self.checked.append(url)
        if url == self.bad_url:
            raise UnreachableDocumentationError(url, "unexpected response", status=404)


def test_catalog_contains_every_attribute_in_order(catalog: Catalog) -> None:
    names = [definition.name for definition in catalog.attributes]
    assert len(names) == 21
    assert names[0] == "DatastarAttr"
    assert names[-1] == "DatastarText"
    assert names == [draft.name for draft in DATASTAR_ATTRIBUTES]


def test_referenced_modifiers_are_complete(catalog: Catalog) -> None:
    """Every modifier referenced by an attribute has a prefix and a type."""
    for definition in catalog.attributes:
        for modifier in definition.modifiers:
            assert modifier.prefix
            assert modifier.type is not None
            assert catalog.modifiers.includes(modifier)
    assert len(catalog.referenced_modifiers()) == len(catalog.modifiers)


def test_modifiers_are_shared_by_reference(catalog: Catalog) -> None:
    on_case = catalog.attribute("on").modifier("Case")
    signals_case = catalog.attribute("signals").modifier("Case")
    assert on_case is signals_case is catalog.modifiers["Case"]


def test_lookup_by_name_key_and_wire_key(catalog: Catalog) -> None:
    by_name = catalog.attribute("DatastarClass")
    assert catalog.attribute("datastar-class") is by_name
    assert catalog.attribute("class") is by_name
    assert by_name.wire_key == "class"
    assert "on-intersect" in catalog
    with pytest.raises(KeyError):
        catalog.attribute("data-on")


def test_lookup_by_builder_method_name(catalog: Catalog) -> None:
    assert catalog.attribute("datastar_on") is catalog.attribute("on")
    assert catalog.attribute("datastar_on_signal_patch_filter").key == "on-signal-patch-filter"
    assert "datastar_class" in catalog


def test_attribute_shapes(catalog: Catalog) -> None:
    assert catalog.attribute("ignore").value_kind is ValueKind.BOOL
    assert catalog.attribute("bind").customizable_by_suffix
    assert not catalog.attribute("effect").customizable_by_suffix
    on = catalog.attribute("on")
    assert [modifier.name for modifier in on.modifiers][:4] == ["Once", "Passive", "Capture", "Case"]
    assert len(on.modifiers) == 23


def test_descriptions_carry_documentation_footer(catalog: Catalog) -> None:
    text = catalog.attribute("text")
    assert text.description.endswith("\n\nSee: https://data-star.dev/reference/attributes#data-text")
    on_intersect = catalog.attribute("on-intersect")
    assert on_intersect.doc_url is None
    assert "See:" not in on_intersect.description


def test_checksum_is_deterministic(catalog: Catalog) -> None:
    again = build_catalog()
    assert catalog.checksum == again.checksum
    assert len(catalog.checksum) == 64


def test_incomplete_registry_aborts_construction() -> None:
    entries = datastar_modifier_entries()
    entries[0] = (entries[0][0], None)
    with pytest.raises(MalformedModifierConfigError, match="Capture"):
        build_catalog(registry=ModifierRegistry.from_entries(entries))


def test_unknown_modifier_reference_is_rejected() -> None:
    drafts = (
        AttributeDraft(
            name="DatastarBogus",
            key="bogus",
            description="Bogus.",
            customizable_by_suffix=False,
            modifiers=("Sideways",),
        ),
    )
    with pytest.raises(CatalogIntegrityError, match="unknown modifier 'Sideways'"):
        build_catalog(drafts=drafts)


def test_duplicate_keys_are_rejected() -> None:
    drafts = (DATASTAR_ATTRIBUTES[0], replace(DATASTAR_ATTRIBUTES[0], name="DatastarAttrAgain"))
    with pytest.raises(CatalogIntegrityError, match="duplicate name or key 'attr'"):
        build_catalog(drafts=drafts)


def test_duplicate_modifier_on_attribute_is_rejected() -> None:
    drafts = (replace(DATASTAR_ATTRIBUTES[2], modifiers=("Case", "Case")),)
    with pytest.raises(CatalogIntegrityError, match="listed twice"):
        build_catalog(drafts=drafts)


def test_unreachable_documentation_aborts_construction() -> None:
    """A single failing link aborts the build; no partial catalog is returned."""
    bad = "https://data-star.dev/reference/attributes#data-bind"
    checker = _RejectingChecker(bad)
    with pytest.raises(UnreachableDocumentationError) as excinfo:
        build_catalog(link_checker=checker)
    assert excinfo.value.url == bad
    assert checker.checked == ["https://data-star.dev/reference/attributes#data-attr", bad]


def test_settings_enable_http_checker(monkeypatch: pytest.MonkeyPatch) -> None:
    checked: list[str] = []

    def _check(self, url: str) -> None:
        assert self.timeout == 3.0
        checked.append(url)

    monkeypatch.setattr("datastar_attrs.catalog.loader.HttpLinkChecker.check", _check)
    build_catalog(settings=CatalogSettings(check_links=True, link_timeout=3.0))
    assert len(checked) == sum(1 for draft in DATASTAR_ATTRIBUTES if draft.doc_url)


def test_settings_restrict_schemes() -> None:
    with pytest.raises(UnreachableDocumentationError, match="invalid URL"):
        build_catalog(settings=CatalogSettings(allowed_schemes=["ftp"]))


def test_builder_accepts_custom_registry() -> None:
    registry = datastar_modifier_registry()
    drafts = (
        AttributeDraft(name="DatastarShow", key="show", description="Shows things.", customizable_by_suffix=False),
    )
    catalog = CatalogBuilder(registry=registry, drafts=drafts).build()
    assert [definition.key for definition in catalog] == ["show"]


def test_load_catalog_is_cached() -> None:
    assert load_catalog() is load_catalog()

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Declarative catalog of Datastar data-attributes and their modifiers."""

from __future__ import annotations

from .catalog import (
    AttributeDefinition,
    Catalog,
    CatalogIntegrityError,
    CatalogValidationError,
    MalformedModifierConfigError,
    ModifierDefinition,
    UnreachableDocumentationError,
    build_catalog,
    load_catalog,
)
from .config import CatalogSettings, load_settings
from .rendering import Element, render_attribute

__all__ = [
    "AttributeDefinition",
    "Catalog",
    "CatalogIntegrityError",
    "CatalogSettings",
    "CatalogValidationError",
    "Element",
    "MalformedModifierConfigError",
    "ModifierDefinition",
    "UnreachableDocumentationError",
    "build_catalog",
    "load_catalog",
    "load_settings",
    "render_attribute",
]

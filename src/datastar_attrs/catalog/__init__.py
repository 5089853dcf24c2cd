# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the Datastar attribute catalog."""

from __future__ import annotations

from typing import Final

from .documentation import HttpLinkChecker, LinkChecker, NullLinkChecker, annotate_description
from .errors import (
    CatalogError,
    CatalogIntegrityError,
    CatalogValidationError,
    MalformedModifierConfigError,
    UnreachableDocumentationError,
)
from .loader import CatalogBuilder, build_catalog, clear_catalog_cache, load_catalog
from .model_attribute import AttributeDefinition, AttributeType
from .model_catalog import Catalog
from .model_modifier import AppliedModifier, ModifierDefinition, ModifierType
from .registry import ModifierRegistry, datastar_modifier_registry
from .types import ValueKind

__all__: Final[tuple[str, ...]] = (
    "AppliedModifier",
    "AttributeDefinition",
    "AttributeType",
    "Catalog",
    "CatalogBuilder",
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogValidationError",
    "HttpLinkChecker",
    "LinkChecker",
    "MalformedModifierConfigError",
    "ModifierDefinition",
    "ModifierRegistry",
    "ModifierType",
    "NullLinkChecker",
    "UnreachableDocumentationError",
    "ValueKind",
    "annotate_description",
    "build_catalog",
    "clear_catalog_cache",
    "datastar_modifier_registry",
    "load_catalog",
)

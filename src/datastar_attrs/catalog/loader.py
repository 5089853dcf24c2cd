# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Factory that turns the literal attribute table into a validated catalog."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import TYPE_CHECKING

from .definitions import DATASTAR_ATTRIBUTES, AttributeDraft
from .documentation import HttpLinkChecker, LinkChecker, annotate_description
from .errors import CatalogIntegrityError
from .model_attribute import AttributeDefinition, AttributeType
from .model_catalog import Catalog
from .registry import ModifierRegistry, datastar_modifier_registry

if TYPE_CHECKING:
    from ..config import CatalogSettings

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class CatalogBuilder:
    """Resolve attribute drafts against a modifier registry."""

    registry: ModifierRegistry
    drafts: Sequence[AttributeDraft] = DATASTAR_ATTRIBUTES
    link_checker: LinkChecker | None = None
    schemes: Sequence[str] = field(default_factory=lambda: ("http", "https"))

    def build(self) -> Catalog:
        """Return the validated catalog.

        Raises:
            MalformedModifierConfigError: If the registry is incomplete.
            UnreachableDocumentationError: If a documentation link fails.
            CatalogIntegrityError: If a draft references an unknown modifier or
                duplicates another attribute.
        """

        registry = self.registry.validate()
        attributes = tuple(self._resolve(draft, registry) for draft in self.drafts)
        catalog = Catalog(attributes, registry)
        LOGGER.debug(
            "built catalog attributes=%d modifiers=%d checksum=%s",
            len(catalog),
            len(registry),
            catalog.checksum,
        )
        return catalog

    def _resolve(self, draft: AttributeDraft, registry: ModifierRegistry) -> AttributeDefinition:
        modifiers = []
        for identifier in draft.modifiers:
            if identifier not in registry:
                raise CatalogIntegrityError(
                    f"attribute {draft.name}: unknown modifier '{identifier}'",
                )
            modifiers.append(registry[identifier])
        description = draft.description
        if draft.doc_url is not None:
            description = annotate_description(
                description,
                draft.doc_url,
                self.link_checker,
                schemes=self.schemes,
            )
        return AttributeDefinition(
            name=draft.name,
            key=draft.key,
            description=description,
            type=AttributeType(
                customizable_by_suffix=draft.customizable_by_suffix,
                value_kind=draft.value_kind,
                modifiers=tuple(modifiers),
            ),
            doc_url=draft.doc_url,
        )


def build_catalog(
    *,
    registry: ModifierRegistry | None = None,
    link_checker: LinkChecker | None = None,
    settings: CatalogSettings | None = None,
    drafts: Sequence[AttributeDraft] = DATASTAR_ATTRIBUTES,
) -> Catalog:
    """Build the attribute catalog once, failing fast on misconfiguration.

    Args:
        registry: Modifier registry; the Datastar registry when omitted.
        link_checker: Explicit link checker. When omitted, an HTTP checker is
            used only if ``settings.check_links`` is enabled.
        settings: Catalog settings controlling link verification.
        drafts: Attribute table to resolve.

    Returns:
        Catalog: Frozen, validated catalog.
    """

    if registry is None:
        registry = datastar_modifier_registry()
    schemes: Sequence[str] = ("http", "https")
    if settings is not None:
        schemes = tuple(settings.allowed_schemes)
        if link_checker is None and settings.check_links:
            link_checker = HttpLinkChecker(timeout=settings.link_timeout, user_agent=settings.user_agent)
    builder = CatalogBuilder(registry=registry, drafts=drafts, link_checker=link_checker, schemes=schemes)
    return builder.build()


@lru_cache(maxsize=1)
def load_catalog() -> Catalog:
    """Return the process-wide Datastar catalog without link verification."""

    return build_catalog()


def clear_catalog_cache() -> None:
    """Reset the cached catalog returned by :func:`load_catalog`."""

    load_catalog.cache_clear()


__all__ = [
    "CatalogBuilder",
    "build_catalog",
    "clear_catalog_cache",
    "load_catalog",
]

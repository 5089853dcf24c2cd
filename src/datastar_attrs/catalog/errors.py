# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by attribute catalog operations."""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for failures raised while building or exporting the catalog."""


class CatalogIntegrityError(CatalogError):
    """Raised when catalog metadata violates semantic invariants."""

    def __init__(self, message: str | None = None) -> None:
        """Create the integrity error with an optional ``message``."""

        super().__init__(message or "catalog integrity violation")


class MalformedModifierConfigError(CatalogIntegrityError):
    """Raised when a modifier registry entry is unset or incomplete."""

    def __init__(self, identifier: str, field: str | None = None) -> None:
        """Record the offending registry ``identifier`` and optional ``field``.

        Args:
            identifier: Registry identifier of the broken modifier.
            field: Descriptor field that is missing, or ``None`` when the
                whole descriptor is unset.
        """

        self.identifier = identifier
        self.field = field
        if field is None:
            message = f"Modifier {identifier} is unset"
        else:
            message = f"Modifier {identifier} has no {field}"
        super().__init__(message)


class UnreachableDocumentationError(CatalogIntegrityError):
    """Raised when a documentation URL is malformed or cannot be fetched."""

    def __init__(self, url: str, reason: str, *, status: int | None = None) -> None:
        """Record the failing ``url`` together with a ``reason`` and HTTP ``status``."""

        self.url = url
        self.reason = reason
        self.status = status
        detail = reason if status is None else f"{reason} (statusCode={status})"
        super().__init__(f"Failed to fetch url {url}: {detail}")


class CatalogValidationError(CatalogError):
    """Raised when an exported catalog document fails schema validation."""

    def __init__(self, messages: list[str]) -> None:
        """Store every schema violation reported for the document."""

        self.messages = tuple(messages)
        super().__init__("; ".join(messages) or "catalog document failed schema validation")


__all__ = (
    "CatalogError",
    "CatalogIntegrityError",
    "CatalogValidationError",
    "MalformedModifierConfigError",
    "UnreachableDocumentationError",
)

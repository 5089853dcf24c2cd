# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""JSON export of the catalog for downstream code generators."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path

from .model_catalog import Catalog
from .types import CATALOG_SCHEMA_VERSION, JSONValue


def catalog_to_document(catalog: Catalog) -> dict[str, JSONValue]:
    """Return the exportable JSON document describing ``catalog``.

    Args:
        catalog: Validated catalog to export.

    Returns:
        dict[str, JSONValue]: Document carrying the schema version, the
        catalog checksum and the modifier and attribute tables.
    """

    document: dict[str, JSONValue] = {
        "schemaVersion": CATALOG_SCHEMA_VERSION,
        "checksum": catalog.checksum,
    }
    document.update(catalog.to_payload())
    return document


def dump_document(document: Mapping[str, JSONValue]) -> str:
    """Return ``document`` rendered as indented JSON text."""

    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


def write_document(path: Path, document: Mapping[str, JSONValue]) -> Path:
    """Write ``document`` to ``path`` creating parent directories as needed."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_document(document), encoding="utf-8")
    return path


__all__ = ["catalog_to_document", "dump_document", "write_document"]

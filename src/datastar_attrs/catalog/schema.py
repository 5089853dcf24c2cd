# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema validation for exported catalog documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from typing import Final, cast

from jsonschema import Draft202012Validator, ValidationError

from .errors import CatalogValidationError
from .types import JSONValue

SCHEMA_PATH: Final[Path] = Path(__file__).resolve().parent / "schema" / "catalog.schema.json"


@lru_cache(maxsize=1)
def load_schema(path: Path = SCHEMA_PATH) -> Mapping[str, JSONValue]:
    """Load the catalog JSON schema from ``path``.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        CatalogValidationError: If the schema is not a JSON object.
    """
    with path.open("r", encoding="utf-8") as stream:
        payload = cast(JSONValue, json.load(stream))
    if not isinstance(payload, Mapping):
        raise CatalogValidationError([f"{path}: expected a JSON object"])
    return payload


def validate_document(document: Mapping[str, JSONValue], *, schema: Mapping[str, JSONValue] | None = None) -> None:
    """Validate an exported catalog ``document`` against the catalog schema.

    Args:
        document: Document produced by ``catalog_to_document``.
        schema: Optional schema override; the packaged schema by default.

    Raises:
        CatalogValidationError: If the document violates the schema. Every
            violation is reported, ordered by location.
    """

    validator = Draft202012Validator(schema if schema is not None else load_schema())
    errors = sorted(validator.iter_errors(document), key=lambda error: error.json_path)
    if errors:
        raise CatalogValidationError([_format_error(error) for error in errors])


def _format_error(error: ValidationError) -> str:
    return f"{error.json_path}: {error.message}"


__all__ = ["SCHEMA_PATH", "load_schema", "validate_document"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Checksum utilities for catalog contents."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping

from .types import JSONValue


def canonical_json(payload: Mapping[str, JSONValue]) -> bytes:
    """Return the canonical UTF-8 JSON encoding of ``payload``."""

    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def compute_catalog_checksum(payload: Mapping[str, JSONValue]) -> str:
    """Calculate the catalog checksum for ``payload``.

    Args:
        payload: JSON-compatible catalog payload without its checksum.

    Returns:
        str: Hex-encoded SHA-256 checksum of the canonical encoding.
    """
    return hashlib.sha256(canonical_json(payload)).hexdigest()


__all__ = ["canonical_json", "compute_catalog_checksum"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Identifier helpers shared by the catalog and the rendering layer."""

from __future__ import annotations

import re
from typing import Final

_WORD_BOUNDARY: Final[re.Pattern[str]] = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def snake_case(name: str) -> str:
    """Return ``name`` converted from PascalCase to snake_case."""

    return _WORD_BOUNDARY.sub("_", name).replace("-", "_").lower()


__all__ = ["snake_case"]

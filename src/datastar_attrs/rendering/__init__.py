# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rendering helpers turning catalog entries into HTML attribute syntax."""

from __future__ import annotations

from .attributes import RenderedAttribute, apply_modifier, render_attribute, render_attribute_name
from .element import Element
from .naming import (
    BuilderForm,
    builder_index,
    builder_method_name,
    builder_names,
    modifier_helper_index,
    modifier_helper_name,
)

__all__ = [
    "BuilderForm",
    "Element",
    "RenderedAttribute",
    "apply_modifier",
    "builder_index",
    "builder_method_name",
    "builder_names",
    "modifier_helper_index",
    "modifier_helper_name",
    "render_attribute",
    "render_attribute_name",
]

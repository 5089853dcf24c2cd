# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Literal table of Datastar attribute definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .types import ValueKind

DOCS_ROOT: Final[str] = "https://data-star.dev/reference/attributes"

_TIMING: Final[tuple[str, ...]] = (
    "DelayMs",
    "DelaySec",
    "DebounceMs",
    "DebounceMsLeading",
    "DebounceMsNoTrailing",
    "DebounceSec",
    "DebounceSecLeading",
    "DebounceSecNoTrailing",
    "ThrottleMs",
    "ThrottleMsNoLeading",
    "ThrottleMsTrailing",
    "ThrottleSec",
    "ThrottleSecNoLeading",
    "ThrottleSecTrailing",
)


@dataclass(frozen=True, slots=True)
class AttributeDraft:
    """Unresolved catalog row naming its modifiers by registry identifier."""

    name: str
    key: str
    description: str
    customizable_by_suffix: bool
    value_kind: ValueKind = ValueKind.STRING
    modifiers: tuple[str, ...] = ()
    doc_url: str | None = None


def _docs(anchor: str) -> str:
    return f"{DOCS_ROOT}#{anchor}"


DATASTAR_ATTRIBUTES: Final[tuple[AttributeDraft, ...]] = (
    AttributeDraft(
        name="DatastarAttr",
        key="attr",
        description="Sets the value of any HTML attribute to an expression, and keeps it in sync.",
        customizable_by_suffix=True,
        doc_url=_docs("data-attr"),
    ),
    AttributeDraft(
        name="DatastarBind",
        key="bind",
        description=(
            "Creates a signal (if one doesn’t already exist) and sets up two-way data binding "
            "between it and an element’s value."
        ),
        customizable_by_suffix=True,
        doc_url=_docs("data-bind"),
    ),
    AttributeDraft(
        name="DatastarClass",
        key="datastar-class",
        description="Adds or removes a class to or from an element based on an expression.",
        customizable_by_suffix=True,
        modifiers=("Case",),
    ),
    AttributeDraft(
        name="DatastarComputed",
        key="computed",
        description=(
            "Creates a signal that is computed based on an expression. The computed signal is "
            "read-only, and its value is automatically updated when any signals in the "
            "expression are updated."
        ),
        customizable_by_suffix=True,
        modifiers=("Case",),
        doc_url=_docs("data-computed"),
    ),
    AttributeDraft(
        name="DatastarEffect",
        key="effect",
        description=(
            "Executes an expression on page load and whenever any signals in the expression "
            "change. This is useful for performing side effects, such as updating other "
            "signals, making requests to the backend, or manipulating the DOM."
        ),
        customizable_by_suffix=False,
        doc_url=_docs("data-effect"),
    ),
    AttributeDraft(
        name="DatastarIgnore",
        key="ignore",
        description=(
            "Datastar walks the entire DOM and applies plugins to each element it encounters. "
            "It's possible to tell Datastar to ignore an element and its descendants by placing "
            "a data-ignore attribute on it. This can be useful for preventing naming conflicts "
            "with third-party libraries, or when you are unable to escape user input."
        ),
        customizable_by_suffix=False,
        value_kind=ValueKind.BOOL,
        modifiers=("Self",),
        doc_url=_docs("data-ignore"),
    ),
    AttributeDraft(
        name="DatastarIgnoreMorph",
        key="ignore-morph",
        description=(
            "Similar to the data-ignore attribute, the data-ignore-morph attribute tells the "
            "PatchElements watcher to skip processing an element and its children when morphing "
            "elements. This can be useful for preventing conflicts with third-party libraries "
            "that manipulate the DOM, or when you are unable to escape user input."
        ),
        customizable_by_suffix=False,
        value_kind=ValueKind.BOOL,
        doc_url=_docs("data-ignore-morph"),
    ),
    AttributeDraft(
        name="DatastarIndicator",
        key="indicator",
        description=(
            "Creates a signal and sets its value to true while a fetch request is in flight, "
            "otherwise false. The signal can be used to show a loading indicator."
        ),
        customizable_by_suffix=False,
        modifiers=("Case",),
        doc_url=_docs("data-indicator"),
    ),
    AttributeDraft(
        name="DatastarInit",
        key="init",
        description=(
            "Runs an expression when the attribute is initialized. This can happen on page load, "
            "when an element is patched into the DOM, and any time the attribute is modified "
            "(via a backend action or otherwise)."
        ),
        customizable_by_suffix=False,
        modifiers=("DelayMs", "DelaySec", "ViewTransition"),
        doc_url=_docs("data-init"),
    ),
    AttributeDraft(
        name="DatastarJSONSignals",
        key="json-signals",
        description=(
            "Sets the text content of an element to a reactive JSON stringified version of "
            "signals. Useful when troubleshooting an issue."
        ),
        customizable_by_suffix=False,
        modifiers=("Terse",),
        doc_url=_docs("data-json-signals"),
    ),
    AttributeDraft(
        name="DatastarOn",
        key="on",
        description=(
            "Attaches an event listener to an element, executing an expression whenever the "
            "event is triggered."
        ),
        customizable_by_suffix=True,
        modifiers=(
            "Once",
            "Passive",
            "Capture",
            "Case",
            *_TIMING,
            "ViewTransition",
            "Window",
            "Prevent",
            "Outside",
            "Stop",
        ),
        doc_url=_docs("data-on"),
    ),
    AttributeDraft(
        name="DatastarOnIntersect",
        key="on-intersect",
        description="Runs an expression when the element intersects with the viewport.",
        customizable_by_suffix=False,
        modifiers=("Once", "Half", "Full", *_TIMING, "ViewTransition"),
    ),
    AttributeDraft(
        name="DatastarOnInterval",
        key="on-interval",
        description=(
            "Runs an expression at a regular interval. The interval duration defaults to one "
            "second and can be modified using the '__duration' modifier."
        ),
        customizable_by_suffix=False,
        modifiers=(
            "DurationMs",
            "DurationMsLeading",
            "DurationSec",
            "DurationSecLeading",
            "ViewTransition",
        ),
        doc_url=_docs("data-on-interval"),
    ),
    AttributeDraft(
        name="DatastarOnSignalPatch",
        key="on-signal-patch",
        description=(
            "Runs an expression whenever any signals are patched. This is useful for tracking "
            "changes, updating computed values, or triggering side effects when data updates."
        ),
        customizable_by_suffix=False,
        modifiers=_TIMING,
        doc_url=_docs("data-on-signal-patch"),
    ),
    AttributeDraft(
        name="DatastarOnSignalPatchFilter",
        key="on-signal-patch-filter",
        description=(
            "Filters which signals to watch when using the data-on-signal-patch attribute.\n\n"
            "The data-on-signal-patch-filter attribute accepts an object with include and/or "
            "exclude properties that are regular expressions."
        ),
        customizable_by_suffix=False,
        doc_url=_docs("data-on-signal-patch-filter"),
    ),
    AttributeDraft(
        name="DatastarPreserveAttr",
        key="preserve-attr",
        description="Preserves the value of an attribute when morphing DOM elements.",
        customizable_by_suffix=False,
        doc_url=_docs("data-preserve-attr"),
    ),
    AttributeDraft(
        name="DatastarRef",
        key="ref",
        description=(
            "Creates a new signal that is a reference to the element on which the data "
            "attribute is placed."
        ),
        customizable_by_suffix=False,
        modifiers=("Case",),
        doc_url=_docs("data-ref"),
    ),
    AttributeDraft(
        name="DatastarShow",
        key="show",
        description=(
            "Shows or hides an element based on whether an expression evaluates to 'true' or "
            "'false'. For anything with custom requirements, use 'data-class' instead."
        ),
        customizable_by_suffix=False,
        doc_url=_docs("data-show"),
    ),
    AttributeDraft(
        name="DatastarSignals",
        key="signals",
        description=(
            "Patches (adds, updates or removes) one or more signals into the existing signals. "
            "Values defined later in the DOM tree override those defined earlier."
        ),
        customizable_by_suffix=True,
        modifiers=("Case", "IfMissing"),
        doc_url=_docs("data-signals"),
    ),
    AttributeDraft(
        name="DatastarStyle",
        key="datastar-style",
        description=(
            "Sets the value of inline CSS styles on an element based on an expression, and "
            "keeps them in sync."
        ),
        customizable_by_suffix=True,
        modifiers=("Case",),
        doc_url=_docs("data-style"),
    ),
    AttributeDraft(
        name="DatastarText",
        key="text",
        description="Binds the text content of an element to an expression.",
        customizable_by_suffix=False,
        doc_url=_docs("data-text"),
    ),
)


__all__ = ["DATASTAR_ATTRIBUTES", "DOCS_ROOT", "AttributeDraft"]

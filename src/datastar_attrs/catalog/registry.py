# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Registry of reusable Datastar modifiers and its completeness check."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Final

from .errors import MalformedModifierConfigError
from .model_modifier import ModifierDefinition, ModifierType
from .types import ValueKind

LOGGER = logging.getLogger(__name__)

RegistryEntry = tuple[str, ModifierDefinition | None]

_REQUIRED_FIELDS: Final[tuple[str, ...]] = ("name", "description", "type", "prefix")


@dataclass(frozen=True, slots=True)
class ModifierRegistry:
    """Ordered set of named modifier descriptors.

    Entries are ``(identifier, descriptor)`` pairs. A descriptor may be
    ``None`` until :meth:`validate` has been run, which is what catches a
    registry that forgot to fill one in.
    """

    entries: tuple[RegistryEntry, ...]

    @classmethod
    def from_entries(cls, entries: Sequence[RegistryEntry]) -> ModifierRegistry:
        """Return a registry holding ``entries`` in the given order."""

        return cls(entries=tuple(entries))

    def validate(self) -> ModifierRegistry:
        """Fail fast when any registry entry is unset or incomplete.

        Returns:
            ModifierRegistry: ``self`` so construction can be chained.

        Raises:
            MalformedModifierConfigError: If an entry is ``None``, a required
                field is empty, the identifier disagrees with the descriptor
                name, or an identifier is declared twice.
        """

        seen: set[str] = set()
        for identifier, definition in self.entries:
            if identifier in seen:
                raise MalformedModifierConfigError(identifier, "unique identifier")
            seen.add(identifier)
            if definition is None:
                raise MalformedModifierConfigError(identifier)
            for field in _REQUIRED_FIELDS:
                if not getattr(definition, field):
                    raise MalformedModifierConfigError(identifier, field)
            if definition.name != identifier:
                raise MalformedModifierConfigError(identifier, f"name matching '{identifier}'")
        LOGGER.debug("validated %d modifiers", len(self.entries))
        return self

    @property
    def identifiers(self) -> tuple[str, ...]:
        """Return registry identifiers in declared order."""

        return tuple(identifier for identifier, _ in self.entries)

    def __getitem__(self, identifier: str) -> ModifierDefinition:
        for candidate, definition in self.entries:
            if candidate == identifier:
                if definition is None:
                    raise MalformedModifierConfigError(identifier)
                return definition
        raise KeyError(identifier)

    def __contains__(self, identifier: object) -> bool:
        return any(candidate == identifier for candidate, _ in self.entries)

    def __iter__(self) -> Iterator[ModifierDefinition]:
        for identifier, definition in self.entries:
            if definition is None:
                raise MalformedModifierConfigError(identifier)
            yield definition

    def __len__(self) -> int:
        return len(self.entries)

    def includes(self, definition: ModifierDefinition) -> bool:
        """Return ``True`` when ``definition`` is one of the registered descriptors."""

        return any(candidate is definition for _, candidate in self.entries)


def _flag(name: str, description: str, key: str) -> RegistryEntry:
    return name, ModifierDefinition(
        name=name,
        description=description,
        type=ModifierType(key=key, customizable=False, value_kind=ValueKind.BOOL),
        prefix=key,
    )


def _timed(name: str, description: str, key: str, kind: ValueKind, suffix: str) -> RegistryEntry:
    return name, ModifierDefinition(
        name=name,
        description=description,
        type=ModifierType(key=key, customizable=False, value_kind=kind),
        prefix=f"{key}.",
        suffix=suffix,
    )


CASE_CHOICES: Final[tuple[str, ...]] = ("camel", "kebab", "snake", "pascal")

_MS = ValueKind.DURATION_MS
_SEC = ValueKind.DURATION_SEC


def datastar_modifier_entries() -> list[RegistryEntry]:
    """Return the Datastar modifier registry entries in declared order."""

    return [
        _flag("Capture", "Use capture event listener. Only works with built-in events.", "capture"),
        (
            "Case",
            ModifierDefinition(
                name="Case",
                description=(
                    "Converts the casing of the signal name.\n"
                    "\t- 'camel' – Camel case: 'mySignal' (default)\n"
                    "\t- 'kebab' – Kebab case: 'my-signal'\n"
                    "\t- 'snake' – Snake case: 'my_signal'\n"
                    "\t- 'pascal' – Pascal case: 'MySignal'"
                ),
                type=ModifierType(key="case", customizable=False, value_kind=ValueKind.STRING),
                prefix="case.",
                choices=CASE_CHOICES,
            ),
        ),
        _timed("DebounceMs", "Debounces the event handler", "debounce", _MS, "ms"),
        _timed(
            "DebounceMsLeading",
            "Debounce the event listener in milliseconds with leading edge.",
            "debounce",
            _MS,
            "ms.leading",
        ),
        _timed(
            "DebounceMsNoTrailing",
            "Debounce the event listener in milliseconds without trailing edge.",
            "debounce",
            _MS,
            "ms.notrailing",
        ),
        _timed("DebounceSec", "Debounces the event handler", "debounce", _SEC, "s"),
        _timed(
            "DebounceSecLeading",
            "Debounce the event listener in seconds with leading edge.",
            "debounce",
            _SEC,
            "s.leading",
        ),
        _timed(
            "DebounceSecNoTrailing",
            "Debounce the event listener in seconds without trailing edge.",
            "debounce",
            _SEC,
            "s.notrailing",
        ),
        _timed("DelayMs", "Delay the event listener in milliseconds.", "delay", _MS, "ms"),
        _timed("DelaySec", "Delay the event listener in seconds.", "delay", _SEC, "s"),
        _timed("DurationMs", "Sets the interval duration in milliseconds.", "duration", _MS, "ms"),
        _timed(
            "DurationMsLeading",
            "Sets the interval duration in milliseconds. Execute the first interval immediately.",
            "duration",
            _MS,
            "ms.leading",
        ),
        _timed("DurationSec", "Sets the interval duration in seconds.", "duration", _SEC, "s"),
        _timed(
            "DurationSecLeading",
            "Sets the interval duration in seconds. Execute the first interval immediately.",
            "duration",
            _SEC,
            "s.leading",
        ),
        _flag("Full", "Trigger when the full element is visible.", "full"),
        _flag(
            "IfMissing",
            "Only patches signals if their keys do not already exist. "
            "This is useful for setting defaults without overwriting existing values.",
            "ifmissing",
        ),
        _flag("Half", "Trigger when half of the element is visible.", "half"),
        _flag("Once", "Only run the expression once. Only works with built-in events.", "once"),
        _flag("Outside", "Triggers when the event is outside the element.", "outside"),
        _flag(
            "Passive",
            "Do not call preventDefault on the event listener. Only works with built-in events.",
            "passive",
        ),
        _flag("Prevent", "Calls 'preventDefault' on the event listener.", "prevent"),
        _flag("Self", "Only ignore the element itself, not its descendants.", "self"),
        _flag("Stop", "Calls 'stopPropagation' on the event listener.", "stop"),
        _flag(
            "Terse",
            "Outputs a more compact JSON format without extra whitespace. "
            "Useful for displaying filtered data inline.",
            "terse",
        ),
        _timed("ThrottleMs", "Throttles the event handler", "throttle", _MS, "ms"),
        _timed(
            "ThrottleMsNoLeading",
            "Throttle the event listener in milliseconds without leading edge.",
            "throttle",
            _MS,
            "ms.noleading",
        ),
        _timed(
            "ThrottleMsTrailing",
            "Throttle the event listener in milliseconds with trailing edge.",
            "throttle",
            _MS,
            "ms.trailing",
        ),
        _timed("ThrottleSec", "Throttles the event listener in seconds.", "throttle", _SEC, "s"),
        _timed(
            "ThrottleSecNoLeading",
            "Throttle the event listener in seconds without leading edge.",
            "throttle",
            _SEC,
            "s.noleading",
        ),
        _timed(
            "ThrottleSecTrailing",
            "Throttle the event listener in seconds with trailing edge.",
            "throttle",
            _SEC,
            "s.trailing",
        ),
        _flag(
            "ViewTransition",
            "Wraps the expression in 'document.startViewTransition()' when the "
            "View Transition API is available.",
            "viewtransition",
        ),
        _flag("Window", "Attaches the event listener to the 'window' element.", "window"),
    ]


def datastar_modifier_registry() -> ModifierRegistry:
    """Return the validated Datastar modifier registry."""

    return ModifierRegistry.from_entries(datastar_modifier_entries()).validate()


__all__ = [
    "CASE_CHOICES",
    "ModifierRegistry",
    "RegistryEntry",
    "datastar_modifier_entries",
    "datastar_modifier_registry",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render a single attribute on an element for quick inspection."""

from __future__ import annotations

from typing import Annotated

import typer

from ...catalog import AppliedModifier, AttributeDefinition, ValueKind, load_catalog
from ...rendering import Element
from ..shared import CLIError, build_cli_logger


def parse_modifier(definition: AttributeDefinition, raw: str) -> AppliedModifier:
    """Return the modifier described by ``raw`` (``Name`` or ``Name=value``).

    Duration values are numbers in the modifier's unit.

    Raises:
        CLIError: If the modifier is unknown or the value is invalid.
    """

    name, _, value = raw.partition("=")
    try:
        modifier = definition.modifier(name.strip())
    except KeyError as exc:
        raise CLIError(f"{definition.name} does not permit modifier '{name}'") from exc
    try:
        if modifier.value_kind is ValueKind.BOOL:
            return modifier(None if not value else value)
        if modifier.value_kind is ValueKind.STRING:
            return modifier(value)
        return modifier(_parse_number(value))
    except ValueError as exc:
        raise CLIError(str(exc)) from exc


def _parse_number(raw: str) -> int | float:
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def render_command(
    name: Annotated[str, typer.Argument(help="Attribute name, key or wire key.")],
    expression: Annotated[str | None, typer.Argument(help="Expression; omit for boolean attributes.")] = None,
    subkey: Annotated[str, typer.Option("--subkey", "-k", help="Sub-key placed after ':'.")] = "",
    modifiers: Annotated[
        list[str] | None,
        typer.Option("--modifier", "-m", help="Modifier as Name or Name=value; repeatable."),
    ] = None,
    tag: Annotated[str, typer.Option("--tag", help="Element tag.")] = "div",
) -> None:
    """Print an element carrying one rendered catalog attribute."""

    logger = build_cli_logger(emoji=False)
    catalog = load_catalog()
    try:
        try:
            definition = catalog.attribute(name)
        except KeyError as exc:
            raise CLIError(f"Unknown attribute '{name}'") from exc
        applied = [parse_modifier(definition, raw) for raw in modifiers or []]
        args: list[object] = []
        if definition.customizable_by_suffix:
            args.append(subkey)
        elif subkey:
            raise CLIError(f"{definition.name} does not accept a sub-key")
        if definition.value_kind is not ValueKind.BOOL:
            if expression is None:
                raise CLIError(f"{definition.name} requires an expression")
            args.append(expression)
        elif expression is not None:
            raise CLIError(f"{definition.name} does not take an expression")
        element = Element(tag, catalog=catalog).datastar(definition, *args, *applied)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    typer.echo(element.render())


__all__ = ["parse_modifier", "render_command"]

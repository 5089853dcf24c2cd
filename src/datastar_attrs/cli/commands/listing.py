# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Commands presenting catalog entries as Rich tables."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...catalog import AttributeDefinition, Catalog, load_catalog
from ...rendering.naming import builder_names, modifier_helper_name
from ..shared import build_cli_logger


def build_attributes_table(catalog: Catalog) -> Table:
    """Return a table summarising every attribute in ``catalog``."""

    table = Table(title="Datastar attributes", show_lines=False)
    table.add_column("Name", style="bold cyan")
    table.add_column("Attribute")
    table.add_column("Sub-key")
    table.add_column("Value")
    table.add_column("Modifiers", justify="right")
    for definition in catalog.attributes:
        table.add_row(
            definition.name,
            f"data-{definition.wire_key}",
            "yes" if definition.customizable_by_suffix else "no",
            definition.value_kind.value,
            str(len(definition.modifiers)),
        )
    return table


def build_modifiers_table(definition: AttributeDefinition, *, tag: str) -> Table:
    """Return a table of the modifiers permitted on ``definition``."""

    table = Table(title=f"Modifiers for data-{definition.wire_key}")
    table.add_column("Modifier", style="bold magenta")
    table.add_column("Token")
    table.add_column("Value")
    table.add_column("Helper")
    for modifier in definition.modifiers:
        placeholder = "" if modifier.value_kind.value == "bool" else "<value>"
        table.add_row(
            modifier.name,
            f"__{modifier.prefix}{placeholder}{modifier.suffix}",
            modifier.value_kind.value,
            modifier_helper_name(tag, definition, modifier),
        )
    return table


def list_command() -> None:
    """List every attribute in the catalog."""

    build_cli_logger().show(build_attributes_table(load_catalog()))


def show_command(
    name: Annotated[str, typer.Argument(help="Attribute name, key or wire key.")],
    tag: Annotated[str, typer.Option("--tag", help="Element tag used for helper names.")] = "div",
) -> None:
    """Show description, builder methods and modifiers of one attribute."""

    logger = build_cli_logger()
    catalog = load_catalog()
    try:
        definition = catalog.attribute(name)
    except KeyError:
        logger.show(Panel(f"[red]Unknown attribute '{escape(name)}'[/red]", border_style="red"))
        raise typer.Exit(code=1) from None
    logger.show(Panel(definition.description, title=f"[bold cyan]{definition.name}[/bold cyan]"))
    builders = ", ".join(builder_names(definition).values())
    logger.show(f"Builders: {builders}")
    if definition.modifiers:
        logger.show(build_modifiers_table(definition, tag=tag))


__all__ = ["build_attributes_table", "build_modifiers_table", "list_command", "show_command"]

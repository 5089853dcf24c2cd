# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from . import export, listing, render, validate

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register built-in CLI commands on ``app``."""

    app.command("list")(listing.list_command)
    app.command("show")(listing.show_command)
    app.command("validate")(validate.validate_command)
    app.command("export")(export.export_command)
    app.command("render")(render.render_command)

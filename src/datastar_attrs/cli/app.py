# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from typing import Annotated

import typer

from ..logging import configure_logging
from .commands import register_commands

app = typer.Typer(
    help="Inspect, validate and export the Datastar attribute catalog.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug logging on stderr.")] = False,
) -> None:
    """Configure logging before any command runs."""

    configure_logging(debug=debug)


register_commands(app)

__all__ = ["app", "main"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog validation command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..shared import CLIError, build_catalog_or_error, build_cli_logger, resolve_settings


def validate_command(
    root: Annotated[Path, typer.Option("--root", "-r", help="Project root holding pyproject.toml.")] = Path("."),
    check_links: Annotated[
        bool | None,
        typer.Option("--check-links/--no-check-links", help="Fetch every documentation URL."),
    ] = None,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate output with emoji.")] = True,
) -> None:
    """Build the catalog and report whether it is valid."""

    logger = build_cli_logger(emoji=emoji)
    logger.section("Catalog")
    try:
        settings = resolve_settings(root.resolve(), check_links=check_links)
        if not settings.check_links:
            logger.info("Documentation links are not fetched; pass --check-links to verify them.")
        catalog = build_catalog_or_error(settings)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    logger.ok(
        f"{len(catalog)} attributes, {len(catalog.modifiers)} modifiers valid (checksum {catalog.checksum})",
    )


__all__ = ["validate_command"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Catalog export command."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...catalog import CatalogValidationError
from ...catalog.schema import validate_document
from ...catalog.serialization import catalog_to_document, dump_document, write_document
from ..shared import CLIError, build_catalog_or_error, build_cli_logger, resolve_settings


def export_command(
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the document here instead of stdout."),
    ] = None,
    root: Annotated[Path, typer.Option("--root", "-r", help="Project root holding pyproject.toml.")] = Path("."),
    check_links: Annotated[
        bool | None,
        typer.Option("--check-links/--no-check-links", help="Fetch every documentation URL."),
    ] = None,
) -> None:
    """Export the catalog as a schema-validated JSON document."""

    logger = build_cli_logger(emoji=False)
    try:
        catalog = build_catalog_or_error(resolve_settings(root.resolve(), check_links=check_links))
        document = catalog_to_document(catalog)
        validate_document(document)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except CatalogValidationError as exc:
        for message in exc.messages:
            logger.fail(message)
        raise typer.Exit(code=1) from exc
    if output is None:
        typer.echo(dump_document(document), nl=False)
        return
    if output.exists():
        logger.warn(f"Overwriting {output}")
    write_document(output, document)
    logger.ok(f"Wrote {output}")


__all__ = ["export_command"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared CLI plumbing: exit-coded errors, console output, catalog loading."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console, RenderableType

from ..catalog import Catalog, CatalogError, build_catalog
from ..config import CatalogSettings, ConfigError, load_settings
from ..logging import section, status


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Status lines and Rich renderables for one command invocation."""

    console: Console
    use_emoji: bool
    use_color: bool = True

    def section(self, title: str) -> None:
        section(title, use_color=self.use_color)

    def info(self, message: str) -> None:
        status("info", message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        status("ok", message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        status("warn", message, use_emoji=self.use_emoji, use_color=self.use_color)

    def fail(self, message: str) -> None:
        status("fail", message, use_emoji=self.use_emoji, use_color=self.use_color)

    def show(self, renderable: RenderableType) -> None:
        """Print a Rich table, panel or markup string."""

        self.console.print(renderable)


def build_cli_logger(*, emoji: bool = False, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a dedicated Rich console."""

    console = Console(no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji, use_color=not no_color)


def resolve_settings(root: Path, *, check_links: bool | None = None) -> CatalogSettings:
    """Load settings for ``root`` applying the ``--check-links`` override.

    Raises:
        CLIError: If the configuration is invalid.
    """

    try:
        settings = load_settings(root)
    except ConfigError as exc:
        raise CLIError(f"Invalid configuration: {exc}") from exc
    if check_links is not None:
        settings.check_links = check_links
    return settings


def build_catalog_or_error(settings: CatalogSettings) -> Catalog:
    """Build the catalog, translating catalog failures into ``CLIError``."""

    try:
        return build_catalog(settings=settings)
    except CatalogError as exc:
        raise CLIError(str(exc)) from exc


__all__ = [
    "CLIError",
    "CLILogger",
    "build_catalog_or_error",
    "build_cli_logger",
    "resolve_settings",
]

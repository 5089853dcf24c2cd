# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console status lines for the CLI and ``logging`` setup for the library.

Library modules log through ``logging.getLogger(__name__)`` and never print.
Only the CLI writes status lines, using the helpers below.
"""

from __future__ import annotations

import logging
import sys
from typing import Final, Literal

StatusLevel = Literal["info", "ok", "warn", "fail"]

ANSI: Final[dict[str, str]] = {
    "reset": "\033[0m",
    "blue": "\033[34;1m",
    "cyan": "\033[36;1m",
    "green": "\033[32;1m",
    "yellow": "\033[33;1m",
    "red": "\033[31;1m",
}

_STATUS_STYLE: Final[dict[str, tuple[str, str | None]]] = {
    "info": ("ℹ️ ", None),
    "ok": ("✅ ", "green"),
    "warn": ("⚠️ ", "yellow"),
    "fail": ("❌ ", "red"),
}

LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s"


def is_tty() -> bool:
    """Return ``True`` when stdout appears to be a TTY."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):  # pragma: no cover - closed stream
        return False


def colorize(text: str, code: str | None, enable: bool) -> str:
    """Wrap ``text`` in the ANSI sequence named ``code`` on a colour TTY."""

    if code is None or not enable or not is_tty():
        return text
    return f"{ANSI.get(code, '')}{text}{ANSI['reset']}"


def emoji(symbol: str, enable: bool) -> str:
    """Return *symbol* when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def status(level: StatusLevel, msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    """Print ``msg`` as a status line of the given ``level``."""

    symbol, colour = _STATUS_STYLE[level]
    print(f"{emoji(symbol, use_emoji)}{colorize(msg, colour, use_color)}")


def section(title: str, *, use_color: bool) -> None:
    """Print a section header."""

    rule = colorize("───", "blue", use_color)
    print(f"\n{rule} {colorize(title, 'cyan', use_color)} {rule}")


def info(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    status("info", msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    status("ok", msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    status("warn", msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool = True) -> None:
    status("fail", msg, use_emoji=use_emoji, use_color=use_color)


def configure_logging(*, debug: bool = False) -> None:
    """Route library loggers to stderr at DEBUG or WARNING level."""

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


__all__ = [
    "colorize",
    "configure_logging",
    "emoji",
    "fail",
    "info",
    "ok",
    "section",
    "status",
    "warn",
]

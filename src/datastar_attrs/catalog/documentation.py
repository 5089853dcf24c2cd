# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Documentation links attached to attribute descriptions."""

from __future__ import annotations

import logging
import ssl
import urllib.error
import urllib.request
from collections.abc import Collection
from dataclasses import dataclass
from http import HTTPStatus
from typing import Final, Protocol, runtime_checkable
from urllib.parse import urlparse

from .errors import UnreachableDocumentationError

LOGGER = logging.getLogger(__name__)

DEFAULT_SCHEMES: Final[frozenset[str]] = frozenset({"http", "https"})
DEFAULT_USER_AGENT: Final[str] = "datastar-attrs-doc-check/1.0"
DEFAULT_TIMEOUT: Final[float] = 10.0
SEE_ALSO_SEPARATOR: Final[str] = "\n\nSee: "


@runtime_checkable
class LinkChecker(Protocol):
    """Capability that confirms a documentation URL is reachable."""

    def check(self, url: str) -> None:
        """Verify ``url`` or raise :class:`UnreachableDocumentationError`."""


class NullLinkChecker:
    """Link checker that accepts every URL without touching the network."""

    def check(self, url: str) -> None:
        """Accept ``url`` unconditionally."""

        del url


@dataclass(slots=True)
class HttpLinkChecker:
    """Fetch documentation URLs over HTTP and require a ``200 OK`` response."""

    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    def check(self, url: str) -> None:
        """Fetch ``url`` and raise when the response is not ``200 OK``.

        Args:
            url: Documentation URL to fetch.

        Raises:
            UnreachableDocumentationError: If the request fails or returns a
                status other than ``200``.
        """

        LOGGER.debug("checking documentation link url=%s", url)
        request = urllib.request.Request(url, headers={"User-Agent": self.user_agent})
        opener = urllib.request.build_opener(urllib.request.HTTPSHandler(context=ssl.create_default_context()))
        try:
            with opener.open(request, timeout=self.timeout) as response:
                status = response.status
        except urllib.error.HTTPError as exc:
            raise UnreachableDocumentationError(url, "unexpected response", status=exc.code) from exc
        except (urllib.error.URLError, OSError) as exc:
            raise UnreachableDocumentationError(url, str(exc)) from exc
        if status != HTTPStatus.OK:
            raise UnreachableDocumentationError(url, "unexpected response", status=status)


def ensure_well_formed(url: str, *, schemes: Collection[str] = DEFAULT_SCHEMES) -> str:
    """Return ``url`` when it parses with an allowed scheme and a host.

    Raises:
        UnreachableDocumentationError: If ``url`` is malformed.
    """

    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise UnreachableDocumentationError(url, "invalid URL") from exc
    if parsed.scheme.lower() not in schemes or not parsed.netloc:
        raise UnreachableDocumentationError(url, "invalid URL")
    return parsed.geturl()


def annotate_description(
    description: str,
    url: str,
    checker: LinkChecker | None = None,
    *,
    schemes: Collection[str] = DEFAULT_SCHEMES,
) -> str:
    """Append a ``See:`` footer for ``url`` to ``description``.

    The URL is always checked for well-formedness. Reachability is delegated
    to ``checker``; without one no network access happens.

    Args:
        description: Human readable attribute description.
        url: Documentation link for the attribute.
        checker: Optional link checker confirming the URL is reachable.
        schemes: URL schemes accepted for documentation links.

    Returns:
        str: Description followed by the documentation footer.

    Raises:
        UnreachableDocumentationError: If the URL is malformed or the checker
            rejects it.
    """

    resolved = ensure_well_formed(url, schemes=schemes)
    if checker is not None:
        checker.check(resolved)
    return f"{description}{SEE_ALSO_SEPARATOR}{resolved}"


__all__ = [
    "DEFAULT_SCHEMES",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "SEE_ALSO_SEPARATOR",
    "HttpLinkChecker",
    "LinkChecker",
    "NullLinkChecker",
    "annotate_description",
    "ensure_well_formed",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from datastar_attrs.catalog import Catalog, NullLinkChecker, build_catalog, clear_catalog_cache


@pytest.fixture
def catalog() -> Catalog:
    """Return a freshly built catalog that never touches the network."""
    return build_catalog(link_checker=NullLinkChecker())


@pytest.fixture(autouse=True)
def _reset_catalog_cache() -> Iterator[None]:
    """Ensure cached catalogs do not leak between tests."""
    clear_catalog_cache()
    yield
    clear_catalog_cache()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop catalog settings inherited from the developer environment."""
    for name in ("CHECK_LINKS", "LINK_TIMEOUT", "USER_AGENT", "ALLOWED_SCHEMES"):
        monkeypatch.delenv(f"DATASTAR_ATTRS_{name}", raising=False)

"""HTTP client factory — the single network capability the pipeline uses."""

from __future__ import annotations

import os

import httpx

from dockmatch import __version__

DEFAULT_TIMEOUT = float(os.environ.get("DOCKMATCH_HTTP_TIMEOUT", "30"))

USER_AGENT = f"dockmatch/{__version__}"


def create_client(timeout: float | None = None, **kwargs) -> httpx.AsyncClient:
    """Build the ``httpx.AsyncClient`` shared by registry and catalog fetches.

    Extra keyword arguments are passed through to ``httpx.AsyncClient``
    (tests pass ``transport=httpx.MockTransport(...)``).
    """
    return httpx.AsyncClient(
        headers={"User-Agent": USER_AGENT},
        timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
        follow_redirects=True,
        **kwargs,
    )

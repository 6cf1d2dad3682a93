"""Match a manifest's dependencies against the official image catalog."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Mapping
from pathlib import Path

import httpx
import structlog

from dockmatch.catalog import fetch_catalog
from dockmatch.http import create_client
from dockmatch.manifest import dependencies
from dockmatch.registry import REGISTRY_URL, fetch_and_parse, registry_url

log = structlog.get_logger("dockmatch.matcher")


def match_keywords(keywords: Iterable[str], catalog: Mapping[str, str]) -> list[str]:
    """Return the keywords that name a catalog image, first occurrence only."""
    matched: list[str] = []
    seen: set[str] = set()
    for kw in keywords:
        if kw in catalog and kw not in seen:
            seen.add(kw)
            matched.append(kw)
    return matched


async def match_dependencies(
    path: str | Path,
    client: httpx.AsyncClient | None = None,
    *,
    catalog_url: str | None = None,
    registry_base_url: str = REGISTRY_URL,
    timeout: float | None = None,
) -> list[str]:
    """Return the official image names matching the manifest at *path*.

    The manifest is read before any request is made. Every registry page and
    the catalog are then fetched concurrently; the first failure propagates
    and no partial result is returned.

    When *client* is None a client is created for this call and closed after.
    Fetches still running when one fails are cancelled before returning.
    """
    names = dependencies(path)
    urls = [registry_url(name, registry_base_url) for name in names]

    if client is None:
        async with create_client(timeout) as owned:
            return await _gather_and_match(owned, urls, catalog_url)
    return await _gather_and_match(client, urls, catalog_url)


async def _gather_and_match(
    client: httpx.AsyncClient,
    urls: list[str],
    catalog_url: str | None,
) -> list[str]:
    log.info("matcher.fetching", packages=len(urls))
    tasks = [asyncio.ensure_future(fetch_catalog(client, catalog_url))]
    tasks.extend(asyncio.ensure_future(fetch_and_parse(url, client)) for url in urls)
    try:
        catalog, *pages = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise

    keywords = [kw for page in pages for kw in page]
    matched = match_keywords(keywords, catalog)
    log.info("matcher.done", keywords=len(keywords), matched=len(matched))
    return matched

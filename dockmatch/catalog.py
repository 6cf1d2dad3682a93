"""Official image catalog — fetch and index Docker Hub's ``library/`` repos."""

from __future__ import annotations

import json
import os

import httpx
import structlog

from dockmatch.exceptions import CatalogFetchError

log = structlog.get_logger("dockmatch.catalog")

# One large page; entries beyond page_size are not requested.
CATALOG_URL = os.environ.get(
    "DOCKMATCH_CATALOG_URL",
    "https://hub.docker.com/v2/repositories/library/?page_size=999",
)


def parse_catalog(text: str) -> dict[str, str]:
    """Turn a catalog JSON body into ``{name: description}``.

    The body looks like::

        {"count": 1, "results": [{"name": "nginx",
                                  "description": "Official build of Nginx.",
                                  "star_count": 3054, ...}]}

    Duplicate names keep the last description seen. Raises ``ValueError``
    (``json.JSONDecodeError`` included) or ``KeyError`` on a malformed body.
    """
    data = json.loads(text)
    results = data["results"]
    if not isinstance(results, list):
        raise ValueError("catalog 'results' is not a list")

    images: dict[str, str] = {}
    for entry in results:
        images[entry["name"]] = entry.get("description") or ""
    return images


async def fetch_catalog(client: httpx.AsyncClient, url: str | None = None) -> dict[str, str]:
    """GET the official image catalog and return ``{name: description}``.

    Raises :class:`CatalogFetchError` on transport failure, a non-2xx status,
    or a body that is not a catalog.
    """
    url = url or CATALOG_URL
    log.debug("catalog.fetch", url=url)
    try:
        resp = await client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise CatalogFetchError(url, exc) from exc

    try:
        images = parse_catalog(resp.text)
    except (ValueError, KeyError, TypeError) as exc:
        raise CatalogFetchError(url, exc) from exc

    log.info("catalog.fetched", url=url, images=len(images))
    return images

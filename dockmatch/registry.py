"""npm registry pages — URL building, fetching and keyword scraping."""

from __future__ import annotations

import os

import httpx
import structlog
from bs4 import BeautifulSoup

from dockmatch.exceptions import RegistryFetchError

log = structlog.get_logger("dockmatch.registry")

REGISTRY_URL = os.environ.get("DOCKMATCH_REGISTRY_URL", "https://www.npmjs.com/package")

# First keyword paragraph in the package page sidebar.
KEYWORDS_SELECTOR = ".sidebar > p.list-of-links:first-of-type"


def registry_url(name: str, base_url: str = REGISTRY_URL) -> str:
    """Return the registry detail page URL for package *name*.

    The name is not validated; an invalid one yields a URL that 404s.
    """
    return f"{base_url.rstrip('/')}/{name}"


def parse_keywords(html: str) -> list[str]:
    """Extract the comma-separated keyword list from a registry page.

    Each token is stripped at both ends only; internal whitespace is kept.
    Returns ``[]`` when the page has no keyword paragraph.
    """
    soup = BeautifulSoup(html, "html.parser")
    node = soup.select_one(KEYWORDS_SELECTOR)
    if node is None:
        log.warning("registry.keywords_missing", selector=KEYWORDS_SELECTOR)
        return []

    text = node.get_text()
    if not text.strip():
        return []
    return [token.strip() for token in text.split(",")]


async def fetch_and_parse(url: str, client: httpx.AsyncClient) -> list[str]:
    """GET a registry page and return its keywords.

    Raises :class:`RegistryFetchError` on transport failure or a non-2xx
    status. A page without keywords is not an error.
    """
    log.debug("registry.fetch", url=url)
    try:
        resp = await client.get(url)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise RegistryFetchError(url, exc) from exc

    keywords = parse_keywords(resp.text)
    log.debug("registry.parsed", url=url, keywords=len(keywords))
    return keywords

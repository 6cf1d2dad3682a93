"""dockmatch — find official Docker images for an npm project's dependencies."""

__version__ = "0.1.0"

from dockmatch.catalog import fetch_catalog, parse_catalog  # noqa: E402
from dockmatch.exceptions import (  # noqa: E402
    CatalogFetchError,
    DockmatchError,
    FetchError,
    ManifestError,
    RegistryFetchError,
)
from dockmatch.manifest import dependencies  # noqa: E402
from dockmatch.matcher import match_dependencies, match_keywords  # noqa: E402
from dockmatch.registry import fetch_and_parse, parse_keywords, registry_url  # noqa: E402

__all__ = [
    "CatalogFetchError",
    "DockmatchError",
    "FetchError",
    "ManifestError",
    "RegistryFetchError",
    "dependencies",
    "fetch_and_parse",
    "fetch_catalog",
    "match_dependencies",
    "match_keywords",
    "parse_catalog",
    "parse_keywords",
    "registry_url",
]

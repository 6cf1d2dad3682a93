"""Custom exceptions for dockmatch."""


class DockmatchError(Exception):
    """Base exception for all dockmatch errors."""


class ManifestError(DockmatchError, ValueError):
    """Raised when a manifest lacks a required dependency mapping."""

    def __init__(self, path: str, key: str):
        self.path = path
        self.key = key
        super().__init__(f"manifest {path!r} has no {key!r} mapping")


class FetchError(DockmatchError):
    """Raised when a remote endpoint cannot be fetched or decoded."""

    stage = "fetch"

    def __init__(self, url: str, reason: object):
        self.url = url
        self.reason = reason
        super().__init__(f"{self.stage} failed: {url}: {reason}")


class RegistryFetchError(FetchError):
    """Raised when a package registry page cannot be fetched."""

    stage = "registry fetch"


class CatalogFetchError(FetchError):
    """Raised when the official image catalog cannot be fetched or parsed."""

    stage = "catalog fetch"

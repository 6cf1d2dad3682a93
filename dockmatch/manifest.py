"""Manifest reader — dependency names from an npm ``package.json``."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from dockmatch.exceptions import ManifestError

log = structlog.get_logger("dockmatch.manifest")

_DEP_SECTIONS = ("dependencies", "devDependencies")


def dependencies(path: str | Path) -> list[str]:
    """Return every dependency name declared in the manifest at *path*.

    Runtime dependencies come first, then development dependencies, each in
    the order the file declares them. Names present in both groups appear
    twice.

    File and JSON errors propagate unchanged. A document missing either
    mapping raises :class:`ManifestError`.
    """
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))

    names: list[str] = []
    for section in _DEP_SECTIONS:
        table = data.get(section) if isinstance(data, dict) else None
        if not isinstance(table, dict):
            raise ManifestError(str(path), section)
        names.extend(table.keys())

    log.debug("manifest.read", path=str(path), count=len(names))
    return names

"""CLI entry point: dockmatch.

Usage:
    dockmatch                          # match ./package.json
    dockmatch path/to/package.json --json
    dockmatch package.json --catalog-url 'https://hub.docker.com/v2/repositories/library/?page_size=10'
"""

from __future__ import annotations

import asyncio
import json

import click
import structlog

from dockmatch.catalog import CATALOG_URL
from dockmatch.core.logging import setup_logging
from dockmatch.exceptions import DockmatchError
from dockmatch.http import DEFAULT_TIMEOUT
from dockmatch.matcher import match_dependencies
from dockmatch.registry import REGISTRY_URL

log = structlog.get_logger("dockmatch.cli")


@click.command()
@click.argument("manifest", default="package.json", type=click.Path(dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Output as a JSON array")
@click.option("--catalog-url", default=CATALOG_URL, show_default=True, help="Official image catalog URL")
@click.option("--registry-url", default=REGISTRY_URL, show_default=True, help="Registry package page prefix")
@click.option("--timeout", type=float, default=DEFAULT_TIMEOUT, show_default=True, help="HTTP timeout (s)")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    manifest: str,
    as_json: bool,
    catalog_url: str,
    registry_url: str,
    timeout: float,
    verbose: bool,
) -> None:
    """List official Docker images matching the dependencies in MANIFEST."""
    setup_logging("DEBUG" if verbose else None)

    try:
        matched = asyncio.run(
            match_dependencies(
                manifest,
                catalog_url=catalog_url,
                registry_base_url=registry_url,
                timeout=timeout,
            )
        )
    except (DockmatchError, OSError, json.JSONDecodeError) as exc:
        log.debug("cli.failed", exc_info=True)
        raise click.ClickException(str(exc)) from exc

    if as_json:
        click.echo(json.dumps(matched, indent=2))
    elif not matched:
        click.echo("No official images matched.")
    else:
        for name in matched:
            click.echo(name)

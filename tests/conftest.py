"""Shared pytest fixtures for dockmatch tests (no network required)."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def package_json() -> Path:
    return FIXTURES / "package-test.json"


@pytest.fixture
def npm_html() -> str:
    return (FIXTURES / "npm-test.html").read_text(encoding="utf-8")


@pytest.fixture
def docker_json() -> str:
    return (FIXTURES / "docker-test.json").read_text(encoding="utf-8")

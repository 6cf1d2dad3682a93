"""Tests for the manifest reader."""

from __future__ import annotations

import json

import pytest

from dockmatch.exceptions import DockmatchError, ManifestError
from dockmatch.manifest import dependencies

TARGET_DEPS = [
    "mongoose",
    "redis",
    "express",
    "q",
    "sequelize",
    "ghost",
    "cradle",
    "node-solr-smart-client",
    "expect",
    "mocha",
    "consul",
]


def _write(tmp_path, data) -> str:
    path = tmp_path / "package.json"
    path.write_text(json.dumps(data))
    return str(path)


class TestDependencies:
    def test_reads_fixture_in_order(self, package_json):
        assert dependencies(package_json) == TARGET_DEPS

    def test_accepts_str_path(self, package_json):
        assert dependencies(str(package_json)) == TARGET_DEPS

    def test_runtime_before_dev(self, tmp_path):
        path = _write(
            tmp_path,
            {"devDependencies": {"mocha": "*"}, "dependencies": {"redis": "*"}},
        )
        assert dependencies(path) == ["redis", "mocha"]

    def test_duplicates_kept(self, tmp_path):
        path = _write(
            tmp_path,
            {"dependencies": {"redis": "^2"}, "devDependencies": {"redis": "^3"}},
        )
        assert dependencies(path) == ["redis", "redis"]

    def test_empty_mappings(self, tmp_path):
        path = _write(tmp_path, {"dependencies": {}, "devDependencies": {}})
        assert dependencies(path) == []

    def test_missing_dev_dependencies(self, tmp_path):
        path = _write(tmp_path, {"dependencies": {"redis": "*"}})
        with pytest.raises(ManifestError) as exc_info:
            dependencies(path)
        assert exc_info.value.key == "devDependencies"
        assert isinstance(exc_info.value, DockmatchError)
        assert isinstance(exc_info.value, ValueError)

    def test_missing_dependencies(self, tmp_path):
        path = _write(tmp_path, {"devDependencies": {"mocha": "*"}})
        with pytest.raises(ManifestError, match="'dependencies'"):
            dependencies(path)

    def test_mapping_not_an_object(self, tmp_path):
        path = _write(tmp_path, {"dependencies": ["redis"], "devDependencies": {}})
        with pytest.raises(ManifestError):
            dependencies(path)

    def test_top_level_not_an_object(self, tmp_path):
        path = _write(tmp_path, ["redis"])
        with pytest.raises(ManifestError):
            dependencies(path)

    def test_missing_file_not_wrapped(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            dependencies(tmp_path / "nope.json")

    def test_malformed_json_not_wrapped(self, tmp_path):
        path = tmp_path / "package.json"
        path.write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            dependencies(path)

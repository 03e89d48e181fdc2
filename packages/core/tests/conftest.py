"""Pytest configuration and fixtures for core tests."""

import json
from typing import Iterable

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests that touch the real filesystem")


@pytest.fixture
def write_manifest(tmp_path):
    """Return a function that writes package.json into a directory under tmp_path."""

    def _write(data, directory=None, raw: bool = False):
        pkg_dir = directory or tmp_path
        pkg_dir.mkdir(parents=True, exist_ok=True)
        content = data if raw else json.dumps(data)
        (pkg_dir / "package.json").write_text(content, encoding="utf-8")
        return pkg_dir

    return _write


@pytest.fixture
def fake_fs():
    """
    Return a factory for in-memory ``is_file`` predicates.

    The predicate records every path it was asked about in ``.calls``.
    """

    def _make(files: Iterable[str] = ()):
        file_set = set(files)

        async def is_file(path: str) -> bool:
            is_file.calls.append(path)
            return path in file_set

        is_file.calls = []
        return is_file

    return _make

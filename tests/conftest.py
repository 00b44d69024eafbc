"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def yaml_post() -> str:
    return _read_fixture("yaml_post.md")


@pytest.fixture
def toml_post() -> str:
    return _read_fixture("toml_post.md")


@pytest.fixture
def json_post() -> str:
    return _read_fixture("json_post.md")


@pytest.fixture
def page_html() -> str:
    return _read_fixture("page.html")


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR

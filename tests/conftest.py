"""Shared test fixtures and configuration."""

import os
from pathlib import Path

import pytest

from context_search.searcher import Searcher


FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch, tmp_path):
    """Keep developer environment variables and .env files out of tests."""
    for key in list(os.environ):
        if key.upper().startswith("CONTEXT_SEARCH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def short_searcher() -> Searcher:
    return Searcher.from_file(FIXTURES_DIR / "short_excerpt.txt")


@pytest.fixture
def long_searcher() -> Searcher:
    return Searcher.from_file(FIXTURES_DIR / "long_excerpt.txt")

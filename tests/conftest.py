"""Shared pytest fixtures for lh-avg tests."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from lh_avg.core.settings import get_cached_settings


@pytest.fixture
def spaced_score() -> str:
    """Return a score string in spaced shorthand form."""
    return "14 / 100 / 98 / 100 / (1, 0, 6)"


@pytest.fixture
def compressed_score() -> str:
    """Return the same score string without whitespace."""
    return "14/100/98/100/(1,0,6)"


@pytest.fixture
def fraction_score() -> str:
    """Return the same score string in full-fraction form."""
    return "14 / 100 / 98 / 100 / (1/3, 0/3, 6/7)"


@pytest.fixture
def improved_score() -> str:
    """Return a second run of the same page with better scores."""
    return "28 / 100 / 97 / 100 / (1, 2, 6)"


@pytest.fixture(autouse=True)
def clean_settings_env(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Iterator[None]:
    """Isolate tests from LH_AVG_* variables and .env files."""
    for key in list(os.environ):
        if key.startswith("LH_AVG_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    get_cached_settings.cache_clear()
    yield
    get_cached_settings.cache_clear()

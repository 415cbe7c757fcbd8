"""Shared fixtures."""

from __future__ import annotations

import os

import pytest

from wikimark.config.settings import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate every test from ambient WIKIMARK_* variables and cached settings."""
    for key in list(os.environ):
        if key.startswith("WIKIMARK_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

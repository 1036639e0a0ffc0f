"""Shared pytest fixtures."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's libpq and probe settings out of the tests."""
    for name in ("PGPASSWORD", "PGDEBUG", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

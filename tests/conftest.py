"""Shared pytest fixtures."""

import pytest

from librunner.config import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from LIBRUNNER_ environment variables and cached settings."""
    for name in (
        "LIBRUNNER_DEFAULT_UNIT_SYSTEM",
        "LIBRUNNER_LOG_LEVEL",
        "LIBRUNNER_NEGATIVE_SPLIT_DEGREE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()

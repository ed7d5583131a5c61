# tests/startup/conftest.py
"""Pytest configuration and fixtures for startup tests."""

import pytest

from app.configs import settings


@pytest.fixture(autouse=True)
def keep_root_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Stop the lifespan from replacing pytest's logging handlers."""
    monkeypatch.setattr("app.middleware.middleware.configure_logging", lambda: None)


@pytest.fixture
def unconfigured(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove the remote endpoint settings for the duration of a test."""
    monkeypatch.setattr(settings, "URL", None)
    monkeypatch.setattr(settings, "SECRET_KEY", None)

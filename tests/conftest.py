# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Required settings must exist before app is imported anywhere
os.environ.setdefault("URL", "https://blogs.example.test/api/rest/blogs")
os.environ.setdefault("SECRET_KEY", "test-admin-secret")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ["LOG_TO_FILE"] = "false"

import pytest  # noqa: E402

from app.schemas import Blog  # noqa: E402

SAMPLE_TITLES = ["Privacy Policy", "Hello World", "Hello World", "Privacy and You"]


@pytest.fixture
def sample_blogs() -> list[Blog]:
    """The four-record collection used across engine and route tests."""
    return [Blog(title=title) for title in SAMPLE_TITLES]

"""Pytest configuration and fixtures for client tests."""

from collections.abc import Callable

import pytest
from httpx import MockTransport, Request, Response

from app.clients import BlogClient

BLOG_URL = "https://blogs.example.test/api/rest/blogs"
ADMIN_SECRET = "s3cret"

Handler = Callable[[Request], Response]


@pytest.fixture
def make_blog_client() -> Callable[[Handler], BlogClient]:
    """Build a BlogClient whose requests are answered by ``handler``."""

    def factory(handler: Handler) -> BlogClient:
        return BlogClient(BLOG_URL, ADMIN_SECRET, transport=MockTransport(handler))

    return factory

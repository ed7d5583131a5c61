"""Pytest configuration and fixtures for route tests."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from app.clients import BlogClient
from app.dependencies import get_blog_client, get_search_cache
from app.main import app
from app.managers import SearchCache
from app.schemas import Blog


@pytest.fixture
def blog_client(sample_blogs: list[Blog]) -> MagicMock:
    """Mock BlogClient returning the sample collection."""
    mock_client = MagicMock(spec=BlogClient)
    mock_client.fetch_blogs = AsyncMock(return_value=sample_blogs)
    return mock_client


@pytest.fixture
def search_cache() -> SearchCache:
    """Fresh search cache for each test."""
    return SearchCache()


@pytest.fixture
async def client(
    blog_client: MagicMock,
    search_cache: SearchCache,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create async HTTP client for testing the blog endpoints.

    The remote endpoint is replaced by ``blog_client`` and the process-wide
    cache by ``search_cache`` through dependency overrides.
    """
    app.dependency_overrides[get_blog_client] = lambda: blog_client
    app.dependency_overrides[get_search_cache] = lambda: search_cache
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app, raise_app_exceptions=False),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()

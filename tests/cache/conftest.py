"""Pytest configuration and fixtures for cache tests."""

import pytest

from app.clients import MemoryClient
from app.managers import SearchCache


@pytest.fixture
def memory_client() -> MemoryClient:
    """Create an unbounded in-memory cache client."""
    return MemoryClient()


@pytest.fixture
def search_cache(memory_client: MemoryClient) -> SearchCache:
    """Create a search cache without request coalescing."""
    return SearchCache(memory_client)


@pytest.fixture
def coalescing_cache() -> SearchCache:
    """Create a search cache that computes each key once."""
    return SearchCache(MemoryClient(), coalesce=True)

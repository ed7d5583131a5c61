"""Protocol definitions for cache client implementations."""

from collections.abc import Awaitable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheClientProtocol(Protocol):
    """
    Protocol for the key-value store behind the search cache.

    Any store that implements these coroutines can replace the default
    MemoryClient (an LRU store, a TTL store, a shared store) without the
    SearchCache or the routes changing.
    """

    def get(self, key: str) -> Awaitable[Any | None]:
        """Get a value from the cache."""
        ...

    def set(self, key: str, value: Any, ex: int | None = None) -> Awaitable[bool]:
        """Set a value in the cache with optional TTL."""
        ...

    def delete(self, *keys: str) -> Awaitable[int]:
        """Delete one or more keys from the cache."""
        ...

    def exists(self, *keys: str) -> Awaitable[int]:
        """Check if keys exist in the cache."""
        ...

    def flush_all(self) -> Awaitable[bool]:
        """Clear all entries from the cache."""
        ...

    def info(self) -> Awaitable[dict[str, Any]]:
        """Get information about the cache."""
        ...

"""In-memory key-value store backing the search cache."""

from asyncio import Lock
from collections import OrderedDict
from logging import DEBUG, getLogger
from time import monotonic
from typing import Any

logger = getLogger(__name__)


class MemoryClient:
    """
    An asynchronous in-memory key-value store.

    With no limits configured the store is a plain map that grows for the
    lifetime of the process and never expires anything. Limits are opt-in:

        - ``max_entries``: least recently used entries are evicted beyond it.
        - ``ttl``: default lifetime in seconds; expired keys are dropped
          lazily when read.
    """

    def __init__(self, max_entries: int | None = None, ttl: int | None = None) -> None:
        """
        Initialize the MemoryClient.

        Args:
            max_entries: Maximum number of entries before LRU eviction, None for unbounded.
            ttl: Default time to live in seconds, None for entries that never expire.

        Raises:
            ValueError: If max_entries is less than 1.
        """
        if max_entries is not None and max_entries < 1:
            mssg = f"max_entries must be at least 1, got {max_entries}"
            raise ValueError(mssg)

        # OrderedDict keeps recency order for LRU eviction
        self._cache: OrderedDict[str, Any] = OrderedDict()
        self._ttl: dict[str, float] = {}
        self._max_entries = max_entries
        self._default_ttl = ttl
        self.evictions: int = 0

        self._lock = Lock()

    def _is_expired_internal(self, key: str) -> bool:
        """Check if a key has expired (internal, no lock)."""
        if key in self._ttl:
            return monotonic() > self._ttl[key]
        return False

    def _delete_internal(self, *keys: str) -> int:
        """Delete keys without acquiring lock (internal use only)."""
        count = 0
        for key in keys:
            if key in self._cache:
                del self._cache[key]
                self._ttl.pop(key, None)
                count += 1
        return count

    def _evict_oldest(self) -> None:
        """Evict the least recently used entry (internal, no lock)."""
        key, _ = self._cache.popitem(last=False)
        self._ttl.pop(key, None)
        self.evictions += 1
        if logger.isEnabledFor(DEBUG):
            logger.debug("Evicted cache key: %s", key)

    async def get(self, key: str) -> Any | None:
        """Get a value from the cache."""
        async with self._lock:
            if self._is_expired_internal(key):
                self._delete_internal(key)
                return None
            if key not in self._cache:
                return None
            self._cache.move_to_end(key)
            return self._cache[key]

    async def set(self, key: str, value: Any, ex: int | None = None) -> bool:
        """Set a value, replacing any previous one stored under the key."""
        async with self._lock:
            if self._max_entries is not None:
                while len(self._cache) >= self._max_entries and key not in self._cache:
                    self._evict_oldest()

            self._cache[key] = value
            self._cache.move_to_end(key)

            if lifetime := ex if ex is not None else self._default_ttl:
                self._ttl[key] = monotonic() + lifetime
            else:
                self._ttl.pop(key, None)

            return True

    async def delete(self, *keys: str) -> int:
        """Delete one or more keys from the cache."""
        async with self._lock:
            return self._delete_internal(*keys)

    async def exists(self, *keys: str) -> int:
        """Count how many of the keys are present and unexpired."""
        async with self._lock:
            return sum(
                1 for key in keys if key in self._cache and not self._is_expired_internal(key)
            )

    async def flush_all(self) -> bool:
        """Clear the entire cache."""
        async with self._lock:
            self._cache.clear()
            self._ttl.clear()
            return True

    async def info(self) -> dict[str, Any]:
        """Get information about the in-memory cache."""
        async with self._lock:
            return {
                "server": "In-Memory Cache",
                "total_keys": len(self._cache),
                "max_entries": self._max_entries,
                "default_ttl": self._default_ttl,
                "evictions": self.evictions,
            }

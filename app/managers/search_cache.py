# app/managers/search_cache.py
"""Process-wide cache of blog search reports keyed by raw query text."""

from asyncio import Lock as AsyncLock
from collections.abc import Awaitable, Callable
from typing import Any

from app.clients.memory_client import MemoryClient
from app.clients.protocols import CacheClientProtocol
from app.data import CacheStatistics
from app.monitoring import get_logger
from app.schemas import BlogSearchResponse
from app.schemas.cache import CacheStatisticsData
from app.utils.cache_keys import blog_search_key

logger = get_logger(__name__)

SearchCallback = Callable[[], Awaitable[BlogSearchResponse]]


class SearchCache:
    """
    Memoizes search reports for the lifetime of the process.

    An entry, once written, is served for every later request with the same
    key, even if the remote collection has changed since. Nothing is
    invalidated unless the backing client is configured with limits.

    Concurrent misses for the same key:
        - ``coalesce=False``: every caller computes and stores; the last
          write wins. De-duplication is best effort.
        - ``coalesce=True``: callers for a key queue on a per-key lock and
          re-check the store, so the report is computed once.
    """

    def __init__(
        self,
        client: CacheClientProtocol | None = None,
        *,
        coalesce: bool = False,
    ) -> None:
        """Initialize the cache over ``client`` (an unbounded MemoryClient by default)."""
        self._client: CacheClientProtocol = client if client is not None else MemoryClient()
        self.coalesce = coalesce
        self.statistics = CacheStatistics()
        self._locks: dict[str, AsyncLock] = {}

    @staticmethod
    def build_key(query: str) -> str:
        """Build the cache key for a raw, unnormalized query."""
        return blog_search_key(query)

    async def get(self, key: str) -> BlogSearchResponse | None:
        """Return the stored report for ``key``, or None."""
        cached = await self._client.get(key)
        if cached is None:
            self.statistics.record_miss()
            logger.debug(f"Search cache miss: {key}")
            return None

        self.statistics.record_hit()
        return cached

    async def _compute_and_store(self, key: str, compute: SearchCallback) -> BlogSearchResponse:
        try:
            report = await compute()
        except Exception:
            self.statistics.record_error()
            raise
        await self._client.set(key, report)
        self.statistics.record_set()
        return report

    def _get_or_create_lock(self, key: str) -> AsyncLock:
        if (lock := self._locks.get(key)) is None:
            lock = self._locks[key] = AsyncLock()
        return lock

    async def get_or_compute(self, key: str, compute: SearchCallback) -> BlogSearchResponse:
        """
        Return the report stored under ``key``, computing and storing it on a miss.

        ``compute`` is not awaited on a hit. If it raises, nothing is stored
        and the exception propagates.
        """
        # 1. Optimistic check
        if (cached := await self.get(key)) is not None:
            return cached

        if not self.coalesce:
            return await self._compute_and_store(key, compute)

        # 2. One computation per key; later callers wait here
        try:
            async with self._get_or_create_lock(key):
                # 3. Double check after acquiring the lock
                if (cached := await self._client.get(key)) is not None:
                    self.statistics.record_hit()
                    return cached
                return await self._compute_and_store(key, compute)
        finally:
            # stored or failed, the lock is no longer needed
            self._locks.pop(key, None)

    async def clear(self) -> None:
        """Drop every stored report."""
        await self._client.flush_all()
        logger.info("Search cache cleared.")

    async def size(self) -> int:
        """Return the number of stored reports."""
        info = await self.info()
        return int(info["total_keys"])

    async def info(self) -> dict[str, Any]:
        """Return backend information from the underlying client."""
        return await self._client.info()

    def get_statistics(self) -> CacheStatisticsData:
        """Get cache statistics."""
        return self.statistics.to_data()

"""Search cache statistics module."""

from dataclasses import dataclass, field
from threading import Lock

from app.schemas.cache import CacheStatisticsData
from app.utils.helpers import today_str


@dataclass
class CacheStatistics:
    """Search cache statistics tracker."""

    hits: int = 0
    misses: int = 0
    sets: int = 0
    errors: int = 0
    created_at: str = field(default_factory=today_str)
    last_updated_at: str = field(default_factory=today_str)
    _lock: Lock = field(default_factory=Lock, init=False, repr=False)

    def record_hit(self) -> None:
        """Record cache hit."""
        with self._lock:
            self.hits += 1
            self.last_updated_at = today_str()

    def record_miss(self) -> None:
        """Record cache miss."""
        with self._lock:
            self.misses += 1
            self.last_updated_at = today_str()

    def record_set(self) -> None:
        """Record a computed report being stored."""
        with self._lock:
            self.sets += 1
            self.last_updated_at = today_str()

    def record_error(self) -> None:
        """Record a failed computation."""
        with self._lock:
            self.errors += 1
            self.last_updated_at = today_str()

    @property
    def hit_rate(self) -> float:
        """
        Calculate cache hit rate.

        Returns:
            Hit rate as percentage (0-100).
        """
        total = self.hits + self.misses
        return (self.hits / total * 100) if total > 0 else 0.0

    @property
    def total_requests(self) -> int:
        return self.hits + self.misses

    def to_data(self) -> CacheStatisticsData:
        """Snapshot the counters as a response model."""
        with self._lock:
            return CacheStatisticsData(
                hits=self.hits,
                misses=self.misses,
                sets=self.sets,
                errors=self.errors,
                hit_rate=f"{self.hit_rate:.2f}%",
                total_requests=self.total_requests,
                created_at=self.created_at,
                last_updated_at=self.last_updated_at,
            )

from pydantic import BaseModel, ConfigDict


class CacheStatisticsData(BaseModel):
    """Search cache statistics model."""

    model_config = ConfigDict(frozen=True)

    hits: int
    misses: int
    sets: int
    errors: int
    hit_rate: str
    total_requests: int
    created_at: str
    last_updated_at: str

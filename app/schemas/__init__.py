from app.schemas.blog import (
    Blog,
    BlogFeed,
    BlogSearchResponse,
    BlogStatsResponse,
    ErrorResponse,
    MessageResponse,
)
from app.schemas.cache import CacheStatisticsData

__all__ = [
    "Blog",
    "BlogFeed",
    "BlogSearchResponse",
    "BlogStatsResponse",
    "CacheStatisticsData",
    "ErrorResponse",
    "MessageResponse",
]

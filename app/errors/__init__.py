from app.errors.base import (
    DEFAULT_ERROR_MESSAGE,
    BaseAppError,
    create_exception_handler,
    create_unhandled_exception_handler,
)
from app.errors.blog import (
    BLOG_SEARCH_ERROR,
    BLOG_STATS_ERROR,
    QUERY_REQUIRED_ERROR,
    BlogSearchError,
    BlogServiceError,
    BlogStatsError,
    InvalidQueryError,
    MalformedRecordError,
    UpstreamFetchError,
    blog_exception_handler,
)
from app.errors.config import ConfigMissingError

__all__ = [
    "BLOG_SEARCH_ERROR",
    "BLOG_STATS_ERROR",
    "DEFAULT_ERROR_MESSAGE",
    "QUERY_REQUIRED_ERROR",
    "BaseAppError",
    "BlogSearchError",
    "BlogServiceError",
    "BlogStatsError",
    "ConfigMissingError",
    "InvalidQueryError",
    "MalformedRecordError",
    "UpstreamFetchError",
    "blog_exception_handler",
    "create_exception_handler",
    "create_unhandled_exception_handler",
]

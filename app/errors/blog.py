"""Custom exceptions for blog fetching, analysis and search."""

from logging import getLogger

from starlette import status

from app.errors.base import BaseAppError, create_exception_handler

logger = getLogger(__name__)

BLOG_STATS_ERROR = "An error occurred while fetching and analyzing blog data."
BLOG_SEARCH_ERROR = "An error occurred while searching for blogs."
QUERY_REQUIRED_ERROR = "Query parameter 'query' is required."
UPSTREAM_ERROR_PREFIX = "Error fetching data from the third-party API"


class BlogServiceError(BaseAppError):
    """Base exception for failures while producing a blog report."""

    def __init__(self, detail: str = "Blog service error") -> None:
        super().__init__(
            detail=detail,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


class UpstreamFetchError(BlogServiceError):
    """Raised when the remote blog endpoint cannot be reached or answers badly."""

    def __init__(self, reason: str = "request failed") -> None:
        super().__init__(f"{UPSTREAM_ERROR_PREFIX}: {reason}")


class MalformedRecordError(BlogServiceError):
    """Raised when a blog record has no usable title."""

    def __init__(self, detail: str = "Blog record has no usable title") -> None:
        super().__init__(detail)


class InvalidQueryError(BaseAppError):
    """Raised when the search query parameter is missing or empty."""

    def __init__(self, detail: str = QUERY_REQUIRED_ERROR) -> None:
        super().__init__(detail=detail, status_code=status.HTTP_400_BAD_REQUEST)


class BlogStatsError(BaseAppError):
    """Client-facing failure of the blog statistics endpoint."""

    def __init__(self, detail: str = BLOG_STATS_ERROR) -> None:
        super().__init__(detail=detail)


class BlogSearchError(BaseAppError):
    """Client-facing failure of the blog search endpoint."""

    def __init__(self, detail: str = BLOG_SEARCH_ERROR) -> None:
        super().__init__(detail=detail)


# Create the exception handler using the helper
blog_exception_handler = create_exception_handler(logger)

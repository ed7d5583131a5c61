# app/routes/blog.py

"""
Blog Routes.

Proxies the remote blog endpoint and reports on what it returns.

Summary
-------
Endpoints include:
  - Blog statistics (fetched fresh on every request)
  - Blog title search (memoized per raw query string)

Dependencies
------------
  - `BlogClientDep`: Client for the remote blog endpoint.
  - `SearchCacheDep`: Process-wide search report cache.

Errors
------
Failures are logged with their cause and answered with a fixed,
per-endpoint ``{"error": ...}`` body; no internal detail reaches the client.
"""

from typing import Annotated

from fastapi import APIRouter, Query
from fastapi.responses import ORJSONResponse

from app.dependencies import BlogClientDep, SearchCacheDep
from app.errors import (
    BLOG_SEARCH_ERROR,
    BLOG_STATS_ERROR,
    QUERY_REQUIRED_ERROR,
    BlogSearchError,
    BlogServiceError,
    BlogStatsError,
    InvalidQueryError,
)
from app.monitoring import get_logger
from app.schemas import BlogSearchResponse, BlogStatsResponse, ErrorResponse
from app.services import compute_stats, search_blogs

router = APIRouter(prefix="/api", tags=["📝 Blogs"])

logger = get_logger(__name__)


@router.get(
    "/blog-stats",
    summary="Blog statistics",
    response_model=BlogStatsResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "totalBlogs": 4,
                        "blogWithLongestTitle": "Privacy and You",
                        "numberOfBlogsWithPrivacy": 2,
                        "blogTitlesWithPrivacy": ["Privacy Policy", "Privacy and You"],
                        "uniqueBlogTitles": ["Privacy Policy", "Hello World", "Privacy and You"],
                    },
                },
            },
        },
        500: {"model": ErrorResponse, "description": BLOG_STATS_ERROR},
    },
    operation_id="get_blog_stats",
)
async def get_blog_stats(client: BlogClientDep) -> ORJSONResponse:
    """
    Fetch the blog collection and summarize it.

    Parameters
    ----------
    client : BlogClient
        Client for the remote blog endpoint.

    Returns
    -------
    ORJSONResponse
        Total count, longest title, privacy titles and unique titles.

    Raises
    ------
    BlogStatsError
        When fetching or analyzing fails.

    Examples
    --------
    Request
        GET /api/blog-stats
    Response
        200 OK
        {"totalBlogs": 4, "blogWithLongestTitle": "Privacy and You", ...}
    """
    try:
        blogs = await client.fetch_blogs()
        stats = compute_stats(blogs)
    except BlogServiceError as e:
        logger.error(f"An error occurred while fetching and analyzing blog data: {e}")
        raise BlogStatsError from e
    except Exception as e:
        logger.exception("Unexpected failure while fetching and analyzing blog data")
        raise BlogStatsError from e

    return ORJSONResponse(content=stats.model_dump(by_alias=True))


@router.get(
    "/blog-search",
    summary="Search blog titles",
    response_model=BlogSearchResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "query": "hello",
                        "matchingBlogCount": 2,
                        "matchingBlogTitles": ["Hello World", "Hello World"],
                    },
                },
            },
        },
        400: {"model": ErrorResponse, "description": QUERY_REQUIRED_ERROR},
        500: {"model": ErrorResponse, "description": BLOG_SEARCH_ERROR},
    },
    operation_id="search_blogs",
)
async def get_blog_search(
    client: BlogClientDep,
    cache: SearchCacheDep,
    query: Annotated[str | None, Query(description="Case-insensitive title substring")] = None,
) -> ORJSONResponse:
    """
    Search blog titles, serving repeated queries from the cache.

    The cache key is the raw query text, so ``Foo`` and ``foo`` are cached
    separately. A cached report is returned even if the remote collection
    has changed since it was computed.

    Parameters
    ----------
    client : BlogClient
        Client for the remote blog endpoint, only used on a cache miss.
    cache : SearchCache
        Process-wide search report cache.
    query : str | None
        Text to look for in blog titles.

    Returns
    -------
    ORJSONResponse
        The query, the number of matches and the matching titles.

    Raises
    ------
    InvalidQueryError
        When ``query`` is missing or empty.
    BlogSearchError
        When fetching or searching fails.

    Examples
    --------
    Request
        GET /api/blog-search?query=hello
    Response
        200 OK
        {"query": "hello", "matchingBlogCount": 2, "matchingBlogTitles": [...]}
    """
    if not query:
        raise InvalidQueryError

    async def compute() -> BlogSearchResponse:
        blogs = await client.fetch_blogs()
        return search_blogs(blogs, query)

    try:
        report = await cache.get_or_compute(cache.build_key(query), compute)
    except BlogServiceError as e:
        logger.error(f"An error occurred while searching for blogs: {e}")
        raise BlogSearchError from e
    except Exception as e:
        logger.exception("Unexpected failure while searching for blogs")
        raise BlogSearchError from e

    return ORJSONResponse(content=report.model_dump(by_alias=True))

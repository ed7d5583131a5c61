# app/middleware/middleware.py
"""
Middleware components for the Blog Insights application.

This module contains the request logging middleware and the lifespan
event handler that validates configuration and creates the process-wide
services (blog client and search cache).
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from app.clients import BlogClient, MemoryClient
from app.configs import settings
from app.managers import SearchCache
from app.monitoring import bind_request_id, clear_context, configure_logging, get_logger
from app.utils.helpers import get_summary, host

logger = get_logger(__name__)


def build_search_cache() -> SearchCache:
    """Create the search cache described by the current settings."""
    store = MemoryClient(
        max_entries=settings.SEARCH_CACHE_MAX_ENTRIES,
        ttl=settings.SEARCH_CACHE_TTL,
    )
    return SearchCache(store, coalesce=settings.SEARCH_CACHE_COALESCE)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events with service initialization."""
    # Startup
    configure_logging()
    logger.info(f"Starting {app.title}...")

    try:
        settings.validate_required()
    except Exception:
        logger.exception("Invalid configuration, refusing to start")
        raise

    blog_client = BlogClient(
        url=settings.URL or "",
        secret=settings.SECRET_KEY or "",
        timeout=settings.BLOG_API_TIMEOUT,
    )
    app.state.blog_client = blog_client
    app.state.search_cache = build_search_cache()

    logger.info(f"Server is running on port {settings.PORT}")

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title}...")
    await blog_client.close()
    cache_info = await app.state.search_cache.info()
    logger.info(f"Search cache held {cache_info['total_keys']} entries at shutdown")


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        request_id = request.headers.get("X-Request-ID") or uuid4().hex
        bind_request_id(request_id)
        start_time = perf_counter()

        route_info = get_summary(request) or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        try:
            response = await call_next(request)
        finally:
            duration = perf_counter() - start_time
            clear_context()

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
            request_id=request_id,
        )
        response.headers["X-Request-ID"] = request_id
        return response

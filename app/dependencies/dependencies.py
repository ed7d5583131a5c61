"""Application dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from app.clients.blog_client import BlogClient
from app.managers.search_cache import SearchCache


def get_blog_client(request: Request) -> BlogClient:
    """Dependency to get the blog client created at startup."""
    return request.app.state.blog_client


BlogClientDep = Annotated[BlogClient, Depends(get_blog_client)]


def get_search_cache(request: Request) -> SearchCache:
    """Dependency to get the process-wide search cache."""
    return request.app.state.search_cache


SearchCacheDep = Annotated[SearchCache, Depends(get_search_cache)]

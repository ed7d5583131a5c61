# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    BlogClientDep,
    SearchCacheDep,
    get_blog_client,
    get_search_cache,
)

__all__ = [
    "BlogClientDep",
    "SearchCacheDep",
    "get_blog_client",
    "get_search_cache",
]

"""
Cache key builders for the application.

Keys are built from the raw request text with no normalization, so
``Foo`` and ``foo`` (or ``" foo"``) land in separate entries.
"""

BLOG_SEARCH_PATH = "/api/blog-search"


def blog_search_key(query: str) -> str:
    """Generate cache key for a blog search query."""
    return f"{BLOG_SEARCH_PATH}?query={query}"

from app.middleware.middleware import LoggingMiddleware, build_search_cache, lifespan

__all__ = [
    "LoggingMiddleware",
    "build_search_cache",
    "lifespan",
]

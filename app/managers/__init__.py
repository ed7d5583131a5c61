from app.managers.search_cache import SearchCache, SearchCallback

__all__ = ["SearchCache", "SearchCallback"]

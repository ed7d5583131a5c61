"""Utility helper functions."""

from app.utils.cache_keys import blog_search_key
from app.utils.helpers import get_summary, host, today_str

__all__ = [
    "blog_search_key",
    "get_summary",
    "host",
    "today_str",
]

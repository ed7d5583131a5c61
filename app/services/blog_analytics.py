"""
Blog statistics and title search.

Both functions are pure and synchronous: they never touch the network or
the cache, so concurrent requests can call them freely. Every title is
validated before any result is built, so a bad record fails the whole call.
"""

from collections.abc import Mapping, Sequence

from app.configs import PRIVACY_KEYWORD
from app.errors import MalformedRecordError
from app.schemas import Blog, BlogSearchResponse, BlogStatsResponse

BlogRecord = Blog | Mapping[str, object]


def _title(record: BlogRecord, index: int) -> str:
    if isinstance(record, Blog):
        title: object = record.title
    elif isinstance(record, Mapping):
        title = record.get("title")
    else:
        title = None
    if not isinstance(title, str):
        mssg = f"Blog record at index {index} has no string title"
        raise MalformedRecordError(mssg)
    return title


def _titles(collection: Sequence[BlogRecord]) -> list[str]:
    return [_title(record, i) for i, record in enumerate(collection)]


def compute_stats(collection: Sequence[BlogRecord]) -> BlogStatsResponse:
    """
    Summarize a blog collection.

    Args:
        collection: Blogs in remote order, possibly empty.

    Returns:
        Total count, the first longest title (None when empty), titles
        mentioning "privacy" in any case, and titles with duplicates removed
        keeping the first occurrence.

    Raises:
        MalformedRecordError: If any record lacks a string title.
    """
    titles = _titles(collection)

    # max() keeps the first of equal keys
    longest = max(titles, key=len, default=None)
    with_privacy = [title for title in titles if PRIVACY_KEYWORD in title.lower()]
    unique = list(dict.fromkeys(titles))

    return BlogStatsResponse(
        total_blogs=len(titles),
        blog_with_longest_title=longest,
        number_of_blogs_with_privacy=len(with_privacy),
        blog_titles_with_privacy=with_privacy,
        unique_blog_titles=unique,
    )


def search_blogs(collection: Sequence[BlogRecord], query: str) -> BlogSearchResponse:
    """
    Match ``query`` case-insensitively against every blog title.

    Args:
        collection: Blogs in remote order.
        query: Non-empty search text, echoed back unchanged.

    Returns:
        Matching titles in collection order and their count.

    Raises:
        MalformedRecordError: If any record lacks a string title.
    """
    needle = query.lower()
    matches = [title for title in _titles(collection) if needle in title.lower()]

    return BlogSearchResponse(
        query=query,
        matching_blog_count=len(matches),
        matching_blog_titles=matches,
    )

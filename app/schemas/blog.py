"""
Blog models for the Blog Insights application.

This module defines the shape of the records fetched from the remote
content-graph endpoint and the reports returned by the blog routes.
Response fields are serialized in camelCase to match the public API.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Blog(BaseModel):
    """A single blog record; only the title is interpreted."""

    model_config = ConfigDict(extra="allow", frozen=True)

    title: str = Field(..., description="Blog title", examples=["Privacy Policy"])


class BlogFeed(BaseModel):
    """Payload returned by the remote endpoint."""

    model_config = ConfigDict(extra="allow")

    blogs: list[Blog] = Field(..., description="Blogs in remote order")


class _ReportModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class BlogStatsResponse(_ReportModel):
    """Aggregate statistics over a blog collection."""

    total_blogs: int = Field(..., ge=0, description="Number of blogs fetched")
    blog_with_longest_title: str | None = Field(
        default=None,
        description="First title of maximal length, null when there are no blogs",
    )
    number_of_blogs_with_privacy: int = Field(..., ge=0)
    blog_titles_with_privacy: list[str] = Field(default_factory=list)
    unique_blog_titles: list[str] = Field(default_factory=list)


class BlogSearchResponse(_ReportModel):
    """Result of matching a query against every blog title."""

    query: str = Field(..., description="Query exactly as received")
    matching_blog_count: int = Field(..., ge=0)
    matching_blog_titles: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str


class MessageResponse(BaseModel):
    """Plain message body."""

    message: str

"""Application queries (read-only use cases)."""

from bse.application.queries.blog import GetBlogPostQuery, ListBlogPostsQuery

__all__ = [
    "GetBlogPostQuery",
    "ListBlogPostsQuery",
]

"""Blog domain - posts, their image attachments and pagination.

Design notes:
- A post's author is fixed at creation
- Edits replace title/content and append images, never remove them
- Author name/email are a read-time projection, not stored on the post
"""

from bse.domain.blog.aggregates import BlogPost
from bse.domain.blog.entities import BlogImage
from bse.domain.blog.exceptions import (
    BlogPostNotFoundError,
    BlogPostPermissionError,
    InvalidFileError,
)
from bse.domain.blog.repositories import BlogPostRepository
from bse.domain.blog.value_objects import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    Author,
    PageRequest,
)

__all__ = [
    "Author",
    "BlogImage",
    "BlogPost",
    "BlogPostNotFoundError",
    "BlogPostPermissionError",
    "BlogPostRepository",
    "DEFAULT_PAGE_SIZE",
    "InvalidFileError",
    "MAX_PAGE_SIZE",
    "PageRequest",
]

"""Value objects for the blog domain."""

from bse.domain.blog.value_objects.author import Author
from bse.domain.blog.value_objects.page_request import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    PageRequest,
)

__all__ = [
    "Author",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PageRequest",
]

"""Pagination request value object."""

from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """A normalized (page, page_size) pair.

    Use ``PageRequest.normalize`` to build one from raw client input:
    page < 1 becomes 1, page_size < 1 becomes the default and page_size
    above the maximum is capped.
    """

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def normalize(cls, page: int | None, page_size: int | None) -> "PageRequest":
        page = DEFAULT_PAGE if page is None or page < 1 else page
        if page_size is None or page_size < 1:
            page_size = DEFAULT_PAGE_SIZE
        elif page_size > MAX_PAGE_SIZE:
            page_size = MAX_PAGE_SIZE
        return cls(page=page, page_size=page_size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def total_pages(self, total_count: int) -> int:
        # Ceiling division; zero items means zero pages
        return -(-total_count // self.page_size)

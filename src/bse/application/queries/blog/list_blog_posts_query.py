"""List blog posts one page at a time."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from bse.application.dtos.blog import PaginatedBlogPostsDTO
from bse.domain.blog import BlogPostRepository, PageRequest

if TYPE_CHECKING:
    from bse.application.factories import RepositoryFactory


class ListBlogPostsQuery:
    """Newest-first paginated listing.

    Out-of-range paging input is normalized, never rejected.
    """

    def __init__(self, blog_post_repository: BlogPostRepository):
        self._blog_repo = blog_post_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> ListBlogPostsQuery:
        return cls(blog_post_repository=factory.blog_post_repository())

    async def execute(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> PaginatedBlogPostsDTO:
        page_request = PageRequest.normalize(page, page_size)

        total_count = await self._blog_repo.count()
        # Pages past the end are empty; their offset may not fit a SQL integer
        posts = []
        if page_request.offset < total_count:
            posts = await self._blog_repo.find_page(
                offset=page_request.offset,
                limit=page_request.page_size,
            )

        return PaginatedBlogPostsDTO.create(posts, total_count, page_request)

"""Fetch a single blog post."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bse.application.dtos.blog import BlogPostDTO
from bse.domain.blog import BlogPostNotFoundError, BlogPostRepository

if TYPE_CHECKING:
    from bse.application.factories import RepositoryFactory


class GetBlogPostQuery:
    def __init__(self, blog_post_repository: BlogPostRepository):
        self._blog_repo = blog_post_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetBlogPostQuery:
        return cls(blog_post_repository=factory.blog_post_repository())

    async def execute(self, post_id: int) -> BlogPostDTO:
        post = await self._blog_repo.find_by_id(post_id)
        if post is None:
            raise BlogPostNotFoundError(post_id)
        return BlogPostDTO.from_blog_post(post)

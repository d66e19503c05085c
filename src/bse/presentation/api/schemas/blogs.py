"""Schemas for blog post responses.

Create and update requests are multipart forms, declared directly on the
router functions.
"""

from datetime import datetime

from pydantic import Field

from bse.application.dtos import BlogImageDTO, BlogPostDTO, PaginatedBlogPostsDTO
from bse.presentation.api.schemas.common import CamelModel


class BlogImageResponse(CamelModel):
    id: int
    image_url: str = Field(..., description="Root-relative URL, e.g. /uploads/...")

    @classmethod
    def from_dto(cls, dto: BlogImageDTO) -> "BlogImageResponse":
        return cls(id=dto.id, image_url=dto.image_url)


class BlogPostResponse(CamelModel):
    """A blog post with its author and images."""

    id: int
    title: str
    content: str
    author_id: int
    author_name: str
    author_email: str
    created_at: datetime
    updated_at: datetime
    images: list[BlogImageResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: BlogPostDTO) -> "BlogPostResponse":
        return cls(
            id=dto.id,
            title=dto.title,
            content=dto.content,
            author_id=dto.author_id,
            author_name=dto.author_name,
            author_email=dto.author_email,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
            images=[BlogImageResponse.from_dto(i) for i in dto.images],
        )


class PaginatedBlogPostsResponse(CamelModel):
    """One page of blog posts, newest first."""

    items: list[BlogPostResponse]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_dto(cls, dto: PaginatedBlogPostsDTO) -> "PaginatedBlogPostsResponse":
        return cls(
            items=[BlogPostResponse.from_dto(i) for i in dto.items],
            total_count=dto.total_count,
            page=dto.page,
            page_size=dto.page_size,
            total_pages=dto.total_pages,
            has_next_page=dto.has_next_page,
            has_previous_page=dto.has_previous_page,
        )

"""Wire DTOs and the client-side models built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

EXCERPT_LENGTH = 150


class _CamelDto(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class AuthResponseDto(_CamelDto):
    token: str
    email: str
    full_name: str
    role: str
    expires_at: datetime


class BlogImageDto(_CamelDto):
    id: int
    image_url: str


class BlogResponseDto(_CamelDto):
    id: int
    title: str
    content: str
    author_id: Optional[int] = None
    author_name: str
    author_email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    images: list[BlogImageDto] = []


class PaginatedBlogsDto(_CamelDto):
    items: list[BlogResponseDto]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


@dataclass(frozen=True)
class User:
    """The signed-in user as the client remembers it."""

    email: str
    full_name: str
    role: str
    token: str
    expires_at: datetime

    @classmethod
    def from_dto(cls, dto: AuthResponseDto) -> User:
        return cls(
            email=dto.email,
            full_name=dto.full_name,
            role=dto.role,
            token=dto.token,
            expires_at=dto.expires_at,
        )


@dataclass(frozen=True)
class BlogImage:
    id: str
    url: str
    alt_text: str
    caption: str = ""


@dataclass(frozen=True)
class BlogPost:
    """A post ready for display: absolute image URLs and a short excerpt."""

    id: int
    title: str
    content: str
    excerpt: str
    author_name: str
    author_email: str
    author_id: Optional[int] = None
    images: tuple[BlogImage, ...] = field(default_factory=tuple)

    @classmethod
    def from_dto(cls, dto: BlogResponseDto, backend_url: str) -> BlogPost:
        return cls(
            id=dto.id,
            title=dto.title,
            content=dto.content,
            excerpt=make_excerpt(dto.content),
            author_name=dto.author_name,
            author_email=dto.author_email,
            author_id=dto.author_id,
            images=tuple(
                BlogImage(
                    id=str(image.id),
                    url=full_image_url(image.image_url, backend_url),
                    # No alt text is stored; the post title stands in
                    alt_text=dto.title,
                )
                for image in dto.images
            ),
        )


@dataclass(frozen=True)
class BlogPage:
    items: tuple[BlogPost, ...]
    total_count: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_dto(cls, dto: PaginatedBlogsDto, backend_url: str) -> BlogPage:
        return cls(
            items=tuple(BlogPost.from_dto(i, backend_url) for i in dto.items),
            total_count=dto.total_count,
            page=dto.page,
            page_size=dto.page_size,
            total_pages=dto.total_pages,
            has_next_page=dto.has_next_page,
            has_previous_page=dto.has_previous_page,
        )


def make_excerpt(content: str, length: int = EXCERPT_LENGTH) -> str:
    """First ``length`` characters followed by an ellipsis when truncated."""
    if len(content) > length:
        return content[:length] + "..."
    return content


def full_image_url(image_url: str, backend_url: str) -> str:
    """Prefix root-relative image URLs with the backend origin."""
    if image_url.startswith("/"):
        return f"{backend_url.rstrip('/')}{image_url}"
    return image_url

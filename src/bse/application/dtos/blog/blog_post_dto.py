"""DTOs for blog post reads."""

from dataclasses import dataclass
from datetime import datetime

from bse.domain.blog import BlogImage, BlogPost, PageRequest


@dataclass(frozen=True)
class BlogImageDTO:
    id: int
    image_url: str

    @classmethod
    def from_image(cls, image: BlogImage) -> "BlogImageDTO":
        if image.id is None:
            msg = "Cannot build a DTO for an unsaved blog image"
            raise ValueError(msg)
        return cls(id=image.id, image_url=image.image_url)


@dataclass(frozen=True)
class BlogPostDTO:
    """A post with its author projection and images."""

    id: int
    title: str
    content: str
    author_id: int
    author_name: str
    author_email: str
    created_at: datetime
    updated_at: datetime
    images: tuple[BlogImageDTO, ...]

    @classmethod
    def from_blog_post(cls, post: BlogPost) -> "BlogPostDTO":
        if post.id is None:
            msg = "Cannot build a DTO for an unsaved blog post"
            raise ValueError(msg)
        author = post.author
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            author_id=post.author_id,
            author_name=author.name if author else "",
            author_email=author.email if author else "",
            created_at=post.created_at,
            updated_at=post.updated_at,
            images=tuple(BlogImageDTO.from_image(i) for i in post.images),
        )


@dataclass(frozen=True)
class PaginatedBlogPostsDTO:
    """One page of posts plus the paging metadata."""

    items: tuple[BlogPostDTO, ...]
    total_count: int
    page: int
    page_size: int
    total_pages: int

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1

    @classmethod
    def create(
        cls,
        posts: list[BlogPost],
        total_count: int,
        page_request: PageRequest,
    ) -> "PaginatedBlogPostsDTO":
        return cls(
            items=tuple(BlogPostDTO.from_blog_post(p) for p in posts),
            total_count=total_count,
            page=page_request.page,
            page_size=page_request.page_size,
            total_pages=page_request.total_pages(total_count),
        )

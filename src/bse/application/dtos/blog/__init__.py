from bse.application.dtos.blog.blog_post_dto import (
    BlogImageDTO,
    BlogPostDTO,
    PaginatedBlogPostsDTO,
)

__all__ = [
    "BlogImageDTO",
    "BlogPostDTO",
    "PaginatedBlogPostsDTO",
]

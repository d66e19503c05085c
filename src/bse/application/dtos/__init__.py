"""Data transfer objects returned by the application layer."""

from bse.application.dtos.auth_dto import AuthResultDTO
from bse.application.dtos.blog import (
    BlogImageDTO,
    BlogPostDTO,
    PaginatedBlogPostsDTO,
)

__all__ = [
    "AuthResultDTO",
    "BlogImageDTO",
    "BlogPostDTO",
    "PaginatedBlogPostsDTO",
]

"""Pydantic schemas for the HTTP API."""

from bse.presentation.api.schemas.auth import (
    AuthResponse,
    SignInRequest,
    SignUpRequest,
)
from bse.presentation.api.schemas.blogs import (
    BlogImageResponse,
    BlogPostResponse,
    PaginatedBlogPostsResponse,
)
from bse.presentation.api.schemas.common import (
    CamelModel,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "AuthResponse",
    "BlogImageResponse",
    "BlogPostResponse",
    "CamelModel",
    "ErrorResponse",
    "HealthResponse",
    "PaginatedBlogPostsResponse",
    "SignInRequest",
    "SignUpRequest",
]

"""BSE client - talks to the BSE API and keeps presentation state.

Usage:
    async with BseApiClient("http://localhost:8000") as api:
        session = AuthSession(api)
        await session.sign_in("jane@example.com", "secret123")
        feed = BlogFeed(api)
        await feed.load()
"""

from bse_client.api_client import BseApiClient, ImageUpload
from bse_client.exceptions import ApiError
from bse_client.models import (
    BlogImage,
    BlogPage,
    BlogPost,
    User,
    full_image_url,
    make_excerpt,
)
from bse_client.state import AuthSession, BlogFeed

__all__ = [
    "ApiError",
    "AuthSession",
    "BlogFeed",
    "BlogImage",
    "BlogPage",
    "BlogPost",
    "BseApiClient",
    "ImageUpload",
    "User",
    "full_image_url",
    "make_excerpt",
]

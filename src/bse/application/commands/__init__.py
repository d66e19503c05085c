"""Application commands (state-changing use cases)."""

from bse.application.commands.blog import (
    CreateBlogPostCommand,
    DeleteBlogPostCommand,
    UpdateBlogPostCommand,
)

__all__ = [
    "CreateBlogPostCommand",
    "DeleteBlogPostCommand",
    "UpdateBlogPostCommand",
]

"""SQLAlchemy models for persistence layer."""

from bse.infrastructure.persistence.sqlalchemy.models.base import Base
from bse.infrastructure.persistence.sqlalchemy.models.blog_post_model import (
    BlogImageModel,
    BlogPostModel,
)
from bse.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "BlogImageModel",
    "BlogPostModel",
    "UserModel",
]

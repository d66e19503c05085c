"""Repository factory protocol for application layer."""

from __future__ import annotations

from typing import Any, Protocol

from bse.domain.blog.repositories import BlogPostRepository
from bse.domain.user.repositories import UserRepository


class RepositoryFactory(Protocol):
    """Protocol for creating repositories bound to one unit of work."""

    @property
    def session(self) -> Any:
        """Get the database session for transaction management.

        The type is `Any` to keep the application layer free of a
        specific database implementation. Use this for commit/rollback
        at the presentation layer.
        """
        ...

    def user_repository(self) -> UserRepository:
        """Get user repository."""
        ...

    def blog_post_repository(self) -> BlogPostRepository:
        """Get blog post repository."""
        ...

"""SQLAlchemy repository factory."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from bse.infrastructure.persistence.sqlalchemy.repositories.blog import (
    BlogPostRepositorySQLAlchemy,
)
from bse.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)


class SQLAlchemyRepositoryFactory:
    """SQLAlchemy implementation of the RepositoryFactory Protocol.

    All repositories share one session, so a request commits or rolls
    back as a single unit of work.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._blog_post_repo: BlogPostRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(self._session)
        return self._user_repo

    def blog_post_repository(self) -> BlogPostRepositorySQLAlchemy:
        if self._blog_post_repo is None:
            self._blog_post_repo = BlogPostRepositorySQLAlchemy(self._session)
        return self._blog_post_repo

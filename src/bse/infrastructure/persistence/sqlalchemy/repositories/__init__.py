"""SQLAlchemy repository implementations."""

from bse.infrastructure.persistence.sqlalchemy.repositories.blog import (
    BlogPostRepositorySQLAlchemy,
)
from bse.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from bse.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "BlogPostRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "UserRepositorySQLAlchemy",
]

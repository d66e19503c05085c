from bse.infrastructure.persistence.sqlalchemy.repositories.blog.blog_post_repository import (  # NOQA: E501
    BlogPostRepositorySQLAlchemy,
)

__all__ = ["BlogPostRepositorySQLAlchemy"]

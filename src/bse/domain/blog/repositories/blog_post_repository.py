"""Blog post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from bse.domain.blog.aggregates.blog_post import BlogPost


class BlogPostRepository(ABC):
    """Repository interface for BlogPost aggregates.

    Posts returned by the find methods carry their images and the
    ``author`` projection.
    """

    @abstractmethod
    async def find_by_id(self, post_id: int) -> Optional[BlogPost]:
        """Find a post by ID, or None if it does not exist."""

    @abstractmethod
    async def find_page(self, offset: int, limit: int) -> list[BlogPost]:
        """
        Return a slice of posts ordered by descending id (newest first).

        Parameters
        ----------
        offset
            Number of posts to skip
        limit
            Maximum number of posts to return
        """

    @abstractmethod
    async def count(self) -> int:
        """Return the total number of posts."""

    @abstractmethod
    async def save(self, post: BlogPost) -> BlogPost:
        """
        Insert or update a post together with its images.

        Returns
        -------
        The stored post as it would be returned by ``find_by_id``
        """

    @abstractmethod
    async def delete(self, post_id: int) -> bool:
        """
        Delete a post and, by cascade, its image rows.

        Returns
        -------
        True if a post was deleted, False if it did not exist
        """

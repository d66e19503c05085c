"""Delete a blog post and its stored images."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from bse.application.commands.blog._blob_cleanup import discard_images
from bse.application.ports import CurrentUser, ImageStorage
from bse.domain.blog import (
    BlogPostNotFoundError,
    BlogPostPermissionError,
    BlogPostRepository,
)

if TYPE_CHECKING:
    from bse.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class DeleteBlogPostCommand:
    """Remove image blobs (best-effort), then the post and its image rows."""

    def __init__(
        self,
        blog_post_repository: BlogPostRepository,
        image_storage: ImageStorage,
    ):
        self._blog_repo = blog_post_repository
        self._storage = image_storage

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        image_storage: ImageStorage,
    ) -> DeleteBlogPostCommand:
        return cls(
            blog_post_repository=factory.blog_post_repository(),
            image_storage=image_storage,
        )

    async def execute(self, post_id: int, requester: CurrentUser) -> None:
        post = await self._blog_repo.find_by_id(post_id)
        if post is None:
            raise BlogPostNotFoundError(post_id)

        if not post.can_be_modified_by(requester.user_id, requester.role):
            raise BlogPostPermissionError(post_id, "delete", requester.user_id)

        await discard_images(self._storage, post.image_urls)
        await self._blog_repo.delete(post_id)

        logger.info("Blog post %s deleted by user %s", post_id, requester.user_id)

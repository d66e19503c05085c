"""Edit a blog post's text and append new images."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from bse.application.commands.blog._blob_cleanup import discard_images
from bse.application.dtos.blog import BlogPostDTO
from bse.application.ports import (
    BLOG_IMAGE_FOLDER,
    CurrentUser,
    ImageStorage,
    UploadedFile,
)
from bse.domain.blog import (
    BlogPost,
    BlogPostNotFoundError,
    BlogPostPermissionError,
    BlogPostRepository,
)

if TYPE_CHECKING:
    from bse.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class UpdateBlogPostCommand:
    """Replace title and content, and attach any newly uploaded images.

    Existing images are kept. Checks run in the order: existence,
    permission, input validation.
    """

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
    ) -> UpdateBlogPostCommand:
        return cls(
            blog_post_repository=factory.blog_post_repository(),
            image_storage=image_storage,
        )

    async def execute(  # NOQA: PLR0913
        self,
        post_id: int,
        title: str,
        content: str,
        requester: CurrentUser,
        new_images: Sequence[UploadedFile] = (),
    ) -> BlogPostDTO:
        post = await self._blog_repo.find_by_id(post_id)
        if post is None:
            raise BlogPostNotFoundError(post_id)

        if not post.can_be_modified_by(requester.user_id, requester.role):
            raise BlogPostPermissionError(post_id, "update", requester.user_id)

        BlogPost.validate_content(title, content)

        urls = (
            await self._storage.save_many(new_images, BLOG_IMAGE_FOLDER)
            if new_images
            else []
        )
        post.update_content(title, content)
        post.add_images(urls)

        try:
            saved = await self._blog_repo.save(post)
        except Exception:
            await discard_images(self._storage, urls)
            raise

        logger.info(
            "Blog post %s updated by user %s (%d new image(s))",
            post_id,
            requester.user_id,
            len(urls),
        )
        return BlogPostDTO.from_blog_post(saved)

"""Create a blog post with optional image attachments."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from bse.application.commands.blog._blob_cleanup import discard_images
from bse.application.dtos.blog import BlogPostDTO
from bse.application.ports import BLOG_IMAGE_FOLDER, ImageStorage, UploadedFile
from bse.domain.blog import BlogPost, BlogPostRepository

if TYPE_CHECKING:
    from bse.application.factories import RepositoryFactory

logger = logging.getLogger(__name__)


class CreateBlogPostCommand:
    """Store uploaded images, then persist the post referencing them."""

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
    ) -> CreateBlogPostCommand:
        return cls(
            blog_post_repository=factory.blog_post_repository(),
            image_storage=image_storage,
        )

    async def execute(
        self,
        title: str,
        content: str,
        author_id: int,
        images: Sequence[UploadedFile] = (),
    ) -> BlogPostDTO:
        # Reject bad input before any blob is written
        BlogPost.validate_content(title, content)

        urls = await self._storage.save_many(images, BLOG_IMAGE_FOLDER) if images else []
        post = BlogPost.create(
            title=title,
            content=content,
            author_id=author_id,
            image_urls=urls,
        )

        try:
            saved = await self._blog_repo.save(post)
        except Exception:
            await discard_images(self._storage, urls)
            raise

        logger.info(
            "Blog post %s created by user %s with %d image(s)",
            saved.id,
            author_id,
            len(urls),
        )
        return BlogPostDTO.from_blog_post(saved)

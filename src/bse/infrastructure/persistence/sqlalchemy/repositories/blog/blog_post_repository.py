"""SQLAlchemy implementation of BlogPostRepository."""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bse.domain.blog import Author, BlogImage, BlogPost, BlogPostRepository
from bse.domain.shared.time import ensure_tz_aware
from bse.infrastructure.persistence.sqlalchemy.models import (
    BlogImageModel,
    BlogPostModel,
)

logger = logging.getLogger(__name__)


class BlogPostRepositorySQLAlchemy(BlogPostRepository):
    """SQLAlchemy implementation of the blog post repository.

    The author (joined) and images (selectin) are loaded with every post.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, post_id: int) -> Optional[BlogPost]:
        model = await self._find_model_by_id(post_id, refresh=True)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_page(self, offset: int, limit: int) -> list[BlogPost]:
        stmt = (
            select(BlogPostModel)
            .order_by(BlogPostModel.id.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(m) for m in result.scalars().all()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(BlogPostModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def save(self, post: BlogPost) -> BlogPost:
        model = None
        if post.id is not None:
            model = await self._find_model_by_id(post.id)

        if model is not None:
            logger.debug("Updating blog post: %s", post.id)
            self._update_model(model, post)
        else:
            logger.debug("Creating blog post: %s", post.title)
            model = self._map_to_model(post)
            self._session.add(model)

        await self._session.flush()

        # Reload so the author join and generated ids are present
        saved = await self._find_model_by_id(model.id, refresh=True)
        if saved is None:  # pragma: no cover
            msg = f"Blog post {model.id} vanished after flush"
            raise RuntimeError(msg)
        return self._map_to_domain(saved)

    async def delete(self, post_id: int) -> bool:
        model = await self._find_model_by_id(post_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted blog post: %s", post_id)
        return True

    async def _find_model_by_id(
        self,
        post_id: int,
        refresh: bool = False,
    ) -> Optional[BlogPostModel]:
        stmt = select(BlogPostModel).where(BlogPostModel.id == post_id)
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self._session.execute(stmt)
        return result.unique().scalar_one_or_none()

    def _map_to_domain(self, model: BlogPostModel) -> BlogPost:
        author = Author(
            id=model.author.id,
            name=model.author.full_name,
            email=model.author.email,
        )
        images = [
            BlogImage(
                id=image.id,
                image_url=image.image_url,
                blog_post_id=image.blog_post_id,
            )
            for image in model.images
        ]
        return BlogPost.reconstitute(
            id=model.id,
            title=model.title,
            content=model.content,
            author_id=model.author_id,
            images=images,
            author=author,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, post: BlogPost) -> BlogPostModel:
        return BlogPostModel(
            title=post.title,
            content=post.content,
            author_id=post.author_id,
            created_at=post.created_at,
            updated_at=post.updated_at,
            images=[BlogImageModel(image_url=i.image_url) for i in post.images],
        )

    def _update_model(self, model: BlogPostModel, post: BlogPost) -> None:
        model.title = post.title
        model.content = post.content
        model.updated_at = post.updated_at
        # Images are append-only: add the ones without an id yet
        for image in post.images:
            if image.id is None:
                model.images.append(BlogImageModel(image_url=image.image_url))

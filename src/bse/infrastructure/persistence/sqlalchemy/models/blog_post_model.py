"""SQLAlchemy models for blog posts and their images."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bse.domain.shared.time import utc_now
from bse.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from bse.infrastructure.persistence.sqlalchemy.models.user_model import UserModel


class BlogPostModel(Base, TimestampMixin):
    """Database model for blog posts."""

    __tablename__ = "blog_posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Author name/email are read through this join, never copied onto the post
    author: Mapped[UserModel] = relationship(lazy="joined", innerjoin=True)

    images: Mapped[list[BlogImageModel]] = relationship(
        back_populates="blog_post",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="BlogImageModel.id",
    )

    def __repr__(self) -> str:
        return f"<BlogPostModel(id={self.id}, title={self.title!r})>"


class BlogImageModel(Base):
    """Database model for images attached to a blog post."""

    __tablename__ = "blog_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    image_url: Mapped[str] = mapped_column(String(500), nullable=False)
    blog_post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("blog_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )

    blog_post: Mapped[BlogPostModel] = relationship(back_populates="images")

    def __repr__(self) -> str:
        return f"<BlogImageModel(id={self.id}, url={self.image_url})>"

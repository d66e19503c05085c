"""BlogPost aggregate root."""

from collections.abc import Iterable
from datetime import datetime
from typing import Optional, Union

from bse.domain.blog.entities.blog_image import BlogImage
from bse.domain.blog.value_objects.author import Author
from bse.domain.shared.exceptions import ValidationError
from bse.domain.shared.time import utc_now
from bse.domain.user.value_objects import Permission, UserRole, permissions_for


class BlogPost:
    """
    Blog post aggregate root.

    A post belongs to exactly one author for its whole life. Title and
    content may be replaced, and images may be appended, but existing
    images are never detached by an edit; they go away only together with
    the post.
    """

    MAX_TITLE_LENGTH = 200

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        content: str,
        author_id: int,
        images: Optional[Iterable[BlogImage]] = None,
        id: Optional[int] = None,
        author: Optional[Author] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id
        self._title = title
        self._content = content
        self._author_id = author_id
        self._author = author
        self._images: list[BlogImage] = list(images or [])
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> Optional[int]:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def content(self) -> str:
        return self._content

    @property
    def author_id(self) -> int:
        return self._author_id

    @property
    def author(self) -> Optional[Author]:
        return self._author

    @property
    def images(self) -> tuple[BlogImage, ...]:
        return tuple(self._images)

    @property
    def image_urls(self) -> list[str]:
        return [image.image_url for image in self._images]

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def validate_content(cls, title: str, content: str) -> tuple[str, str]:
        """Check title and content, returning the values to store.

        Raises
        ------
        ValidationError
            If the title is blank or too long, or the content is blank
        """
        normalized_title = (title or "").strip()
        if not normalized_title:
            msg = "Title is required"
            raise ValidationError(msg, details={"field": "title"})
        if len(normalized_title) > cls.MAX_TITLE_LENGTH:
            msg = f"Title cannot exceed {cls.MAX_TITLE_LENGTH} characters"
            raise ValidationError(msg, details={"field": "title"})
        if not content or not content.strip():
            msg = "Content is required"
            raise ValidationError(msg, details={"field": "content"})
        return normalized_title, content

    @classmethod
    def create(
        cls,
        title: str,
        content: str,
        author_id: int,
        image_urls: Iterable[str] = (),
    ) -> "BlogPost":
        title, content = cls.validate_content(title, content)
        post = cls(title=title, content=content, author_id=author_id)
        post.add_images(image_urls)
        return post

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        title: str,
        content: str,
        author_id: int,
        images: Iterable[BlogImage],
        created_at: datetime,
        updated_at: datetime,
        author: Optional[Author] = None,
    ) -> "BlogPost":
        return cls(
            id=id,
            title=title,
            content=content,
            author_id=author_id,
            images=images,
            author=author,
            created_at=created_at,
            updated_at=updated_at,
        )

    def update_content(self, title: str, content: str) -> None:
        self._title, self._content = self.validate_content(title, content)
        self._updated_at = utc_now()

    def add_images(self, image_urls: Iterable[str]) -> None:
        added = False
        for url in image_urls:
            self._images.append(BlogImage(image_url=url, blog_post_id=self._id))
            added = True
        if added and self._id is not None:
            self._updated_at = utc_now()

    def can_be_modified_by(
        self,
        user_id: int,
        role: Union[str, UserRole],
    ) -> bool:
        """Whether the user may edit or delete this post.

        Allowed for the author when the role holds ``MANAGE_OWN_BLOG_POST``,
        and for anyone whose role holds ``MANAGE_ANY_BLOG_POST``.
        """
        permissions = permissions_for(role)
        if Permission.MANAGE_ANY_BLOG_POST in permissions:
            return True
        return (
            user_id == self._author_id
            and Permission.MANAGE_OWN_BLOG_POST in permissions
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlogPost):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return (
            f"BlogPost(id={self._id}, author_id={self._author_id}, "
            f"title={self._title!r}, images={len(self._images)})"
        )

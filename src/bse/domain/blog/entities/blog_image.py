"""Image attachment entity, owned by a BlogPost."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class BlogImage:
    """An image attached to a blog post.

    ``image_url`` is the root-relative URL returned by the image storage.
    ``id`` and ``blog_post_id`` are assigned by the store on save.
    """

    image_url: str
    id: Optional[int] = None
    blog_post_id: Optional[int] = None

"""Application layer ports (aka interfaces)."""

from bse.application.ports.identity import CurrentUser
from bse.application.ports.image_storage import (
    BLOG_IMAGE_FOLDER,
    ImageStorage,
    UploadedFile,
)

__all__ = [
    "BLOG_IMAGE_FOLDER",
    "CurrentUser",
    "ImageStorage",
    "UploadedFile",
]

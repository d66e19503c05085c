"""Blob storage adapters."""

from bse.infrastructure.storage.local_image_storage import (
    DEFAULT_ALLOWED_EXTENSIONS,
    DEFAULT_MAX_FILE_SIZE,
    UPLOADS_DIR,
    LocalImageStorage,
)

__all__ = [
    "DEFAULT_ALLOWED_EXTENSIONS",
    "DEFAULT_MAX_FILE_SIZE",
    "UPLOADS_DIR",
    "LocalImageStorage",
]

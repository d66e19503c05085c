"""Image storage port.

The blog workflow stores uploaded image files through this interface and
keeps only the returned root-relative URLs.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Optional

BLOG_IMAGE_FOLDER = "blog-images"


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded file, fully read into memory."""

    filename: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        """Lower-cased extension including the dot, or an empty string."""
        return PurePosixPath(self.filename or "").suffix.lower()


class ImageStorage(ABC):
    """Port for saving and deleting image blobs."""

    @abstractmethod
    async def save(self, file: UploadedFile, folder: str) -> str:
        """
        Validate and store a single file.

        Returns
        -------
        Root-relative URL of the stored file, e.g. ``/uploads/<folder>/<name>``

        Raises
        ------
        InvalidFileError
            If the file is empty, too large or of a disallowed type
        """

    @abstractmethod
    async def save_many(
        self,
        files: Sequence[UploadedFile],
        folder: str,
    ) -> list[str]:
        """
        Validate every file, then store them in order.

        Nothing is written if any file is invalid. If a write fails part
        way, files already written by this call are removed before the
        error propagates.

        Returns
        -------
        URLs in the same order as ``files``
        """

    @abstractmethod
    async def delete(self, url: str) -> None:
        """
        Remove a stored file by URL.

        Never raises: a missing file is ignored and other failures are
        logged.
        """

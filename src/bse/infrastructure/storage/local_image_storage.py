"""Filesystem implementation of the ImageStorage port.

Files are written below ``<root>/uploads/<folder>/`` and addressed by the
root-relative URL ``/uploads/<folder>/<name>``, which the API serves as
static files.
"""

from __future__ import annotations

import logging
import re
import uuid
from collections.abc import Iterable, Sequence
from pathlib import Path

import aiofiles
import aiofiles.os

from bse.application.ports import ImageStorage, UploadedFile
from bse.domain.blog import InvalidFileError
from bse.domain.shared.time import utc_now

logger = logging.getLogger(__name__)

UPLOADS_DIR = "uploads"
DEFAULT_MAX_FILE_SIZE = 5 * 1024 * 1024
DEFAULT_ALLOWED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})

_FOLDER_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class LocalImageStorage(ImageStorage):
    """Stores images on the local disk under a web root.

    Parameters
    ----------
    root
        Web root directory; files go to ``root/uploads/<folder>``
    max_file_size
        Largest accepted file, in bytes
    allowed_extensions
        Accepted extensions, lower-case with leading dot
    """

    def __init__(
        self,
        root: Path | str,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
        allowed_extensions: Iterable[str] = DEFAULT_ALLOWED_EXTENSIONS,
    ):
        self._root = Path(root).resolve()
        self._max_file_size = max_file_size
        self._allowed_extensions = frozenset(e.lower() for e in allowed_extensions)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def uploads_dir(self) -> Path:
        return self._root / UPLOADS_DIR

    def validate(self, file: UploadedFile) -> None:
        """Raise InvalidFileError if the file cannot be stored."""
        if file.size == 0:
            msg = "File is empty"
            raise InvalidFileError(msg, file.filename)

        if file.size > self._max_file_size:
            max_mb = self._max_file_size / (1024 * 1024)
            msg = f"File size exceeds maximum allowed size of {max_mb:g} MB"
            raise InvalidFileError(msg, file.filename)

        if file.extension not in self._allowed_extensions:
            allowed = ", ".join(sorted(self._allowed_extensions))
            msg = f"File type '{file.extension}' is not allowed. Allowed types: {allowed}"
            raise InvalidFileError(msg, file.filename)

    async def save(self, file: UploadedFile, folder: str) -> str:
        self.validate(file)
        return await self._write(file, folder)

    async def save_many(
        self,
        files: Sequence[UploadedFile],
        folder: str,
    ) -> list[str]:
        for file in files:
            self.validate(file)

        urls: list[str] = []
        try:
            for file in files:
                urls.append(await self._write(file, folder))
        except Exception:
            logger.warning(
                "Image batch write failed after %d file(s); removing them",
                len(urls),
            )
            for url in urls:
                await self.delete(url)
            raise
        return urls

    async def delete(self, url: str) -> None:
        try:
            path = self._resolve_url(url)
        except ValueError:
            logger.warning("Refusing to delete image outside storage root: %s", url)
            return

        try:
            if await aiofiles.os.path.exists(path):
                await aiofiles.os.remove(path)
                logger.debug("Deleted image %s", path)
        except OSError as e:
            logger.warning("Failed to delete image %s: %s", path, e)

    async def _write(self, file: UploadedFile, folder: str) -> str:
        folder = self._check_folder(folder)
        target_dir = self.uploads_dir / folder
        await aiofiles.os.makedirs(target_dir, exist_ok=True)

        name = self._unique_name(file.extension)
        path = target_dir / name
        async with aiofiles.open(path, "wb") as f:
            await f.write(file.content)

        logger.debug("Stored image %s (%d bytes)", path, file.size)
        return f"/{UPLOADS_DIR}/{folder}/{name}"

    def _resolve_url(self, url: str) -> Path:
        relative = (url or "").split("?", 1)[0].lstrip("/")
        if not relative:
            msg = "Empty image URL"
            raise ValueError(msg)
        path = (self._root / relative).resolve()
        if not path.is_relative_to(self._root):
            msg = f"Path escapes storage root: {url}"
            raise ValueError(msg)
        return path

    @staticmethod
    def _check_folder(folder: str) -> str:
        if not _FOLDER_PATTERN.match(folder or ""):
            msg = f"Invalid storage folder name: {folder!r}"
            raise ValueError(msg)
        return folder

    @staticmethod
    def _unique_name(extension: str) -> str:
        timestamp = utc_now().strftime("%Y%m%d%H%M%S")
        return f"{timestamp}_{uuid.uuid4().hex}{extension}"

"""Tests for LocalImageStorage against a temporary directory."""

import re
from unittest.mock import patch

import pytest

from bse.application.ports import BLOG_IMAGE_FOLDER, UploadedFile
from bse.domain.blog import InvalidFileError
from bse.infrastructure.storage import LocalImageStorage
from tests.shared.fixtures.factories import PNG_BYTES, png_upload

URL_PATTERN = re.compile(r"^/uploads/blog-images/\d{14}_[0-9a-f]{32}\.png$")


@pytest.fixture
def storage(tmp_path) -> LocalImageStorage:
    return LocalImageStorage(root=tmp_path, max_file_size=1024)


def _path_for(storage: LocalImageStorage, url: str):
    return storage.root / url.lstrip("/")


class TestValidate:
    def test_empty_file(self, storage):
        with pytest.raises(InvalidFileError, match="File is empty"):
            storage.validate(UploadedFile("a.png", b""))

    def test_too_large(self, tmp_path):
        storage = LocalImageStorage(root=tmp_path, max_file_size=5 * 1024 * 1024)

        with pytest.raises(InvalidFileError, match="maximum allowed size of 5 MB"):
            storage.validate(UploadedFile("a.png", b"x" * (5 * 1024 * 1024 + 1)))

    def test_exactly_max_size_accepted(self, storage):
        storage.validate(UploadedFile("a.png", b"x" * 1024))

    @pytest.mark.parametrize("filename", ["notes.txt", "image", "photo.png.exe"])
    def test_disallowed_extension(self, storage, filename):
        with pytest.raises(InvalidFileError, match="is not allowed"):
            storage.validate(UploadedFile(filename, PNG_BYTES))

    def test_extension_check_ignores_case(self, storage):
        storage.validate(UploadedFile("PHOTO.JPG", PNG_BYTES))


class TestSave:
    @pytest.mark.asyncio
    async def test_save_writes_file_and_returns_url(self, storage):
        url = await storage.save(png_upload(), BLOG_IMAGE_FOLDER)

        assert URL_PATTERN.match(url)
        assert _path_for(storage, url).read_bytes() == PNG_BYTES

    @pytest.mark.asyncio
    async def test_names_are_unique(self, storage):
        first = await storage.save(png_upload(), BLOG_IMAGE_FOLDER)
        second = await storage.save(png_upload(), BLOG_IMAGE_FOLDER)

        assert first != second

    @pytest.mark.asyncio
    async def test_save_many_keeps_order(self, storage):
        urls = await storage.save_many(
            [png_upload(content=b"first"), png_upload(content=b"second")],
            BLOG_IMAGE_FOLDER,
        )

        assert [_path_for(storage, u).read_bytes() for u in urls] == [
            b"first",
            b"second",
        ]

    @pytest.mark.asyncio
    async def test_save_many_rejects_batch_before_writing(self, storage):
        with pytest.raises(InvalidFileError):
            await storage.save_many(
                [png_upload(), UploadedFile("notes.txt", b"text")],
                BLOG_IMAGE_FOLDER,
            )

        assert not (storage.uploads_dir / BLOG_IMAGE_FOLDER).exists()

    @pytest.mark.asyncio
    async def test_save_many_rolls_back_on_write_failure(self, storage):
        original_write = storage._write
        calls = 0

        async def failing_write(file, folder):
            nonlocal calls
            calls += 1
            if calls == 2:
                raise OSError("disk full")
            return await original_write(file, folder)

        with patch.object(storage, "_write", side_effect=failing_write):
            with pytest.raises(OSError, match="disk full"):
                await storage.save_many(
                    [png_upload(), png_upload(), png_upload()],
                    BLOG_IMAGE_FOLDER,
                )

        assert list((storage.uploads_dir / BLOG_IMAGE_FOLDER).iterdir()) == []

    @pytest.mark.asyncio
    async def test_invalid_folder_rejected(self, storage):
        with pytest.raises(ValueError, match="Invalid storage folder"):
            await storage.save(png_upload(), "../outside")


class TestDelete:
    @pytest.mark.asyncio
    async def test_delete_removes_file(self, storage):
        url = await storage.save(png_upload(), BLOG_IMAGE_FOLDER)

        await storage.delete(url)

        assert not _path_for(storage, url).exists()

    @pytest.mark.asyncio
    async def test_delete_missing_file_is_silent(self, storage):
        await storage.delete("/uploads/blog-images/missing.png")

    @pytest.mark.asyncio
    async def test_delete_refuses_paths_outside_root(self, storage, tmp_path):
        outside = tmp_path.parent / "keep-me.txt"
        outside.write_text("important")

        await storage.delete("/../keep-me.txt")

        assert outside.exists()

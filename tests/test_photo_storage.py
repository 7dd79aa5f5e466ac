"""
Customer Service — Photo Storage Unit Tests
=============================================

What:  Tests for filename sanitization/generation and PhotoStorage writes.
How:   Real writes into pytest's tmp_path; aiofiles is patched to simulate
       OS failures.
"""

from unittest.mock import patch

import pytest

from customer_service.exceptions import FileStorageError
from customer_service.services.photo_storage import (
    PhotoStorage,
    generate_photo_filename,
    sanitize_filename,
)


class TestSanitizeFilename:

    def test_removes_spaces(self):
        assert sanitize_filename("my holiday photo.jpg") == "myholidayphoto.jpg"

    def test_removes_colons(self):
        assert sanitize_filename("2024-01-15 12:00:00.png") == "2024-01-15120000.png"

    def test_removes_double_slashes(self):
        assert sanitize_filename("a//b.jpg") == "ab.jpg"

    def test_plain_name_unchanged(self):
        assert sanitize_filename("portrait.jpg") == "portrait.jpg"

    def test_drops_directory_part(self):
        assert sanitize_filename("sub/dir/face.png") == "face.png"

    def test_drops_windows_directory_part(self):
        assert sanitize_filename("C:\\Users\\ana\\face.png") == "face.png"


class TestGeneratePhotoFilename:

    def test_prefixes_token_and_keeps_sanitized_name(self):
        name = generate_photo_filename("my photo.jpg")

        token, _, rest = name.partition("-myphoto.jpg")
        assert rest == ""
        assert len(token) == 36  # uuid4 string form
        assert name != "my photo.jpg"

    def test_same_original_name_gives_distinct_names(self):
        assert generate_photo_filename("a.jpg") != generate_photo_filename("a.jpg")


class TestPhotoStorage:

    @pytest.mark.asyncio
    async def test_store_writes_bytes(self, tmp_path, sample_photo_bytes):
        storage = PhotoStorage(str(tmp_path))

        filename = await storage.store("face.jpg", sample_photo_bytes)

        assert filename.endswith("-face.jpg")
        assert (tmp_path / filename).read_bytes() == sample_photo_bytes

    @pytest.mark.asyncio
    async def test_store_keeps_nested_client_names_flat(self, tmp_path):
        storage = PhotoStorage(str(tmp_path))

        filename = await storage.store("a/b/face.jpg", b"data")

        assert "/" not in filename
        assert [p.name for p in tmp_path.iterdir()] == [filename]
        assert (tmp_path / filename).is_file()

    @pytest.mark.asyncio
    async def test_store_rejects_names_escaping_root(self, tmp_path):
        storage = PhotoStorage(str(tmp_path / "uploads"))

        with patch(
            "customer_service.services.photo_storage.generate_photo_filename",
            return_value="../outside.jpg",
        ):
            with pytest.raises(FileStorageError):
                await storage.store("outside.jpg", b"data")

        assert not (tmp_path / "outside.jpg").exists()

    @pytest.mark.asyncio
    async def test_os_error_becomes_file_storage_error(self, tmp_path):
        storage = PhotoStorage(str(tmp_path))

        with patch("aiofiles.open", side_effect=OSError("No space left on device")):
            with pytest.raises(FileStorageError, match="Failed to save"):
                await storage.store("face.jpg", b"data")

    @pytest.mark.asyncio
    async def test_remove_deletes_file(self, tmp_path):
        storage = PhotoStorage(str(tmp_path))
        filename = await storage.store("face.jpg", b"data")

        await storage.remove(filename)

        assert not (tmp_path / filename).exists()

    @pytest.mark.asyncio
    async def test_remove_missing_file_does_not_raise(self, tmp_path):
        storage = PhotoStorage(str(tmp_path))

        await storage.remove("nonexistent.jpg")

"""Unit tests for LocalFileStorage."""

import pytest

from materia.adapter.error import FileStorageError
from materia.adapter.storage import LocalFileStorage


class TestLocalFileStorage:
    """Tests for the on-disk file storage."""

    @pytest.mark.asyncio
    async def test_write_then_read(self, tmp_path):
        storage = LocalFileStorage(tmp_path)

        await storage.write("materials/1700000000000-a.pdf", b"%PDF")

        assert (tmp_path / "materials" / "1700000000000-a.pdf").read_bytes() == b"%PDF"
        assert await storage.read("materials/1700000000000-a.pdf") == b"%PDF"

    @pytest.mark.asyncio
    async def test_path_outside_root_is_rejected(self, tmp_path):
        storage = LocalFileStorage(tmp_path / "files")

        with pytest.raises(FileStorageError):
            await storage.write("../escape.txt", b"nope")

        assert not (tmp_path / "escape.txt").exists()

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        storage = LocalFileStorage(tmp_path)

        with pytest.raises(FileStorageError):
            await storage.read("materials/missing.pdf")

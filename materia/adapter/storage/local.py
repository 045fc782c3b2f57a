"""File storage backends."""

import asyncio
from pathlib import Path

import logfire

from materia.adapter.error import FileStorageError
from materia.domain.service.file_service import FileStorage


class LocalFileStorage(FileStorage):
    """Stores files on the local disk under a root directory."""

    def __init__(self, root: Path) -> None:
        """Initialize local storage.

        Args:
            root: Directory all storage paths are relative to
        """
        self.root = root.resolve()

    def _full_path(self, path: str) -> Path:
        full_path = (self.root / path).resolve()
        if not full_path.is_relative_to(self.root):
            raise FileStorageError(f"Path escapes the storage root: {path}")
        return full_path

    async def write(self, path: str, content: bytes) -> None:
        full_path = self._full_path(path)
        try:
            await asyncio.to_thread(_write_bytes, full_path, content)
        except OSError as e:
            logfire.error("File write failed", path=path, error=str(e))
            raise FileStorageError(f"Could not write {path}") from e
        logfire.info("File written", path=path, size=len(content))

    async def read(self, path: str) -> bytes:
        full_path = self._full_path(path)
        try:
            return await asyncio.to_thread(full_path.read_bytes)
        except OSError as e:
            logfire.error("File read failed", path=path, error=str(e))
            raise FileStorageError(f"Could not read {path}") from e


def _write_bytes(full_path: Path, content: bytes) -> None:
    full_path.parent.mkdir(parents=True, exist_ok=True)
    full_path.write_bytes(content)


class InMemoryFileStorage(FileStorage):
    """Keeps file contents in memory, for tests."""

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}

    async def write(self, path: str, content: bytes) -> None:
        self.files[path] = content

    async def read(self, path: str) -> bytes:
        if path not in self.files:
            raise FileStorageError(f"Could not read {path}")
        return self.files[path]

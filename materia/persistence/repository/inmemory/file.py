"""In-memory implementation of File repository for testing."""

from copy import deepcopy
from typing import Optional

from materia.domain.model.file import StoredFile
from materia.domain.repository import FileRepository
from materia.domain.value import EntityId, FileId

from .store import InMemoryStore


class InMemoryFileRepository(FileRepository):
    """In-memory implementation of FileRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def save(self, stored_file: StoredFile) -> StoredFile:
        """Save file metadata."""
        self._store.files[stored_file.id] = deepcopy(stored_file)
        return deepcopy(stored_file)

    async def find_by_id(
        self, file_id: FileId, entity_id: EntityId
    ) -> Optional[StoredFile]:
        """Find metadata of a file uploaded in an entity."""
        stored = self._store.files.get(file_id)
        if not stored or stored.entity_id != entity_id:
            return None
        return deepcopy(stored)

    async def find_by_ids(self, file_ids: list[FileId]) -> list[StoredFile]:
        """Find metadata of multiple files."""
        return [
            deepcopy(self._store.files[file_id])
            for file_id in file_ids
            if file_id in self._store.files
        ]

    async def delete(self, file_ids: list[FileId]) -> None:
        """Delete file metadata."""
        for file_id in file_ids:
            self._store.files.pop(file_id, None)

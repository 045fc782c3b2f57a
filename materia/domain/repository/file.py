"""Stored file repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from materia.domain.model.file import StoredFile
from materia.domain.value import EntityId, FileId


class FileRepository(ABC):
    """Repository interface for stored file metadata."""

    @abstractmethod
    async def save(self, stored_file: StoredFile) -> StoredFile:
        """Save file metadata.

        Args:
            stored_file: File metadata

        Returns:
            Saved metadata
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, file_id: FileId, entity_id: EntityId
    ) -> Optional[StoredFile]:
        """Find metadata of a file uploaded in an entity.

        Args:
            file_id: File identifier
            entity_id: Tenant scope

        Returns:
            File metadata if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, file_ids: list[FileId]) -> list[StoredFile]:
        """Find metadata of multiple files.

        Args:
            file_ids: File identifiers

        Returns:
            Found files (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def delete(self, file_ids: list[FileId]) -> None:
        """Delete file metadata.

        Args:
            file_ids: File identifiers
        """
        pass

"""File attachment domain service."""

import re
from datetime import datetime
from uuid import uuid4

import logfire

from materia.domain.model.file import FileUpload, StoredFile
from materia.domain.repository import FileRepository
from materia.domain.error import NotFoundFileError
from materia.domain.value import EntityId, FileId

from .base import Service


class FileStorage:
    """Generic interface for the byte store behind file characteristics."""

    async def write(self, path: str, content: bytes) -> None:
        """Store file content.

        Args:
            path: Storage path, relative to the storage root
            content: File bytes
        """
        raise NotImplementedError

    async def read(self, path: str) -> bytes:
        """Read file content.

        Args:
            path: Storage path, relative to the storage root

        Returns:
            File bytes
        """
        raise NotImplementedError


class FileService(Service):
    """Domain service storing uploads and tracking their metadata.

    Removing an attachment only forgets its metadata. The bytes stay in the
    storage so history snapshots, which record the path, remain readable.
    """

    def __init__(
        self,
        file_repository: FileRepository,
        file_storage: FileStorage,
        enabled: bool = True,
    ) -> None:
        """Initialize file service.

        Args:
            file_repository: Stored file metadata repository
            file_storage: Byte storage
            enabled: When False, uploads are dropped
        """
        self.file_repository = file_repository
        self.file_storage = file_storage
        self.enabled = enabled

    async def store(
        self, uploads: list[FileUpload], folder: str, entity_id: EntityId
    ) -> list[StoredFile]:
        """Store uploaded files under a folder.

        Args:
            uploads: Files sent by the client
            folder: Storage folder, e.g. ``materials/<id>/characteristics/<id>``
            entity_id: Tenant owning the files

        Returns:
            Metadata of the stored files, empty when storage is disabled
        """
        if not uploads:
            return []
        if not self.enabled:
            logfire.warn("File storage disabled, uploads dropped", count=len(uploads))
            return []

        with logfire.span("file_service.store", folder=folder, count=len(uploads)):
            stored = []
            for upload in uploads:
                file_id = FileId(uuid4())
                file_name = _clean_file_name(upload.name)
                # Unique per upload, even for equal names stored together
                path = f"{folder}/{file_id}-{file_name}"
                await self.file_storage.write(path, upload.content)
                saved = await self.file_repository.save(
                    StoredFile(
                        id=file_id,
                        entity_id=entity_id,
                        name=file_name,
                        type=upload.type,
                        path=path,
                        created_at=datetime.now(),
                    )
                )
                stored.append(saved)

            logfire.info("Files stored", folder=folder, count=len(stored))
            return stored

    async def forget(self, file_ids: list[FileId]) -> None:
        """Forget the metadata of detached files.

        Args:
            file_ids: Files to forget
        """
        if not file_ids:
            return
        await self.file_repository.delete(file_ids)
        logfire.info("Files detached", count=len(file_ids))

    async def resolve(self, file_ids: list[FileId]) -> dict[FileId, StoredFile]:
        """Load stored metadata keyed by file id.

        Args:
            file_ids: Files to resolve

        Returns:
            Metadata of the files found
        """
        if not file_ids:
            return {}
        files = await self.file_repository.find_by_ids(file_ids)
        return {f.id: f for f in files}

    async def download(
        self, file_id: FileId, entity_id: EntityId
    ) -> tuple[StoredFile, bytes]:
        """Load an attached file with its content.

        Args:
            file_id: File to load
            entity_id: Tenant scope

        Returns:
            File metadata and bytes

        Raises:
            NotFoundFileError: If the file is not attached in the entity
        """
        with logfire.span("file_service.download", file_id=str(file_id)):
            stored = await self.file_repository.find_by_id(file_id, entity_id)
            if not stored:
                logfire.warn("File not found", file_id=str(file_id))
                raise NotFoundFileError(str(file_id))

            content = await self.file_storage.read(stored.path)
            logfire.info("File read", file_id=str(file_id), size=len(content))
            return stored, content


def _clean_file_name(name: str) -> str:
    """Replace whitespace and drop directory parts from a client file name."""
    base = name.replace("\\", "/").rsplit("/", 1)[-1]
    return re.sub(r"\s+", "-", base.strip()) or "file"

"""PostgreSQL implementation of File repository."""

from typing import Optional

from sqlalchemy import delete, insert, select

from materia.domain.model.file import StoredFile
from materia.domain.repository import FileRepository
from materia.domain.value import EntityId, FileId
from materia.persistence.mappers import row_to_stored_file
from materia.persistence.repository.base import PostgresRepository
from materia.persistence.tables import files_table


class PostgresFileRepository(PostgresRepository, FileRepository):
    """PostgreSQL implementation of FileRepository."""

    async def save(self, stored_file: StoredFile) -> StoredFile:
        """Insert file metadata."""
        await self._execute(insert(files_table).values(**stored_file.model_dump()))
        return stored_file

    async def find_by_id(
        self, file_id: FileId, entity_id: EntityId
    ) -> Optional[StoredFile]:
        """Find metadata of a file uploaded in an entity."""
        stmt = select(files_table).where(
            files_table.c.id == file_id, files_table.c.entity_id == entity_id
        )
        result = await self._execute(stmt)
        row = result.fetchone()
        return row_to_stored_file(row._asdict()) if row else None

    async def find_by_ids(self, file_ids: list[FileId]) -> list[StoredFile]:
        """Find metadata of multiple files."""
        if not file_ids:
            return []
        stmt = select(files_table).where(files_table.c.id.in_(file_ids))
        result = await self._execute(stmt)
        return [row_to_stored_file(row._asdict()) for row in result]

    async def delete(self, file_ids: list[FileId]) -> None:
        """Delete file metadata."""
        if not file_ids:
            return
        await self._execute(delete(files_table).where(files_table.c.id.in_(file_ids)))

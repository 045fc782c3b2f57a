"""File attachments for file characteristics."""

from datetime import datetime

from pydantic import Base64Bytes, Field

from materia.domain.model.common import DomainModel
from materia.domain.value import EntityId, FileId
from materia.domain.value.common import ValueObject


class StoredFile(DomainModel):
    """Metadata of a file kept by the file storage."""

    id: FileId
    entity_id: EntityId  # Tenant the file was uploaded in
    name: str = Field(min_length=1, max_length=255)
    type: str  # MIME type
    path: str  # Storage path, relative to the storage root
    created_at: datetime = Field(default_factory=datetime.now)

    def to_reference(self) -> "FileReference":
        return FileReference(id=self.id, name=self.name, type=self.type)


class FileReference(ValueObject):
    """Reference to a stored file attached to a material."""

    id: FileId
    name: str
    type: str


class FileUpload(ValueObject):
    """File sent by a client, not stored yet.

    Content is base64-encoded on the wire.
    """

    name: str = Field(min_length=1, max_length=255)
    type: str = "application/octet-stream"
    content: Base64Bytes


class FileSnapshot(ValueObject):
    """File as recorded in a material history snapshot."""

    type: str
    name: str
    path: str

"""Download file use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import FileService, PermissionGuard
from materia.domain.value import FileId

from ..base import BaseUseCase, parse_id


class DownloadFileRequest(BaseModel):
    """Download file request."""

    session_token: Optional[str] = None
    file_id: str


class DownloadFileResponse(BaseModel):
    """File content with what is needed to serve it."""

    name: str
    type: str
    content: bytes


class DownloadFileUseCase(BaseUseCase):
    """Use case for reading a file attached to a material."""

    def __init__(self, guard: PermissionGuard, file_service: FileService) -> None:
        self.guard = guard
        self.file_service = file_service

    async def execute(self, request: DownloadFileRequest) -> DownloadFileResponse:
        """Execute download flow.

        Raises:
            NoActiveSessionError: If the session is missing or expired
            pydantic.ValidationError: If the file id is malformed
            NotFoundFileError: If the file is not attached in the caller's entity
        """
        with logfire.span("download_file.execute", file_id=request.file_id):
            actor = await self.guard.verify(request.session_token)
            file_id = FileId(parse_id(request.file_id))

            stored, content = await self.file_service.download(file_id, actor.entity_id)
            return DownloadFileResponse(name=stored.name, type=stored.type, content=content)

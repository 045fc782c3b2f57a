"""File download routes."""

from typing import Optional
from urllib.parse import quote

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends
from fastapi.responses import Response

from materia.application.usecase.file import DownloadFileRequest, DownloadFileUseCase
from materia.interface.api.session import get_session_token

router = APIRouter(prefix="/files", tags=["files"], route_class=DishkaRoute)


@router.get(
    "/{file_id}",
    response_class=Response,
    responses={200: {"content": {"application/octet-stream": {}}}},
)
async def download_file(
    file_id: str,
    use_case: FromDishka[DownloadFileUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> Response:
    """Serve a file attached to a material of the caller's entity.

    The response carries the MIME type recorded at upload and is meant to
    be displayed inline (images, PDFs).

    Example:
        GET /files/{id}
        Cookie: session_token=...
    """
    with logfire.span("api.download_file", file_id=file_id):
        request = DownloadFileRequest(session_token=session_token, file_id=file_id)
        downloaded = await use_case.execute(request)
        return Response(
            content=downloaded.content,
            media_type=downloaded.type,
            headers={
                "Content-Disposition": f"inline; filename*=UTF-8''{quote(downloaded.name)}",
                # Content behind a file id never changes
                "Cache-Control": "private, max-age=31536000, immutable",
            },
        )

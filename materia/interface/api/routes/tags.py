"""Tag routes."""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from materia.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    DeleteTagRequest,
    DeleteTagUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
    TagItem,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from materia.domain.model.tag import TagData
from materia.interface.api.openapi import json_body
from materia.interface.api.session import get_session_token

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List tags",
    description="Tags of the caller's entity with the number of materials carrying each.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> ListTagsResponse:
    """List tags of the caller's entity.

    Args:
        use_case: List tags use case (injected)
        session_token: Session token from cookie

    Returns:
        Tags ordered by name
    """
    with logfire.span("api.list_tags"):
        request = ListTagsRequest(session_token=session_token)
        return await use_case.execute(request)


@router.post(
    "",
    response_model=TagItem,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=json_body(TagData),
)
async def create_tag(
    use_case: FromDishka[CreateTagUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> TagItem:
    """Create a tag. Requires ``tag_create``."""
    with logfire.span("api.create_tag"):
        request = CreateTagRequest(session_token=session_token, payload=payload)
        return await use_case.execute(request)


@router.put("/{tag_id}", response_model=TagItem, openapi_extra=json_body(TagData))
async def update_tag(
    tag_id: str,
    use_case: FromDishka[UpdateTagUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> TagItem:
    """Update a tag.

    Renaming a tag snapshots every active material carrying it.
    """
    with logfire.span("api.update_tag", tag_id=tag_id):
        request = UpdateTagRequest(
            session_token=session_token, tag_id=tag_id, payload=payload
        )
        return await use_case.execute(request)


@router.delete("/{tag_id}", response_model=TagItem)
async def delete_tag(
    tag_id: str,
    use_case: FromDishka[DeleteTagUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> TagItem:
    """Delete a tag no material carries, deleted materials included."""
    with logfire.span("api.delete_tag", tag_id=tag_id):
        request = DeleteTagRequest(session_token=session_token, tag_id=tag_id)
        return await use_case.execute(request)

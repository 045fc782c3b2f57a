"""Material routes."""

from datetime import datetime
from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from materia.application.usecase.material import (
    CreateMaterialRequest,
    CreateMaterialUseCase,
    DeleteMaterialRequest,
    DeleteMaterialResponse,
    DeleteMaterialUseCase,
    GetMaterialCharacteristicsRequest,
    GetMaterialCharacteristicsResponse,
    GetMaterialCharacteristicsUseCase,
    ListMaterialsRequest,
    ListMaterialsResponse,
    ListMaterialsUseCase,
    MaterialItem,
    UpdateMaterialRequest,
    UpdateMaterialUseCase,
)
from materia.application.usecase.material_history import (
    GetLastMaterialHistoryRequest,
    GetLastMaterialHistoryResponse,
    GetLastMaterialHistoryUseCase,
    GetMaterialHistoryRequest,
    GetMaterialHistoryResponse,
    GetMaterialHistoryUseCase,
)
from materia.domain.model.material import MaterialData
from materia.interface.api.openapi import json_body
from materia.interface.api.session import get_session_token

router = APIRouter(
    prefix="/materials",
    tags=["materials"],
    route_class=DishkaRoute,
)


@router.get("", response_model=ListMaterialsResponse)
async def list_materials(
    use_case: FromDishka[ListMaterialsUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> ListMaterialsResponse:
    """List active materials of the caller's entity, most recently updated first."""
    with logfire.span("api.list_materials"):
        request = ListMaterialsRequest(session_token=session_token)
        return await use_case.execute(request)


@router.post(
    "",
    response_model=MaterialItem,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=json_body(MaterialData),
)
async def create_material(
    use_case: FromDishka[CreateMaterialUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> MaterialItem:
    """Create a material with its tags and characteristic values.

    Requires ``material_create``. A first history snapshot is taken once the
    material is stored.

    Args:
        use_case: Create material use case (injected)
        payload: Name, description, tagIds and characteristicValues
        session_token: Session token from cookie

    Returns:
        Created material
    """
    with logfire.span("api.create_material"):
        request = CreateMaterialRequest(session_token=session_token, payload=payload)
        return await use_case.execute(request)


@router.put(
    "/{material_id}", response_model=MaterialItem, openapi_extra=json_body(MaterialData)
)
async def update_material(
    material_id: str,
    use_case: FromDishka[UpdateMaterialUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> MaterialItem:
    """Replace the data of a material. Requires ``material_edit``."""
    with logfire.span("api.update_material", material_id=material_id):
        request = UpdateMaterialRequest(
            session_token=session_token, material_id=material_id, payload=payload
        )
        return await use_case.execute(request)


@router.delete("/{material_id}", response_model=DeleteMaterialResponse)
async def delete_material(
    material_id: str,
    use_case: FromDishka[DeleteMaterialUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> DeleteMaterialResponse:
    """Soft-delete a material. Requires ``material_create``."""
    with logfire.span("api.delete_material", material_id=material_id):
        request = DeleteMaterialRequest(session_token=session_token, material_id=material_id)
        return await use_case.execute(request)


@router.get(
    "/{material_id}/characteristics",
    response_model=GetMaterialCharacteristicsResponse,
)
async def get_material_characteristics(
    material_id: str,
    use_case: FromDishka[GetMaterialCharacteristicsUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> GetMaterialCharacteristicsResponse:
    """Characteristic values of a material with their definitions."""
    with logfire.span("api.get_material_characteristics", material_id=material_id):
        request = GetMaterialCharacteristicsRequest(
            session_token=session_token, material_id=material_id
        )
        return await use_case.execute(request)


@router.get("/{material_id}/history", response_model=GetMaterialHistoryResponse)
async def get_material_history(
    material_id: str,
    use_case: FromDishka[GetMaterialHistoryUseCase],
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
    session_token: Optional[str] = Depends(get_session_token),
) -> GetMaterialHistoryResponse:
    """History snapshots of a material, newest first.

    Args:
        material_id: Material UUID
        use_case: Get material history use case (injected)
        date_from: Inclusive lower bound
        date_to: Inclusive upper bound
        session_token: Session token from cookie

    Example:
        GET /materials/{id}/history?date_from=2024-01-01T00:00:00
    """
    with logfire.span("api.get_material_history", material_id=material_id):
        request = GetMaterialHistoryRequest(
            session_token=session_token,
            material_id=material_id,
            date_from=date_from,
            date_to=date_to,
        )
        return await use_case.execute(request)


@router.get(
    "/{material_id}/history/last",
    response_model=GetLastMaterialHistoryResponse,
)
async def get_last_material_history(
    material_id: str,
    use_case: FromDishka[GetLastMaterialHistoryUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> GetLastMaterialHistoryResponse:
    """Most recent snapshot of a material, if any."""
    with logfire.span("api.get_last_material_history", material_id=material_id):
        request = GetLastMaterialHistoryRequest(
            session_token=session_token, material_id=material_id
        )
        return await use_case.execute(request)

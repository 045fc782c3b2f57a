"""Characteristic routes."""

from typing import Any, Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, Depends, status

from materia.application.usecase.characteristic import (
    CharacteristicItem,
    CreateCharacteristicRequest,
    CreateCharacteristicUseCase,
    DeleteCharacteristicRequest,
    DeleteCharacteristicUseCase,
    ListCharacteristicsRequest,
    ListCharacteristicsResponse,
    ListCharacteristicsUseCase,
    UpdateCharacteristicRequest,
    UpdateCharacteristicUseCase,
)
from materia.domain.model.characteristic import CharacteristicChanges, NewCharacteristic
from materia.interface.api.openapi import json_body
from materia.interface.api.session import get_session_token

router = APIRouter(
    prefix="/characteristics",
    tags=["characteristics"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListCharacteristicsResponse,
    summary="List characteristics",
    description="Characteristics of the caller's entity with the number of active materials using each.",
)
async def list_characteristics(
    use_case: FromDishka[ListCharacteristicsUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> ListCharacteristicsResponse:
    """List characteristics of the caller's entity."""
    with logfire.span("api.list_characteristics"):
        request = ListCharacteristicsRequest(session_token=session_token)
        return await use_case.execute(request)


@router.post(
    "",
    response_model=CharacteristicItem,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=json_body(NewCharacteristic),
)
async def create_characteristic(
    use_case: FromDishka[CreateCharacteristicUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> CharacteristicItem:
    """Create a characteristic.

    Requires the ``characteristic_create`` permission.

    Args:
        use_case: Create characteristic use case (injected)
        payload: Name, description, type, options and units
        session_token: Session token from cookie

    Returns:
        Created characteristic
    """
    with logfire.span("api.create_characteristic"):
        request = CreateCharacteristicRequest(session_token=session_token, payload=payload)
        return await use_case.execute(request)


@router.put(
    "/{characteristic_id}",
    response_model=CharacteristicItem,
    openapi_extra=json_body(CharacteristicChanges),
)
async def update_characteristic(
    characteristic_id: str,
    use_case: FromDishka[UpdateCharacteristicUseCase],
    payload: Any = Body(default=None, include_in_schema=False),
    session_token: Optional[str] = Depends(get_session_token),
) -> CharacteristicItem:
    """Update name, description and options of a characteristic.

    The type cannot be changed. New options are appended to the existing ones.
    """
    with logfire.span("api.update_characteristic", characteristic_id=characteristic_id):
        request = UpdateCharacteristicRequest(
            session_token=session_token,
            characteristic_id=characteristic_id,
            payload=payload,
        )
        return await use_case.execute(request)


@router.delete("/{characteristic_id}", response_model=CharacteristicItem)
async def delete_characteristic(
    characteristic_id: str,
    use_case: FromDishka[DeleteCharacteristicUseCase],
    session_token: Optional[str] = Depends(get_session_token),
) -> CharacteristicItem:
    """Delete a characteristic no active material uses."""
    with logfire.span("api.delete_characteristic", characteristic_id=characteristic_id):
        request = DeleteCharacteristicRequest(
            session_token=session_token, characteristic_id=characteristic_id
        )
        return await use_case.execute(request)

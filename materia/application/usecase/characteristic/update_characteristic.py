"""Update characteristic use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.characteristic import CharacteristicChanges
from materia.domain.service import CharacteristicService, PermissionGuard
from materia.domain.value import CharacteristicId, PermissionCode

from ..base import BaseUseCase, parse_id
from .items import CharacteristicItem


class UpdateCharacteristicRequest(BaseModel):
    """Update characteristic request."""

    session_token: Optional[str] = None
    characteristic_id: str
    payload: Any = None


class UpdateCharacteristicUseCase(BaseUseCase):
    """Use case for editing a characteristic's name, description and options."""

    def __init__(
        self, guard: PermissionGuard, characteristic_service: CharacteristicService
    ) -> None:
        self.guard = guard
        self.characteristic_service = characteristic_service

    async def execute(self, request: UpdateCharacteristicRequest) -> CharacteristicItem:
        """Execute update characteristic flow.

        A payload carrying ``type`` is rejected: the type of a characteristic
        is fixed at creation.

        Raises:
            NoActiveSessionError: If the session is missing or expired
            MissingPermissionError: If the caller lacks characteristic_edit
            pydantic.ValidationError: If the data is invalid
            NotFoundCharacteristicError: If the characteristic is not in the entity
        """
        with logfire.span(
            "update_characteristic.execute", characteristic_id=request.characteristic_id
        ):
            actor = await self.guard.verify(
                request.session_token, PermissionCode.CHARACTERISTIC_EDIT
            )
            characteristic_id = CharacteristicId(parse_id(request.characteristic_id))
            changes = CharacteristicChanges.model_validate(request.payload)

            characteristic = await self.characteristic_service.update_characteristic(
                characteristic_id, actor.entity_id, changes, actor.user_id
            )
            return CharacteristicItem.from_domain(characteristic)

"""Delete characteristic use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import CharacteristicService, PermissionGuard
from materia.domain.value import CharacteristicId, PermissionCode

from ..base import BaseUseCase, parse_id
from .items import CharacteristicItem


class DeleteCharacteristicRequest(BaseModel):
    """Delete characteristic request."""

    session_token: Optional[str] = None
    characteristic_id: str


class DeleteCharacteristicUseCase(BaseUseCase):
    """Use case for deleting a characteristic no active material uses."""

    def __init__(
        self, guard: PermissionGuard, characteristic_service: CharacteristicService
    ) -> None:
        self.guard = guard
        self.characteristic_service = characteristic_service

    async def execute(self, request: DeleteCharacteristicRequest) -> CharacteristicItem:
        """Execute delete characteristic flow.

        Deleting requires the create permission.
        """
        with logfire.span(
            "delete_characteristic.execute", characteristic_id=request.characteristic_id
        ):
            actor = await self.guard.verify(
                request.session_token, PermissionCode.CHARACTERISTIC_CREATE
            )
            characteristic_id = CharacteristicId(parse_id(request.characteristic_id))

            characteristic = await self.characteristic_service.delete_characteristic(
                characteristic_id, actor.entity_id, actor.user_id
            )
            return CharacteristicItem.from_domain(characteristic)

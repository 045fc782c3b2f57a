"""Create characteristic use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.model.characteristic import NewCharacteristic
from materia.domain.service import CharacteristicService, PermissionGuard
from materia.domain.value import PermissionCode

from ..base import BaseUseCase
from .items import CharacteristicItem


class CreateCharacteristicRequest(BaseModel):
    """Create characteristic request.

    The payload is kept raw: it is only validated once the caller is known
    to hold the permission.
    """

    session_token: Optional[str] = None
    payload: Any = None


class CreateCharacteristicUseCase(BaseUseCase):
    """Use case for creating a characteristic."""

    def __init__(
        self, guard: PermissionGuard, characteristic_service: CharacteristicService
    ) -> None:
        self.guard = guard
        self.characteristic_service = characteristic_service

    async def execute(self, request: CreateCharacteristicRequest) -> CharacteristicItem:
        """Execute create characteristic flow.

        Args:
            request: Session token and raw characteristic data

        Returns:
            Created characteristic

        Raises:
            NoActiveSessionError: If the session is missing or expired
            MissingPermissionError: If the caller lacks characteristic_create
            pydantic.ValidationError: If the data is invalid
        """
        with logfire.span("create_characteristic.execute"):
            actor = await self.guard.verify(
                request.session_token, PermissionCode.CHARACTERISTIC_CREATE
            )
            data = NewCharacteristic.model_validate(request.payload)

            characteristic = await self.characteristic_service.create_characteristic(
                actor.entity_id, data, actor.user_id
            )
            return CharacteristicItem.from_domain(characteristic)

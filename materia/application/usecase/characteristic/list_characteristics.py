"""List characteristics use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import CharacteristicService, PermissionGuard

from ..base import BaseUseCase
from .items import CharacteristicItem


class CharacteristicWithCountItem(CharacteristicItem):
    """Characteristic with the number of active materials using it."""

    material_count: int


class ListCharacteristicsRequest(BaseModel):
    """List characteristics request."""

    session_token: Optional[str] = None


class ListCharacteristicsResponse(BaseModel):
    """List characteristics response."""

    characteristics: list[CharacteristicWithCountItem]


class ListCharacteristicsUseCase(BaseUseCase):
    """Use case for listing the characteristics of the caller's entity."""

    def __init__(
        self, guard: PermissionGuard, characteristic_service: CharacteristicService
    ) -> None:
        """Initialize list characteristics use case.

        Args:
            guard: Permission guard
            characteristic_service: Characteristic domain service
        """
        self.guard = guard
        self.characteristic_service = characteristic_service

    async def execute(
        self, request: ListCharacteristicsRequest
    ) -> ListCharacteristicsResponse:
        """Execute list characteristics flow.

        Any active session may list characteristics.
        """
        with logfire.span("list_characteristics.execute"):
            actor = await self.guard.verify(request.session_token)
            characteristics = await self.characteristic_service.list_characteristics(
                actor.entity_id
            )
            return ListCharacteristicsResponse(
                characteristics=[
                    CharacteristicWithCountItem(
                        **CharacteristicItem.from_domain(c).model_dump(),
                        material_count=c.material_count,
                    )
                    for c in characteristics
                ]
            )

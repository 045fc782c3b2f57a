"""Get material characteristics use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from materia.domain.service import MaterialService, PermissionGuard
from materia.domain.value import MaterialId

from ..base import BaseUseCase, parse_id
from ..characteristic.items import CharacteristicItem
from .items import dump_value


class MaterialCharacteristicItem(BaseModel):
    """Characteristic definition with the material's value for it."""

    characteristic: CharacteristicItem
    value: Optional[dict[str, Any]]


class GetMaterialCharacteristicsRequest(BaseModel):
    """Get material characteristics request."""

    session_token: Optional[str] = None
    material_id: str


class GetMaterialCharacteristicsResponse(BaseModel):
    """Get material characteristics response."""

    material_id: str
    characteristics: list[MaterialCharacteristicItem]


class GetMaterialCharacteristicsUseCase(BaseUseCase):
    """Use case for reading the characteristic values of a material."""

    def __init__(self, guard: PermissionGuard, material_service: MaterialService) -> None:
        self.guard = guard
        self.material_service = material_service

    async def execute(
        self, request: GetMaterialCharacteristicsRequest
    ) -> GetMaterialCharacteristicsResponse:
        """Execute get material characteristics flow.

        Returns:
            Characteristic values in display order

        Raises:
            NotFoundMaterialError: If the material is not in the entity
        """
        with logfire.span(
            "get_material_characteristics.execute", material_id=request.material_id
        ):
            actor = await self.guard.verify(request.session_token)
            material_id = MaterialId(parse_id(request.material_id))

            values = await self.material_service.get_characteristics(
                material_id, actor.entity_id
            )
            return GetMaterialCharacteristicsResponse(
                material_id=str(material_id),
                characteristics=[
                    MaterialCharacteristicItem(
                        characteristic=CharacteristicItem.from_domain(characteristic),
                        value=dump_value(value),
                    )
                    for characteristic, value in values
                ],
            )

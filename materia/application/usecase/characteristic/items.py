"""Characteristic response items."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from materia.domain.model.characteristic import Characteristic
from materia.domain.value import CharacteristicType


class CharacteristicItem(BaseModel):
    """Characteristic in responses."""

    id: str
    name: str
    description: str
    type: CharacteristicType
    options: Optional[list[str]]
    units: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, characteristic: Characteristic) -> "CharacteristicItem":
        return cls(
            id=str(characteristic.id),
            name=characteristic.name,
            description=characteristic.description,
            type=characteristic.type,
            options=characteristic.options,
            units=characteristic.units,
            created_at=characteristic.created_at,
            updated_at=characteristic.updated_at,
        )

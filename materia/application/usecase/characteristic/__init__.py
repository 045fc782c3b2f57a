"""Characteristic use cases."""

from .create_characteristic import (
    CreateCharacteristicRequest,
    CreateCharacteristicUseCase,
)
from .delete_characteristic import (
    DeleteCharacteristicRequest,
    DeleteCharacteristicUseCase,
)
from .items import CharacteristicItem
from .list_characteristics import (
    CharacteristicWithCountItem,
    ListCharacteristicsRequest,
    ListCharacteristicsResponse,
    ListCharacteristicsUseCase,
)
from .update_characteristic import (
    UpdateCharacteristicRequest,
    UpdateCharacteristicUseCase,
)

__all__ = [
    "CharacteristicItem",
    "CharacteristicWithCountItem",
    "CreateCharacteristicRequest",
    "CreateCharacteristicUseCase",
    "DeleteCharacteristicRequest",
    "DeleteCharacteristicUseCase",
    "ListCharacteristicsRequest",
    "ListCharacteristicsResponse",
    "ListCharacteristicsUseCase",
    "UpdateCharacteristicRequest",
    "UpdateCharacteristicUseCase",
]

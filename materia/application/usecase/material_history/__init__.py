"""Material history use cases."""

from .get_last_material_history import (
    GetLastMaterialHistoryRequest,
    GetLastMaterialHistoryResponse,
    GetLastMaterialHistoryUseCase,
)
from .get_material_history import (
    GetMaterialHistoryRequest,
    GetMaterialHistoryResponse,
    GetMaterialHistoryUseCase,
)
from .items import MaterialHistoryItem

__all__ = [
    "GetLastMaterialHistoryRequest",
    "GetLastMaterialHistoryResponse",
    "GetLastMaterialHistoryUseCase",
    "GetMaterialHistoryRequest",
    "GetMaterialHistoryResponse",
    "GetMaterialHistoryUseCase",
    "MaterialHistoryItem",
]

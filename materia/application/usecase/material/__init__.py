"""Material use cases."""

from .create_material import CreateMaterialRequest, CreateMaterialUseCase
from .delete_material import (
    DeleteMaterialRequest,
    DeleteMaterialResponse,
    DeleteMaterialUseCase,
)
from .get_material_characteristics import (
    GetMaterialCharacteristicsRequest,
    GetMaterialCharacteristicsResponse,
    GetMaterialCharacteristicsUseCase,
)
from .items import MaterialItem
from .list_materials import ListMaterialsRequest, ListMaterialsResponse, ListMaterialsUseCase
from .update_material import UpdateMaterialRequest, UpdateMaterialUseCase

__all__ = [
    "CreateMaterialRequest",
    "CreateMaterialUseCase",
    "DeleteMaterialRequest",
    "DeleteMaterialResponse",
    "DeleteMaterialUseCase",
    "GetMaterialCharacteristicsRequest",
    "GetMaterialCharacteristicsResponse",
    "GetMaterialCharacteristicsUseCase",
    "ListMaterialsRequest",
    "ListMaterialsResponse",
    "ListMaterialsUseCase",
    "MaterialItem",
    "UpdateMaterialRequest",
    "UpdateMaterialUseCase",
]

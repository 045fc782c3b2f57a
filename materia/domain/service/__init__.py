"""Domain services."""

from .base import Service
from .characteristic_service import CharacteristicService
from .file_service import FileService, FileStorage
from .log_service import LogService
from .material_history_scheduler import (
    HistoryServiceFactory,
    MaterialHistoryQueue,
    MaterialHistoryScheduler,
)
from .material_history_service import MaterialHistoryService
from .material_service import MaterialService
from .permission_guard import PermissionGuard
from .role_service import RoleService
from .tag_service import TagService
from .user_service import UserService

__all__ = [
    "CharacteristicService",
    "FileService",
    "FileStorage",
    "HistoryServiceFactory",
    "LogService",
    "MaterialHistoryQueue",
    "MaterialHistoryScheduler",
    "MaterialHistoryService",
    "MaterialService",
    "PermissionGuard",
    "RoleService",
    "Service",
    "TagService",
    "UserService",
]

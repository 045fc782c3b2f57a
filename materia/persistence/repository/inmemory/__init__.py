"""In-memory repository implementations for testing."""

from .characteristic import InMemoryCharacteristicRepository
from .file import InMemoryFileRepository
from .log import InMemoryLogRepository
from .material import InMemoryMaterialRepository
from .material_history import InMemoryMaterialHistoryRepository
from .role import InMemoryRoleRepository
from .session import InMemorySessionRepository
from .store import InMemoryStore
from .tag import InMemoryTagRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryCharacteristicRepository",
    "InMemoryFileRepository",
    "InMemoryLogRepository",
    "InMemoryMaterialRepository",
    "InMemoryMaterialHistoryRepository",
    "InMemoryRoleRepository",
    "InMemorySessionRepository",
    "InMemoryStore",
    "InMemoryTagRepository",
    "InMemoryUserRepository",
]

"""PostgreSQL repository implementations."""

from materia.persistence.repository.characteristic import (
    PostgresCharacteristicRepository,
)
from materia.persistence.repository.file import PostgresFileRepository
from materia.persistence.repository.log import PostgresLogRepository
from materia.persistence.repository.material import PostgresMaterialRepository
from materia.persistence.repository.material_history import (
    PostgresMaterialHistoryRepository,
)
from materia.persistence.repository.role import PostgresRoleRepository
from materia.persistence.repository.session import PostgresSessionRepository
from materia.persistence.repository.tag import PostgresTagRepository
from materia.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCharacteristicRepository",
    "PostgresFileRepository",
    "PostgresLogRepository",
    "PostgresMaterialRepository",
    "PostgresMaterialHistoryRepository",
    "PostgresRoleRepository",
    "PostgresSessionRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
]

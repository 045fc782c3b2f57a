"""Repository interfaces for Materia domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from materia.domain.repository.characteristic import CharacteristicRepository
from materia.domain.repository.file import FileRepository
from materia.domain.repository.log import LogRepository
from materia.domain.repository.material import MaterialRepository
from materia.domain.repository.material_history import MaterialHistoryRepository
from materia.domain.repository.role import RoleRepository
from materia.domain.repository.session import SessionRepository
from materia.domain.repository.tag import TagRepository
from materia.domain.repository.user import UserRepository

__all__ = [
    "CharacteristicRepository",
    "FileRepository",
    "LogRepository",
    "MaterialRepository",
    "MaterialHistoryRepository",
    "RoleRepository",
    "SessionRepository",
    "TagRepository",
    "UserRepository",
]

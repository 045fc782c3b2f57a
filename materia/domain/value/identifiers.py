"""Strongly typed identifiers for Materia domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Tenant scope
EntityId = NewType("EntityId", UUID)

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
CharacteristicId = NewType("CharacteristicId", UUID)
TagId = NewType("TagId", UUID)
MaterialId = NewType("MaterialId", UUID)
MaterialHistoryId = NewType("MaterialHistoryId", UUID)
FileId = NewType("FileId", UUID)
RoleId = NewType("RoleId", UUID)
LogId = NewType("LogId", UUID)

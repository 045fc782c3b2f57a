"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any
from uuid import UUID

from pydantic import TypeAdapter

_uuid_adapter = TypeAdapter(UUID)


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Use cases always verify the caller's session and permission before
    validating any input, so an unauthorized caller learns nothing about
    what a valid request looks like.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def parse_id(value: str) -> UUID:
    """Parse an identifier taken from a path.

    Raises:
        pydantic.ValidationError: If the value is not a UUID
    """
    return _uuid_adapter.validate_python(value)

"""Shared plumbing for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from materia.domain.error import StorageError


class PostgresRepository:
    """Base class for PostgreSQL repositories.

    Driver errors are logged with their detail and re-raised as
    ``StorageError`` so nothing database specific leaves the persistence
    layer.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def _execute(self, stmt: Executable, params: Any = None) -> Result[Any]:
        try:
            return await self.session.execute(stmt, params)
        except SQLAlchemyError as e:
            logfire.error(
                "Database statement failed",
                repository=type(self).__name__,
                error=str(e),
            )
            raise StorageError(f"{type(self).__name__} failed") from e

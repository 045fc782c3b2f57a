"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from materia.config import Settings
from materia.domain.repository import (
    CharacteristicRepository,
    FileRepository,
    LogRepository,
    MaterialHistoryRepository,
    MaterialRepository,
    RoleRepository,
    SessionRepository,
    TagRepository,
    UserRepository,
)
from materia.domain.service import MaterialHistoryQueue, MaterialHistoryScheduler
from materia.persistence.database import create_engine, create_session_factory
from materia.persistence.repository import (
    PostgresCharacteristicRepository,
    PostgresFileRepository,
    PostgresLogRepository,
    PostgresMaterialHistoryRepository,
    PostgresMaterialRepository,
    PostgresRoleRepository,
    PostgresSessionRepository,
    PostgresTagRepository,
    PostgresUserRepository,
)
from materia.util.di.base import ProviderBase
from materia.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app stops."""
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_history_queue(
        self, scheduler: MaterialHistoryScheduler
    ) -> MaterialHistoryQueue:
        """Provide the snapshot requests of the current unit of work."""
        return MaterialHistoryQueue(scheduler=scheduler)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        history_queue: MaterialHistoryQueue,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        Requested history snapshots are only scheduled after the commit.
        """
        async with session_factory() as session:
            # dishka sends the exception that closed the scope, if any
            exception = yield session
            if exception is not None:
                logfire.warn("Session rollback", error=str(exception))
                await session.rollback()
                history_queue.clear()
                return
            await session.commit()
            logfire.info("Session committed")
            history_queue.flush()

    @provide(scope=Scope.REQUEST)
    def get_characteristic_repository(
        self, session: AsyncSession
    ) -> CharacteristicRepository:
        """Provide Characteristic repository."""
        return PostgresCharacteristicRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_material_repository(self, session: AsyncSession) -> MaterialRepository:
        """Provide Material repository."""
        return PostgresMaterialRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_material_history_repository(
        self, session: AsyncSession
    ) -> MaterialHistoryRepository:
        """Provide MaterialHistory repository."""
        return PostgresMaterialHistoryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_file_repository(self, session: AsyncSession) -> FileRepository:
        """Provide File repository."""
        return PostgresFileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_log_repository(self, session: AsyncSession) -> LogRepository:
        """Provide Log repository."""
        return PostgresLogRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_role_repository(self, session: AsyncSession) -> RoleRepository:
        """Provide Role repository."""
        return PostgresRoleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_session_repository(self, session: AsyncSession) -> SessionRepository:
        """Provide Session repository."""
        return PostgresSessionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

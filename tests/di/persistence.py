"""Mock persistence providers for testing."""

from collections.abc import AsyncIterator

from dishka import Scope, from_context, provide

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
from materia.persistence.repository.inmemory import (
    InMemoryCharacteristicRepository,
    InMemoryFileRepository,
    InMemoryLogRepository,
    InMemoryMaterialHistoryRepository,
    InMemoryMaterialRepository,
    InMemoryRoleRepository,
    InMemorySessionRepository,
    InMemoryStore,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from materia.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    All repositories share the store passed as container context, so tests
    can seed it directly and inspect it afterwards.
    """

    __is_mock__ = True

    store = from_context(provides=InMemoryStore, scope=Scope.APP)

    @provide(scope=Scope.REQUEST)
    async def get_history_queue(
        self, scheduler: MaterialHistoryScheduler
    ) -> AsyncIterator[MaterialHistoryQueue]:
        """Provide the history queue, flushed when the request succeeds."""
        queue = MaterialHistoryQueue(scheduler=scheduler)
        exception = yield queue
        if exception is not None:
            queue.clear()
            return
        queue.flush()

    @provide(scope=Scope.REQUEST)
    def get_characteristic_repository(
        self, store: InMemoryStore
    ) -> CharacteristicRepository:
        """Provide in-memory characteristic repository."""
        return InMemoryCharacteristicRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, store: InMemoryStore) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_material_repository(self, store: InMemoryStore) -> MaterialRepository:
        """Provide in-memory material repository."""
        return InMemoryMaterialRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_material_history_repository(
        self, store: InMemoryStore
    ) -> MaterialHistoryRepository:
        """Provide in-memory material history repository."""
        return InMemoryMaterialHistoryRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_file_repository(self, store: InMemoryStore) -> FileRepository:
        """Provide in-memory file repository."""
        return InMemoryFileRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_log_repository(self, store: InMemoryStore) -> LogRepository:
        """Provide in-memory log repository."""
        return InMemoryLogRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_role_repository(self, store: InMemoryStore) -> RoleRepository:
        """Provide in-memory role repository."""
        return InMemoryRoleRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_session_repository(self, store: InMemoryStore) -> SessionRepository:
        """Provide in-memory session repository."""
        return InMemorySessionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

"""Domain layer DI providers."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer, Scope, provide

from materia.config import Settings, StorageSettings
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
from materia.domain.service import (
    CharacteristicService,
    FileService,
    FileStorage,
    LogService,
    MaterialHistoryQueue,
    MaterialHistoryScheduler,
    MaterialHistoryService,
    MaterialService,
    PermissionGuard,
    RoleService,
    TagService,
    UserService,
)
from materia.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The history scheduler is the exception: it outlives requests and opens a
    unit of work of its own for every snapshot.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    async def get_history_scheduler(
        self, container: AsyncContainer, settings: Settings
    ) -> AsyncIterator[MaterialHistoryScheduler]:
        """Provide the history scheduler, draining it when the app stops."""

        @asynccontextmanager
        async def open_history_service() -> AsyncIterator[MaterialHistoryService]:
            async with container() as request_container:
                yield await request_container.get(MaterialHistoryService)

        scheduler = MaterialHistoryScheduler(service_factory=open_history_service)
        yield scheduler
        await scheduler.drain(timeout=settings.history.drain_timeout)

    @provide
    def get_permission_guard(
        self, session_repository: SessionRepository
    ) -> PermissionGuard:
        """Provide permission guard."""
        return PermissionGuard(session_repository=session_repository)

    @provide
    def get_log_service(self, log_repository: LogRepository) -> LogService:
        """Provide audit log domain service."""
        return LogService(log_repository=log_repository)

    @provide
    def get_file_service(
        self,
        file_repository: FileRepository,
        file_storage: FileStorage,
        storage_settings: StorageSettings,
    ) -> FileService:
        """Provide file domain service."""
        return FileService(
            file_repository=file_repository,
            file_storage=file_storage,
            enabled=storage_settings.enabled,
        )

    @provide
    def get_characteristic_service(
        self,
        characteristic_repository: CharacteristicRepository,
        log_service: LogService,
    ) -> CharacteristicService:
        """Provide characteristic domain service."""
        return CharacteristicService(
            characteristic_repository=characteristic_repository,
            log_service=log_service,
        )

    @provide
    def get_tag_service(
        self,
        tag_repository: TagRepository,
        log_service: LogService,
        history_queue: MaterialHistoryQueue,
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository,
            log_service=log_service,
            history_queue=history_queue,
        )

    @provide
    def get_material_service(
        self,
        material_repository: MaterialRepository,
        characteristic_repository: CharacteristicRepository,
        tag_repository: TagRepository,
        file_service: FileService,
        log_service: LogService,
        history_queue: MaterialHistoryQueue,
    ) -> MaterialService:
        """Provide material domain service."""
        return MaterialService(
            material_repository=material_repository,
            characteristic_repository=characteristic_repository,
            tag_repository=tag_repository,
            file_service=file_service,
            log_service=log_service,
            history_queue=history_queue,
        )

    @provide
    def get_material_history_service(
        self,
        material_history_repository: MaterialHistoryRepository,
        material_repository: MaterialRepository,
        characteristic_repository: CharacteristicRepository,
        tag_repository: TagRepository,
        file_service: FileService,
    ) -> MaterialHistoryService:
        """Provide material history domain service."""
        return MaterialHistoryService(
            material_history_repository=material_history_repository,
            material_repository=material_repository,
            characteristic_repository=characteristic_repository,
            tag_repository=tag_repository,
            file_service=file_service,
        )

    @provide
    def get_role_service(
        self,
        role_repository: RoleRepository,
        log_service: LogService,
        settings: Settings,
    ) -> RoleService:
        """Provide role domain service."""
        return RoleService(
            role_repository=role_repository,
            log_service=log_service,
            max_roles=settings.roles.max_roles,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        log_service: LogService,
        settings: Settings,
    ) -> UserService:
        """Provide user administration domain service."""
        return UserService(
            user_repository=user_repository,
            role_repository=role_repository,
            log_service=log_service,
            max_users=settings.users.max_users,
        )

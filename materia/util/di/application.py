"""Application layer DI providers."""

from dishka import Scope, provide

from materia.application.usecase.characteristic import (
    CreateCharacteristicUseCase,
    DeleteCharacteristicUseCase,
    ListCharacteristicsUseCase,
    UpdateCharacteristicUseCase,
)
from materia.application.usecase.file import DownloadFileUseCase
from materia.application.usecase.log import ListLogsUseCase
from materia.application.usecase.material import (
    CreateMaterialUseCase,
    DeleteMaterialUseCase,
    GetMaterialCharacteristicsUseCase,
    ListMaterialsUseCase,
    UpdateMaterialUseCase,
)
from materia.application.usecase.material_history import (
    GetLastMaterialHistoryUseCase,
    GetMaterialHistoryUseCase,
)
from materia.application.usecase.role import (
    AssignPermissionsUseCase,
    CreateRoleUseCase,
    DeleteRoleUseCase,
    ListPermissionsUseCase,
    ListRolesUseCase,
    UpdateRoleUseCase,
)
from materia.application.usecase.tag import (
    CreateTagUseCase,
    DeleteTagUseCase,
    ListTagsUseCase,
    UpdateTagUseCase,
)
from materia.application.usecase.user import (
    AssignRolesUseCase,
    ChangeSelectedEntityUseCase,
    CreateUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from materia.domain.service import (
    CharacteristicService,
    FileService,
    LogService,
    MaterialHistoryService,
    MaterialService,
    PermissionGuard,
    RoleService,
    TagService,
    UserService,
)
from materia.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Characteristic use cases
    @provide(scope=Scope.REQUEST)
    def get_list_characteristics_use_case(
        self, guard: PermissionGuard, characteristic_service: CharacteristicService
    ) -> ListCharacteristicsUseCase:
        """Provide list characteristics use case."""
        return ListCharacteristicsUseCase(
            guard=guard, characteristic_service=characteristic_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_characteristic_use_case(
        self, guard: PermissionGuard, characteristic_service: CharacteristicService
    ) -> CreateCharacteristicUseCase:
        """Provide create characteristic use case."""
        return CreateCharacteristicUseCase(
            guard=guard, characteristic_service=characteristic_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_characteristic_use_case(
        self, guard: PermissionGuard, characteristic_service: CharacteristicService
    ) -> UpdateCharacteristicUseCase:
        """Provide update characteristic use case."""
        return UpdateCharacteristicUseCase(
            guard=guard, characteristic_service=characteristic_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_characteristic_use_case(
        self, guard: PermissionGuard, characteristic_service: CharacteristicService
    ) -> DeleteCharacteristicUseCase:
        """Provide delete characteristic use case."""
        return DeleteCharacteristicUseCase(
            guard=guard, characteristic_service=characteristic_service
        )

    # Tag use cases
    @provide(scope=Scope.REQUEST)
    def get_list_tags_use_case(
        self, guard: PermissionGuard, tag_service: TagService
    ) -> ListTagsUseCase:
        """Provide list tags use case."""
        return ListTagsUseCase(guard=guard, tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_create_tag_use_case(
        self, guard: PermissionGuard, tag_service: TagService
    ) -> CreateTagUseCase:
        """Provide create tag use case."""
        return CreateTagUseCase(guard=guard, tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_update_tag_use_case(
        self, guard: PermissionGuard, tag_service: TagService
    ) -> UpdateTagUseCase:
        """Provide update tag use case."""
        return UpdateTagUseCase(guard=guard, tag_service=tag_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_tag_use_case(
        self, guard: PermissionGuard, tag_service: TagService
    ) -> DeleteTagUseCase:
        """Provide delete tag use case."""
        return DeleteTagUseCase(guard=guard, tag_service=tag_service)

    # Material use cases
    @provide(scope=Scope.REQUEST)
    def get_list_materials_use_case(
        self,
        guard: PermissionGuard,
        material_service: MaterialService,
        tag_service: TagService,
    ) -> ListMaterialsUseCase:
        """Provide list materials use case."""
        return ListMaterialsUseCase(
            guard=guard, material_service=material_service, tag_service=tag_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_material_characteristics_use_case(
        self, guard: PermissionGuard, material_service: MaterialService
    ) -> GetMaterialCharacteristicsUseCase:
        """Provide get material characteristics use case."""
        return GetMaterialCharacteristicsUseCase(
            guard=guard, material_service=material_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_material_use_case(
        self,
        guard: PermissionGuard,
        material_service: MaterialService,
        tag_service: TagService,
    ) -> CreateMaterialUseCase:
        """Provide create material use case."""
        return CreateMaterialUseCase(
            guard=guard, material_service=material_service, tag_service=tag_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_material_use_case(
        self,
        guard: PermissionGuard,
        material_service: MaterialService,
        tag_service: TagService,
    ) -> UpdateMaterialUseCase:
        """Provide update material use case."""
        return UpdateMaterialUseCase(
            guard=guard, material_service=material_service, tag_service=tag_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_material_use_case(
        self, guard: PermissionGuard, material_service: MaterialService
    ) -> DeleteMaterialUseCase:
        """Provide delete material use case."""
        return DeleteMaterialUseCase(guard=guard, material_service=material_service)

    # Material history use cases
    @provide(scope=Scope.REQUEST)
    def get_get_material_history_use_case(
        self, guard: PermissionGuard, material_history_service: MaterialHistoryService
    ) -> GetMaterialHistoryUseCase:
        """Provide get material history use case."""
        return GetMaterialHistoryUseCase(
            guard=guard, material_history_service=material_history_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_last_material_history_use_case(
        self, guard: PermissionGuard, material_history_service: MaterialHistoryService
    ) -> GetLastMaterialHistoryUseCase:
        """Provide get last material history use case."""
        return GetLastMaterialHistoryUseCase(
            guard=guard, material_history_service=material_history_service
        )

    # Role use cases
    @provide(scope=Scope.REQUEST)
    def get_list_roles_use_case(
        self, guard: PermissionGuard, role_service: RoleService
    ) -> ListRolesUseCase:
        """Provide list roles use case."""
        return ListRolesUseCase(guard=guard, role_service=role_service)

    @provide(scope=Scope.REQUEST)
    def get_list_permissions_use_case(
        self, guard: PermissionGuard, role_service: RoleService
    ) -> ListPermissionsUseCase:
        """Provide list permissions use case."""
        return ListPermissionsUseCase(guard=guard, role_service=role_service)

    @provide(scope=Scope.REQUEST)
    def get_create_role_use_case(
        self, guard: PermissionGuard, role_service: RoleService
    ) -> CreateRoleUseCase:
        """Provide create role use case."""
        return CreateRoleUseCase(guard=guard, role_service=role_service)

    @provide(scope=Scope.REQUEST)
    def get_update_role_use_case(
        self, guard: PermissionGuard, role_service: RoleService
    ) -> UpdateRoleUseCase:
        """Provide update role use case."""
        return UpdateRoleUseCase(guard=guard, role_service=role_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_role_use_case(
        self, guard: PermissionGuard, role_service: RoleService
    ) -> DeleteRoleUseCase:
        """Provide delete role use case."""
        return DeleteRoleUseCase(guard=guard, role_service=role_service)

    @provide(scope=Scope.REQUEST)
    def get_assign_permissions_use_case(
        self, guard: PermissionGuard, role_service: RoleService
    ) -> AssignPermissionsUseCase:
        """Provide assign permissions use case."""
        return AssignPermissionsUseCase(guard=guard, role_service=role_service)

    # Log use cases
    @provide(scope=Scope.REQUEST)
    def get_list_logs_use_case(
        self, guard: PermissionGuard, log_service: LogService
    ) -> ListLogsUseCase:
        """Provide list logs use case."""
        return ListLogsUseCase(guard=guard, log_service=log_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(
        self, guard: PermissionGuard, user_service: UserService
    ) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(guard=guard, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(
        self, guard: PermissionGuard, user_service: UserService
    ) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(guard=guard, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(
        self, guard: PermissionGuard, user_service: UserService
    ) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(guard=guard, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_assign_roles_use_case(
        self, guard: PermissionGuard, user_service: UserService
    ) -> AssignRolesUseCase:
        """Provide assign roles use case."""
        return AssignRolesUseCase(guard=guard, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_change_selected_entity_use_case(
        self, guard: PermissionGuard, user_service: UserService
    ) -> ChangeSelectedEntityUseCase:
        """Provide change selected entity use case."""
        return ChangeSelectedEntityUseCase(guard=guard, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(
        self, guard: PermissionGuard, user_service: UserService
    ) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(guard=guard, user_service=user_service)

    # File use cases
    @provide(scope=Scope.REQUEST)
    def get_download_file_use_case(
        self, guard: PermissionGuard, file_service: FileService
    ) -> DownloadFileUseCase:
        """Provide download file use case."""
        return DownloadFileUseCase(guard=guard, file_service=file_service)

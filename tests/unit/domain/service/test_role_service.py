"""Unit tests for RoleService."""

from uuid import uuid4

import pytest

from materia.domain.error import (
    DeleteRoleUserAssignedError,
    NotFoundRoleError,
    ProtectedRoleError,
    RoleLimitReachedError,
)
from materia.domain.model.role import RoleData
from materia.domain.service import LogService, RoleService
from materia.domain.value import (
    SUPER_ADMIN_ROLE_NAME,
    LogType,
    PermissionCode,
    RoleId,
    UserId,
)
from materia.persistence.repository.inmemory import (
    InMemoryLogRepository,
    InMemoryRoleRepository,
    InMemoryStore,
)
from tests.factories import make_role
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateRole:
    """Tests for role creation."""

    @pytest.mark.asyncio
    async def test_create_role_is_logged(self, unit_env):
        # Arrange
        service = await unit_env.get(RoleService)
        store = await unit_env.get(InMemoryStore)
        actor_id = UserId(uuid4())

        # Act
        role = await service.create_role(
            RoleData(name="  Editor ", description="Edits things"), actor_id=actor_id
        )

        # Assert
        assert role.name == "Editor"
        assert role.permission_codes == []
        assert store.roles[role.id] == role
        assert [entry.type for entry in store.logs] == [LogType.ROLE_CREATE]
        assert store.logs[0].user_id == actor_id
        assert store.logs[0].entity_id is None

    @pytest.mark.asyncio
    async def test_role_limit(self):
        store = InMemoryStore()
        service = RoleService(
            role_repository=InMemoryRoleRepository(store),
            log_service=LogService(InMemoryLogRepository(store)),
            max_roles=1,
        )
        await service.create_role(RoleData(name="Editor"))

        with pytest.raises(RoleLimitReachedError):
            await service.create_role(RoleData(name="Viewer"))

        assert len(store.roles) == 1


class TestModifyRole:
    """Tests for update, delete and permission assignment."""

    @pytest.mark.asyncio
    async def test_super_admin_is_protected(self, unit_env):
        service = await unit_env.get(RoleService)
        store = await unit_env.get(InMemoryStore)
        admin = make_role(SUPER_ADMIN_ROLE_NAME, list(PermissionCode))
        store.roles[admin.id] = admin

        with pytest.raises(ProtectedRoleError):
            await service.update_role(admin.id, RoleData(name="Admin"))
        with pytest.raises(ProtectedRoleError):
            await service.assign_permissions(admin.id, [])
        with pytest.raises(ProtectedRoleError):
            await service.delete_role(admin.id)

        assert store.roles[admin.id] == admin
        assert store.logs == []

    @pytest.mark.asyncio
    async def test_delete_role_held_by_users(self, unit_env):
        service = await unit_env.get(RoleService)
        store = await unit_env.get(InMemoryStore)
        role = make_role()
        store.roles[role.id] = role
        store.role_users[role.id] = {UserId(uuid4())}

        with pytest.raises(DeleteRoleUserAssignedError) as exc_info:
            await service.delete_role(role.id)

        assert exc_info.value.code == "roleHasUsers"
        assert role.id in store.roles

    @pytest.mark.asyncio
    async def test_delete_unassigned_role(self, unit_env):
        service = await unit_env.get(RoleService)
        store = await unit_env.get(InMemoryStore)
        role = make_role()
        store.roles[role.id] = role

        deleted = await service.delete_role(role.id)

        assert deleted.id == role.id
        assert role.id not in store.roles
        assert store.logs[0].type == LogType.ROLE_DELETE
        assert store.logs[0].info == {"role": {"id": str(role.id), "name": "Editor"}}

    @pytest.mark.asyncio
    async def test_assign_permissions_replaces_and_dedupes(self, unit_env):
        service = await unit_env.get(RoleService)
        store = await unit_env.get(InMemoryStore)
        role = make_role(permissions=[PermissionCode.LOG_READ])
        store.roles[role.id] = role

        updated = await service.assign_permissions(
            role.id,
            [PermissionCode.TAG_READ, PermissionCode.TAG_CREATE, PermissionCode.TAG_READ],
        )

        assert updated.permission_codes == [PermissionCode.TAG_READ, PermissionCode.TAG_CREATE]
        assert store.logs[0].type == LogType.ROLE_SET_PERMISSION

    @pytest.mark.asyncio
    async def test_unknown_role(self, unit_env):
        service = await unit_env.get(RoleService)

        with pytest.raises(NotFoundRoleError):
            await service.update_role(RoleId(uuid4()), RoleData(name="Viewer"))


class TestListRoles:
    """Tests for listing roles and permissions."""

    @pytest.mark.asyncio
    async def test_roles_sorted_by_name(self, unit_env):
        service = await unit_env.get(RoleService)
        store = await unit_env.get(InMemoryStore)
        for name in ("Viewer", "Editor"):
            role = make_role(name)
            store.roles[role.id] = role

        roles = await service.list_roles()

        assert [r.name for r in roles] == ["Editor", "Viewer"]

    @pytest.mark.asyncio
    async def test_permissions_cover_every_code(self, unit_env):
        service = await unit_env.get(RoleService)

        permissions = await service.list_permissions()

        assert set(permissions) == set(PermissionCode)

"""Role domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from materia.domain.error import (
    DeleteRoleUserAssignedError,
    NotFoundRoleError,
    ProtectedRoleError,
    RoleLimitReachedError,
)
from materia.domain.model.role import Role, RoleData
from materia.domain.repository import RoleRepository
from materia.domain.value import LogType, PermissionCode, RoleId, UserId

from .base import Service
from .log_service import LogService


class RoleService(Service):
    """Domain service for roles and their permissions.

    Roles are global. The Super Admin role can be neither modified nor
    deleted.
    """

    def __init__(
        self,
        role_repository: RoleRepository,
        log_service: LogService,
        max_roles: Optional[int] = None,
    ) -> None:
        """Initialize role service.

        Args:
            role_repository: Role repository
            log_service: Audit log service
            max_roles: Maximum number of roles, None for no limit
        """
        self.role_repository = role_repository
        self.log_service = log_service
        self.max_roles = max_roles

    async def list_roles(self) -> list[Role]:
        """List roles sorted by name."""
        with logfire.span("role_service.list_roles"):
            roles = await self.role_repository.find_all()
            logfire.info("Roles retrieved", count=len(roles))
            return roles

    async def list_permissions(self) -> list[PermissionCode]:
        """List the permission codes that can be granted."""
        return await self.role_repository.find_all_permissions()

    async def create_role(self, data: RoleData, actor_id: Optional[UserId] = None) -> Role:
        """Create a role without permissions.

        Args:
            data: Validated role data
            actor_id: User creating the role

        Returns:
            Created role

        Raises:
            RoleLimitReachedError: If the configured role limit is reached
        """
        with logfire.span("role_service.create_role", role_name=data.name):
            if self.max_roles is not None:
                count = await self.role_repository.count()
                if count >= self.max_roles:
                    logfire.warn("Role limit reached", max_roles=self.max_roles)
                    raise RoleLimitReachedError(
                        f"Cannot create more than {self.max_roles} roles"
                    )

            now = datetime.now()
            role = Role(
                id=RoleId(uuid4()),
                name=data.name,
                description=data.description,
                created_at=now,
                updated_at=now,
            )
            saved = await self.role_repository.save(role)
            await self.log_service.append(
                LogType.ROLE_CREATE, saved.id, saved.name, user_id=actor_id
            )

            logfire.info("Role created", role_id=str(saved.id))
            return saved

    async def update_role(
        self, role_id: RoleId, data: RoleData, actor_id: Optional[UserId] = None
    ) -> Role:
        """Rename or describe a role.

        Raises:
            NotFoundRoleError: If the role does not exist
            ProtectedRoleError: If the role is Super Admin
        """
        with logfire.span("role_service.update_role", role_id=str(role_id)):
            existing = await self._get_modifiable_role(role_id)

            updated = existing.model_copy(
                update={
                    "name": data.name,
                    "description": data.description,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.role_repository.save(updated)
            await self.log_service.append(
                LogType.ROLE_UPDATE, saved.id, saved.name, user_id=actor_id
            )

            logfire.info("Role updated", role_id=str(role_id))
            return saved

    async def delete_role(self, role_id: RoleId, actor_id: Optional[UserId] = None) -> Role:
        """Delete a role no user holds.

        Raises:
            NotFoundRoleError: If the role does not exist
            ProtectedRoleError: If the role is Super Admin
            DeleteRoleUserAssignedError: If users hold the role
        """
        with logfire.span("role_service.delete_role", role_id=str(role_id)):
            existing = await self._get_modifiable_role(role_id, lock=True)

            user_count = await self.role_repository.count_users(role_id)
            if user_count > 0:
                logfire.warn(
                    "Role still assigned to users", role_id=str(role_id), user_count=user_count
                )
                raise DeleteRoleUserAssignedError(
                    f"Role {role_id} is assigned to {user_count} users"
                )

            await self.role_repository.delete(role_id)
            await self.log_service.append(
                LogType.ROLE_DELETE, existing.id, existing.name, user_id=actor_id
            )

            logfire.info("Role deleted", role_id=str(role_id))
            return existing

    async def assign_permissions(
        self,
        role_id: RoleId,
        permission_codes: list[PermissionCode],
        actor_id: Optional[UserId] = None,
    ) -> Role:
        """Replace the permissions granted by a role.

        Args:
            role_id: Role to update
            permission_codes: Complete set of permissions to grant
            actor_id: User changing the permissions

        Returns:
            Updated role

        Raises:
            NotFoundRoleError: If the role does not exist
            ProtectedRoleError: If the role is Super Admin
        """
        with logfire.span(
            "role_service.assign_permissions",
            role_id=str(role_id),
            permissions=[p.value for p in permission_codes],
        ):
            existing = await self._get_modifiable_role(role_id)

            updated = existing.model_copy(
                update={
                    "permission_codes": list(dict.fromkeys(permission_codes)),
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.role_repository.save(updated)
            await self.log_service.append(
                LogType.ROLE_SET_PERMISSION, saved.id, saved.name, user_id=actor_id
            )

            logfire.info(
                "Role permissions set",
                role_id=str(role_id),
                count=len(saved.permission_codes),
            )
            return saved

    async def _get_modifiable_role(self, role_id: RoleId, lock: bool = False) -> Role:
        role = await self.role_repository.find_by_id(role_id, lock=lock)
        if not role:
            logfire.warn("Role not found", role_id=str(role_id))
            raise NotFoundRoleError(str(role_id))
        if role.is_super_admin:
            logfire.warn("Attempt to modify Super Admin role", role_id=str(role_id))
            raise ProtectedRoleError("The Super Admin role cannot be modified")
        return role

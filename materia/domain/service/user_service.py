"""User administration domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from materia.domain.error import (
    EmailInUseError,
    EntityNotAssignedError,
    NotFoundEntityError,
    NotFoundRoleError,
    NotFoundUserError,
    ProtectedUserError,
    UserLimitReachedError,
    UserWithoutEntityError,
)
from materia.domain.model.user import NewUser, User, UserChanges
from materia.domain.repository import RoleRepository, UserRepository
from materia.domain.value import EntityId, LogType, RoleId, UserId

from .base import Service
from .log_service import LogService


class UserService(Service):
    """Domain service for administering users.

    Users are global: they belong to one or more entities and work in the
    one they have selected. Deleting a user is a soft delete that frees
    their email address and drops their roles.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        role_repository: RoleRepository,
        log_service: LogService,
        max_users: Optional[int] = None,
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            role_repository: Role repository
            log_service: Audit log service
            max_users: Maximum number of users, None for no limit
        """
        self.user_repository = user_repository
        self.role_repository = role_repository
        self.log_service = log_service
        self.max_users = max_users

    async def list_users(self) -> list[User]:
        """List users sorted by name, with their entities and roles."""
        with logfire.span("user_service.list_users"):
            users = await self.user_repository.find_all()
            logfire.info("Users retrieved", count=len(users))
            return users

    async def create_user(self, data: NewUser, actor_id: Optional[UserId] = None) -> User:
        """Create a user working in the first of their entities.

        Args:
            data: Validated user data
            actor_id: User creating the account

        Returns:
            Created user

        Raises:
            UserLimitReachedError: If the configured user limit is reached
            EmailInUseError: If another user has the email
            NotFoundEntityError: If an entity does not exist
        """
        with logfire.span("user_service.create_user"):
            if self.max_users is not None:
                count = await self.user_repository.count()
                if count >= self.max_users:
                    logfire.warn("User limit reached", max_users=self.max_users)
                    raise UserLimitReachedError(
                        f"Cannot create more than {self.max_users} users"
                    )

            await self._check_email_free(data.email)
            entity_ids = list(dict.fromkeys(data.entity_ids))
            await self._check_entities_exist(entity_ids)

            user = User(
                id=UserId(uuid4()),
                name=data.name,
                email=data.email,
                active=data.active,
                entity_selected_id=entity_ids[0],
                entity_ids=entity_ids,
                created_at=datetime.now(),
            )
            saved = await self.user_repository.save(user)
            await self.log_service.append(
                LogType.USER_CREATE, saved.id, saved.name, user_id=actor_id
            )

            logfire.info("User created", user_id=str(saved.id))
            return saved

    async def update_user(
        self, user_id: UserId, data: UserChanges, actor_id: Optional[UserId] = None
    ) -> User:
        """Change a user's details and entities.

        When the selected entity is removed, the first remaining one is
        selected instead.

        Raises:
            ProtectedUserError: If users try to change their own account
            NotFoundUserError: If the user does not exist
            EmailInUseError: If another user has the email
            NotFoundEntityError: If an added entity does not exist
            UserWithoutEntityError: If no entity would remain
        """
        with logfire.span("user_service.update_user", user_id=str(user_id)):
            if actor_id == user_id:
                logfire.warn("Attempt to administer own account", user_id=str(user_id))
                raise ProtectedUserError("Users cannot administer their own account")

            existing = await self._get_user(user_id, lock=True)
            if data.email != existing.email:
                await self._check_email_free(data.email)
            await self._check_entities_exist(data.entities_to_add)

            removed = set(data.entities_to_remove)
            entity_ids = [
                e
                for e in dict.fromkeys(existing.entity_ids + data.entities_to_add)
                if e not in removed
            ]
            if not entity_ids:
                raise UserWithoutEntityError(f"User {user_id} would have no entity")
            selected = existing.entity_selected_id
            if selected not in entity_ids:
                selected = entity_ids[0]

            updated = existing.model_copy(
                update={
                    "name": data.name,
                    "email": data.email,
                    "active": data.active,
                    "entity_ids": entity_ids,
                    "entity_selected_id": selected,
                }
            )
            saved = await self.user_repository.save(updated)
            await self.log_service.append(
                LogType.USER_UPDATE, saved.id, saved.name, user_id=actor_id
            )
            if existing.active and not saved.active:
                await self.log_service.append(
                    LogType.USER_DISABLE, saved.id, saved.name, user_id=actor_id
                )

            logfire.info("User updated", user_id=str(user_id))
            return saved

    async def assign_roles(
        self,
        user_id: UserId,
        role_ids: list[RoleId],
        actor_id: Optional[UserId] = None,
    ) -> User:
        """Replace the roles held by a user.

        Args:
            user_id: User to update
            role_ids: Complete set of roles to hold
            actor_id: User changing the roles

        Returns:
            Updated user

        Raises:
            NotFoundUserError: If the user does not exist
            NotFoundRoleError: If a role does not exist
        """
        with logfire.span(
            "user_service.assign_roles",
            user_id=str(user_id),
            role_ids=[str(r) for r in role_ids],
        ):
            existing = await self._get_user(user_id, lock=True)

            known = {role.id for role in await self.role_repository.find_all()}
            unknown = [r for r in role_ids if r not in known]
            if unknown:
                logfire.warn("Roles not found", role_ids=[str(r) for r in unknown])
                raise NotFoundRoleError(str(unknown[0]))

            updated = existing.model_copy(
                update={"role_ids": list(dict.fromkeys(role_ids))}
            )
            saved = await self.user_repository.save(updated)
            await self.log_service.append(
                LogType.USER_SET_ROLE, saved.id, saved.name, user_id=actor_id
            )

            logfire.info("User roles set", user_id=str(user_id), count=len(saved.role_ids))
            return saved

    async def change_selected_entity(self, user_id: UserId, entity_id: EntityId) -> User:
        """Switch the entity a user works in.

        Raises:
            NotFoundUserError: If the user does not exist
            EntityNotAssignedError: If the user does not belong to the entity
        """
        with logfire.span(
            "user_service.change_selected_entity",
            user_id=str(user_id),
            entity_id=str(entity_id),
        ):
            existing = await self._get_user(user_id)
            if entity_id not in existing.entity_ids:
                logfire.warn(
                    "Entity not assigned to user",
                    user_id=str(user_id),
                    entity_id=str(entity_id),
                )
                raise EntityNotAssignedError(
                    f"User {user_id} has no access to entity {entity_id}"
                )

            updated = existing.model_copy(update={"entity_selected_id": entity_id})
            saved = await self.user_repository.save(updated)
            await self.log_service.append(
                LogType.USER_SET_ENTITY, saved.id, saved.name, user_id=user_id
            )

            logfire.info("Selected entity changed", user_id=str(user_id))
            return saved

    async def delete_user(self, user_id: UserId, actor_id: Optional[UserId] = None) -> User:
        """Soft delete a user.

        Raises:
            ProtectedUserError: If users delete themselves or a Super Admin
            NotFoundUserError: If the user does not exist
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            if actor_id == user_id:
                logfire.warn("Attempt to delete own account", user_id=str(user_id))
                raise ProtectedUserError("Users cannot delete themselves")

            existing = await self._get_user(user_id, lock=True)
            for role_id in existing.role_ids:
                role = await self.role_repository.find_by_id(role_id)
                if role and role.is_super_admin:
                    logfire.warn("Attempt to delete a Super Admin", user_id=str(user_id))
                    raise ProtectedUserError("Super Admin users cannot be deleted")

            now = datetime.now()
            deleted = existing.model_copy(
                update={
                    # Frees the address for a new account
                    "email": f"{existing.email[:200]}_deleted_{now.isoformat()}",
                    "role_ids": [],
                    "deleted_at": now,
                }
            )
            await self.user_repository.save(deleted)
            await self.log_service.append(
                LogType.USER_DISABLE, existing.id, existing.name, user_id=actor_id
            )

            logfire.info("User deleted", user_id=str(user_id))
            return existing

    async def _get_user(self, user_id: UserId, lock: bool = False) -> User:
        user = await self.user_repository.find_by_id(user_id, lock=lock)
        if not user:
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundUserError(str(user_id))
        return user

    async def _check_email_free(self, email: str) -> None:
        if await self.user_repository.find_by_email(email):
            logfire.warn("Email already in use")
            raise EmailInUseError("Email is already in use by another account")

    async def _check_entities_exist(self, entity_ids: list[EntityId]) -> None:
        existing = await self.user_repository.find_existing_entities(entity_ids)
        missing = [e for e in entity_ids if e not in existing]
        if missing:
            logfire.warn("Entities not found", entity_ids=[str(e) for e in missing])
            raise NotFoundEntityError(str(missing[0]))

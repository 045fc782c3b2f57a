"""User account managed by administrators."""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from materia.domain.model.common import DomainInput, DomainModel
from materia.domain.value import Email, EntityId, Name, RoleId, UserId


class User(DomainModel):
    """Back-office user.

    A user works in one of the entities they belong to at a time, the
    selected entity. Passwords and sessions belong to the authentication
    service and are not part of this model.
    """

    id: UserId
    name: str = Field(min_length=2, max_length=64)
    email: str = Field(max_length=255)
    active: bool = True
    entity_selected_id: EntityId
    entity_ids: list[EntityId] = Field(min_length=1)
    role_ids: list[RoleId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None

    @model_validator(mode="after")
    def validate_selected_entity(self) -> "User":
        """The selected entity is one of the user's entities."""
        if self.entity_selected_id not in self.entity_ids:
            raise ValueError("The selected entity must be one of the user's entities")
        return self


class NewUser(DomainInput):
    """Data required to create a user.

    The first entity becomes the selected one.
    """

    name: Name
    email: Email
    active: bool = True
    entity_ids: list[EntityId] = Field(alias="entities", min_length=1)


class UserChanges(DomainInput):
    """Editable attributes of a user."""

    name: Name
    email: Email
    active: bool
    entities_to_add: list[EntityId] = Field(default_factory=list, alias="entitiesToAdd")
    entities_to_remove: list[EntityId] = Field(
        default_factory=list, alias="entitiesToRemove"
    )


class RoleAssignment(DomainInput):
    """Complete set of roles held by a user."""

    role_ids: list[RoleId] = Field(alias="roleIds")


class EntitySelection(DomainInput):
    """Entity a user switches to."""

    entity_id: EntityId = Field(alias="entityId")

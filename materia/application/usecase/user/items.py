"""User response items."""

from datetime import datetime

from pydantic import BaseModel

from materia.domain.model.user import User


class UserItem(BaseModel):
    """User in responses."""

    id: str
    name: str
    email: str
    active: bool
    entity_selected_id: str
    entity_ids: list[str]
    role_ids: list[str]
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserItem":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            active=user.active,
            entity_selected_id=str(user.entity_selected_id),
            entity_ids=[str(e) for e in user.entity_ids],
            role_ids=[str(r) for r in user.role_ids],
            created_at=user.created_at,
        )

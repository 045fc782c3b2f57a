"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import uuid4

from materia.domain.model.actor import Actor
from materia.domain.model.characteristic import Characteristic
from materia.domain.model.material import Material, MaterialCharacteristic
from materia.domain.model.role import Role
from materia.domain.model.tag import Tag
from materia.domain.model.user import User
from materia.domain.value import (
    CharacteristicId,
    CharacteristicType,
    EntityId,
    MaterialId,
    PermissionCode,
    RoleId,
    TagId,
    UserId,
)
from materia.persistence.repository.inmemory import InMemoryStore


def make_actor(
    entity_id: Optional[EntityId] = None,
    permissions: Optional[set[PermissionCode]] = None,
    active: bool = True,
    expires_in: Optional[timedelta] = timedelta(hours=1),
) -> Actor:
    """Build an actor holding the given permissions (all of them by default)."""
    return Actor(
        user_id=UserId(uuid4()),
        name="Test User",
        active=active,
        entity_id=entity_id or EntityId(uuid4()),
        permissions=frozenset(set(PermissionCode) if permissions is None else permissions),
        session_expires_at=datetime.now() + expires_in if expires_in else None,
    )


def open_session(store: InMemoryStore, actor: Actor) -> str:
    """Register a session for an actor and return its token."""
    token = f"session-{uuid4()}"
    store.sessions[token] = actor
    return token


def make_tag(entity_id: EntityId, name: str = "Fragile", **kwargs: Any) -> Tag:
    return Tag(
        id=kwargs.pop("id", TagId(uuid4())),
        entity_id=entity_id,
        name=name,
        color=kwargs.pop("color", "#ff0000"),
        font_color=kwargs.pop("font_color", "#ffffff"),
        **kwargs,
    )


def make_characteristic(
    entity_id: EntityId,
    name: str = "Weight",
    type: CharacteristicType = CharacteristicType.NUMBER,
    **kwargs: Any,
) -> Characteristic:
    return Characteristic(
        id=kwargs.pop("id", CharacteristicId(uuid4())),
        entity_id=entity_id,
        name=name,
        type=type,
        **kwargs,
    )


def make_material(
    entity_id: EntityId,
    name: str = "Oak plank",
    tags: Optional[list[Tag]] = None,
    values: Optional[list[MaterialCharacteristic]] = None,
    deleted: bool = False,
) -> Material:
    return Material(
        id=MaterialId(uuid4()),
        entity_id=entity_id,
        name=name,
        tag_ids=[tag.id for tag in tags or []],
        characteristics=values or [],
        deleted_at=datetime.now() if deleted else None,
    )


def make_role(name: str = "Editor", permissions: Optional[list[PermissionCode]] = None) -> Role:
    return Role(id=RoleId(uuid4()), name=name, permission_codes=permissions or [])


def make_user(
    entity_ids: list[EntityId],
    name: str = "Ada Lovelace",
    email: Optional[str] = None,
    **kwargs: Any,
) -> User:
    return User(
        id=kwargs.pop("id", UserId(uuid4())),
        name=name,
        email=email or f"{uuid4().hex[:8]}@example.com",
        entity_selected_id=kwargs.pop("entity_selected_id", entity_ids[0]),
        entity_ids=entity_ids,
        **kwargs,
    )

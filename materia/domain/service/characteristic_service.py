"""Characteristic domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from materia.domain.error import (
    DeleteCharacteristicUsedByMaterialsError,
    NotFoundCharacteristicError,
)
from materia.domain.model.characteristic import (
    Characteristic,
    CharacteristicChanges,
    CharacteristicWithCount,
    NewCharacteristic,
    merge_options,
)
from materia.domain.repository import CharacteristicRepository
from materia.domain.value import (
    CharacteristicId,
    EntityId,
    LogType,
    UserId,
    VariantGroup,
)

from .base import Service
from .log_service import LogService


class CharacteristicService(Service):
    """Domain service for characteristic definitions.

    Permissions are checked by the caller before any of these operations.
    Editing a definition never rewrites material history.
    """

    def __init__(
        self,
        characteristic_repository: CharacteristicRepository,
        log_service: LogService,
    ) -> None:
        """Initialize characteristic service.

        Args:
            characteristic_repository: Characteristic repository
            log_service: Audit log service
        """
        self.characteristic_repository = characteristic_repository
        self.log_service = log_service

    async def list_characteristics(
        self, entity_id: EntityId
    ) -> list[CharacteristicWithCount]:
        """List the characteristics of an entity sorted by name.

        Args:
            entity_id: Tenant scope

        Returns:
            Characteristics with their material counts
        """
        with logfire.span(
            "characteristic_service.list_characteristics", entity_id=str(entity_id)
        ):
            characteristics = await self.characteristic_repository.find_all_with_count(
                entity_id
            )
            logfire.info("Characteristics retrieved", count=len(characteristics))
            return characteristics

    async def create_characteristic(
        self,
        entity_id: EntityId,
        data: NewCharacteristic,
        actor_id: Optional[UserId] = None,
    ) -> Characteristic:
        """Create a characteristic.

        Args:
            entity_id: Tenant scope
            data: Validated characteristic data
            actor_id: User creating the characteristic

        Returns:
            Created characteristic
        """
        with logfire.span(
            "characteristic_service.create_characteristic",
            entity_id=str(entity_id),
            name=data.name,
            type=data.type.value,
        ):
            now = datetime.now()
            characteristic = Characteristic(
                id=CharacteristicId(uuid4()),
                entity_id=entity_id,
                name=data.name,
                description=data.description,
                type=data.type,
                options=data.clean_options,
                units=data.units or None,
                created_at=now,
                updated_at=now,
            )

            saved = await self.characteristic_repository.save(characteristic)
            await self.log_service.append(
                LogType.CHARACTERISTIC_CREATE, saved.id, saved.name, entity_id, actor_id
            )

            logfire.info("Characteristic created", characteristic_id=str(saved.id))
            return saved

    async def update_characteristic(
        self,
        characteristic_id: CharacteristicId,
        entity_id: EntityId,
        changes: CharacteristicChanges,
        actor_id: Optional[UserId] = None,
    ) -> Characteristic:
        """Update the name, description and options of a characteristic.

        Existing options are never removed: new non-blank options are
        appended. Options are ignored for non-choice characteristics. An
        update that changes nothing is not written nor logged.

        Args:
            characteristic_id: Characteristic to update
            entity_id: Tenant scope
            changes: Validated changes
            actor_id: User updating the characteristic

        Returns:
            Updated characteristic

        Raises:
            NotFoundCharacteristicError: If the characteristic is not in the entity
        """
        with logfire.span(
            "characteristic_service.update_characteristic",
            characteristic_id=str(characteristic_id),
            entity_id=str(entity_id),
        ):
            existing = await self.characteristic_repository.find_by_id(
                characteristic_id, entity_id
            )
            if not existing:
                logfire.warn(
                    "Characteristic not found", characteristic_id=str(characteristic_id)
                )
                raise NotFoundCharacteristicError(str(characteristic_id))

            update: dict[str, object] = {
                "name": changes.name,
                "description": changes.description,
            }
            if changes.options is not None and existing.group is VariantGroup.CHOICE:
                update["options"] = merge_options(existing.options or [], changes.options)

            if all(getattr(existing, field) == value for field, value in update.items()):
                logfire.info(
                    "Characteristic unchanged", characteristic_id=str(characteristic_id)
                )
                return existing

            updated = existing.model_copy(update={**update, "updated_at": datetime.now()})
            saved = await self.characteristic_repository.save(updated)
            await self.log_service.append(
                LogType.CHARACTERISTIC_UPDATE, saved.id, saved.name, entity_id, actor_id
            )

            logfire.info("Characteristic updated", characteristic_id=str(saved.id))
            return saved

    async def delete_characteristic(
        self,
        characteristic_id: CharacteristicId,
        entity_id: EntityId,
        actor_id: Optional[UserId] = None,
    ) -> Characteristic:
        """Delete a characteristic no active material uses.

        The row is locked before the reference count so a material cannot be
        attached between the check and the delete.

        Args:
            characteristic_id: Characteristic to delete
            entity_id: Tenant scope
            actor_id: User deleting the characteristic

        Returns:
            Deleted characteristic

        Raises:
            NotFoundCharacteristicError: If the characteristic is not in the entity
            DeleteCharacteristicUsedByMaterialsError: If active materials use it
        """
        with logfire.span(
            "characteristic_service.delete_characteristic",
            characteristic_id=str(characteristic_id),
            entity_id=str(entity_id),
        ):
            existing = await self.characteristic_repository.find_by_id(
                characteristic_id, entity_id, lock=True
            )
            if not existing:
                logfire.warn(
                    "Characteristic not found", characteristic_id=str(characteristic_id)
                )
                raise NotFoundCharacteristicError(str(characteristic_id))

            material_count = await self.characteristic_repository.count_active_materials(
                characteristic_id, entity_id
            )
            if material_count > 0:
                logfire.warn(
                    "Characteristic still used by materials",
                    characteristic_id=str(characteristic_id),
                    material_count=material_count,
                )
                raise DeleteCharacteristicUsedByMaterialsError(
                    f"Characteristic {characteristic_id} is used by "
                    f"{material_count} active materials"
                )

            await self.characteristic_repository.delete(characteristic_id, entity_id)
            await self.log_service.append(
                LogType.CHARACTERISTIC_DELETE,
                existing.id,
                existing.name,
                entity_id,
                actor_id,
            )

            logfire.info("Characteristic deleted", characteristic_id=str(characteristic_id))
            return existing

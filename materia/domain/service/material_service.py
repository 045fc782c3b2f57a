"""Material domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from materia.domain.error import (
    NotFoundCharacteristicError,
    NotFoundMaterialError,
    NotFoundTagError,
)
from materia.domain.model.characteristic import Characteristic
from materia.domain.model.characteristic_value import (
    FileValue,
    LiveValue,
    validate_live_value,
)
from materia.domain.model.material import Material, MaterialCharacteristic, MaterialData
from materia.domain.repository import (
    CharacteristicRepository,
    MaterialRepository,
    TagRepository,
)
from materia.domain.value import (
    CharacteristicId,
    EntityId,
    FileId,
    LogType,
    MaterialId,
    UserId,
)

from .base import Service
from .file_service import FileService
from .log_service import LogService
from .material_history_scheduler import MaterialHistoryQueue


class MaterialService(Service):
    """Domain service for materials and their characteristic values."""

    def __init__(
        self,
        material_repository: MaterialRepository,
        characteristic_repository: CharacteristicRepository,
        tag_repository: TagRepository,
        file_service: FileService,
        log_service: LogService,
        history_queue: MaterialHistoryQueue,
    ) -> None:
        """Initialize material service.

        Args:
            material_repository: Material repository
            characteristic_repository: Characteristic repository
            tag_repository: Tag repository
            file_service: File service for file characteristics
            log_service: Audit log service
            history_queue: Snapshot requests of the current unit of work
        """
        self.material_repository = material_repository
        self.characteristic_repository = characteristic_repository
        self.tag_repository = tag_repository
        self.file_service = file_service
        self.log_service = log_service
        self.history_queue = history_queue

    async def list_materials(self, entity_id: EntityId) -> list[Material]:
        """List active materials, most recently updated first.

        Args:
            entity_id: Tenant scope

        Returns:
            Active materials
        """
        with logfire.span("material_service.list_materials", entity_id=str(entity_id)):
            materials = await self.material_repository.find_active(entity_id)
            logfire.info("Materials retrieved", count=len(materials))
            return materials

    async def get_material(self, material_id: MaterialId, entity_id: EntityId) -> Material:
        """Get an active material.

        Raises:
            NotFoundMaterialError: If the material is not in the entity
        """
        material = await self.material_repository.find_by_id(material_id, entity_id)
        if not material:
            logfire.warn("Material not found", material_id=str(material_id))
            raise NotFoundMaterialError(str(material_id))
        return material

    async def get_characteristics(
        self, material_id: MaterialId, entity_id: EntityId
    ) -> list[tuple[Characteristic, Optional[LiveValue]]]:
        """Get the characteristics of a material with their values, in order.

        Args:
            material_id: Material identifier
            entity_id: Tenant scope

        Returns:
            Pairs of characteristic definition and value

        Raises:
            NotFoundMaterialError: If the material is not in the entity
        """
        with logfire.span(
            "material_service.get_characteristics", material_id=str(material_id)
        ):
            material = await self.get_material(material_id, entity_id)
            characteristics = await self.characteristic_repository.find_by_ids(
                material.characteristic_ids, entity_id
            )
            by_id = {c.id: c for c in characteristics}
            return [
                (by_id[mc.characteristic_id], mc.value)
                for mc in material.characteristics
                if mc.characteristic_id in by_id
            ]

    async def create_material(
        self,
        entity_id: EntityId,
        data: MaterialData,
        actor_id: Optional[UserId] = None,
    ) -> Material:
        """Create a material with its tags and characteristic values.

        Args:
            entity_id: Tenant scope
            data: Validated material data
            actor_id: User creating the material

        Returns:
            Created material

        Raises:
            NotFoundTagError: If a tag is not in the entity
            NotFoundCharacteristicError: If a characteristic is not in the entity
            ShapeMismatchError: If a value does not match its characteristic
        """
        with logfire.span(
            "material_service.create_material", entity_id=str(entity_id), name=data.name
        ):
            await self._check_tags(data, entity_id)
            characteristics = await self._load_characteristics(data, entity_id)

            material_id = MaterialId(uuid4())
            values = await self._build_values(
                material_id, entity_id, data, characteristics, {}
            )

            now = datetime.now()
            material = Material(
                id=material_id,
                entity_id=entity_id,
                name=data.name,
                description=data.description,
                tag_ids=data.tag_ids,
                characteristics=values,
                created_at=now,
                updated_at=now,
            )
            saved = await self.material_repository.save(material)

            self.history_queue.add(saved.id)
            await self.log_service.append(
                LogType.MATERIAL_CREATE, saved.id, saved.name, entity_id, actor_id
            )

            logfire.info("Material created", material_id=str(saved.id))
            return saved

    async def update_material(
        self,
        material_id: MaterialId,
        entity_id: EntityId,
        data: MaterialData,
        actor_id: Optional[UserId] = None,
    ) -> Material:
        """Replace the tags and characteristic values of a material.

        File values keep the current attachments minus ``fileToDelete`` and
        add the ``fileToAdd`` uploads. Attachments of characteristics that
        are removed or emptied are detached.

        Args:
            material_id: Material to update
            entity_id: Tenant scope
            data: Validated material data
            actor_id: User updating the material

        Returns:
            Updated material

        Raises:
            NotFoundMaterialError: If the material is not in the entity
            NotFoundTagError: If a tag is not in the entity
            NotFoundCharacteristicError: If a characteristic is not in the entity
            ShapeMismatchError: If a value does not match its characteristic
        """
        with logfire.span(
            "material_service.update_material",
            material_id=str(material_id),
            entity_id=str(entity_id),
        ):
            existing = await self.get_material(material_id, entity_id)
            await self._check_tags(data, entity_id)
            characteristics = await self._load_characteristics(data, entity_id)

            previous = {
                mc.characteristic_id: mc.value
                for mc in existing.characteristics
                if isinstance(mc.value, FileValue)
            }
            values = await self._build_values(
                material_id, entity_id, data, characteristics, previous
            )

            # Attachments of file characteristics removed or emptied
            kept = {
                cv.characteristic_id for cv in data.characteristics if cv.value is not None
            }
            orphaned = [
                reference.id
                for characteristic_id, value in previous.items()
                if characteristic_id not in kept
                for reference in value.files
            ]
            await self.file_service.forget(orphaned)

            updated = existing.model_copy(
                update={
                    "name": data.name,
                    "description": data.description,
                    "tag_ids": data.tag_ids,
                    "characteristics": values,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.material_repository.save(updated)

            self.history_queue.add(saved.id)
            await self.log_service.append(
                LogType.MATERIAL_UPDATE, saved.id, existing.name, entity_id, actor_id
            )

            logfire.info("Material updated", material_id=str(material_id))
            return saved

    async def delete_material(
        self,
        material_id: MaterialId,
        entity_id: EntityId,
        actor_id: Optional[UserId] = None,
    ) -> Material:
        """Soft delete a material.

        Its tags and values are kept, but it no longer counts as an active
        reference.

        Raises:
            NotFoundMaterialError: If the material is not in the entity
        """
        with logfire.span(
            "material_service.delete_material",
            material_id=str(material_id),
            entity_id=str(entity_id),
        ):
            existing = await self.get_material(material_id, entity_id)
            deleted = existing.model_copy(update={"deleted_at": datetime.now()})
            saved = await self.material_repository.save(deleted)

            await self.log_service.append(
                LogType.MATERIAL_DELETE, saved.id, saved.name, entity_id, actor_id
            )

            logfire.info("Material deleted", material_id=str(material_id))
            return saved

    async def _check_tags(self, data: MaterialData, entity_id: EntityId) -> None:
        if not data.tag_ids:
            return
        tags = await self.tag_repository.find_by_ids(data.tag_ids, entity_id)
        missing = set(data.tag_ids) - {tag.id for tag in tags}
        if missing:
            logfire.warn("Tags not found", tag_ids=sorted(str(t) for t in missing))
            raise NotFoundTagError(str(sorted(missing, key=str)[0]))

    async def _load_characteristics(
        self, data: MaterialData, entity_id: EntityId
    ) -> dict[CharacteristicId, Characteristic]:
        ids = [cv.characteristic_id for cv in data.characteristics]
        if not ids:
            return {}
        characteristics = await self.characteristic_repository.find_by_ids(ids, entity_id)
        by_id = {c.id: c for c in characteristics}
        missing = [cid for cid in ids if cid not in by_id]
        if missing:
            logfire.warn(
                "Characteristics not found", characteristic_ids=[str(c) for c in missing]
            )
            raise NotFoundCharacteristicError(str(missing[0]))
        return by_id

    async def _build_values(
        self,
        material_id: MaterialId,
        entity_id: EntityId,
        data: MaterialData,
        characteristics: dict[CharacteristicId, Characteristic],
        previous_files: dict[CharacteristicId, FileValue],
    ) -> list[MaterialCharacteristic]:
        # Validate every value before touching the file storage
        validated = [
            (
                cv.characteristic_id,
                None
                if cv.value is None
                else validate_live_value(
                    characteristics[cv.characteristic_id].type, cv.value
                ),
            )
            for cv in data.characteristics
        ]

        values = []
        for characteristic_id, value in validated:
            if isinstance(value, FileValue):
                value = await self._apply_file_changes(
                    material_id,
                    entity_id,
                    characteristic_id,
                    value,
                    previous_files.get(characteristic_id),
                )
            values.append(
                MaterialCharacteristic(characteristic_id=characteristic_id, value=value)
            )
        return values

    async def _apply_file_changes(
        self,
        material_id: MaterialId,
        entity_id: EntityId,
        characteristic_id: CharacteristicId,
        value: FileValue,
        previous: Optional[FileValue],
    ) -> Optional[FileValue]:
        """Resolve the attachments of a file value.

        Attachments are taken from the stored material, never from the
        client: the client only sends which ones to drop and what to add.
        """
        current = previous.files if previous else []
        to_delete: set[FileId] = set(value.file_to_delete)
        kept = [f for f in current if f.id not in to_delete]
        await self.file_service.forget([f.id for f in current if f.id in to_delete])

        added = await self.file_service.store(
            value.file_to_add,
            folder=f"materials/{material_id}/characteristics/{characteristic_id}",
            entity_id=entity_id,
        )

        files = kept + [stored.to_reference() for stored in added]
        if not files:
            return None
        return FileValue(files=files)

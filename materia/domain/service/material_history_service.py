"""Material history domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from materia.domain.error import NotFoundMaterialError
from materia.domain.model.characteristic_value import (
    CharacteristicSnapshot,
    FileValue,
    snapshot_characteristic,
)
from materia.domain.model.material import Material
from materia.domain.model.material_history import MaterialHistory, TagSnapshot
from materia.domain.repository import (
    CharacteristicRepository,
    MaterialHistoryRepository,
    MaterialRepository,
    TagRepository,
)
from materia.domain.value import EntityId, MaterialHistoryId, MaterialId

from .base import Service
from .file_service import FileService


class MaterialHistoryService(Service):
    """Domain service building and reading material history snapshots."""

    def __init__(
        self,
        material_history_repository: MaterialHistoryRepository,
        material_repository: MaterialRepository,
        characteristic_repository: CharacteristicRepository,
        tag_repository: TagRepository,
        file_service: FileService,
    ) -> None:
        """Initialize material history service.

        Args:
            material_history_repository: Snapshot repository
            material_repository: Material repository
            characteristic_repository: Characteristic repository
            tag_repository: Tag repository
            file_service: File service, resolves attachment metadata
        """
        self.material_history_repository = material_history_repository
        self.material_repository = material_repository
        self.characteristic_repository = characteristic_repository
        self.tag_repository = tag_repository
        self.file_service = file_service

    async def create_material_history(self, material_id: MaterialId) -> MaterialHistory:
        """Snapshot the current state of a material.

        Tags and characteristics are copied by value. Characteristics without
        a value are left out of the snapshot.

        Args:
            material_id: Material to snapshot

        Returns:
            Appended snapshot

        Raises:
            NotFoundMaterialError: If the material does not exist
        """
        with logfire.span(
            "material_history_service.create_material_history",
            material_id=str(material_id),
        ):
            material = await self.material_repository.find_by_id(
                material_id, include_deleted=True
            )
            if not material:
                logfire.error("Material not found for history", material_id=str(material_id))
                raise NotFoundMaterialError(str(material_id))

            history = MaterialHistory(
                id=MaterialHistoryId(uuid4()),
                material_id=material.id,
                name=material.name,
                description=material.description,
                tags=await self._snapshot_tags(material),
                characteristics=await self._snapshot_characteristics(material),
                created_at=datetime.now(),
            )

            saved = await self.material_history_repository.append(history)
            logfire.info(
                "Material history created",
                material_id=str(material_id),
                history_id=str(saved.id),
                characteristic_count=len(saved.characteristics),
            )
            return saved

    async def _snapshot_tags(self, material: Material) -> list[TagSnapshot]:
        tags = await self.tag_repository.find_by_ids(material.tag_ids, material.entity_id)
        by_id = {tag.id: tag for tag in tags}
        return [
            TagSnapshot(name=tag.name, color=tag.color, font_color=tag.font_color)
            for tag in (by_id.get(tag_id) for tag_id in material.tag_ids)
            if tag is not None
        ]

    async def _snapshot_characteristics(
        self, material: Material
    ) -> list[CharacteristicSnapshot]:
        characteristics = await self.characteristic_repository.find_by_ids(
            material.characteristic_ids, material.entity_id
        )
        by_id = {c.id: c for c in characteristics}

        file_ids = [
            reference.id
            for mc in material.characteristics
            if isinstance(mc.value, FileValue)
            for reference in mc.value.files
        ]
        resolved_files = await self.file_service.resolve(file_ids)

        snapshots = []
        for mc in material.characteristics:
            characteristic = by_id.get(mc.characteristic_id)
            if characteristic is None:
                logfire.warn(
                    "Characteristic missing from material snapshot",
                    material_id=str(material.id),
                    characteristic_id=str(mc.characteristic_id),
                )
                continue
            if mc.value is None:
                continue
            snapshots.append(
                snapshot_characteristic(characteristic, mc.value, resolved_files)
            )
        return snapshots

    async def get_material_history(
        self,
        material_id: MaterialId,
        entity_id: EntityId,
        date_from: Optional[datetime] = None,
        date_to: Optional[datetime] = None,
    ) -> list[MaterialHistory]:
        """Get the snapshots of a material, newest first.

        Args:
            material_id: Material identifier
            entity_id: Tenant scope
            date_from: Inclusive lower bound on snapshot date
            date_to: Inclusive upper bound on snapshot date

        Returns:
            Snapshots in the range

        Raises:
            NotFoundMaterialError: If the material is not in the entity
        """
        with logfire.span(
            "material_history_service.get_material_history",
            material_id=str(material_id),
        ):
            await self._ensure_material(material_id, entity_id)
            history = await self.material_history_repository.find_by_material(
                material_id, date_from, date_to
            )
            logfire.info(
                "Material history retrieved", material_id=str(material_id), count=len(history)
            )
            return history

    async def get_last_material_history(
        self, material_id: MaterialId, entity_id: EntityId
    ) -> Optional[MaterialHistory]:
        """Get the most recent snapshot of a material.

        Args:
            material_id: Material identifier
            entity_id: Tenant scope

        Returns:
            Latest snapshot, None if none was generated yet

        Raises:
            NotFoundMaterialError: If the material is not in the entity
        """
        with logfire.span(
            "material_history_service.get_last_material_history",
            material_id=str(material_id),
        ):
            await self._ensure_material(material_id, entity_id)
            history = await self.material_history_repository.find_last(material_id)
            if not history:
                logfire.warn("Material has no history", material_id=str(material_id))
            return history

    async def _ensure_material(self, material_id: MaterialId, entity_id: EntityId) -> None:
        material = await self.material_repository.find_by_id(
            material_id, entity_id, include_deleted=True
        )
        if not material:
            logfire.warn("Material not found", material_id=str(material_id))
            raise NotFoundMaterialError(str(material_id))

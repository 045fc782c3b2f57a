"""Tag domain service."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire

from materia.domain.error import DeleteTagUsedByMaterialsError, NotFoundTagError
from materia.domain.model.tag import Tag, TagData, TagWithCount
from materia.domain.repository import TagRepository
from materia.domain.value import EntityId, LogType, TagId, UserId

from .base import Service
from .log_service import LogService
from .material_history_scheduler import MaterialHistoryQueue


class TagService(Service):
    """Domain service for tag operations."""

    def __init__(
        self,
        tag_repository: TagRepository,
        log_service: LogService,
        history_queue: MaterialHistoryQueue,
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag repository
            log_service: Audit log service
            history_queue: Snapshot requests of the current unit of work
        """
        self.tag_repository = tag_repository
        self.log_service = log_service
        self.history_queue = history_queue

    async def list_tags(self, entity_id: EntityId) -> list[TagWithCount]:
        """List the tags of an entity sorted by name.

        Args:
            entity_id: Tenant scope

        Returns:
            Tags with the number of active materials carrying each
        """
        with logfire.span("tag_service.list_tags", entity_id=str(entity_id)):
            tags = await self.tag_repository.find_all_with_count(entity_id)
            logfire.info("Tags retrieved", count=len(tags))
            return tags

    async def create_tag(
        self, entity_id: EntityId, data: TagData, actor_id: Optional[UserId] = None
    ) -> Tag:
        """Create a tag.

        Args:
            entity_id: Tenant scope
            data: Validated tag data
            actor_id: User creating the tag

        Returns:
            Created tag
        """
        with logfire.span(
            "tag_service.create_tag", entity_id=str(entity_id), tag_name=data.name
        ):
            now = datetime.now()
            tag = Tag(
                id=TagId(uuid4()),
                entity_id=entity_id,
                name=data.name,
                color=data.color,
                font_color=data.font_color,
                created_at=now,
                updated_at=now,
            )

            saved = await self.tag_repository.save(tag)
            await self.log_service.append(
                LogType.TAG_CREATE, saved.id, saved.name, entity_id, actor_id
            )

            logfire.info("Tag created", tag_id=str(saved.id))
            return saved

    async def update_tag(
        self,
        tag_id: TagId,
        entity_id: EntityId,
        data: TagData,
        actor_id: Optional[UserId] = None,
    ) -> Tag:
        """Update a tag.

        Snapshots embed tag names, so a rename requests a new history
        snapshot for every active material carrying the tag. Colour changes
        alone do not.

        Args:
            tag_id: Tag to update
            entity_id: Tenant scope
            data: Validated tag data
            actor_id: User updating the tag

        Returns:
            Updated tag

        Raises:
            NotFoundTagError: If the tag is not in the entity
        """
        with logfire.span(
            "tag_service.update_tag", tag_id=str(tag_id), entity_id=str(entity_id)
        ):
            existing = await self.tag_repository.find_by_id(tag_id, entity_id)
            if not existing:
                logfire.warn("Tag not found", tag_id=str(tag_id))
                raise NotFoundTagError(str(tag_id))

            # Read before the update so the cascade targets the pre-update holders
            material_ids = await self.tag_repository.find_active_material_ids(tag_id)

            updated = existing.model_copy(
                update={
                    "name": data.name,
                    "color": data.color,
                    "font_color": data.font_color,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.tag_repository.save(updated)

            if saved.name != existing.name and material_ids:
                for material_id in material_ids:
                    self.history_queue.add(material_id)
                logfire.info(
                    "Tag renamed, material history requested",
                    tag_id=str(tag_id),
                    material_count=len(material_ids),
                )

            await self.log_service.append(
                LogType.TAG_UPDATE, saved.id, saved.name, entity_id, actor_id
            )

            logfire.info("Tag updated", tag_id=str(tag_id))
            return saved

    async def delete_tag(
        self, tag_id: TagId, entity_id: EntityId, actor_id: Optional[UserId] = None
    ) -> Tag:
        """Delete a tag no material carries.

        Unlike characteristics, soft-deleted materials still count as
        references here.

        Args:
            tag_id: Tag to delete
            entity_id: Tenant scope
            actor_id: User deleting the tag

        Returns:
            Deleted tag

        Raises:
            NotFoundTagError: If the tag is not in the entity
            DeleteTagUsedByMaterialsError: If any material carries it
        """
        with logfire.span(
            "tag_service.delete_tag", tag_id=str(tag_id), entity_id=str(entity_id)
        ):
            existing = await self.tag_repository.find_by_id(tag_id, entity_id, lock=True)
            if not existing:
                logfire.warn("Tag not found", tag_id=str(tag_id))
                raise NotFoundTagError(str(tag_id))

            material_count = await self.tag_repository.count_materials(tag_id)
            if material_count > 0:
                logfire.warn(
                    "Tag still used by materials",
                    tag_id=str(tag_id),
                    material_count=material_count,
                )
                raise DeleteTagUsedByMaterialsError(
                    f"Tag {tag_id} is used by {material_count} materials"
                )

            await self.tag_repository.delete(tag_id, entity_id)
            await self.log_service.append(
                LogType.TAG_DELETE, existing.id, existing.name, entity_id, actor_id
            )

            logfire.info("Tag deleted", tag_id=str(tag_id))
            return existing

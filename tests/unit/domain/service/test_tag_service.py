"""Unit tests for TagService."""

from uuid import uuid4

import pytest

from materia.domain.error import DeleteTagUsedByMaterialsError, NotFoundTagError
from materia.domain.model.tag import TagData
from materia.domain.service import MaterialHistoryQueue, TagService
from materia.domain.value import EntityId, LogType, TagId
from materia.persistence.repository.inmemory import InMemoryStore
from tests.factories import make_material, make_tag
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def tag_data(name: str = "Fragile", color: str = "#ff0000") -> TagData:
    return TagData.model_validate({"name": name, "color": color, "fontColor": "#ffffff"})


class TestCreateTag:
    """Tests for create_tag."""

    @pytest.mark.asyncio
    async def test_create_tag(self, unit_env):
        service = await unit_env.get(TagService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())

        tag = await service.create_tag(entity_id, tag_data())

        assert store.tags[tag.id].name == "Fragile"
        assert tag.font_color == "#ffffff"
        assert store.logs[0].type == LogType.TAG_CREATE
        assert store.logs[0].entity_id == entity_id

    def test_invalid_colour_rejected(self):
        with pytest.raises(ValueError):
            tag_data(color="red")


class TestUpdateTag:
    """Tests for update_tag."""

    @pytest.mark.asyncio
    async def test_rename_requests_history_for_active_materials_only(self, unit_env):
        """Renaming regenerates history of active holders, never deleted ones."""
        # Arrange
        service = await unit_env.get(TagService)
        queue = await unit_env.get(MaterialHistoryQueue)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        tag = make_tag(entity_id, name="Alpha")
        store.tags[tag.id] = tag
        m1 = make_material(entity_id, name="M1", tags=[tag])
        m2 = make_material(entity_id, name="M2", tags=[tag])
        m3 = make_material(entity_id, name="M3", tags=[tag], deleted=True)
        for material in (m1, m2, m3):
            store.materials[material.id] = material

        # Act
        await service.update_tag(tag.id, entity_id, tag_data(name="Beta"))

        # Assert
        assert set(queue.material_ids) == {m1.id, m2.id}
        assert m3.id not in queue.material_ids

    @pytest.mark.asyncio
    async def test_same_name_requests_no_history(self, unit_env):
        service = await unit_env.get(TagService)
        queue = await unit_env.get(MaterialHistoryQueue)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        tag = make_tag(entity_id, name="Alpha")
        store.tags[tag.id] = tag
        material = make_material(entity_id, tags=[tag])
        store.materials[material.id] = material

        updated = await service.update_tag(
            tag.id, entity_id, tag_data(name="Alpha", color="#00ff00")
        )

        assert updated.color == "#00ff00"
        assert queue.material_ids == []

    @pytest.mark.asyncio
    async def test_update_missing_tag_raises(self, unit_env):
        service = await unit_env.get(TagService)

        with pytest.raises(NotFoundTagError) as exc_info:
            await service.update_tag(TagId(uuid4()), EntityId(uuid4()), tag_data())

        assert exc_info.value.code == "tagNotFound"


class TestDeleteTag:
    """Tests for delete_tag."""

    @pytest.mark.asyncio
    async def test_delete_unused_tag(self, unit_env):
        service = await unit_env.get(TagService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        tag = make_tag(entity_id)
        store.tags[tag.id] = tag

        await service.delete_tag(tag.id, entity_id)

        assert tag.id not in store.tags
        assert store.logs[-1].type == LogType.TAG_DELETE

    @pytest.mark.asyncio
    async def test_delete_blocked_by_deleted_material(self, unit_env):
        """Unlike characteristics, deleted materials still hold their tags."""
        service = await unit_env.get(TagService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        tag = make_tag(entity_id)
        store.tags[tag.id] = tag
        material = make_material(entity_id, tags=[tag], deleted=True)
        store.materials[material.id] = material

        with pytest.raises(DeleteTagUsedByMaterialsError):
            await service.delete_tag(tag.id, entity_id)

        assert tag.id in store.tags

    @pytest.mark.asyncio
    async def test_delete_missing_tag_raises(self, unit_env):
        service = await unit_env.get(TagService)

        with pytest.raises(NotFoundTagError):
            await service.delete_tag(TagId(uuid4()), EntityId(uuid4()))


class TestFragileScenario:
    """Create, attach, rename, then try to delete a tag."""

    @pytest.mark.asyncio
    async def test_fragile_tag_lifecycle(self, unit_env):
        # Arrange
        service = await unit_env.get(TagService)
        queue = await unit_env.get(MaterialHistoryQueue)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())

        tag = await service.create_tag(entity_id, tag_data(name="Fragile"))
        m1 = make_material(entity_id, name="M1", tags=[tag])
        store.materials[m1.id] = m1

        # Act
        updated = await service.update_tag(tag.id, entity_id, tag_data(name="VeryFragile"))

        # Assert
        assert updated.name == "VeryFragile"
        assert queue.material_ids == [m1.id]

        with pytest.raises(DeleteTagUsedByMaterialsError) as exc_info:
            await service.delete_tag(tag.id, entity_id)
        assert exc_info.value.code == "tagHasMaterials"

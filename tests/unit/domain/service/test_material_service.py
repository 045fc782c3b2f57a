"""Unit tests for MaterialService."""

import base64
from uuid import uuid4

import pytest

from materia.domain.error import (
    NotFoundCharacteristicError,
    NotFoundMaterialError,
    NotFoundTagError,
    ShapeMismatchError,
)
from materia.domain.model.characteristic_value import FileValue, ScalarValue
from materia.domain.model.material import MaterialData
from materia.domain.service import FileStorage, MaterialHistoryQueue, MaterialService
from materia.domain.value import CharacteristicType, EntityId, LogType, MaterialId
from materia.persistence.repository.inmemory import InMemoryStore
from tests.factories import make_characteristic, make_material, make_tag
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


def upload(name: str, content: bytes = b"data") -> dict:
    return {
        "name": name,
        "type": "application/pdf",
        "content": base64.b64encode(content).decode(),
    }


class TestCreateMaterial:
    """Tests for create_material."""

    @pytest.mark.asyncio
    async def test_create_material_with_values(self, unit_env):
        # Arrange
        service = await unit_env.get(MaterialService)
        queue = await unit_env.get(MaterialHistoryQueue)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        tag = make_tag(entity_id)
        weight = make_characteristic(entity_id, units="kg")
        store.tags[tag.id] = tag
        store.characteristics[weight.id] = weight
        data = MaterialData.model_validate(
            {
                "name": "Oak plank",
                "tagIds": [str(tag.id)],
                "characteristicValues": [
                    {"characteristicId": str(weight.id), "value": "12"}
                ],
            }
        )

        # Act
        material = await service.create_material(entity_id, data)

        # Assert
        assert store.materials[material.id].tag_ids == [tag.id]
        assert material.characteristics[0].value == ScalarValue(value="12")
        assert queue.material_ids == [material.id]
        assert store.logs[-1].type == LogType.MATERIAL_CREATE

    @pytest.mark.asyncio
    async def test_unknown_tag_raises(self, unit_env):
        service = await unit_env.get(MaterialService)
        data = MaterialData.model_validate({"name": "Oak plank", "tagIds": [str(uuid4())]})

        with pytest.raises(NotFoundTagError):
            await service.create_material(EntityId(uuid4()), data)

    @pytest.mark.asyncio
    async def test_characteristic_of_other_entity_raises(self, unit_env):
        service = await unit_env.get(MaterialService)
        store = await unit_env.get(InMemoryStore)
        foreign = make_characteristic(EntityId(uuid4()))
        store.characteristics[foreign.id] = foreign
        data = MaterialData.model_validate(
            {
                "name": "Oak plank",
                "characteristicValues": [{"characteristicId": str(foreign.id), "value": "1"}],
            }
        )

        with pytest.raises(NotFoundCharacteristicError):
            await service.create_material(EntityId(uuid4()), data)

    @pytest.mark.asyncio
    async def test_mismatched_value_raises_before_storing(self, unit_env):
        service = await unit_env.get(MaterialService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        flag = make_characteristic(entity_id, name="Recycled", type=CharacteristicType.BOOLEAN)
        store.characteristics[flag.id] = flag
        data = MaterialData.model_validate(
            {
                "name": "Oak plank",
                "characteristicValues": [{"characteristicId": str(flag.id), "value": "yes"}],
            }
        )

        with pytest.raises(ShapeMismatchError):
            await service.create_material(entity_id, data)

        assert store.materials == {}


class TestUpdateMaterialFiles:
    """File characteristic changes on update."""

    @pytest.mark.asyncio
    async def test_files_added_and_removed(self, unit_env):
        # Arrange
        service = await unit_env.get(MaterialService)
        storage = await unit_env.get(FileStorage)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        sheet = make_characteristic(entity_id, name="Datasheet", type=CharacteristicType.FILE)
        store.characteristics[sheet.id] = sheet

        created = await service.create_material(
            entity_id,
            MaterialData.model_validate(
                {
                    "name": "Oak plank",
                    "characteristicValues": [
                        {
                            "characteristicId": str(sheet.id),
                            "value": {"fileToAdd": [upload("a.pdf"), upload("b.pdf")]},
                        }
                    ],
                }
            ),
        )
        first, second = created.characteristics[0].value.files

        # Act
        updated = await service.update_material(
            created.id,
            entity_id,
            MaterialData.model_validate(
                {
                    "name": "Oak plank",
                    "characteristicValues": [
                        {
                            "characteristicId": str(sheet.id),
                            "value": {
                                "fileToDelete": [str(first.id)],
                                "fileToAdd": [upload("my notes.pdf")],
                            },
                        }
                    ],
                }
            ),
        )

        # Assert
        value = updated.characteristics[0].value
        assert isinstance(value, FileValue)
        assert [f.name for f in value.files] == ["b.pdf", "my-notes.pdf"]
        assert value.file_to_add == []
        assert first.id not in store.files
        assert second.id in store.files
        assert len(storage.files) == 3

    @pytest.mark.asyncio
    async def test_removing_characteristic_forgets_its_files(self, unit_env):
        service = await unit_env.get(MaterialService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        sheet = make_characteristic(entity_id, name="Datasheet", type=CharacteristicType.FILE)
        store.characteristics[sheet.id] = sheet
        created = await service.create_material(
            entity_id,
            MaterialData.model_validate(
                {
                    "name": "Oak plank",
                    "characteristicValues": [
                        {"characteristicId": str(sheet.id), "value": {"fileToAdd": [upload("a.pdf")]}}
                    ],
                }
            ),
        )

        updated = await service.update_material(
            created.id, entity_id, MaterialData.model_validate({"name": "Oak plank"})
        )

        assert updated.characteristics == []
        assert store.files == {}

    @pytest.mark.asyncio
    async def test_update_missing_material_raises(self, unit_env):
        service = await unit_env.get(MaterialService)

        with pytest.raises(NotFoundMaterialError) as exc_info:
            await service.update_material(
                MaterialId(uuid4()),
                EntityId(uuid4()),
                MaterialData.model_validate({"name": "Oak plank"}),
            )

        assert exc_info.value.code == "materialNotFound"


class TestDeleteMaterial:
    """Tests for delete_material."""

    @pytest.mark.asyncio
    async def test_delete_is_soft(self, unit_env):
        service = await unit_env.get(MaterialService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        material = make_material(entity_id)
        store.materials[material.id] = material

        deleted = await service.delete_material(material.id, entity_id)

        assert deleted.deleted_at is not None
        assert store.materials[material.id].deleted_at is not None
        assert await service.list_materials(entity_id) == []

    @pytest.mark.asyncio
    async def test_deleted_material_cannot_be_deleted_again(self, unit_env):
        service = await unit_env.get(MaterialService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        material = make_material(entity_id, deleted=True)
        store.materials[material.id] = material

        with pytest.raises(NotFoundMaterialError):
            await service.delete_material(material.id, entity_id)

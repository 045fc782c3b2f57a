"""Unit tests for CharacteristicService."""

from uuid import uuid4

import pytest

from materia.domain.error import (
    DeleteCharacteristicUsedByMaterialsError,
    NotFoundCharacteristicError,
)
from materia.domain.model.characteristic import CharacteristicChanges, NewCharacteristic
from materia.domain.model.characteristic_value import ScalarValue
from materia.domain.model.material import MaterialCharacteristic
from materia.domain.service import CharacteristicService, MaterialHistoryQueue
from materia.domain.value import CharacteristicId, CharacteristicType, EntityId, LogType
from materia.persistence.repository.inmemory import InMemoryStore
from tests.factories import make_characteristic, make_material
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestCreateCharacteristic:
    """Tests for create_characteristic."""

    @pytest.mark.asyncio
    async def test_create_numeric_characteristic(self, unit_env):
        """Creating a characteristic stores it and writes an audit entry."""
        # Arrange
        service = await unit_env.get(CharacteristicService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        data = NewCharacteristic(name="Weight", type=CharacteristicType.NUMBER, units="kg")

        # Act
        characteristic = await service.create_characteristic(entity_id, data)

        # Assert
        assert store.characteristics[characteristic.id].units == "kg"
        assert characteristic.type is CharacteristicType.NUMBER
        assert characteristic.options is None
        assert [e.type for e in store.logs] == [LogType.CHARACTERISTIC_CREATE]
        assert store.logs[0].info == {
            "characteristic": {"id": str(characteristic.id), "name": "Weight"}
        }

    @pytest.mark.asyncio
    async def test_create_choice_characteristic_cleans_options(self, unit_env):
        service = await unit_env.get(CharacteristicService)
        data = NewCharacteristic(
            name="Finish", type=CharacteristicType.SELECT, options=["matte", "", "matte"]
        )

        characteristic = await service.create_characteristic(EntityId(uuid4()), data)

        assert characteristic.options == ["matte"]


class TestUpdateCharacteristic:
    """Tests for update_characteristic."""

    @pytest.mark.asyncio
    async def test_update_appends_options(self, unit_env):
        """New options are appended, existing ones are never removed."""
        # Arrange
        service = await unit_env.get(CharacteristicService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        existing = make_characteristic(
            entity_id, name="Finish", type=CharacteristicType.SELECT, options=["matte"]
        )
        store.characteristics[existing.id] = existing

        # Act
        updated = await service.update_characteristic(
            existing.id,
            entity_id,
            CharacteristicChanges(name="Finish", options=["gloss"]),
        )

        # Assert
        assert updated.options == ["matte", "gloss"]
        assert updated.type is CharacteristicType.SELECT

    @pytest.mark.asyncio
    async def test_options_ignored_for_non_choice_type(self, unit_env):
        service = await unit_env.get(CharacteristicService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        existing = make_characteristic(entity_id, units="kg")
        store.characteristics[existing.id] = existing

        updated = await service.update_characteristic(
            existing.id, entity_id, CharacteristicChanges(name="Mass", options=["a"])
        )

        assert updated.name == "Mass"
        assert updated.options is None
        assert updated.units == "kg"

    @pytest.mark.asyncio
    async def test_unchanged_update_is_not_logged(self, unit_env):
        service = await unit_env.get(CharacteristicService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        existing = make_characteristic(entity_id)
        store.characteristics[existing.id] = existing

        result = await service.update_characteristic(
            existing.id, entity_id, CharacteristicChanges(name="Weight")
        )

        assert result == existing
        assert store.logs == []

    @pytest.mark.asyncio
    async def test_update_never_requests_history(self, unit_env):
        """Editing a definition leaves material history untouched."""
        # Arrange
        service = await unit_env.get(CharacteristicService)
        queue = await unit_env.get(MaterialHistoryQueue)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        existing = make_characteristic(entity_id)
        store.characteristics[existing.id] = existing
        material = make_material(
            entity_id,
            values=[
                MaterialCharacteristic(
                    characteristic_id=existing.id, value=ScalarValue(value="12")
                )
            ],
        )
        store.materials[material.id] = material

        # Act
        await service.update_characteristic(
            existing.id, entity_id, CharacteristicChanges(name="Mass")
        )

        # Assert
        assert queue.material_ids == []

    @pytest.mark.asyncio
    async def test_update_in_other_entity_raises_not_found(self, unit_env):
        service = await unit_env.get(CharacteristicService)
        store = await unit_env.get(InMemoryStore)
        existing = make_characteristic(EntityId(uuid4()))
        store.characteristics[existing.id] = existing

        with pytest.raises(NotFoundCharacteristicError):
            await service.update_characteristic(
                existing.id, EntityId(uuid4()), CharacteristicChanges(name="Mass")
            )


class TestDeleteCharacteristic:
    """Tests for delete_characteristic."""

    @pytest.mark.asyncio
    async def test_delete_unused_characteristic(self, unit_env):
        service = await unit_env.get(CharacteristicService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        existing = make_characteristic(entity_id)
        store.characteristics[existing.id] = existing

        deleted = await service.delete_characteristic(existing.id, entity_id)

        assert deleted.id == existing.id
        assert existing.id not in store.characteristics
        assert store.logs[-1].type == LogType.CHARACTERISTIC_DELETE

    @pytest.mark.asyncio
    async def test_delete_used_by_active_material_is_blocked(self, unit_env):
        # Arrange
        service = await unit_env.get(CharacteristicService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        existing = make_characteristic(entity_id)
        store.characteristics[existing.id] = existing
        material = make_material(
            entity_id,
            values=[MaterialCharacteristic(characteristic_id=existing.id)],
        )
        store.materials[material.id] = material

        # Act & Assert
        with pytest.raises(DeleteCharacteristicUsedByMaterialsError) as exc_info:
            await service.delete_characteristic(existing.id, entity_id)

        assert exc_info.value.code == "characteristicHasMaterials"
        assert existing.id in store.characteristics

    @pytest.mark.asyncio
    async def test_delete_used_only_by_deleted_material_succeeds(self, unit_env):
        """Soft-deleted materials do not block a characteristic delete."""
        service = await unit_env.get(CharacteristicService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        existing = make_characteristic(entity_id)
        store.characteristics[existing.id] = existing
        material = make_material(
            entity_id,
            values=[MaterialCharacteristic(characteristic_id=existing.id)],
            deleted=True,
        )
        store.materials[material.id] = material

        await service.delete_characteristic(existing.id, entity_id)

        assert existing.id not in store.characteristics

    @pytest.mark.asyncio
    async def test_delete_missing_characteristic_raises(self, unit_env):
        service = await unit_env.get(CharacteristicService)

        with pytest.raises(NotFoundCharacteristicError) as exc_info:
            await service.delete_characteristic(
                CharacteristicId(uuid4()), EntityId(uuid4())
            )

        assert exc_info.value.code == "characteristicNotFound"


class TestListCharacteristics:
    """Tests for list_characteristics."""

    @pytest.mark.asyncio
    async def test_list_counts_active_materials_in_entity(self, unit_env):
        service = await unit_env.get(CharacteristicService)
        store = await unit_env.get(InMemoryStore)
        entity_id = EntityId(uuid4())
        weight = make_characteristic(entity_id)
        store.characteristics[weight.id] = weight
        other = make_characteristic(EntityId(uuid4()))
        store.characteristics[other.id] = other
        for deleted in (False, False, True):
            material = make_material(
                entity_id,
                values=[MaterialCharacteristic(characteristic_id=weight.id)],
                deleted=deleted,
            )
            store.materials[material.id] = material

        characteristics = await service.list_characteristics(entity_id)

        assert [c.id for c in characteristics] == [weight.id]
        assert characteristics[0].material_count == 2

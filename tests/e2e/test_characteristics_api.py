"""End-to-end tests for characteristic endpoints."""

from uuid import uuid4

from materia.domain.model.characteristic_value import ScalarValue
from materia.domain.model.material import MaterialCharacteristic
from materia.domain.value import EntityId
from tests.factories import make_characteristic, make_material


class TestCharacteristicEndpoints:
    """End-to-end tests for /characteristics."""

    def test_create_choice_characteristic(self, client):
        # Act
        response = client.post(
            "/characteristics",
            json={
                "name": "Finish",
                "type": "select",
                "options": ["matte", " ", "matte", "gloss"],
            },
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["type"] == "select"
        assert body["options"] == ["matte", "gloss"]

    def test_unknown_type(self, client):
        response = client.post("/characteristics", json={"name": "Colour", "type": "colour"})

        assert response.status_code == 422
        assert response.json()["detail"][0]["loc"] == ["type"]

    def test_type_is_immutable(self, client, store, entity_id):
        weight = make_characteristic(entity_id)
        store.characteristics[weight.id] = weight

        response = client.put(
            f"/characteristics/{weight.id}", json={"name": "Weight", "type": "text"}
        )

        assert response.status_code == 422
        assert store.characteristics[weight.id].type.value == "number"

    def test_list_counts_active_materials(self, client, store, entity_id):
        weight = make_characteristic(entity_id)
        store.characteristics[weight.id] = weight
        value = [
            MaterialCharacteristic(characteristic_id=weight.id, value=ScalarValue(value="3"))
        ]
        for deleted in (False, True):
            material = make_material(entity_id, values=value, deleted=deleted)
            store.materials[material.id] = material

        response = client.get("/characteristics")

        [item] = response.json()["characteristics"]
        assert item["material_count"] == 1

    def test_delete_used_characteristic(self, client, store, entity_id):
        weight = make_characteristic(entity_id)
        store.characteristics[weight.id] = weight
        material = make_material(
            entity_id, values=[MaterialCharacteristic(characteristic_id=weight.id)]
        )
        store.materials[material.id] = material

        response = client.delete(f"/characteristics/{weight.id}")

        assert response.status_code == 409
        assert response.json() == {"detail": "characteristicHasMaterials"}

    def test_delete_characteristic_of_other_entity(self, client, store):
        foreign = make_characteristic(EntityId(uuid4()))
        store.characteristics[foreign.id] = foreign

        response = client.delete(f"/characteristics/{foreign.id}")

        assert response.status_code == 404
        assert response.json() == {"detail": "characteristicNotFound"}
        assert foreign.id in store.characteristics

    def test_malformed_id(self, client):
        response = client.delete("/characteristics/not-a-uuid")

        assert response.status_code == 422

"""End-to-end tests for material and material history endpoints."""

import base64

from fastapi.testclient import TestClient

from materia.domain.value import CharacteristicType
from tests.factories import make_characteristic, make_material, make_tag, open_session


def seed(store, entity_id):
    """Store a tag, a number characteristic and a file characteristic."""
    tag = make_tag(entity_id)
    weight = make_characteristic(entity_id, units="kg")
    datasheet = make_characteristic(entity_id, name="Datasheet", type=CharacteristicType.FILE)
    store.tags[tag.id] = tag
    store.characteristics.update({weight.id: weight, datasheet.id: datasheet})
    return tag, weight, datasheet


class TestMaterialEndpoints:
    """End-to-end tests for /materials."""

    def test_create_material_with_values(self, client, store, entity_id):
        # Arrange
        tag, weight, datasheet = seed(store, entity_id)
        payload = {
            "name": "Oak plank",
            "description": "Untreated",
            "tagIds": [str(tag.id)],
            "characteristicValues": [
                {"characteristicId": str(weight.id), "value": "12"},
                {
                    "characteristicId": str(datasheet.id),
                    "value": {
                        "fileToAdd": [
                            {
                                "name": "data sheet.pdf",
                                "type": "application/pdf",
                                "content": base64.b64encode(b"%PDF").decode(),
                            }
                        ]
                    },
                },
            ],
        }

        # Act
        created = client.post("/materials", json=payload)
        material_id = created.json()["id"]
        values = client.get(f"/materials/{material_id}/characteristics")

        # Assert
        assert created.status_code == 201
        assert [t["name"] for t in created.json()["tags"]] == ["Fragile"]
        assert values.status_code == 200
        weight_value, file_value = values.json()["characteristics"]
        assert weight_value["characteristic"]["units"] == "kg"
        assert weight_value["value"] == {"kind": "scalar", "value": "12"}
        assert [f["name"] for f in file_value["value"]["file"]] == ["data-sheet.pdf"]
        [stored] = store.files.values()
        assert stored.path.endswith("-data-sheet.pdf")

    def test_value_not_matching_type(self, client, store, entity_id):
        _, weight, _ = seed(store, entity_id)

        response = client.post(
            "/materials",
            json={
                "name": "Oak plank",
                "characteristicValues": [{"characteristicId": str(weight.id), "value": True}],
            },
        )

        assert response.status_code == 422
        assert response.json() == {"detail": "characteristicValueMismatch"}
        assert store.materials == {}

    def test_unknown_tag(self, client):
        response = client.post(
            "/materials",
            json={"name": "Oak plank", "tagIds": ["00000000-0000-0000-0000-000000000000"]},
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "tagNotFound"}

    def test_delete_material(self, client, store, entity_id):
        material = make_material(entity_id)
        store.materials[material.id] = material

        deleted = client.delete(f"/materials/{material.id}")
        listed = client.get("/materials")
        again = client.delete(f"/materials/{material.id}")

        assert deleted.status_code == 200
        assert listed.json()["materials"] == []
        assert store.materials[material.id].deleted_at is not None
        assert again.status_code == 404
        assert again.json() == {"detail": "materialNotFound"}


class TestMaterialHistoryEndpoints:
    """Snapshots are generated after each mutation and can be read back."""

    def test_history_after_create_and_update(self, app, store, actor, entity_id):
        # Arrange
        tag, weight, _ = seed(store, entity_id)

        # Act
        with TestClient(app) as client:
            client.cookies.set("session_token", open_session(store, actor))
            material_id = client.post(
                "/materials",
                json={
                    "name": "Oak plank",
                    "tagIds": [str(tag.id)],
                    "characteristicValues": [
                        {"characteristicId": str(weight.id), "value": "12"}
                    ],
                },
            ).json()["id"]
            client.put(
                f"/materials/{material_id}",
                json={"name": "Oak board", "tagIds": [str(tag.id)]},
            )

        # Assert
        assert sorted(h.name for h in store.history) == ["Oak board", "Oak plank"]
        first = next(h for h in store.history if h.name == "Oak plank")
        assert first.characteristics[0].units == "kg"
        assert first.tags[0].name == "Fragile"

    def test_read_history(self, client, store, entity_id):
        material = make_material(entity_id)
        store.materials[material.id] = material

        empty = client.get(f"/materials/{material.id}/history/last")
        full = client.get(
            f"/materials/{material.id}/history",
            params={"date_from": "2024-01-01T00:00:00"},
        )

        assert empty.status_code == 200
        assert empty.json() == {"history": None}
        assert full.json() == {"history": []}

    def test_history_of_unknown_material(self, client):
        response = client.get("/materials/00000000-0000-0000-0000-000000000000/history")

        assert response.status_code == 404
        assert response.json() == {"detail": "materialNotFound"}

"""End-to-end tests for file downloads."""

import base64
from uuid import uuid4

from materia.domain.value import CharacteristicType, EntityId
from tests.factories import make_actor, make_characteristic, open_session


def upload_datasheet(client, store, entity_id) -> str:
    """Create a material carrying one PDF and return the file's ID."""
    datasheet = make_characteristic(entity_id, name="Datasheet", type=CharacteristicType.FILE)
    store.characteristics[datasheet.id] = datasheet
    created = client.post(
        "/materials",
        json={
            "name": "Oak plank",
            "characteristicValues": [
                {
                    "characteristicId": str(datasheet.id),
                    "value": {
                        "fileToAdd": [
                            {
                                "name": "data sheet.pdf",
                                "type": "application/pdf",
                                "content": base64.b64encode(b"%PDF-1.7").decode(),
                            }
                        ]
                    },
                }
            ],
        },
    )
    assert created.status_code == 201
    [stored] = store.files.values()
    return str(stored.id)


class TestFileEndpoints:
    """End-to-end tests for /files."""

    def test_download_uploaded_file(self, client, store, entity_id):
        file_id = upload_datasheet(client, store, entity_id)

        response = client.get(f"/files/{file_id}")

        assert response.status_code == 200
        assert response.content == b"%PDF-1.7"
        assert response.headers["content-type"] == "application/pdf"
        assert "data-sheet.pdf" in response.headers["content-disposition"]
        assert "private" in response.headers["cache-control"]

    def test_file_of_another_entity(self, client, store, entity_id):
        file_id = upload_datasheet(client, store, entity_id)
        outsider = make_actor(EntityId(uuid4()))
        client.cookies.set("session_token", open_session(store, outsider))

        response = client.get(f"/files/{file_id}")

        assert response.status_code == 404
        assert response.json() == {"detail": "fileNotFound"}

    def test_download_requires_session(self, client, store, entity_id):
        file_id = upload_datasheet(client, store, entity_id)
        client.cookies.clear()

        response = client.get(f"/files/{file_id}")

        assert response.status_code == 401

"""End-to-end tests for the audit log endpoint."""

from materia.domain.value import PermissionCode
from tests.factories import make_actor, open_session


class TestLogEndpoints:
    """End-to-end tests for /logs."""

    def test_mutations_are_logged(self, client, actor):
        # Arrange
        tag_id = client.post(
            "/tags", json={"name": "Fragile", "color": "#ff0000", "fontColor": "#ffffff"}
        ).json()["id"]

        # Act
        response = client.get("/logs")

        # Assert
        assert response.status_code == 200
        [entry] = response.json()["logs"]
        assert entry["type"] == "tag_create"
        assert entry["info"] == {"tag": {"id": tag_id, "name": "Fragile"}}
        assert entry["user_id"] == str(actor.user_id)

    def test_requires_log_read(self, client, store, entity_id):
        reader = make_actor(entity_id, permissions={PermissionCode.TAG_READ})
        client.cookies.set("session_token", open_session(store, reader))

        response = client.get("/logs")

        assert response.status_code == 403
        assert response.json() == {"detail": "missingPermission"}

"""End-to-end tests for role and permission endpoints."""

from uuid import uuid4

from materia.domain.value import SUPER_ADMIN_ROLE_NAME, PermissionCode, UserId
from materia.interface.api.error import GENERIC_ERROR_MESSAGE
from tests.factories import make_role


class TestRoleEndpoints:
    """End-to-end tests for /roles and /permissions."""

    def test_create_role_and_assign_permissions(self, client, store):
        # Act
        created = client.post("/roles", json={"name": "Editor"})
        role_id = created.json()["id"]
        assigned = client.put(
            f"/roles/{role_id}/permissions",
            json={"permissionCodes": ["tag_read", "tag_create"]},
        )
        listed = client.get("/roles")

        # Assert
        assert created.status_code == 201
        assert assigned.status_code == 200
        assert assigned.json()["permission_codes"] == ["tag_read", "tag_create"]
        assert [r["name"] for r in listed.json()["roles"]] == ["Editor"]

    def test_list_permissions(self, client):
        response = client.get("/permissions")

        assert response.status_code == 200
        assert set(response.json()["permission_codes"]) == {p.value for p in PermissionCode}

    def test_delete_role_held_by_users(self, client, store):
        role = make_role()
        store.roles[role.id] = role
        store.role_users[role.id] = {UserId(uuid4())}

        response = client.delete(f"/roles/{role.id}")

        assert response.status_code == 409
        assert response.json() == {"detail": "roleHasUsers"}

    def test_super_admin_cannot_be_renamed(self, client, store):
        admin = make_role(SUPER_ADMIN_ROLE_NAME, list(PermissionCode))
        store.roles[admin.id] = admin

        response = client.put(f"/roles/{admin.id}", json={"name": "Admin"})

        assert response.status_code == 409
        assert response.json() == {"detail": GENERIC_ERROR_MESSAGE}
        assert store.roles[admin.id].name == SUPER_ADMIN_ROLE_NAME

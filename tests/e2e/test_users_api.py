"""End-to-end tests for user administration endpoints."""

from uuid import uuid4

from materia.domain.value import EntityId, PermissionCode
from tests.factories import make_actor, make_role, make_tag, make_user, open_session


def new_user(entity_id, email="ada@example.com"):
    return {"name": "Ada Lovelace", "email": email, "entities": [str(entity_id)]}


class TestUserEndpoints:
    """End-to-end tests for /users."""

    def test_create_and_list(self, client, store, entity_id):
        # Arrange
        store.entities.add(entity_id)

        # Act
        created = client.post("/users", json=new_user(entity_id, "Ada@Example.com"))
        listed = client.get("/users")

        # Assert
        assert created.status_code == 201
        assert created.json()["email"] == "ada@example.com"
        assert created.json()["entity_selected_id"] == str(entity_id)
        assert [u["id"] for u in listed.json()["users"]] == [created.json()["id"]]

    def test_email_in_use(self, client, store, entity_id):
        store.entities.add(entity_id)
        client.post("/users", json=new_user(entity_id))

        response = client.post("/users", json=new_user(entity_id))

        assert response.status_code == 409
        assert response.json() == {"detail": "emailInUse"}

    def test_without_permission(self, client, store, entity_id):
        store.entities.add(entity_id)
        reader = make_actor(entity_id, permissions={PermissionCode.USER_READ})
        client.cookies.set("session_token", open_session(store, reader))

        response = client.post("/users", json=new_user(entity_id))

        assert response.status_code == 403
        assert response.json() == {"detail": "missingPermission"}
        assert store.users == {}

    def test_assigned_role_cannot_be_deleted(self, client, store, entity_id):
        # Arrange
        user = make_user([entity_id])
        store.users[user.id] = user
        role = make_role()
        store.roles[role.id] = role

        # Act
        assigned = client.put(f"/users/{user.id}/roles", json={"roleIds": [str(role.id)]})
        deleted = client.delete(f"/roles/{role.id}")

        # Assert
        assert assigned.status_code == 200
        assert assigned.json()["role_ids"] == [str(role.id)]
        assert deleted.status_code == 409
        assert deleted.json() == {"detail": "roleHasUsers"}

    def test_update_user(self, client, store, entity_id):
        other = EntityId(uuid4())
        store.entities.update({entity_id, other})
        user = make_user([entity_id])
        store.users[user.id] = user

        response = client.put(
            f"/users/{user.id}",
            json={
                "name": "Ada King",
                "email": user.email,
                "active": True,
                "entitiesToAdd": [str(other)],
                "entitiesToRemove": [str(entity_id)],
            },
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Ada King"
        assert response.json()["entity_ids"] == [str(other)]
        assert response.json()["entity_selected_id"] == str(other)

    def test_switching_entity_changes_visible_data(self, client, store, actor, entity_id):
        # Arrange
        other = EntityId(uuid4())
        me = make_user([entity_id, other], id=actor.user_id)
        store.users[me.id] = me
        foreign = make_tag(other, name="Outdoor")
        store.tags[foreign.id] = foreign

        # Act
        before = client.get("/tags")
        switched = client.put("/users/me/entity", json={"entityId": str(other)})
        after = client.get("/tags")

        # Assert
        assert before.json()["tags"] == []
        assert switched.status_code == 200
        assert switched.json()["entity_selected_id"] == str(other)
        assert [t["name"] for t in after.json()["tags"]] == ["Outdoor"]

    def test_switch_to_entity_not_assigned(self, client, store, actor, entity_id):
        me = make_user([entity_id], id=actor.user_id)
        store.users[me.id] = me

        response = client.put("/users/me/entity", json={"entityId": str(uuid4())})

        assert response.status_code == 409
        assert response.json() == {"detail": "entityNotAssigned"}

    def test_users_cannot_delete_themselves(self, client, store, actor, entity_id):
        me = make_user([entity_id], id=actor.user_id)
        store.users[me.id] = me

        response = client.delete(f"/users/{me.id}")

        assert response.status_code == 409
        assert response.json() == {"detail": "userProtected"}
        assert store.users[me.id].deleted_at is None

    def test_delete_unknown_user(self, client):
        response = client.delete(f"/users/{uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"detail": "userNotFound"}

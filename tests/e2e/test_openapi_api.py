"""End-to-end tests for the generated OpenAPI document."""


def request_schema(document, method, path):
    body = document["paths"][path][method]["requestBody"]
    return body["content"]["application/json"]["schema"]


class TestOpenApiDocument:
    """Request bodies are documented even though they are validated late."""

    def test_tag_body_is_documented(self, client):
        document = client.get("/openapi.json").json()

        schema = request_schema(document, "post", "/tags")

        assert {"name", "color", "fontColor"} <= set(schema["properties"])
        assert "name" in schema["required"]

    def test_nested_models_are_components(self, client):
        document = client.get("/openapi.json").json()

        schema = request_schema(document, "post", "/materials")
        ref = schema["properties"]["characteristicValues"]["items"]["$ref"]

        assert ref == "#/components/schemas/CharacteristicValueInput"
        assert "CharacteristicValueInput" in document["components"]["schemas"]

    def test_user_routes_are_documented(self, client):
        document = client.get("/openapi.json").json()

        assert "entities" in request_schema(document, "post", "/users")["properties"]
        assert "entityId" in request_schema(document, "put", "/users/me/entity")["properties"]
        assert "roleIds" in request_schema(document, "put", "/users/{user_id}/roles")["properties"]

"""OpenAPI documentation of request bodies.

Routes take their body as raw JSON because use cases validate it only after
checking the caller's session and permission. The schema of the input model
each use case validates against is attached to the route by hand, and the
models it references are merged into the document's components.
"""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel

REF_TEMPLATE = "#/components/schemas/{model}"

# Models referenced by documented request bodies
_body_components: dict[str, dict[str, Any]] = {}


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """Describe a JSON request body validated against a model.

    Args:
        model: Input model the use case validates the body with

    Returns:
        Value for the route's ``openapi_extra``
    """
    schema = model.model_json_schema(by_alias=True, ref_template=REF_TEMPLATE)
    _body_components.update(schema.pop("$defs", {}))
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema}},
        }
    }


def install_openapi(app: FastAPI) -> None:
    """Generate the app's OpenAPI document with the request body models."""

    def openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema
        document = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        schemas = document.setdefault("components", {}).setdefault("schemas", {})
        for name, schema in _body_components.items():
            schemas.setdefault(name, schema)
        app.openapi_schema = document
        return document

    app.openapi = openapi  # type: ignore[method-assign]

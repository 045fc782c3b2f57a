"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable value compared field by field.

    Value objects are embedded in aggregates and history snapshots; fields
    with a camelCase alias accept both spellings.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class of entities and aggregates.

    Instances are frozen: services derive changed copies with
    ``model_copy(update=...)`` and hand them to a repository.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class DomainInput(BaseModel):
    """Base class for data sent by clients to create or change an entity.

    Unknown fields are rejected, so immutable attributes can never be
    smuggled into an update.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )

"""Audit log entry."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field

from materia.domain.model.common import DomainModel
from materia.domain.value import EntityId, LogId, LogType, UserId


class LogEntry(DomainModel):
    """Record of a mutation made by a user.

    ``info`` holds the subject under its kind, e.g.
    ``{"tag": {"id": "...", "name": "Fragile"}}``. Global subjects such as
    roles have no entity.
    """

    id: LogId
    type: LogType
    info: dict[str, Any] = Field(default_factory=dict)
    user_id: Optional[UserId] = None
    entity_id: Optional[EntityId] = None
    action_date: datetime = Field(default_factory=datetime.now)

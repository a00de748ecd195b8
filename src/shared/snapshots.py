"""Cross-context snapshot contracts.

Snapshots are immutable, denormalized copies of an entity taken at the
moment a domain event is raised. They travel inside domain events as JSON
text (see ``to_json`` / ``from_json``) so event handlers observe the entity
as it was, not as it is when the handler eventually runs.
"""

import json
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict


class Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, raw: str):
        return cls.model_validate_json(raw)


class Actor(Snapshot):
    """The user performing an action, as seen at event time."""

    id: str
    name: str
    email: str
    role: str


class DocumentSnapshot(Snapshot):
    id: str
    name: str
    type: str
    status: str
    file_url: str
    file_size: int
    mime_type: str | None = None
    tags: list[str] = []
    folder_id: str | None = None
    priority: str
    due_date: datetime | None = None
    version: int = 1


class TaskSnapshot(Snapshot):
    id: str
    title: str
    description: str
    status: str
    priority: str
    assigned_to: str
    assigned_by: str | None = None
    due_date: datetime | None = None
    document_id: str | None = None
    estimated_hours: float | None = None
    actual_hours: float | None = None
    completed_at: datetime | None = None


class FolderSnapshot(Snapshot):
    id: str
    name: str
    parent_id: str | None = None


class TemplateSnapshot(Snapshot):
    id: str
    name: str
    category: str
    is_public: bool = False
    variables: list[str] = []
    usage_count: int = 0


class UserSnapshot(Snapshot):
    id: str
    name: str
    email: str
    role: str


def _json_default(value):
    if isinstance(value, datetime | date):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dump_changes(changes: dict) -> str:
    """JSON text for a change set; dates become ISO strings."""
    return json.dumps(changes, default=_json_default)

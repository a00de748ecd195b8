"""Task aggregate — a unit of legal work, optionally tied to a document.

Status values:
    todo → in_progress → review → completed
    Any open status → cancelled
Completion stamps ``completed_at`` and records the hours actually spent.
"""

import json
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, Identifier, String, Text

from shared.snapshots import Actor, TaskSnapshot, dump_changes
from tasks.domain import tasks


class TaskStatus(Enum):
    TODO = "todo"
    IN_PROGRESS = "in_progress"
    REVIEW = "review"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


UPDATABLE_FIELDS = (
    "title",
    "description",
    "status",
    "priority",
    "due_date",
    "assigned_to",
    "document_id",
    "estimated_hours",
    "actual_hours",
    "tags",
)


@tasks.aggregate
class Task:
    """A task assigned to a team member."""

    title: String(required=True, max_length=255)
    description: Text(default="")
    status: String(choices=TaskStatus, default=TaskStatus.TODO.value)
    priority: String(choices=TaskPriority, default=TaskPriority.MEDIUM.value)
    due_date: DateTime()

    assigned_to: String(required=True, max_length=255)
    assigned_by: String(max_length=255)
    document_id: Identifier()

    estimated_hours: Float(min_value=0.0)
    actual_hours: Float(min_value=0.0)
    tags: Text()  # JSON list of tags

    completed_at: DateTime()
    is_deleted: Boolean(default=False)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(
        cls,
        actor: Actor,
        title,
        assigned_to,
        description="",
        priority=TaskPriority.MEDIUM.value,
        due_date=None,
        document_id=None,
        estimated_hours=None,
        tags=None,
    ):
        from tasks.task.events import TaskCreated

        if priority not in {p.value for p in TaskPriority}:
            raise ValidationError({"priority": [f"Unknown task priority: {priority}"]})

        now = datetime.now(UTC)
        task = cls(
            id=str(uuid4()),
            title=title,
            description=description or "",
            status=TaskStatus.TODO.value,
            priority=priority,
            due_date=due_date,
            assigned_to=assigned_to,
            assigned_by=actor.id,
            document_id=document_id,
            estimated_hours=estimated_hours,
            tags=json.dumps(list(tags or [])),
            created_at=now,
            updated_at=now,
        )
        task.raise_(
            TaskCreated(
                task_id=str(task.id),
                actor=actor.to_json(),
                task=task.snapshot().to_json(),
                created_at=now,
            )
        )
        return task

    def get_tags(self) -> list[str]:
        return json.loads(self.tags) if self.tags else []

    def snapshot(self) -> TaskSnapshot:
        return TaskSnapshot(
            id=str(self.id),
            title=self.title,
            description=self.description or "",
            status=self.status,
            priority=self.priority,
            assigned_to=self.assigned_to,
            assigned_by=self.assigned_by,
            due_date=self.due_date,
            document_id=str(self.document_id) if self.document_id else None,
            estimated_hours=self.estimated_hours,
            actual_hours=self.actual_hours,
            completed_at=self.completed_at,
        )

    def update(self, actor: Actor, changes: dict):
        """Apply a partial update; an empty change set is a no-op."""
        from tasks.task.events import TaskUpdated

        unknown = sorted(set(changes) - set(UPDATABLE_FIELDS))
        if unknown:
            raise ValidationError({"changes": [f"Fields cannot be updated: {', '.join(unknown)}"]})
        if not changes:
            return

        if "status" in changes and changes["status"] not in {s.value for s in TaskStatus}:
            raise ValidationError({"status": [f"Unknown task status: {changes['status']}"]})
        if "priority" in changes and changes["priority"] not in {p.value for p in TaskPriority}:
            raise ValidationError({"priority": [f"Unknown task priority: {changes['priority']}"]})

        now = datetime.now(UTC)
        for field, value in changes.items():
            if field == "tags":
                self.tags = json.dumps(list(value or []))
            else:
                setattr(self, field, value)

        if self.status != TaskStatus.COMPLETED.value:
            self.completed_at = None
        elif self.completed_at is None:
            self.completed_at = now
        self.updated_at = now

        self.raise_(
            TaskUpdated(
                task_id=str(self.id),
                actor=actor.to_json(),
                task=self.snapshot().to_json(),
                changes=dump_changes(changes),
                updated_at=now,
            )
        )

    def complete(self, actor: Actor, actual_hours=None):
        """Mark the task completed, optionally recording the hours spent."""
        from tasks.task.events import TaskCompleted

        if self.status == TaskStatus.COMPLETED.value:
            raise ValidationError({"status": ["Task is already completed"]})
        if self.status == TaskStatus.CANCELLED.value:
            raise ValidationError({"status": ["Cannot complete a cancelled task"]})

        now = datetime.now(UTC)
        self.status = TaskStatus.COMPLETED.value
        if actual_hours is not None:
            self.actual_hours = actual_hours
        self.completed_at = now
        self.updated_at = now

        self.raise_(
            TaskCompleted(
                task_id=str(self.id),
                actor=actor.to_json(),
                task=self.snapshot().to_json(),
                completed_at=now,
            )
        )

    def delete(self, actor: Actor):
        from tasks.task.events import TaskDeleted

        if self.is_deleted:
            raise ValidationError({"task": ["Task is already deleted"]})

        now = datetime.now(UTC)
        self.is_deleted = True
        self.updated_at = now
        self.raise_(
            TaskDeleted(
                task_id=str(self.id),
                actor=actor.to_json(),
                task=self.snapshot().to_json(),
                deleted_at=now,
            )
        )

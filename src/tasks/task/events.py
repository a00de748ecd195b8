"""Domain events for the Task aggregate."""

from protean.fields import DateTime, Identifier, Text

from tasks.domain import tasks


@tasks.event(part_of="Task")
class TaskCreated:
    """A new task was assigned."""

    __version__ = "v1"

    task_id: Identifier(required=True)
    actor: Text(required=True)
    task: Text(required=True)
    created_at: DateTime(required=True)


@tasks.event(part_of="Task")
class TaskUpdated:
    """Task fields changed; ``changes`` is the submitted change set (JSON)."""

    __version__ = "v1"

    task_id: Identifier(required=True)
    actor: Text(required=True)
    task: Text(required=True)
    changes: Text(required=True)
    updated_at: DateTime(required=True)


@tasks.event(part_of="Task")
class TaskCompleted:
    __version__ = "v1"

    task_id: Identifier(required=True)
    actor: Text(required=True)
    task: Text(required=True)
    completed_at: DateTime(required=True)


@tasks.event(part_of="Task")
class TaskDeleted:
    __version__ = "v1"

    task_id: Identifier(required=True)
    actor: Text(required=True)
    task: Text(required=True)
    deleted_at: DateTime(required=True)

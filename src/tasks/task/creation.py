"""Task creation — command and handler."""

import json

from protean import handle
from protean.fields import DateTime, Float, Identifier, String, Text
from protean.utils.globals import current_domain

from shared.snapshots import Actor
from tasks.domain import tasks
from tasks.task.task import Task


@tasks.command(part_of="Task")
class CreateTask:
    """Assign a new task, optionally linked to a document."""

    actor: Text(required=True)
    title: String(required=True, max_length=255)
    description: Text()
    priority: String(max_length=10, default="medium")
    assigned_to: String(required=True, max_length=255)
    due_date: DateTime()
    document_id: Identifier()
    estimated_hours: Float(min_value=0.0)
    tags: Text()  # JSON list


@tasks.command_handler(part_of=Task)
class CreateTaskHandler:
    @handle(CreateTask)
    def create_task(self, command):
        task = Task.create(
            actor=Actor.from_json(command.actor),
            title=command.title,
            assigned_to=command.assigned_to,
            description=command.description,
            priority=command.priority,
            due_date=command.due_date,
            document_id=command.document_id,
            estimated_hours=command.estimated_hours,
            tags=json.loads(command.tags) if command.tags else [],
        )
        current_domain.repository_for(Task).add(task)
        return str(task.id)

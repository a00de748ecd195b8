"""Task completion — command and handler."""

from protean import handle
from protean.fields import Float, Identifier, Text
from protean.utils.globals import current_domain

from shared.snapshots import Actor
from tasks.domain import tasks
from tasks.task.queries import load_task
from tasks.task.task import Task


@tasks.command(part_of="Task")
class CompleteTask:
    """Close a task and record the hours actually spent."""

    actor: Text(required=True)
    task_id: Identifier(required=True)
    actual_hours: Float(min_value=0.0)


@tasks.command_handler(part_of=Task)
class CompleteTaskHandler:
    @handle(CompleteTask)
    def complete_task(self, command):
        task = load_task(command.task_id)
        task.complete(Actor.from_json(command.actor), actual_hours=command.actual_hours)
        current_domain.repository_for(Task).add(task)
        return task.snapshot()

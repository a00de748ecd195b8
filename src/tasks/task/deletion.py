"""Task deletion — command and handler."""

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from shared.snapshots import Actor
from tasks.domain import tasks
from tasks.task.queries import load_task
from tasks.task.task import Task


@tasks.command(part_of="Task")
class DeleteTask:
    actor: Text(required=True)
    task_id: Identifier(required=True)


@tasks.command_handler(part_of=Task)
class DeleteTaskHandler:
    @handle(DeleteTask)
    def delete_task(self, command):
        task = load_task(command.task_id)
        task.delete(Actor.from_json(command.actor))
        current_domain.repository_for(Task).add(task)

"""Task updates — command and handler."""

import json

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from shared.snapshots import Actor
from tasks.domain import tasks
from tasks.task.queries import load_task
from tasks.task.task import Task


@tasks.command(part_of="Task")
class UpdateTask:
    actor: Text(required=True)
    task_id: Identifier(required=True)
    changes: Text(required=True)  # JSON object of field -> new value


@tasks.command_handler(part_of=Task)
class UpdateTaskHandler:
    @handle(UpdateTask)
    def update_task(self, command):
        task = load_task(command.task_id)
        task.update(Actor.from_json(command.actor), json.loads(command.changes))
        current_domain.repository_for(Task).add(task)
        return task.snapshot()

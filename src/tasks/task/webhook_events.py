"""Outbound webhook handler — mirrors Task events to the webhook receiver."""

import json

from protean.utils.mixins import handle

from shared.snapshots import Actor, TaskSnapshot
from tasks.domain import tasks
from tasks.task.events import TaskCompleted, TaskCreated, TaskDeleted, TaskUpdated
from tasks.task.task import Task
from webhooks import catalog


def _unpack(event) -> tuple[Actor, TaskSnapshot]:
    return Actor.from_json(event.actor), TaskSnapshot.from_json(event.task)


@tasks.event_handler(part_of=Task)
class TaskWebhookHandler:
    """Publishes task lifecycle events as webhook envelopes."""

    @handle(TaskCreated)
    def on_task_created(self, event: TaskCreated) -> None:
        catalog.task_created(*_unpack(event))

    @handle(TaskUpdated)
    def on_task_updated(self, event: TaskUpdated) -> None:
        actor, task = _unpack(event)
        catalog.task_updated(actor, task, json.loads(event.changes))

    @handle(TaskCompleted)
    def on_task_completed(self, event: TaskCompleted) -> None:
        catalog.task_completed(*_unpack(event))

    @handle(TaskDeleted)
    def on_task_deleted(self, event: TaskDeleted) -> None:
        catalog.task_deleted(*_unpack(event))

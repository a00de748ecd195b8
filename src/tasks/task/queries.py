"""Read-side helpers for tasks."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from tasks.task.task import Task


def load_task(task_id: str) -> Task:
    """Fetch a live task or raise ObjectNotFoundError."""
    task = current_domain.repository_for(Task).get(task_id)
    if task.is_deleted:
        raise ObjectNotFoundError({"_entity": "Task not found"})
    return task


def list_tasks(status: str | None = None, assigned_to: str | None = None) -> list[Task]:
    """Live tasks, newest first, filtered by status and/or assignee."""
    criteria = {"is_deleted": False}
    if status:
        criteria["status"] = status
    if assigned_to:
        criteria["assigned_to"] = assigned_to
    results = current_domain.repository_for(Task)._dao.query.filter(**criteria).all().items
    return sorted(results, key=lambda t: t.created_at, reverse=True)


def tasks_for_document(document_id: str) -> list[Task]:
    results = (
        current_domain.repository_for(Task)._dao.query.filter(is_deleted=False, document_id=document_id).all().items
    )
    return sorted(results, key=lambda t: t.created_at, reverse=True)

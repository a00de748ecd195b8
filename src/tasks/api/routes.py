"""FastAPI endpoints for the Tasks domain."""

import json

from fastapi import APIRouter, Depends
from protean.utils.globals import current_domain

from identity.session import require_actor
from shared.snapshots import Actor
from tasks.api.schemas import (
    CompleteTaskRequest,
    CreateTaskRequest,
    StatusResponse,
    TaskIdResponse,
    TaskResponse,
    UpdateTaskRequest,
)
from tasks.task.completion import CompleteTask
from tasks.task.creation import CreateTask
from tasks.task.deletion import DeleteTask
from tasks.task.queries import list_tasks, load_task, tasks_for_document
from tasks.task.updating import UpdateTask

task_router = APIRouter(prefix="/tasks", tags=["tasks"])
document_task_router = APIRouter(prefix="/documents", tags=["tasks"])


@task_router.post("", status_code=201, response_model=TaskIdResponse)
async def create_task(body: CreateTaskRequest, actor: Actor = Depends(require_actor)) -> TaskIdResponse:
    command = CreateTask(
        actor=actor.to_json(),
        title=body.title,
        description=body.description,
        priority=body.priority,
        assigned_to=body.assigned_to,
        due_date=body.due_date,
        document_id=body.document_id,
        estimated_hours=body.estimated_hours,
        tags=json.dumps(body.tags),
    )
    result = current_domain.process(command, asynchronous=False)
    return TaskIdResponse(task_id=result)


@task_router.get("", response_model=list[TaskResponse])
async def get_tasks(
    status: str | None = None,
    assigned_to: str | None = None,
    actor: Actor = Depends(require_actor),
) -> list[TaskResponse]:
    return [TaskResponse.from_task(t) for t in list_tasks(status=status, assigned_to=assigned_to)]


@task_router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: str, actor: Actor = Depends(require_actor)) -> TaskResponse:
    return TaskResponse.from_task(load_task(task_id))


@task_router.put("/{task_id}", response_model=TaskResponse)
async def update_task(task_id: str, body: UpdateTaskRequest, actor: Actor = Depends(require_actor)) -> TaskResponse:
    command = UpdateTask(
        actor=actor.to_json(),
        task_id=task_id,
        changes=json.dumps(body.model_dump(mode="json", exclude_unset=True)),
    )
    current_domain.process(command, asynchronous=False)
    return TaskResponse.from_task(load_task(task_id))


@task_router.post("/{task_id}/complete", response_model=TaskResponse)
async def complete_task(
    task_id: str, body: CompleteTaskRequest, actor: Actor = Depends(require_actor)
) -> TaskResponse:
    command = CompleteTask(actor=actor.to_json(), task_id=task_id, actual_hours=body.actual_hours)
    current_domain.process(command, asynchronous=False)
    return TaskResponse.from_task(load_task(task_id))


@task_router.delete("/{task_id}", response_model=StatusResponse)
async def delete_task(task_id: str, actor: Actor = Depends(require_actor)) -> StatusResponse:
    command = DeleteTask(actor=actor.to_json(), task_id=task_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@document_task_router.get("/{document_id}/tasks", response_model=list[TaskResponse])
async def get_document_tasks(document_id: str, actor: Actor = Depends(require_actor)) -> list[TaskResponse]:
    return [TaskResponse.from_task(t) for t in tasks_for_document(document_id)]

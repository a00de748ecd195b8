"""Pydantic request/response schemas for the Tasks API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from tasks.task.task import Task

# --- Request Schemas ---


class CreateTaskRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Review TechCorp Service Agreement",
                    "description": "Legal review of the annual agreement",
                    "priority": "high",
                    "assigned_to": "Umar",
                    "document_id": "1",
                    "estimated_hours": 4,
                }
            ]
        }
    }

    title: str = Field(..., max_length=255)
    description: str = ""
    priority: str = Field("medium", max_length=10)
    assigned_to: str = Field(..., max_length=255)
    due_date: datetime | None = None
    document_id: str | None = None
    estimated_hours: float | None = Field(None, ge=0)
    tags: list[str] = Field(default_factory=list)


class UpdateTaskRequest(BaseModel):
    title: str | None = Field(None, max_length=255)
    description: str | None = None
    status: str | None = None
    priority: str | None = None
    due_date: datetime | None = None
    assigned_to: str | None = None
    document_id: str | None = None
    estimated_hours: float | None = Field(None, ge=0)
    actual_hours: float | None = Field(None, ge=0)
    tags: list[str] | None = None


class CompleteTaskRequest(BaseModel):
    actual_hours: float | None = Field(None, ge=0)


# --- Response Schemas ---


class TaskIdResponse(BaseModel):
    task_id: str


class TaskResponse(BaseModel):
    id: str
    title: str
    description: str = ""
    status: str
    priority: str
    assigned_to: str
    assigned_by: str | None = None
    due_date: datetime | None = None
    document_id: str | None = None
    estimated_hours: float | None = None
    actual_hours: float | None = None
    completed_at: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_task(cls, task: Task) -> TaskResponse:
        return cls(
            **task.snapshot().model_dump(),
            tags=task.get_tags(),
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"

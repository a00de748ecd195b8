"""Demo tasks loaded into an empty repository (no events raised)."""

import json
from datetime import UTC, datetime

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from tasks.task.task import Task

logger = structlog.get_logger(__name__)

DEMO_TASKS = (
    {
        "id": "1",
        "title": "Review TechCorp Service Agreement",
        "description": "Legal review required for annual service agreement with TechCorp",
        "status": "in_progress",
        "priority": "high",
        "due_date": datetime(2024, 1, 25, tzinfo=UTC),
        "assigned_to": "Umar",
        "assigned_by": "Legal Team",
        "document_id": "1",
        "estimated_hours": 4.0,
        "actual_hours": 2.0,
        "tags": ["review", "urgent"],
        "created_at": datetime(2024, 1, 20, tzinfo=UTC),
        "updated_at": datetime(2024, 1, 22, tzinfo=UTC),
    },
    {
        "id": "2",
        "title": "Update NDA Template",
        "description": "Incorporate new privacy clauses into standard NDA template",
        "status": "todo",
        "priority": "medium",
        "assigned_to": "Legal Team",
        "assigned_by": "Umar",
        "estimated_hours": 2.0,
        "tags": ["template", "update"],
        "created_at": datetime(2024, 1, 18, tzinfo=UTC),
        "updated_at": datetime(2024, 1, 18, tzinfo=UTC),
    },
)


def _exists(repo, task_id: str) -> bool:
    try:
        repo.get(task_id)
    except ObjectNotFoundError:
        return False
    return True


def seed_tasks() -> int:
    """Insert the demo tasks that are not present yet. Returns how many were added."""
    repo = current_domain.repository_for(Task)
    added = 0
    for record in DEMO_TASKS:
        if _exists(repo, record["id"]):
            continue
        repo.add(Task(**{**record, "tags": json.dumps(record["tags"])}))
        added += 1

    logger.info("Seeded demo tasks", added=added)
    return added

"""Tests for the Task aggregate root."""

import json

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields
from shared.snapshots import TaskSnapshot
from tasks.task.events import TaskCompleted, TaskCreated, TaskDeleted, TaskUpdated
from tasks.task.task import Task, TaskPriority, TaskStatus


def _task(actor, **overrides):
    params = {"title": "Review lease", "assigned_to": "Legal Team"}
    params.update(overrides)
    return Task.create(actor, **params)


class TestTaskConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Task.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Task)
        for name in ("title", "status", "priority", "assigned_to", "assigned_by", "completed_at", "actual_hours"):
            assert name in fields

    def test_create_defaults(self, admin):
        task = _task(admin)

        assert task.status == TaskStatus.TODO.value
        assert task.priority == TaskPriority.MEDIUM.value
        assert task.assigned_by == "1"
        assert task.description == ""
        assert task.get_tags() == []
        assert task.completed_at is None
        assert task.created_at is not None

    def test_create_raises_task_created(self, admin):
        task = _task(admin, tags=["lease"])

        assert len(task._events) == 1
        event = task._events[0]
        assert isinstance(event, TaskCreated)
        assert event.task_id == str(task.id)
        assert TaskSnapshot.from_json(event.task).title == "Review lease"
        assert task.get_tags() == ["lease"]

    def test_unknown_priority_is_rejected(self, admin):
        with pytest.raises(ValidationError):
            _task(admin, priority="whenever")


class TestTaskUpdate:
    def test_update_applies_changes(self, admin):
        task = _task(admin)
        task._events.clear()

        task.update(admin, {"status": "in_progress", "priority": "high"})

        assert task.status == "in_progress"
        assert task.priority == "high"
        assert isinstance(task._events[0], TaskUpdated)
        assert json.loads(task._events[0].changes) == {"status": "in_progress", "priority": "high"}

    def test_empty_changes_raise_nothing(self, admin):
        task = _task(admin)
        task._events.clear()

        task.update(admin, {})

        assert task._events == []

    def test_unknown_field_is_rejected(self, admin):
        task = _task(admin)

        with pytest.raises(ValidationError) as exc_info:
            task.update(admin, {"assigned_by": "someone"})

        assert "changes" in exc_info.value.messages

    def test_unknown_status_is_rejected(self, admin):
        task = _task(admin)

        with pytest.raises(ValidationError) as exc_info:
            task.update(admin, {"status": "done"})

        assert "status" in exc_info.value.messages

    def test_update_to_completed_stamps_completed_at(self, admin):
        task = _task(admin)

        task.update(admin, {"status": "completed"})

        assert task.completed_at is not None

    def test_reopening_completed_task_clears_completed_at(self, admin):
        task = _task(admin)
        task.complete(admin, actual_hours=3)

        task.update(admin, {"status": "todo"})

        assert task.status == "todo"
        assert task.completed_at is None
        assert task.actual_hours == 3.0

    def test_unrelated_update_keeps_completed_at(self, admin):
        task = _task(admin)
        task.complete(admin)
        completed_at = task.completed_at

        task.update(admin, {"priority": "low"})

        assert task.completed_at == completed_at

    def test_update_tags_replaces_list(self, admin):
        task = _task(admin, tags=["a"])

        task.update(admin, {"tags": ["b", "c"]})

        assert task.get_tags() == ["b", "c"]


class TestTaskCompletion:
    def test_complete_records_hours(self, admin):
        task = _task(admin)
        task._events.clear()

        task.complete(admin, actual_hours=3)

        assert task.status == TaskStatus.COMPLETED.value
        assert task.actual_hours == 3.0
        assert task.completed_at is not None
        assert [type(e) for e in task._events] == [TaskCompleted]

    def test_complete_without_hours_keeps_previous(self, admin):
        task = _task(admin)
        task.actual_hours = 1.5

        task.complete(admin)

        assert task.actual_hours == 1.5

    def test_completing_twice_is_rejected(self, admin):
        task = _task(admin)
        task.complete(admin)

        with pytest.raises(ValidationError) as exc_info:
            task.complete(admin)

        assert exc_info.value.messages["status"] == ["Task is already completed"]

    def test_cancelled_task_cannot_be_completed(self, admin):
        task = _task(admin)
        task.update(admin, {"status": "cancelled"})

        with pytest.raises(ValidationError):
            task.complete(admin)


class TestTaskDeletion:
    def test_delete_is_soft(self, admin):
        task = _task(admin)
        task._events.clear()

        task.delete(admin)

        assert task.is_deleted is True
        assert isinstance(task._events[0], TaskDeleted)

    def test_delete_twice_is_rejected(self, admin):
        task = _task(admin)
        task.delete(admin)

        with pytest.raises(ValidationError):
            task.delete(admin)

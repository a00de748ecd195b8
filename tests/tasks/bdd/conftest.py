"""Shared BDD fixtures and step definitions for the Tasks domain."""

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then
from tasks.task.seed import seed_tasks
from tasks.task.task import Task


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("the demo tasks are loaded")
def demo_tasks_loaded():
    seed_tasks()


@given("a signed-in team member", target_fixture="actor")
def signed_in_team_member(team_member, session_store):
    session_store.sign_in(team_member)
    return team_member


@given("the webhook receiver is unavailable")
def receiver_unavailable(webhook):
    webhook.configure(should_succeed=False, failure_reason="connection refused")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('task "{task_id}" is completed with {hours:d} hours recorded'))
def task_completed(task_id, hours):
    task = current_domain.repository_for(Task).get(task_id)
    assert task.status == "completed"
    assert task.actual_hours == hours
    assert task.completed_at is not None


@then("the operation is rejected")
def operation_rejected(error):
    assert error["exc"] is not None


@then("no webhook is delivered")
def no_webhook(webhook):
    assert webhook.delivered == []


@then(parsers.cfparse("exactly {count:d} webhook is delivered"))
def webhook_count(webhook, count):
    assert len(webhook.delivered) == count

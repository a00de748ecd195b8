"""Shared BDD fixtures and step definitions for the Identity domain."""

import pytest
from identity.user.seed import seed_users
from pytest_bdd import given, parsers, then


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
@given("the demo users are loaded")
def demo_users_loaded():
    seed_users()


@given("the webhook receiver is unavailable")
def receiver_unavailable(webhook):
    webhook.configure(should_succeed=False, failure_reason="connection refused")


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{name}" is the signed-in user'))
def signed_in_user(session_store, name):
    assert session_store.current_user().name == name


@then("nobody is signed in")
def nobody_signed_in(session_store):
    assert session_store.current_user() is None


@then(parsers.cfparse('a "{action}" webhook is sent for "{email}"'))
def webhook_sent_for(webhook, action, email):
    payloads = webhook.of(action)
    assert len(payloads) == 1
    assert payloads[0]["user"]["email"] == email


@then("no webhook is delivered")
def no_webhook(webhook):
    assert webhook.delivered == []

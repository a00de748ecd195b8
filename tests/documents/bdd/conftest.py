"""Shared BDD fixtures and step definitions for the Documents domain."""

import pytest
from documents.document.document import Document
from documents.document.upload import UploadDocument
from protean import current_domain
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def context():
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("a signed-in team member", target_fixture="actor")
def signed_in_team_member(team_member, session_store):
    session_store.sign_in(team_member)
    return team_member


@given("the webhook receiver is unavailable")
def receiver_unavailable(webhook):
    webhook.configure(should_succeed=False, failure_reason="connection refused")


@given(parsers.cfparse('an uploaded document "{file_name}"'))
def uploaded_document(actor, file_name, context, webhook):
    command = UploadDocument(
        actor=actor.to_json(),
        file_name=file_name,
        mime_type="application/pdf",
        file_size=1024,
    )
    context["document_id"] = current_domain.process(command, asynchronous=False)
    webhook.reset()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the document is stored as a draft")
def stored_as_draft(context):
    document = current_domain.repository_for(Document).get(context["document_id"])
    assert document.status == "draft"


@then(parsers.cfparse('a "{action}" webhook is sent'))
def webhook_sent(webhook, action):
    assert action in webhook.actions()


@then("no webhook is delivered")
def no_webhook(webhook):
    assert webhook.delivered == []

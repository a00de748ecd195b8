"""BDD tests for document deletion."""

import pytest
from documents.document.access import ViewDocument
from documents.document.deletion import DeleteDocument
from protean import current_domain
from protean.exceptions import ObjectNotFoundError
from pytest_bdd import parsers, scenarios, then, when

scenarios("features/document_deletion.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("they delete the document")
def delete_uploaded(actor, context):
    command = DeleteDocument(actor=actor.to_json(), document_id=context["document_id"])
    current_domain.process(command, asynchronous=False)


@when(parsers.cfparse('they delete the document "{document_id}"'))
def delete_by_id(actor, document_id, error):
    try:
        current_domain.process(DeleteDocument(actor=actor.to_json(), document_id=document_id), asynchronous=False)
    except ObjectNotFoundError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the document can no longer be viewed")
def cannot_view(actor, context):
    with pytest.raises(ObjectNotFoundError):
        current_domain.process(
            ViewDocument(actor=actor.to_json(), document_id=context["document_id"]), asynchronous=False
        )


@then("the operation fails with not found")
def fails_not_found(error):
    assert isinstance(error["exc"], ObjectNotFoundError)

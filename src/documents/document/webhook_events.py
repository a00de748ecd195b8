"""Outbound webhook handler — mirrors Document events to the webhook receiver.

Each handler rebuilds the actor and document snapshots carried by the event
and hands them to the matching catalog emitter. Delivery never raises, so a
dead receiver cannot fail the unit of work that raised the event.
"""

import json

import structlog
from protean.utils.mixins import handle

from documents.document.document import Document
from documents.document.events import (
    DocumentDeleted,
    DocumentDownloaded,
    DocumentEdited,
    DocumentShared,
    DocumentStatusChanged,
    DocumentUploaded,
    DocumentViewed,
    ProposalUploaded,
)
from documents.domain import documents
from shared.snapshots import Actor, DocumentSnapshot
from webhooks import catalog

logger = structlog.get_logger(__name__)


def _unpack(event) -> tuple[Actor, DocumentSnapshot]:
    return Actor.from_json(event.actor), DocumentSnapshot.from_json(event.document)


@documents.event_handler(part_of=Document)
class DocumentWebhookHandler:
    """Publishes document lifecycle events as webhook envelopes."""

    @handle(DocumentUploaded)
    def on_document_uploaded(self, event: DocumentUploaded) -> None:
        catalog.document_uploaded(*_unpack(event))

    @handle(ProposalUploaded)
    def on_proposal_uploaded(self, event: ProposalUploaded) -> None:
        logger.info("Proposal detected on upload", document_id=str(event.document_id))
        catalog.proposal_uploaded(*_unpack(event))

    @handle(DocumentViewed)
    def on_document_viewed(self, event: DocumentViewed) -> None:
        catalog.document_viewed(*_unpack(event))

    @handle(DocumentDownloaded)
    def on_document_downloaded(self, event: DocumentDownloaded) -> None:
        catalog.document_downloaded(*_unpack(event))

    @handle(DocumentStatusChanged)
    def on_document_status_changed(self, event: DocumentStatusChanged) -> None:
        actor, document = _unpack(event)
        catalog.document_status_changed(actor, document, event.old_status, event.new_status)

    @handle(DocumentEdited)
    def on_document_edited(self, event: DocumentEdited) -> None:
        actor, document = _unpack(event)
        catalog.document_edited(actor, document, json.loads(event.changes))

    @handle(DocumentShared)
    def on_document_shared(self, event: DocumentShared) -> None:
        actor, document = _unpack(event)
        catalog.document_shared(actor, document, json.loads(event.shared_with))

    @handle(DocumentDeleted)
    def on_document_deleted(self, event: DocumentDeleted) -> None:
        catalog.document_deleted(*_unpack(event))

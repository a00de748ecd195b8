"""Document sharing — command and handler."""

import json

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from documents.document.document import Document
from documents.document.queries import load_document
from documents.domain import documents
from shared.snapshots import Actor


@documents.command(part_of="Document")
class ShareDocument:
    actor: Text(required=True)
    document_id: Identifier(required=True)
    emails: Text(required=True)  # JSON list of email addresses


@documents.command_handler(part_of=Document)
class ShareDocumentHandler:
    @handle(ShareDocument)
    def share_document(self, command):
        document = load_document(command.document_id)
        document.share(Actor.from_json(command.actor), json.loads(command.emails))
        current_domain.repository_for(Document).add(document)

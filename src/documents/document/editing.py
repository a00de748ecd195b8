"""Document editing — command and handler."""

import json

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from documents.document.document import Document
from documents.document.queries import load_document
from documents.domain import documents
from shared.snapshots import Actor


@documents.command(part_of="Document")
class EditDocument:
    """Apply a partial update to a document's metadata."""

    actor: Text(required=True)
    document_id: Identifier(required=True)
    changes: Text(required=True)  # JSON object of field -> new value


@documents.command_handler(part_of=Document)
class EditDocumentHandler:
    @handle(EditDocument)
    def edit_document(self, command):
        changes = json.loads(command.changes) if isinstance(command.changes, str) else command.changes

        document = load_document(command.document_id)
        document.edit(Actor.from_json(command.actor), changes)
        current_domain.repository_for(Document).add(document)
        return document.snapshot()

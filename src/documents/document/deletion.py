"""Document deletion — command and handler.

Deletion is soft: the record stays in the repository flagged ``is_deleted``
and disappears from every lookup and listing.
"""

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from documents.document.document import Document
from documents.document.queries import load_document
from documents.domain import documents
from shared.snapshots import Actor


@documents.command(part_of="Document")
class DeleteDocument:
    actor: Text(required=True)
    document_id: Identifier(required=True)


@documents.command_handler(part_of=Document)
class DeleteDocumentHandler:
    @handle(DeleteDocument)
    def delete_document(self, command):
        document = load_document(command.document_id)
        document.delete(Actor.from_json(command.actor))
        current_domain.repository_for(Document).add(document)

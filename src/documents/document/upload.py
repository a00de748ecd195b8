"""Document upload — command and handler."""

import json

from protean import handle
from protean.fields import DateTime, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from documents.document.document import Document
from documents.domain import documents
from shared.snapshots import Actor


@documents.command(part_of="Document")
class UploadDocument:
    """Store a new file and register it as a draft document."""

    actor: Text(required=True)  # JSON Actor snapshot
    file_name: String(required=True, max_length=255)
    mime_type: String(required=True, max_length=255)
    file_size: Integer(required=True, min_value=0)
    folder_id: Identifier()
    tags: Text()  # JSON list of user-supplied tags
    priority: String(max_length=10, default="medium")
    due_date: DateTime()


@documents.command_handler(part_of=Document)
class UploadDocumentHandler:
    @handle(UploadDocument)
    def upload_document(self, command):
        tags = json.loads(command.tags) if command.tags else []

        document = Document.upload(
            actor=Actor.from_json(command.actor),
            file_name=command.file_name,
            mime_type=command.mime_type,
            file_size=command.file_size,
            folder_id=command.folder_id,
            tags=tags,
            priority=command.priority,
            due_date=command.due_date,
        )
        current_domain.repository_for(Document).add(document)
        return str(document.id)

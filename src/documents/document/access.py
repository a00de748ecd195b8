"""Viewing and downloading documents.

Both operations are read-mostly but still go through commands: they stamp
``last_viewed_at`` and raise the events the webhook receiver is told about.
"""

from dataclasses import dataclass

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from documents.document.document import Document
from documents.document.queries import load_document
from documents.domain import documents
from shared.snapshots import Actor


@dataclass(frozen=True)
class DownloadedFile:
    file_name: str
    mime_type: str
    content: bytes


@documents.command(part_of="Document")
class ViewDocument:
    actor: Text(required=True)
    document_id: Identifier(required=True)


@documents.command(part_of="Document")
class DownloadDocument:
    actor: Text(required=True)
    document_id: Identifier(required=True)


@documents.command_handler(part_of=Document)
class DocumentAccessHandler:
    @handle(ViewDocument)
    def view_document(self, command):
        document = load_document(command.document_id)
        document.record_view(Actor.from_json(command.actor))
        current_domain.repository_for(Document).add(document)
        return document.snapshot()

    @handle(DownloadDocument)
    def download_document(self, command):
        document = load_document(command.document_id)
        document.record_download(Actor.from_json(command.actor))
        current_domain.repository_for(Document).add(document)

        # Storage is mocked; the body is a placeholder
        return DownloadedFile(
            file_name=document.name,
            mime_type=document.mime_type or "application/octet-stream",
            content=f"Mock content for {document.name}".encode(),
        )

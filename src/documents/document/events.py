"""Domain events for the Document aggregate.

``actor`` and ``document`` hold JSON snapshots taken when the event was
raised; list and mapping deltas are JSON text as well.
"""

from protean.fields import DateTime, Identifier, String, Text

from documents.domain import documents


@documents.event(part_of="Document")
class DocumentUploaded:
    """A new file was added to the repository."""

    __version__ = "v1"

    document_id: Identifier(required=True)
    actor: Text(required=True)
    document: Text(required=True)
    uploaded_at: DateTime(required=True)


@documents.event(part_of="Document")
class ProposalUploaded:
    """An uploaded file was recognised as a business proposal."""

    __version__ = "v1"

    document_id: Identifier(required=True)
    actor: Text(required=True)
    document: Text(required=True)
    uploaded_at: DateTime(required=True)


@documents.event(part_of="Document")
class DocumentViewed:
    __version__ = "v1"

    document_id: Identifier(required=True)
    actor: Text(required=True)
    document: Text(required=True)
    viewed_at: DateTime(required=True)


@documents.event(part_of="Document")
class DocumentDownloaded:
    __version__ = "v1"

    document_id: Identifier(required=True)
    actor: Text(required=True)
    document: Text(required=True)
    downloaded_at: DateTime(required=True)


@documents.event(part_of="Document")
class DocumentStatusChanged:
    """A document moved to a different workflow status."""

    __version__ = "v1"

    document_id: Identifier(required=True)
    actor: Text(required=True)
    document: Text(required=True)
    old_status: String(required=True)
    new_status: String(required=True)
    changed_at: DateTime(required=True)


@documents.event(part_of="Document")
class DocumentEdited:
    """Document metadata was changed; ``changes`` is the submitted change set."""

    __version__ = "v1"

    document_id: Identifier(required=True)
    actor: Text(required=True)
    document: Text(required=True)
    changes: Text(required=True)
    edited_at: DateTime(required=True)


@documents.event(part_of="Document")
class DocumentShared:
    """Access to a document was granted to one or more email addresses."""

    __version__ = "v1"

    document_id: Identifier(required=True)
    actor: Text(required=True)
    document: Text(required=True)
    shared_with: Text(required=True)
    shared_at: DateTime(required=True)


@documents.event(part_of="Document")
class DocumentDeleted:
    __version__ = "v1"

    document_id: Identifier(required=True)
    actor: Text(required=True)
    document: Text(required=True)
    deleted_at: DateTime(required=True)

"""Document aggregate — a file in the legal document repository.

Documents are uploaded with auto-generated tags, can be viewed, downloaded,
edited, shared and (soft) deleted. Every operation raises a domain event
carrying JSON snapshots of the actor and the document at that moment.

Status values:
    draft → review → approved → signed → archived (any order, set by editing)
"""

import json
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String, Text

from documents.domain import documents
from shared.snapshots import Actor, DocumentSnapshot, dump_changes

MOCK_STORAGE_URL = "https://example.com/documents"


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class DocumentStatus(Enum):
    DRAFT = "draft"
    REVIEW = "review"
    APPROVED = "approved"
    SIGNED = "signed"
    ARCHIVED = "archived"


class DocumentType(Enum):
    PDF = "pdf"
    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    IMAGE = "image"
    TEXT = "text"
    OTHER = "other"


class DocumentPriority(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Fields a caller may change through Document.edit()
EDITABLE_FIELDS = ("name", "status", "priority", "tags", "folder_id", "due_date", "assigned_to")


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@documents.aggregate
class Document:
    """A stored document with its metadata, sharing list and tags."""

    name: String(required=True, max_length=255)
    document_type: String(choices=DocumentType, default=DocumentType.OTHER.value)
    status: String(choices=DocumentStatus, default=DocumentStatus.DRAFT.value)

    # Storage
    file_url: String(required=True, max_length=1000)
    file_size: Integer(default=0, min_value=0)
    mime_type: String(max_length=255)

    # Organisation
    tags: Text()  # JSON list of tags
    folder_id: Identifier()
    priority: String(choices=DocumentPriority, default=DocumentPriority.MEDIUM.value)
    due_date: DateTime()
    version: Integer(default=1)

    # People
    created_by: Identifier()
    assigned_to: Identifier()
    shared_with: Text()  # JSON list of email addresses

    # Lifecycle
    is_deleted: Boolean(default=False)
    last_viewed_at: DateTime()
    created_at: DateTime()
    updated_at: DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def upload(
        cls,
        actor: Actor,
        file_name,
        mime_type,
        file_size,
        folder_id=None,
        tags=None,
        priority=DocumentPriority.MEDIUM.value,
        due_date=None,
    ):
        """Register an uploaded file as a new draft document."""
        from documents.document.events import DocumentUploaded, ProposalUploaded
        from documents.document.tagging import (
            document_type_for,
            generate_auto_tags,
            is_proposal,
            merge_tags,
        )

        document_id = str(uuid4())
        all_tags = merge_tags(tags, generate_auto_tags(file_name, mime_type))
        now = datetime.now(UTC)

        document = cls(
            id=document_id,
            name=file_name,
            document_type=document_type_for(mime_type),
            status=DocumentStatus.DRAFT.value,
            file_url=f"{MOCK_STORAGE_URL}/{document_id}-{file_name}",
            file_size=file_size,
            mime_type=mime_type,
            tags=json.dumps(all_tags),
            folder_id=folder_id,
            priority=priority,
            due_date=due_date,
            version=1,
            created_by=actor.id,
            shared_with=json.dumps([]),
            created_at=now,
            updated_at=now,
        )

        snapshot = document.snapshot().to_json()
        document.raise_(
            DocumentUploaded(
                document_id=document_id,
                actor=actor.to_json(),
                document=snapshot,
                uploaded_at=now,
            )
        )
        if is_proposal(file_name, all_tags):
            document.raise_(
                ProposalUploaded(
                    document_id=document_id,
                    actor=actor.to_json(),
                    document=snapshot,
                    uploaded_at=now,
                )
            )

        return document

    # -------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------
    def get_tags(self) -> list[str]:
        return json.loads(self.tags) if self.tags else []

    def get_shared_with(self) -> list[str]:
        return json.loads(self.shared_with) if self.shared_with else []

    def snapshot(self) -> DocumentSnapshot:
        return DocumentSnapshot(
            id=str(self.id),
            name=self.name,
            type=self.document_type,
            status=self.status,
            file_url=self.file_url,
            file_size=self.file_size or 0,
            mime_type=self.mime_type,
            tags=self.get_tags(),
            folder_id=str(self.folder_id) if self.folder_id else None,
            priority=self.priority,
            due_date=self.due_date,
            version=self.version or 1,
        )

    # -------------------------------------------------------------------
    # Behaviour
    # -------------------------------------------------------------------
    def record_view(self, actor: Actor):
        """Note that ``actor`` opened the document."""
        from documents.document.events import DocumentViewed

        now = datetime.now(UTC)
        self.last_viewed_at = now

        self.raise_(
            DocumentViewed(
                document_id=str(self.id),
                actor=actor.to_json(),
                document=self.snapshot().to_json(),
                viewed_at=now,
            )
        )

    def record_download(self, actor: Actor):
        """Note that ``actor`` downloaded the file."""
        from documents.document.events import DocumentDownloaded

        now = datetime.now(UTC)
        self.last_viewed_at = now

        self.raise_(
            DocumentDownloaded(
                document_id=str(self.id),
                actor=actor.to_json(),
                document=self.snapshot().to_json(),
                downloaded_at=now,
            )
        )

    def edit(self, actor: Actor, changes: dict):
        """Apply a partial update.

        Raises DocumentStatusChanged when the status moves, and DocumentEdited
        whenever any field is supplied. An empty change set is a no-op.
        """
        from documents.document.events import DocumentEdited, DocumentStatusChanged

        unknown = sorted(set(changes) - set(EDITABLE_FIELDS))
        if unknown:
            raise ValidationError({"changes": [f"Fields cannot be edited: {', '.join(unknown)}"]})
        if not changes:
            return

        if "status" in changes and changes["status"] not in {s.value for s in DocumentStatus}:
            raise ValidationError({"status": [f"Unknown document status: {changes['status']}"]})
        if "priority" in changes and changes["priority"] not in {p.value for p in DocumentPriority}:
            raise ValidationError({"priority": [f"Unknown document priority: {changes['priority']}"]})

        old_status = self.status
        for field, value in changes.items():
            if field == "tags":
                self.tags = json.dumps(list(value or []))
            else:
                setattr(self, field, value)

        now = datetime.now(UTC)
        self.version = (self.version or 1) + 1
        self.updated_at = now

        snapshot = self.snapshot().to_json()
        if "status" in changes and changes["status"] != old_status:
            self.raise_(
                DocumentStatusChanged(
                    document_id=str(self.id),
                    actor=actor.to_json(),
                    document=snapshot,
                    old_status=old_status,
                    new_status=self.status,
                    changed_at=now,
                )
            )

        self.raise_(
            DocumentEdited(
                document_id=str(self.id),
                actor=actor.to_json(),
                document=snapshot,
                changes=dump_changes(changes),
                edited_at=now,
            )
        )

    def share(self, actor: Actor, emails: list[str]):
        """Grant access to ``emails``; already-shared addresses are kept once."""
        from documents.document.events import DocumentShared

        recipients = [e.strip() for e in emails if e and e.strip()]
        if not recipients:
            raise ValidationError({"emails": ["At least one email address is required"]})
        invalid = [e for e in recipients if "@" not in e]
        if invalid:
            raise ValidationError({"emails": [f"Invalid email address: {', '.join(invalid)}"]})

        shared = self.get_shared_with()
        for email in recipients:
            if email not in shared:
                shared.append(email)
        now = datetime.now(UTC)
        self.shared_with = json.dumps(shared)
        self.updated_at = now

        self.raise_(
            DocumentShared(
                document_id=str(self.id),
                actor=actor.to_json(),
                document=self.snapshot().to_json(),
                shared_with=json.dumps(recipients),
                shared_at=now,
            )
        )

    def delete(self, actor: Actor):
        """Soft-delete the document."""
        from documents.document.events import DocumentDeleted

        if self.is_deleted:
            raise ValidationError({"document": ["Document is already deleted"]})

        now = datetime.now(UTC)
        self.is_deleted = True
        self.updated_at = now

        self.raise_(
            DocumentDeleted(
                document_id=str(self.id),
                actor=actor.to_json(),
                document=self.snapshot().to_json(),
                deleted_at=now,
            )
        )

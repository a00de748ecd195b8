"""Folder aggregate — a named container for documents, optionally nested."""

from datetime import UTC, datetime
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, String

from documents.domain import documents
from shared.snapshots import Actor, FolderSnapshot


@documents.aggregate
class Folder:
    name: String(required=True, max_length=255)
    parent_id: Identifier()
    created_by: Identifier()
    is_deleted: Boolean(default=False)
    created_at: DateTime()

    @classmethod
    def create(cls, actor: Actor, name, parent_id=None):
        from documents.folder.events import FolderCreated

        name = (name or "").strip()
        if not name:
            raise ValidationError({"name": ["Folder name cannot be blank"]})

        now = datetime.now(UTC)
        folder = cls(
            id=str(uuid4()),
            name=name,
            parent_id=parent_id,
            created_by=actor.id,
            created_at=now,
        )
        folder.raise_(
            FolderCreated(
                folder_id=str(folder.id),
                actor=actor.to_json(),
                folder=folder.snapshot().to_json(),
                created_at=now,
            )
        )
        return folder

    def snapshot(self) -> FolderSnapshot:
        return FolderSnapshot(
            id=str(self.id),
            name=self.name,
            parent_id=str(self.parent_id) if self.parent_id else None,
        )

    def delete(self, actor: Actor):
        from documents.folder.events import FolderDeleted

        if self.is_deleted:
            raise ValidationError({"folder": ["Folder is already deleted"]})

        self.is_deleted = True
        self.raise_(
            FolderDeleted(
                folder_id=str(self.id),
                actor=actor.to_json(),
                folder=self.snapshot().to_json(),
                deleted_at=datetime.now(UTC),
            )
        )

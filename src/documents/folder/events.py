"""Domain events for the Folder aggregate."""

from protean.fields import DateTime, Identifier, Text

from documents.domain import documents


@documents.event(part_of="Folder")
class FolderCreated:
    __version__ = "v1"

    folder_id: Identifier(required=True)
    actor: Text(required=True)
    folder: Text(required=True)
    created_at: DateTime(required=True)


@documents.event(part_of="Folder")
class FolderDeleted:
    __version__ = "v1"

    folder_id: Identifier(required=True)
    actor: Text(required=True)
    folder: Text(required=True)
    deleted_at: DateTime(required=True)

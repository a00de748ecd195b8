"""Folder management — commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from documents.document.queries import list_documents
from documents.domain import documents
from documents.folder.folder import Folder
from shared.snapshots import Actor


@documents.command(part_of="Folder")
class CreateFolder:
    actor: Text(required=True)
    name: String(required=True, max_length=255)
    parent_id: Identifier()


@documents.command(part_of="Folder")
class DeleteFolder:
    """Remove an empty folder."""

    actor: Text(required=True)
    folder_id: Identifier(required=True)


def load_folder(folder_id: str) -> Folder:
    folder = current_domain.repository_for(Folder).get(folder_id)
    if folder.is_deleted:
        raise ObjectNotFoundError({"_entity": f"Folder {folder_id} not found"})
    return folder


@documents.command_handler(part_of=Folder)
class ManageFolderHandler:
    @handle(CreateFolder)
    def create_folder(self, command):
        if command.parent_id:
            load_folder(command.parent_id)

        folder = Folder.create(
            actor=Actor.from_json(command.actor),
            name=command.name,
            parent_id=command.parent_id,
        )
        current_domain.repository_for(Folder).add(folder)
        return str(folder.id)

    @handle(DeleteFolder)
    def delete_folder(self, command):
        folder = load_folder(command.folder_id)
        if list_documents(folder_id=str(folder.id)):
            raise ValidationError({"folder": ["Folder still contains documents"]})

        folder.delete(Actor.from_json(command.actor))
        current_domain.repository_for(Folder).add(folder)

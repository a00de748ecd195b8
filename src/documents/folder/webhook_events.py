"""Outbound webhook handler — mirrors Folder events to the webhook receiver."""

from protean.utils.mixins import handle

from documents.domain import documents
from documents.folder.events import FolderCreated, FolderDeleted
from documents.folder.folder import Folder
from shared.snapshots import Actor, FolderSnapshot
from webhooks import catalog


@documents.event_handler(part_of=Folder)
class FolderWebhookHandler:
    @handle(FolderCreated)
    def on_folder_created(self, event: FolderCreated) -> None:
        catalog.folder_created(Actor.from_json(event.actor), FolderSnapshot.from_json(event.folder))

    @handle(FolderDeleted)
    def on_folder_deleted(self, event: FolderDeleted) -> None:
        catalog.folder_deleted(Actor.from_json(event.actor), FolderSnapshot.from_json(event.folder))

"""Webhook envelope — the unit of transmission to the automation receiver.

Every envelope carries exactly one ``EventAction`` and one payload model.
Each action owns a dedicated payload class (``PAYLOADS``), so the ``data``
object of an envelope always has the fixed field set of its action::

    {
      "action": "document_viewed",
      "timestamp": "2024-01-20T10:15:00.000Z",
      "user": {"id": "1", "name": "Umar Khan", "email": "...", "role": "admin"},
      "data": {"document": {"id": "1", "name": "...", "type": "pdf"}}
    }

Payload field names are snake_case in Python and camelCase on the wire.
"""

import threading
from datetime import UTC, datetime
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from shared.snapshots import Actor


# ---------------------------------------------------------------------------
# Action catalog
# ---------------------------------------------------------------------------
class EventAction(Enum):
    DOCUMENT_UPLOADED = "document_uploaded"
    DOCUMENT_VIEWED = "document_viewed"
    DOCUMENT_DOWNLOADED = "document_downloaded"
    DOCUMENT_DELETED = "document_deleted"
    DOCUMENT_STATUS_CHANGED = "document_status_changed"
    DOCUMENT_SHARED = "document_shared"
    DOCUMENT_EDITED = "document_edited"
    TASK_CREATED = "task_created"
    TASK_UPDATED = "task_updated"
    TASK_COMPLETED = "task_completed"
    TASK_DELETED = "task_deleted"
    USER_INVITED = "user_invited"
    USER_ROLE_CHANGED = "user_role_changed"
    USER_PROFILE_UPDATED = "user_profile_updated"
    TEMPLATE_CREATED = "template_created"
    TEMPLATE_USED = "template_used"
    TEMPLATE_DELETED = "template_deleted"
    FOLDER_CREATED = "folder_created"
    FOLDER_DELETED = "folder_deleted"
    PROPOSAL_UPLOADED = "proposal_uploaded"
    USER_LOGIN = "user_login"
    USER_LOGOUT = "user_logout"


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------
def isoformat(value: datetime | None) -> str | None:
    """Render a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` (UTC)."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class MonotonicClock:
    """UTC clock that never goes backwards within one process."""

    def __init__(self, source=None):
        self._source = source or (lambda: datetime.now(UTC))
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            current = self._source()
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
            return current


clock = MonotonicClock()


# ---------------------------------------------------------------------------
# Entity subsets
# ---------------------------------------------------------------------------
class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class DocumentSummary(_WireModel):
    id: str
    name: str
    type: str


class UploadedDocument(_WireModel):
    id: str
    name: str
    type: str
    size: int
    folder_id: str | None = Field(alias="folderId")
    tags: list[str]
    url: str
    status: str
    priority: str


class DownloadedDocument(_WireModel):
    id: str
    name: str
    type: str
    size: int


class DocumentStatusChange(_WireModel):
    id: str
    name: str
    old_status: str = Field(alias="oldStatus")
    new_status: str = Field(alias="newStatus")


class SharedDocument(_WireModel):
    id: str
    name: str


class UploadedProposal(_WireModel):
    id: str
    name: str
    type: str
    size: int
    url: str
    status: str
    tags: list[str]
    priority: str


class CreatedTask(_WireModel):
    id: str
    title: str
    description: str
    priority: str
    assigned_to: str = Field(alias="assignedTo")
    due_date: str | None = Field(alias="dueDate")
    status: str


class TaskSummary(_WireModel):
    id: str
    title: str
    status: str


class CompletedTask(_WireModel):
    id: str
    title: str
    completed_at: str = Field(alias="completedAt")
    actual_hours: float | None = Field(alias="actualHours")


class TaskReference(_WireModel):
    id: str
    title: str


class TargetUser(_WireModel):
    id: str
    name: str
    email: str


class CreatedTemplate(_WireModel):
    id: str
    name: str
    category: str
    is_public: bool = Field(alias="isPublic")
    variables: int


class UsedTemplate(_WireModel):
    id: str
    name: str
    usage_count: int = Field(alias="usageCount")


class DeletedTemplate(_WireModel):
    id: str
    name: str
    category: str


class CreatedFolder(_WireModel):
    id: str
    name: str
    parent_id: str | None = Field(alias="parentId")


class FolderReference(_WireModel):
    id: str
    name: str


# ---------------------------------------------------------------------------
# Payloads, one per action
# ---------------------------------------------------------------------------
class EventData(_WireModel):
    """Base class for action payloads. ``action`` binds a payload to its tag."""

    action: ClassVar[EventAction]


class DocumentUploadedData(EventData):
    action: ClassVar[EventAction] = EventAction.DOCUMENT_UPLOADED
    document: UploadedDocument


class DocumentViewedData(EventData):
    action: ClassVar[EventAction] = EventAction.DOCUMENT_VIEWED
    document: DocumentSummary


class DocumentDownloadedData(EventData):
    action: ClassVar[EventAction] = EventAction.DOCUMENT_DOWNLOADED
    document: DownloadedDocument


class DocumentDeletedData(EventData):
    action: ClassVar[EventAction] = EventAction.DOCUMENT_DELETED
    document: DocumentSummary


class DocumentStatusChangedData(EventData):
    action: ClassVar[EventAction] = EventAction.DOCUMENT_STATUS_CHANGED
    document: DocumentStatusChange


class DocumentSharedData(EventData):
    action: ClassVar[EventAction] = EventAction.DOCUMENT_SHARED
    document: SharedDocument
    shared_with: list[str] = Field(alias="sharedWith")


class DocumentEditedData(EventData):
    action: ClassVar[EventAction] = EventAction.DOCUMENT_EDITED
    document: DocumentSummary
    changes: dict[str, Any]


class TaskCreatedData(EventData):
    action: ClassVar[EventAction] = EventAction.TASK_CREATED
    task: CreatedTask


class TaskUpdatedData(EventData):
    action: ClassVar[EventAction] = EventAction.TASK_UPDATED
    task: TaskSummary
    changes: dict[str, Any]


class TaskCompletedData(EventData):
    action: ClassVar[EventAction] = EventAction.TASK_COMPLETED
    task: CompletedTask


class TaskDeletedData(EventData):
    action: ClassVar[EventAction] = EventAction.TASK_DELETED
    task: TaskReference


class UserInvitedData(EventData):
    action: ClassVar[EventAction] = EventAction.USER_INVITED
    invited_email: str = Field(alias="invitedEmail")
    role: str


class UserRoleChangedData(EventData):
    action: ClassVar[EventAction] = EventAction.USER_ROLE_CHANGED
    target_user: TargetUser = Field(alias="targetUser")
    old_role: str = Field(alias="oldRole")
    new_role: str = Field(alias="newRole")


class UserProfileUpdatedData(EventData):
    action: ClassVar[EventAction] = EventAction.USER_PROFILE_UPDATED
    changes: dict[str, Any]


class TemplateCreatedData(EventData):
    action: ClassVar[EventAction] = EventAction.TEMPLATE_CREATED
    template: CreatedTemplate


class TemplateUsedData(EventData):
    action: ClassVar[EventAction] = EventAction.TEMPLATE_USED
    template: UsedTemplate


class TemplateDeletedData(EventData):
    action: ClassVar[EventAction] = EventAction.TEMPLATE_DELETED
    template: DeletedTemplate


class FolderCreatedData(EventData):
    action: ClassVar[EventAction] = EventAction.FOLDER_CREATED
    folder: CreatedFolder


class FolderDeletedData(EventData):
    action: ClassVar[EventAction] = EventAction.FOLDER_DELETED
    folder: FolderReference


class ProposalUploadedData(EventData):
    action: ClassVar[EventAction] = EventAction.PROPOSAL_UPLOADED
    proposal: UploadedProposal


class UserLoginData(EventData):
    action: ClassVar[EventAction] = EventAction.USER_LOGIN
    login_time: str = Field(alias="loginTime")
    user_agent: str = Field(alias="userAgent")


class UserLogoutData(EventData):
    action: ClassVar[EventAction] = EventAction.USER_LOGOUT
    logout_time: str = Field(alias="logoutTime")


PAYLOADS: dict[EventAction, type[EventData]] = {
    cls.action: cls
    for cls in (
        DocumentUploadedData,
        DocumentViewedData,
        DocumentDownloadedData,
        DocumentDeletedData,
        DocumentStatusChangedData,
        DocumentSharedData,
        DocumentEditedData,
        TaskCreatedData,
        TaskUpdatedData,
        TaskCompletedData,
        TaskDeletedData,
        UserInvitedData,
        UserRoleChangedData,
        UserProfileUpdatedData,
        TemplateCreatedData,
        TemplateUsedData,
        TemplateDeletedData,
        FolderCreatedData,
        FolderDeletedData,
        ProposalUploadedData,
        UserLoginData,
        UserLogoutData,
    )
}


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------
class Envelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: EventAction
    timestamp: datetime
    actor: Actor
    data: EventData

    def to_payload(self) -> dict:
        """Render the JSON object posted to the webhook receiver."""
        return {
            "action": self.action.value,
            "timestamp": isoformat(self.timestamp),
            "user": {
                "id": self.actor.id,
                "name": self.actor.name,
                "email": self.actor.email,
                "role": self.actor.role,
            },
            "data": self.data.model_dump(mode="json", by_alias=True),
        }


def build_envelope(action: EventAction, actor: Actor, data: EventData) -> Envelope:
    """Stamp ``data`` with the actor and the current time.

    Raises ``ValueError`` when ``data`` is not the payload model of ``action``.
    """
    expected = PAYLOADS.get(action)
    if expected is None or type(data) is not expected:
        raise ValueError(f"{type(data).__name__} is not the payload for action {action!r}")

    return Envelope(action=action, timestamp=clock.now(), actor=actor, data=data)

"""Domain event catalog — one emitter per webhook action.

Each emitter selects the fixed field subset of its action from the given
snapshots, builds one envelope and hands it to the configured transport.
Emitters return the envelope they produced. Delivery problems never reach
the caller; a malformed argument (wrong snapshot type, missing field) is a
caller bug and raises.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

import structlog

from shared.snapshots import (
    Actor,
    DocumentSnapshot,
    FolderSnapshot,
    TaskSnapshot,
    TemplateSnapshot,
    UserSnapshot,
)
from webhooks import get_transport
from webhooks.envelope import (
    CompletedTask,
    CreatedFolder,
    CreatedTask,
    CreatedTemplate,
    DeletedTemplate,
    DocumentDeletedData,
    DocumentDownloadedData,
    DocumentEditedData,
    DocumentSharedData,
    DocumentStatusChange,
    DocumentStatusChangedData,
    DocumentSummary,
    DocumentUploadedData,
    DocumentViewedData,
    DownloadedDocument,
    Envelope,
    EventData,
    FolderCreatedData,
    FolderDeletedData,
    FolderReference,
    ProposalUploadedData,
    SharedDocument,
    TargetUser,
    TaskCompletedData,
    TaskCreatedData,
    TaskDeletedData,
    TaskReference,
    TaskSummary,
    TaskUpdatedData,
    TemplateCreatedData,
    TemplateDeletedData,
    TemplateUsedData,
    UploadedDocument,
    UploadedProposal,
    UsedTemplate,
    UserInvitedData,
    UserLoginData,
    UserLogoutData,
    UserProfileUpdatedData,
    UserRoleChangedData,
    build_envelope,
    isoformat,
)

logger = structlog.get_logger(__name__)


def _emit(actor: Actor, data: EventData) -> Envelope:
    envelope = build_envelope(data.action, actor, data)
    logger.debug("Emitting webhook event", action=envelope.action.value, actor_id=actor.id)
    get_transport().deliver(envelope)
    return envelope


def _changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    return dict(changes)


def _document_summary(document: DocumentSnapshot) -> DocumentSummary:
    return DocumentSummary(id=document.id, name=document.name, type=document.type)


# ---------------------------------------------------------------------------
# Document events
# ---------------------------------------------------------------------------
def document_uploaded(actor: Actor, document: DocumentSnapshot) -> Envelope:
    return _emit(
        actor,
        DocumentUploadedData(
            document=UploadedDocument(
                id=document.id,
                name=document.name,
                type=document.type,
                size=document.file_size,
                folder_id=document.folder_id,
                tags=list(document.tags),
                url=document.file_url,
                status=document.status,
                priority=document.priority,
            )
        ),
    )


def document_viewed(actor: Actor, document: DocumentSnapshot) -> Envelope:
    return _emit(actor, DocumentViewedData(document=_document_summary(document)))


def document_downloaded(actor: Actor, document: DocumentSnapshot) -> Envelope:
    return _emit(
        actor,
        DocumentDownloadedData(
            document=DownloadedDocument(
                id=document.id,
                name=document.name,
                type=document.type,
                size=document.file_size,
            )
        ),
    )


def document_deleted(actor: Actor, document: DocumentSnapshot) -> Envelope:
    return _emit(actor, DocumentDeletedData(document=_document_summary(document)))


def document_status_changed(
    actor: Actor,
    document: DocumentSnapshot,
    old_status: str,
    new_status: str,
) -> Envelope:
    return _emit(
        actor,
        DocumentStatusChangedData(
            document=DocumentStatusChange(
                id=document.id,
                name=document.name,
                old_status=old_status,
                new_status=new_status,
            )
        ),
    )


def document_shared(actor: Actor, document: DocumentSnapshot, shared_with: list[str]) -> Envelope:
    return _emit(
        actor,
        DocumentSharedData(
            document=SharedDocument(id=document.id, name=document.name),
            shared_with=list(shared_with),
        ),
    )


def document_edited(actor: Actor, document: DocumentSnapshot, changes: Mapping[str, Any]) -> Envelope:
    return _emit(
        actor,
        DocumentEditedData(document=_document_summary(document), changes=_changes(changes)),
    )


def proposal_uploaded(actor: Actor, proposal: DocumentSnapshot) -> Envelope:
    return _emit(
        actor,
        ProposalUploadedData(
            proposal=UploadedProposal(
                id=proposal.id,
                name=proposal.name,
                type=proposal.type,
                size=proposal.file_size,
                url=proposal.file_url,
                status=proposal.status,
                tags=list(proposal.tags),
                priority=proposal.priority,
            )
        ),
    )


# ---------------------------------------------------------------------------
# Task events
# ---------------------------------------------------------------------------
def task_created(actor: Actor, task: TaskSnapshot) -> Envelope:
    return _emit(
        actor,
        TaskCreatedData(
            task=CreatedTask(
                id=task.id,
                title=task.title,
                description=task.description,
                priority=task.priority,
                assigned_to=task.assigned_to,
                due_date=isoformat(task.due_date),
                status=task.status,
            )
        ),
    )


def task_updated(actor: Actor, task: TaskSnapshot, changes: Mapping[str, Any]) -> Envelope:
    return _emit(
        actor,
        TaskUpdatedData(
            task=TaskSummary(id=task.id, title=task.title, status=task.status),
            changes=_changes(changes),
        ),
    )


def task_completed(actor: Actor, task: TaskSnapshot) -> Envelope:
    completed_at = task.completed_at or datetime.now(UTC)
    return _emit(
        actor,
        TaskCompletedData(
            task=CompletedTask(
                id=task.id,
                title=task.title,
                completed_at=isoformat(completed_at),
                actual_hours=task.actual_hours,
            )
        ),
    )


def task_deleted(actor: Actor, task: TaskSnapshot) -> Envelope:
    return _emit(actor, TaskDeletedData(task=TaskReference(id=task.id, title=task.title)))


# ---------------------------------------------------------------------------
# User events
# ---------------------------------------------------------------------------
def user_invited(inviter: Actor, invited_email: str, role: str) -> Envelope:
    return _emit(inviter, UserInvitedData(invited_email=invited_email, role=role))


def user_role_changed(admin: Actor, target_user: UserSnapshot, old_role: str, new_role: str) -> Envelope:
    return _emit(
        admin,
        UserRoleChangedData(
            target_user=TargetUser(id=target_user.id, name=target_user.name, email=target_user.email),
            old_role=old_role,
            new_role=new_role,
        ),
    )


def user_profile_updated(actor: Actor, changes: Mapping[str, Any]) -> Envelope:
    return _emit(actor, UserProfileUpdatedData(changes=_changes(changes)))


# ---------------------------------------------------------------------------
# Template events
# ---------------------------------------------------------------------------
def template_created(actor: Actor, template: TemplateSnapshot) -> Envelope:
    return _emit(
        actor,
        TemplateCreatedData(
            template=CreatedTemplate(
                id=template.id,
                name=template.name,
                category=template.category,
                is_public=template.is_public,
                variables=len(template.variables),
            )
        ),
    )


def template_used(actor: Actor, template: TemplateSnapshot) -> Envelope:
    return _emit(
        actor,
        TemplateUsedData(
            template=UsedTemplate(id=template.id, name=template.name, usage_count=template.usage_count)
        ),
    )


def template_deleted(actor: Actor, template: TemplateSnapshot) -> Envelope:
    return _emit(
        actor,
        TemplateDeletedData(
            template=DeletedTemplate(id=template.id, name=template.name, category=template.category)
        ),
    )


# ---------------------------------------------------------------------------
# Folder events
# ---------------------------------------------------------------------------
def folder_created(actor: Actor, folder: FolderSnapshot) -> Envelope:
    return _emit(
        actor,
        FolderCreatedData(folder=CreatedFolder(id=folder.id, name=folder.name, parent_id=folder.parent_id)),
    )


def folder_deleted(actor: Actor, folder: FolderSnapshot) -> Envelope:
    return _emit(actor, FolderDeletedData(folder=FolderReference(id=folder.id, name=folder.name)))


# ---------------------------------------------------------------------------
# System events
# ---------------------------------------------------------------------------
def system_login(actor: Actor, user_agent: str, login_time: datetime | None = None) -> Envelope:
    return _emit(
        actor,
        UserLoginData(
            login_time=isoformat(login_time or datetime.now(UTC)),
            user_agent=user_agent,
        ),
    )


def system_logout(actor: Actor, logout_time: datetime | None = None) -> Envelope:
    return _emit(actor, UserLogoutData(logout_time=isoformat(logout_time or datetime.now(UTC))))

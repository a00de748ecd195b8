"""FastAPI endpoints for the Documents domain."""

import json

from fastapi import APIRouter, Depends, Response
from protean.utils.globals import current_domain

from documents.api.schemas import (
    CreateFolderRequest,
    CreateTemplateRequest,
    DocumentIdResponse,
    DocumentResponse,
    EditDocumentRequest,
    FolderIdResponse,
    RenderedTemplateResponse,
    ShareDocumentRequest,
    StatusResponse,
    TemplateIdResponse,
    UploadDocumentRequest,
    UseTemplateRequest,
)
from documents.document.access import DownloadDocument, ViewDocument
from documents.document.deletion import DeleteDocument
from documents.document.editing import EditDocument
from documents.document.queries import list_documents, search_documents
from documents.document.sharing import ShareDocument
from documents.document.upload import UploadDocument
from documents.folder.management import CreateFolder, DeleteFolder
from documents.template.management import CreateTemplate, DeleteTemplate, UseTemplate
from identity.session import require_actor
from shared.snapshots import Actor

document_router = APIRouter(prefix="/documents", tags=["documents"])
folder_router = APIRouter(prefix="/folders", tags=["folders"])
template_router = APIRouter(prefix="/templates", tags=["templates"])


# --- Document endpoints ---


@document_router.post("", status_code=201, response_model=DocumentIdResponse)
async def upload_document(body: UploadDocumentRequest, actor: Actor = Depends(require_actor)) -> DocumentIdResponse:
    command = UploadDocument(
        actor=actor.to_json(),
        file_name=body.file_name,
        mime_type=body.mime_type,
        file_size=body.file_size,
        folder_id=body.folder_id,
        tags=json.dumps(body.tags),
        priority=body.priority,
        due_date=body.due_date,
    )
    result = current_domain.process(command, asynchronous=False)
    return DocumentIdResponse(document_id=result)


@document_router.get("", response_model=list[DocumentResponse])
async def get_documents(folder_id: str | None = None, actor: Actor = Depends(require_actor)) -> list[DocumentResponse]:
    return [DocumentResponse.from_document(d) for d in list_documents(folder_id=folder_id)]


@document_router.get("/search", response_model=list[DocumentResponse])
async def find_documents(q: str = "", actor: Actor = Depends(require_actor)) -> list[DocumentResponse]:
    return [DocumentResponse.from_document(d) for d in search_documents(q)]


@document_router.get("/{document_id}")
async def view_document(document_id: str, actor: Actor = Depends(require_actor)):
    command = ViewDocument(actor=actor.to_json(), document_id=document_id)
    snapshot = current_domain.process(command, asynchronous=False)
    return snapshot.model_dump(mode="json")


@document_router.get("/{document_id}/download")
async def download_document(document_id: str, actor: Actor = Depends(require_actor)) -> Response:
    command = DownloadDocument(actor=actor.to_json(), document_id=document_id)
    downloaded = current_domain.process(command, asynchronous=False)
    return Response(
        content=downloaded.content,
        media_type=downloaded.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{downloaded.file_name}"'},
    )


@document_router.put("/{document_id}")
async def edit_document(document_id: str, body: EditDocumentRequest, actor: Actor = Depends(require_actor)):
    command = EditDocument(
        actor=actor.to_json(),
        document_id=document_id,
        changes=json.dumps(body.model_dump(mode="json", exclude_unset=True)),
    )
    snapshot = current_domain.process(command, asynchronous=False)
    return snapshot.model_dump(mode="json")


@document_router.post("/{document_id}/share", response_model=StatusResponse)
async def share_document(
    document_id: str, body: ShareDocumentRequest, actor: Actor = Depends(require_actor)
) -> StatusResponse:
    command = ShareDocument(actor=actor.to_json(), document_id=document_id, emails=json.dumps(body.emails))
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@document_router.delete("/{document_id}", response_model=StatusResponse)
async def delete_document(document_id: str, actor: Actor = Depends(require_actor)) -> StatusResponse:
    command = DeleteDocument(actor=actor.to_json(), document_id=document_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# --- Folder endpoints ---


@folder_router.post("", status_code=201, response_model=FolderIdResponse)
async def create_folder(body: CreateFolderRequest, actor: Actor = Depends(require_actor)) -> FolderIdResponse:
    command = CreateFolder(actor=actor.to_json(), name=body.name, parent_id=body.parent_id)
    result = current_domain.process(command, asynchronous=False)
    return FolderIdResponse(folder_id=result)


@folder_router.delete("/{folder_id}", response_model=StatusResponse)
async def delete_folder(folder_id: str, actor: Actor = Depends(require_actor)) -> StatusResponse:
    command = DeleteFolder(actor=actor.to_json(), folder_id=folder_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# --- Template endpoints ---


@template_router.post("", status_code=201, response_model=TemplateIdResponse)
async def create_template(body: CreateTemplateRequest, actor: Actor = Depends(require_actor)) -> TemplateIdResponse:
    command = CreateTemplate(
        actor=actor.to_json(),
        name=body.name,
        category=body.category,
        content=body.content,
        is_public=body.is_public,
    )
    result = current_domain.process(command, asynchronous=False)
    return TemplateIdResponse(template_id=result)


@template_router.post("/{template_id}/use", response_model=RenderedTemplateResponse)
async def use_template(
    template_id: str, body: UseTemplateRequest, actor: Actor = Depends(require_actor)
) -> RenderedTemplateResponse:
    command = UseTemplate(actor=actor.to_json(), template_id=template_id, values=json.dumps(body.values))
    rendered = current_domain.process(command, asynchronous=False)
    return RenderedTemplateResponse(content=rendered)


@template_router.delete("/{template_id}", response_model=StatusResponse)
async def delete_template(template_id: str, actor: Actor = Depends(require_actor)) -> StatusResponse:
    command = DeleteTemplate(actor=actor.to_json(), template_id=template_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()

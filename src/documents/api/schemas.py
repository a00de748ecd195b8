"""Pydantic request/response schemas for the Documents API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from documents.document.document import Document

# --- Request Schemas ---


class UploadDocumentRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "file_name": "NDA_Agreement_2024.pdf",
                    "mime_type": "application/pdf",
                    "file_size": 52000,
                    "tags": ["client-acme"],
                    "priority": "high",
                }
            ]
        }
    }

    file_name: str = Field(..., max_length=255)
    mime_type: str = Field(..., max_length=255)
    file_size: int = Field(..., ge=0)
    folder_id: str | None = None
    tags: list[str] = Field(default_factory=list)
    priority: str = Field("medium", max_length=10)
    due_date: datetime | None = None


class EditDocumentRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "approved", "priority": "high"}]}}

    name: str | None = Field(None, max_length=255)
    status: str | None = None
    priority: str | None = None
    tags: list[str] | None = None
    folder_id: str | None = None
    due_date: datetime | None = None
    assigned_to: str | None = None


class ShareDocumentRequest(BaseModel):
    emails: list[str] = Field(..., min_length=1)


class CreateFolderRequest(BaseModel):
    name: str = Field(..., max_length=255)
    parent_id: str | None = None


class CreateTemplateRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Mutual NDA",
                    "category": "nda",
                    "content": "This agreement between {{party_a}} and {{party_b}}...",
                    "is_public": True,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    category: str = Field(..., max_length=100)
    content: str
    is_public: bool = False


class UseTemplateRequest(BaseModel):
    values: dict[str, str] = Field(default_factory=dict)


# --- Response Schemas ---


class DocumentIdResponse(BaseModel):
    document_id: str


class FolderIdResponse(BaseModel):
    folder_id: str


class TemplateIdResponse(BaseModel):
    template_id: str


class RenderedTemplateResponse(BaseModel):
    content: str


class DocumentResponse(BaseModel):
    id: str
    name: str
    type: str
    status: str
    file_url: str
    file_size: int
    mime_type: str | None = None
    tags: list[str] = Field(default_factory=list)
    folder_id: str | None = None
    priority: str
    due_date: datetime | None = None
    version: int = 1
    shared_with: list[str] = Field(default_factory=list)
    created_by: str | None = None
    assigned_to: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_document(cls, document: Document) -> DocumentResponse:
        snapshot = document.snapshot()
        return cls(
            **snapshot.model_dump(),
            shared_with=document.get_shared_with(),
            created_by=str(document.created_by) if document.created_by else None,
            assigned_to=str(document.assigned_to) if document.assigned_to else None,
            created_at=document.created_at,
            updated_at=document.updated_at,
        )


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"

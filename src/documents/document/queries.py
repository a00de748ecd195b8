"""Read-side helpers for documents: lookup, listing and search."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from documents.document.document import Document


def load_document(document_id: str) -> Document:
    """Fetch a live document or raise ObjectNotFoundError."""
    document = current_domain.repository_for(Document).get(document_id)
    if document.is_deleted:
        raise ObjectNotFoundError({"_entity": f"Document {document_id} not found"})
    return document


def list_documents(folder_id: str | None = None) -> list[Document]:
    """Live documents, newest first, optionally restricted to one folder."""
    criteria = {"is_deleted": False}
    if folder_id:
        criteria["folder_id"] = folder_id
    results = current_domain.repository_for(Document)._dao.query.filter(**criteria).all().items
    return sorted(results, key=lambda d: d.created_at, reverse=True)


def search_documents(query: str) -> list[Document]:
    """Case-insensitive match on document name or any tag."""
    needle = (query or "").strip().lower()
    if not needle:
        return list_documents()

    return [
        document
        for document in list_documents()
        if needle in document.name.lower() or any(needle in tag.lower() for tag in document.get_tags())
    ]

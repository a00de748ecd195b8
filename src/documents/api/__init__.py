"""Documents domain API package."""

from documents.api.routes import document_router, folder_router, template_router

__all__ = ["document_router", "folder_router", "template_router"]

"""Tasks domain API package."""

from tasks.api.routes import document_task_router, task_router

__all__ = ["task_router", "document_task_router"]

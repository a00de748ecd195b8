"""Documents bounded context — document repository, folders and templates.

Owns the document lifecycle (upload, view, download, edit, share, delete),
folder organisation and reusable document templates. Every state change is
mirrored to the webhook receiver by the context's event handlers.
"""

import structlog
from protean.domain import Domain

from shared.logging import configure_logging

configure_logging()

documents = Domain(name="documents")

logger = structlog.get_logger(__name__)

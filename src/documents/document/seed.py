"""Demo documents loaded into an empty repository.

Seeding writes aggregates straight to the repository; no events are raised
and nothing is sent to the webhook receiver.
"""

import json
from datetime import UTC, datetime

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from documents.document.document import Document

logger = structlog.get_logger(__name__)

DEMO_DOCUMENTS = (
    {
        "id": "1",
        "name": "Service Agreement - TechCorp.pdf",
        "document_type": "pdf",
        "status": "review",
        "file_url": "https://example.com/documents/service-agreement.pdf",
        "file_size": 245000,
        "mime_type": "application/pdf",
        "tags": ["service", "tech", "annual"],
        "priority": "high",
        "due_date": datetime(2024, 2, 1, tzinfo=UTC),
        "version": 1,
        "created_by": "user-1",
        "created_at": datetime(2024, 1, 15, tzinfo=UTC),
        "updated_at": datetime(2024, 1, 20, tzinfo=UTC),
    },
    {
        "id": "2",
        "name": "NDA Template v2.1.docx",
        "document_type": "document",
        "status": "signed",
        "file_url": "https://example.com/documents/nda-template.docx",
        "file_size": 89000,
        "mime_type": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "tags": ["nda", "template", "standard"],
        "priority": "medium",
        "due_date": None,
        "version": 2,
        "created_by": "user-2",
        "created_at": datetime(2024, 1, 10, tzinfo=UTC),
        "updated_at": datetime(2024, 1, 18, tzinfo=UTC),
    },
)


def _exists(repo, document_id: str) -> bool:
    try:
        repo.get(document_id)
    except ObjectNotFoundError:
        return False
    return True


def seed_documents() -> int:
    """Insert the demo documents that are not present yet. Returns how many were added."""
    repo = current_domain.repository_for(Document)
    added = 0
    for record in DEMO_DOCUMENTS:
        if _exists(repo, record["id"]):
            continue
        repo.add(Document(**{**record, "tags": json.dumps(record["tags"]), "shared_with": json.dumps([])}))
        added += 1

    logger.info("Seeded demo documents", added=added)
    return added

"""Tasks bounded context — legal work items linked to documents.

Tracks task creation, updates, completion and deletion. Every change is
mirrored to the webhook receiver by the context's event handlers.
"""

import structlog
from protean.domain import Domain

from shared.logging import configure_logging

configure_logging()

tasks = Domain(name="tasks")

logger = structlog.get_logger(__name__)

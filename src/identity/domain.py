"""Identity bounded context — users, authentication and administration.

Owns user accounts (demo accounts, sign-up, invitations), sign-in and
sign-out against the local session store, profile updates and role changes.
"""

import structlog
from protean.domain import Domain

from shared.logging import configure_logging

configure_logging()

identity = Domain(name="identity")

logger = structlog.get_logger(__name__)

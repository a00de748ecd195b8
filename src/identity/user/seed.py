"""Demo accounts, all with the password ``password`` (no events raised)."""

from datetime import UTC, datetime

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from identity.user.user import User, hash_password

logger = structlog.get_logger(__name__)

DEMO_PASSWORD = "password"

DEMO_USERS = (
    {
        "id": "1",
        "email": "umar@pocketlaw.com",
        "name": "Umar Khan",
        "role": "admin",
        "department": "Legal",
        "phone": "+1 (555) 123-4567",
        "bio": "Legal professional with 10+ years of experience in contract management and corporate law.",
        "created_at": datetime(2023, 1, 1, tzinfo=UTC),
    },
    {
        "id": "2",
        "email": "team@pocketlaw.com",
        "name": "Team Member",
        "role": "team",
        "department": "Legal",
        "phone": "+1 (555) 123-4568",
        "bio": "Team member focused on document management and client collaboration.",
        "created_at": datetime(2023, 6, 1, tzinfo=UTC),
    },
    {
        "id": "3",
        "email": "client@pocketlaw.com",
        "name": "Client User",
        "role": "client",
        "department": "External",
        "phone": "+1 (555) 123-4569",
        "bio": "External client with limited access to assigned documents.",
        "created_at": datetime(2023, 9, 1, tzinfo=UTC),
    },
)


def _exists(repo, user_id: str) -> bool:
    try:
        repo.get(user_id)
    except ObjectNotFoundError:
        return False
    return True


def seed_users() -> int:
    """Insert the demo accounts that are not present yet. Returns how many were added."""
    repo = current_domain.repository_for(User)
    added = 0
    for record in DEMO_USERS:
        if _exists(repo, record["id"]):
            continue
        repo.add(
            User(
                **record,
                password_hash=hash_password(DEMO_PASSWORD),
                is_active=True,
                updated_at=record["created_at"],
            )
        )
        added += 1

    logger.info("Seeded demo users", added=added)
    return added

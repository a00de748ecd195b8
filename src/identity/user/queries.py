"""User lookups."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from identity.user.email import normalize_email
from identity.user.user import User


def find_user_by_email(email: str) -> User | None:
    results = current_domain.repository_for(User)._dao.query.filter(email=normalize_email(email)).all().items
    return results[0] if results else None


def load_user(user_id: str) -> User:
    return current_domain.repository_for(User).get(user_id)


def load_active_user(user_id: str) -> User:
    user = load_user(user_id)
    if not user.is_active:
        raise ObjectNotFoundError({"_entity": "User not found"})
    return user

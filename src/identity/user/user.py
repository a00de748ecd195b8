"""User aggregate — a dashboard account with a role.

Roles:
    admin   full access, manages users
    team    internal legal staff
    client  external, limited access

Invited users exist with ``is_active=False`` and no password until they sign
up with the invited address.
"""

import hashlib
import hmac
import secrets
from datetime import UTC, datetime
from enum import Enum
from uuid import uuid4

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String, Text

from identity.domain import identity
from identity.user.email import normalize_email
from shared.snapshots import Actor, UserSnapshot, dump_changes


class UserRole(Enum):
    ADMIN = "admin"
    TEAM = "team"
    CLIENT = "client"


PROFILE_FIELDS = ("name", "department", "phone", "bio")


def hash_password(password: str, salt: str | None = None) -> str:
    salt = salt or secrets.token_hex(8)
    digest = hashlib.sha256(f"{salt}${password}".encode()).hexdigest()
    return f"{salt}${digest}"


def _check_role(role: str) -> str:
    if role not in {r.value for r in UserRole}:
        raise ValidationError({"role": [f"Unknown role: {role}"]})
    return role


@identity.aggregate
class User:
    email: String(required=True, max_length=254)
    name: String(required=True, max_length=100)
    role: String(choices=UserRole, default=UserRole.TEAM.value)
    department: String(max_length=100)
    phone: String(max_length=30)
    bio: Text()
    password_hash: String(max_length=200)
    is_active: Boolean(default=True)
    last_login_at: DateTime()
    created_at: DateTime()
    updated_at: DateTime()

    # -------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------
    @classmethod
    def register(cls, email, password, name=None, role=UserRole.TEAM.value, department="", phone="", bio=""):
        """Create an active account. Raises no events; signing in does."""
        address = normalize_email(email)
        if not password:
            raise ValidationError({"password": ["Password is required"]})

        now = datetime.now(UTC)
        return cls(
            id=str(uuid4()),
            email=address,
            name=name or address.split("@")[0],
            role=_check_role(role),
            department=department or "",
            phone=phone or "",
            bio=bio or "",
            password_hash=hash_password(password),
            is_active=True,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def invite(cls, inviter: Actor, email, role):
        """Create a pending account for ``email`` on behalf of ``inviter``."""
        from identity.user.events import UserInvited

        address = normalize_email(email)
        now = datetime.now(UTC)
        user = cls(
            id=str(uuid4()),
            email=address,
            name=address.split("@")[0],
            role=_check_role(role),
            is_active=False,
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserInvited(
                user_id=str(user.id),
                actor=inviter.to_json(),
                email=address,
                role=user.role,
                invited_at=now,
            )
        )
        return user

    # -------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------
    def actor(self) -> Actor:
        return Actor(id=str(self.id), name=self.name, email=self.email, role=self.role)

    def snapshot(self) -> UserSnapshot:
        return UserSnapshot(id=str(self.id), name=self.name, email=self.email, role=self.role)

    def verify_password(self, password: str) -> bool:
        if not self.password_hash or "$" not in self.password_hash:
            return False
        salt = self.password_hash.split("$", 1)[0]
        return hmac.compare_digest(hash_password(password, salt), self.password_hash)

    # -------------------------------------------------------------------
    # Behaviour
    # -------------------------------------------------------------------
    def accept_invitation(self, password, name=None, department="", phone="", bio=""):
        if self.is_active:
            raise ValidationError({"email": ["Email is already registered"]})
        if not password:
            raise ValidationError({"password": ["Password is required"]})

        self.password_hash = hash_password(password)
        self.name = name or self.name
        self.department = department or ""
        self.phone = phone or ""
        self.bio = bio or ""
        self.is_active = True
        self.updated_at = datetime.now(UTC)

    def sign_in(self, user_agent: str):
        from identity.user.events import UserSignedIn

        if not self.is_active:
            raise ValidationError({"credentials": ["Invalid credentials"]})

        now = datetime.now(UTC)
        self.last_login_at = now
        self.updated_at = now
        self.raise_(
            UserSignedIn(
                user_id=str(self.id),
                actor=self.actor().to_json(),
                user_agent=user_agent,
                signed_in_at=now,
            )
        )

    def sign_out(self):
        from identity.user.events import UserSignedOut

        self.raise_(
            UserSignedOut(
                user_id=str(self.id),
                actor=self.actor().to_json(),
                signed_out_at=datetime.now(UTC),
            )
        )

    def update_profile(self, changes: dict):
        """Apply profile changes; the event carries the updated user as actor."""
        from identity.user.events import ProfileUpdated

        unknown = sorted(set(changes) - set(PROFILE_FIELDS))
        if unknown:
            raise ValidationError({"changes": [f"Fields cannot be updated: {', '.join(unknown)}"]})
        if not changes:
            return
        if "name" in changes and not (changes["name"] or "").strip():
            raise ValidationError({"name": ["Name cannot be blank"]})

        for field, value in changes.items():
            setattr(self, field, value)

        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(
            ProfileUpdated(
                user_id=str(self.id),
                actor=self.actor().to_json(),
                changes=dump_changes(changes),
                updated_at=now,
            )
        )

    def change_role(self, admin: Actor, new_role: str):
        from identity.user.events import UserRoleChanged

        if admin.role != UserRole.ADMIN.value:
            raise ValidationError({"role": ["Only administrators can change user roles"]})
        _check_role(new_role)
        if new_role == self.role:
            raise ValidationError({"role": [f"User already has role {new_role}"]})

        old_role = self.role
        now = datetime.now(UTC)
        self.role = new_role
        self.updated_at = now
        self.raise_(
            UserRoleChanged(
                user_id=str(self.id),
                actor=admin.to_json(),
                user=self.snapshot().to_json(),
                old_role=old_role,
                new_role=new_role,
                changed_at=now,
            )
        )

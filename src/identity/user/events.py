"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String, Text

from identity.domain import identity


@identity.event(part_of="User")
class UserSignedIn:
    """A user signed in (also raised right after sign-up)."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    actor: Text(required=True)
    user_agent: String(required=True, max_length=500)
    signed_in_at: DateTime(required=True)


@identity.event(part_of="User")
class UserSignedOut:
    __version__ = "v1"

    user_id: Identifier(required=True)
    actor: Text(required=True)
    signed_out_at: DateTime(required=True)


@identity.event(part_of="User")
class ProfileUpdated:
    """A user changed their own profile; ``changes`` is JSON."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    actor: Text(required=True)
    changes: Text(required=True)
    updated_at: DateTime(required=True)


@identity.event(part_of="User")
class UserInvited:
    """A pending account was created; ``actor`` is the inviter."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    actor: Text(required=True)
    email: String(required=True, max_length=254)
    role: String(required=True)
    invited_at: DateTime(required=True)


@identity.event(part_of="User")
class UserRoleChanged:
    """An administrator changed another user's role."""

    __version__ = "v1"

    user_id: Identifier(required=True)
    actor: Text(required=True)
    user: Text(required=True)
    old_role: String(required=True)
    new_role: String(required=True)
    changed_at: DateTime(required=True)

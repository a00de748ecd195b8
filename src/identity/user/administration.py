"""User administration — invitations and role changes."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.user.queries import find_user_by_email, load_active_user
from identity.user.user import User, UserRole
from shared.snapshots import Actor


@identity.command(part_of="User")
class InviteUser:
    """Invite someone by email with a preset role."""

    actor: Text(required=True)
    email: String(required=True, max_length=254)
    role: String(required=True, max_length=10)


@identity.command(part_of="User")
class ChangeUserRole:
    actor: Text(required=True)
    user_id: Identifier(required=True)
    role: String(required=True, max_length=10)


@identity.command_handler(part_of=User)
class UserAdministrationHandler:
    @handle(InviteUser)
    def invite_user(self, command):
        inviter = Actor.from_json(command.actor)
        if inviter.role == UserRole.CLIENT.value:
            raise ValidationError({"role": ["Clients cannot invite users"]})
        if find_user_by_email(command.email) is not None:
            raise ValidationError({"email": ["A user with this email already exists"]})

        user = User.invite(inviter, command.email, command.role)
        current_domain.repository_for(User).add(user)
        return str(user.id)

    @handle(ChangeUserRole)
    def change_user_role(self, command):
        user = load_active_user(command.user_id)
        user.change_role(Actor.from_json(command.actor), command.role)
        current_domain.repository_for(User).add(user)
        return user.snapshot()

"""Sign-in, sign-up and sign-out — commands and handler.

Successful sign-in and sign-up write the user to the session store; sign-out
clears it.
"""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.session import get_session_store
from identity.user.queries import find_user_by_email, load_user
from identity.user.user import User
from shared.snapshots import Actor

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = "pocketlaw-cli"


@identity.command(part_of="User")
class SignIn:
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=200)
    user_agent: String(max_length=500, default=DEFAULT_USER_AGENT)


@identity.command(part_of="User")
class SignUp:
    """Create a team account (or accept a pending invitation) and sign in."""

    email: String(required=True, max_length=254)
    password: String(required=True, max_length=200)
    name: String(max_length=100)
    department: String(max_length=100)
    phone: String(max_length=30)
    bio: Text()
    user_agent: String(max_length=500, default=DEFAULT_USER_AGENT)


@identity.command(part_of="User")
class SignOut:
    actor: Text(required=True)


@identity.command_handler(part_of=User)
class AuthenticationHandler:
    @handle(SignIn)
    def sign_in(self, command):
        user = find_user_by_email(command.email)
        if user is None or not user.is_active or not user.verify_password(command.password):
            logger.warning("Sign-in rejected", email=command.email)
            raise ValidationError({"credentials": ["Invalid credentials"]})

        user.sign_in(command.user_agent)
        current_domain.repository_for(User).add(user)

        get_session_store().sign_in(user.actor())
        return user.snapshot()

    @handle(SignUp)
    def sign_up(self, command):
        user = find_user_by_email(command.email)
        if user is None:
            user = User.register(
                email=command.email,
                password=command.password,
                name=command.name,
                department=command.department,
                phone=command.phone,
                bio=command.bio,
            )
        else:
            user.accept_invitation(
                password=command.password,
                name=command.name,
                department=command.department,
                phone=command.phone,
                bio=command.bio,
            )

        user.sign_in(command.user_agent)
        current_domain.repository_for(User).add(user)

        get_session_store().sign_in(user.actor())
        return user.snapshot()

    @handle(SignOut)
    def sign_out(self, command):
        actor = Actor.from_json(command.actor)
        user = load_user(actor.id)
        user.sign_out()
        current_domain.repository_for(User).add(user)

        get_session_store().clear()

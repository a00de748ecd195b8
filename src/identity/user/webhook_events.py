"""Outbound webhook handler — mirrors User events to the webhook receiver."""

import json

from protean.utils.mixins import handle

from identity.domain import identity
from identity.user.events import ProfileUpdated, UserInvited, UserRoleChanged, UserSignedIn, UserSignedOut
from identity.user.user import User
from shared.snapshots import Actor, UserSnapshot
from webhooks import catalog


@identity.event_handler(part_of=User)
class UserWebhookHandler:
    @handle(UserSignedIn)
    def on_user_signed_in(self, event: UserSignedIn) -> None:
        catalog.system_login(Actor.from_json(event.actor), event.user_agent, login_time=event.signed_in_at)

    @handle(UserSignedOut)
    def on_user_signed_out(self, event: UserSignedOut) -> None:
        catalog.system_logout(Actor.from_json(event.actor), logout_time=event.signed_out_at)

    @handle(ProfileUpdated)
    def on_profile_updated(self, event: ProfileUpdated) -> None:
        catalog.user_profile_updated(Actor.from_json(event.actor), json.loads(event.changes))

    @handle(UserInvited)
    def on_user_invited(self, event: UserInvited) -> None:
        catalog.user_invited(Actor.from_json(event.actor), event.email, event.role)

    @handle(UserRoleChanged)
    def on_user_role_changed(self, event: UserRoleChanged) -> None:
        catalog.user_role_changed(
            Actor.from_json(event.actor),
            UserSnapshot.from_json(event.user),
            event.old_role,
            event.new_role,
        )

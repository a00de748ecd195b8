"""Profile management — command and handler."""

import json

from protean import handle
from protean.fields import Text
from protean.utils.globals import current_domain

from identity.domain import identity
from identity.session import get_session_store
from identity.user.queries import load_active_user
from identity.user.user import User
from shared.snapshots import Actor


@identity.command(part_of="User")
class UpdateProfile:
    actor: Text(required=True)
    changes: Text(required=True)  # JSON object; name, department, phone, bio


@identity.command_handler(part_of=User)
class ManageProfileHandler:
    @handle(UpdateProfile)
    def update_profile(self, command):
        actor = Actor.from_json(command.actor)
        user = load_active_user(actor.id)
        user.update_profile(json.loads(command.changes))
        current_domain.repository_for(User).add(user)

        # Keep the signed-in copy in step with the stored user
        store = get_session_store()
        current = store.current_user()
        if current is not None and current.id == actor.id:
            store.sign_in(user.actor())
        return user.snapshot()

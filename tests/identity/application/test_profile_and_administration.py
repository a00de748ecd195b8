"""Application tests for profile updates, invitations and role changes."""

import json

import pytest
from identity.user.administration import ChangeUserRole, InviteUser
from identity.user.profile import UpdateProfile
from identity.user.queries import find_user_by_email, load_user
from identity.user.seed import DEMO_USERS, seed_users
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


@pytest.fixture(autouse=True)
def demo_users():
    seed_users()


class TestSeedUsers:
    def test_seed_is_idempotent(self, webhook):
        assert seed_users() == 0
        assert len(DEMO_USERS) == 3
        assert webhook.delivered == []


class TestUpdateProfile:
    def test_update_profile_emits_changes(self, team_member, webhook):
        current_domain.process(
            UpdateProfile(actor=team_member.to_json(), changes=json.dumps({"department": "Corporate"})),
            asynchronous=False,
        )

        assert load_user("2").department == "Corporate"
        assert webhook.actions() == ["user_profile_updated"]
        assert webhook.delivered[0]["data"] == {"changes": {"department": "Corporate"}}

    def test_rename_refreshes_session(self, team_member, session_store, webhook):
        session_store.sign_in(team_member)

        current_domain.process(
            UpdateProfile(actor=team_member.to_json(), changes=json.dumps({"name": "Senior Associate"})),
            asynchronous=False,
        )

        assert session_store.current_user().name == "Senior Associate"
        assert webhook.delivered[0]["user"]["name"] == "Senior Associate"

    def test_other_session_is_left_alone(self, team_member, admin, session_store):
        session_store.sign_in(admin)

        current_domain.process(
            UpdateProfile(actor=team_member.to_json(), changes=json.dumps({"name": "Renamed"})),
            asynchronous=False,
        )

        assert session_store.current_user() == admin


class TestInviteUser:
    def test_invite_emits_user_invited(self, admin, webhook):
        user_id = current_domain.process(
            InviteUser(actor=admin.to_json(), email="Partner@Firm.com", role="team"),
            asynchronous=False,
        )

        assert find_user_by_email("partner@firm.com").id == user_id
        assert webhook.actions() == ["user_invited"]
        assert webhook.delivered[0]["data"] == {"invitedEmail": "partner@firm.com", "role": "team"}

    def test_clients_cannot_invite(self, client_user, webhook):
        with pytest.raises(ValidationError):
            current_domain.process(
                InviteUser(actor=client_user.to_json(), email="friend@acme.com", role="client"),
                asynchronous=False,
            )

        assert webhook.delivered == []

    def test_existing_email_is_rejected(self, admin, webhook):
        with pytest.raises(ValidationError) as exc_info:
            current_domain.process(
                InviteUser(actor=admin.to_json(), email="team@pocketlaw.com", role="team"),
                asynchronous=False,
            )

        assert "email" in exc_info.value.messages
        assert webhook.delivered == []


class TestChangeUserRole:
    def test_admin_promotes_team_member(self, admin, webhook):
        user = current_domain.process(
            ChangeUserRole(actor=admin.to_json(), user_id="2", role="admin"), asynchronous=False
        )

        assert user.role == "admin"
        assert webhook.actions() == ["user_role_changed"]
        assert webhook.delivered[0]["data"] == {
            "targetUser": {"id": "2", "name": "Team Member", "email": "team@pocketlaw.com"},
            "oldRole": "team",
            "newRole": "admin",
        }

    def test_team_member_cannot_change_roles(self, team_member, webhook):
        with pytest.raises(ValidationError):
            current_domain.process(
                ChangeUserRole(actor=team_member.to_json(), user_id="3", role="team"), asynchronous=False
            )

        assert webhook.delivered == []

    def test_unknown_user_is_not_found(self, admin):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(
                ChangeUserRole(actor=admin.to_json(), user_id="missing", role="team"), asynchronous=False
            )

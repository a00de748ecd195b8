"""Tests for the User aggregate root."""

import json

import pytest
from identity.user.events import ProfileUpdated, UserInvited, UserRoleChanged, UserSignedIn, UserSignedOut
from identity.user.user import User, UserRole, hash_password
from protean.exceptions import ValidationError
from shared.snapshots import Actor, UserSnapshot


def _user(**overrides):
    params = {"email": "Associate@PocketLaw.com", "password": "s3cret", "name": "New Associate"}
    params.update(overrides)
    return User.register(**params)


class TestPasswords:
    def test_hash_is_salted(self):
        assert hash_password("password") != hash_password("password")

    def test_hash_is_repeatable_with_same_salt(self):
        hashed = hash_password("password", salt="abc")
        assert hashed.startswith("abc$")
        assert hash_password("password", salt="abc") == hashed

    def test_verify_password(self):
        user = _user()

        assert user.verify_password("s3cret") is True
        assert user.verify_password("wrong") is False

    def test_user_without_password_never_verifies(self, admin):
        user = User.invite(admin, "pending@pocketlaw.com", "team")

        assert user.verify_password("") is False


class TestRegistration:
    def test_register_normalizes_email(self):
        user = _user()

        assert user.email == "associate@pocketlaw.com"
        assert user.role == UserRole.TEAM.value
        assert user.is_active is True
        assert user._events == []

    def test_name_defaults_to_local_part(self):
        user = _user(name=None)

        assert user.name == "associate"

    def test_password_is_required(self):
        with pytest.raises(ValidationError) as exc_info:
            _user(password="")

        assert "password" in exc_info.value.messages

    def test_unknown_role_is_rejected(self):
        with pytest.raises(ValidationError):
            _user(role="superuser")


class TestInvitation:
    def test_invite_creates_inactive_user(self, admin):
        user = User.invite(admin, "Paralegal@PocketLaw.com", "client")

        assert user.is_active is False
        assert user.role == "client"
        assert isinstance(user._events[0], UserInvited)
        assert user._events[0].email == "paralegal@pocketlaw.com"
        assert Actor.from_json(user._events[0].actor) == admin

    def test_accept_invitation_activates(self, admin):
        user = User.invite(admin, "paralegal@pocketlaw.com", "team")

        user.accept_invitation("s3cret", name="Para Legal")

        assert user.is_active is True
        assert user.name == "Para Legal"
        assert user.verify_password("s3cret")

    def test_active_user_cannot_accept_invitation(self):
        with pytest.raises(ValidationError) as exc_info:
            _user().accept_invitation("other")

        assert exc_info.value.messages["email"] == ["Email is already registered"]


class TestSignInAndOut:
    def test_sign_in_stamps_last_login(self):
        user = _user()

        user.sign_in("Mozilla/5.0")

        assert user.last_login_at is not None
        event = user._events[0]
        assert isinstance(event, UserSignedIn)
        assert event.user_agent == "Mozilla/5.0"
        assert Actor.from_json(event.actor) == user.actor()

    def test_inactive_user_cannot_sign_in(self, admin):
        user = User.invite(admin, "pending@pocketlaw.com", "team")

        with pytest.raises(ValidationError):
            user.sign_in("pocketlaw-cli")

    def test_sign_out_raises_event(self):
        user = _user()

        user.sign_out()

        assert isinstance(user._events[0], UserSignedOut)


class TestProfile:
    def test_update_profile(self):
        user = _user()

        user.update_profile({"department": "Corporate", "phone": "+1 555"})

        assert user.department == "Corporate"
        event = user._events[0]
        assert isinstance(event, ProfileUpdated)
        assert json.loads(event.changes) == {"department": "Corporate", "phone": "+1 555"}

    def test_event_actor_reflects_new_name(self):
        user = _user()

        user.update_profile({"name": "Renamed"})

        assert Actor.from_json(user._events[0].actor).name == "Renamed"

    def test_email_and_role_are_not_profile_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            _user().update_profile({"role": "admin"})

        assert "changes" in exc_info.value.messages

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValidationError):
            _user().update_profile({"name": "  "})

    def test_empty_changes_raise_nothing(self):
        user = _user()

        user.update_profile({})

        assert user._events == []


class TestRoleChange:
    def test_admin_changes_role(self, admin):
        user = _user()

        user.change_role(admin, "client")

        assert user.role == "client"
        event = user._events[0]
        assert isinstance(event, UserRoleChanged)
        assert (event.old_role, event.new_role) == ("team", "client")
        assert UserSnapshot.from_json(event.user).email == "associate@pocketlaw.com"

    def test_non_admin_cannot_change_role(self, team_member):
        with pytest.raises(ValidationError) as exc_info:
            _user().change_role(team_member, "admin")

        assert exc_info.value.messages["role"] == ["Only administrators can change user roles"]

    def test_same_role_is_rejected(self, admin):
        with pytest.raises(ValidationError):
            _user().change_role(admin, "team")

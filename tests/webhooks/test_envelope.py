"""Tests for envelope construction and wire rendering."""

from datetime import UTC, datetime, timedelta, timezone

import pytest
from shared.snapshots import Actor
from webhooks.envelope import (
    PAYLOADS,
    DocumentSummary,
    DocumentViewedData,
    EventAction,
    MonotonicClock,
    TaskDeletedData,
    TaskReference,
    UserLogoutData,
    build_envelope,
    isoformat,
)

ACTOR = Actor(id="1", name="Umar Khan", email="umar@pocketlaw.com", role="admin")


class TestIsoformat:
    def test_utc_with_milliseconds_and_z_suffix(self):
        value = datetime(2024, 1, 20, 10, 15, 0, 123456, tzinfo=UTC)
        assert isoformat(value) == "2024-01-20T10:15:00.123Z"

    def test_naive_datetime_is_treated_as_utc(self):
        assert isoformat(datetime(2024, 1, 20, 10, 15)) == "2024-01-20T10:15:00.000Z"

    def test_other_offsets_are_converted_to_utc(self):
        value = datetime(2024, 1, 20, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert isoformat(value) == "2024-01-20T10:00:00.000Z"

    def test_none(self):
        assert isoformat(None) is None


class TestMonotonicClock:
    def test_never_goes_backwards(self):
        readings = iter(
            [
                datetime(2024, 1, 1, 12, 0, 5, tzinfo=UTC),
                datetime(2024, 1, 1, 12, 0, 3, tzinfo=UTC),
                datetime(2024, 1, 1, 12, 0, 7, tzinfo=UTC),
            ]
        )
        clock = MonotonicClock(source=lambda: next(readings))

        first, second, third = clock.now(), clock.now(), clock.now()

        assert first == datetime(2024, 1, 1, 12, 0, 5, tzinfo=UTC)
        assert second == first
        assert third == datetime(2024, 1, 1, 12, 0, 7, tzinfo=UTC)


class TestActionCatalog:
    def test_every_action_has_exactly_one_payload(self):
        assert set(PAYLOADS) == set(EventAction)

    def test_payload_classes_are_bound_to_their_action(self):
        for action, payload_cls in PAYLOADS.items():
            assert payload_cls.action is action

    def test_wire_values(self):
        assert EventAction.DOCUMENT_UPLOADED.value == "document_uploaded"
        assert EventAction.USER_LOGIN.value == "user_login"
        assert EventAction.USER_LOGOUT.value == "user_logout"
        assert len(EventAction) == 22


class TestBuildEnvelope:
    def test_payload_shape(self):
        data = DocumentViewedData(document=DocumentSummary(id="1", name="Service Agreement.pdf", type="pdf"))

        payload = build_envelope(EventAction.DOCUMENT_VIEWED, ACTOR, data).to_payload()

        assert set(payload) == {"action", "timestamp", "user", "data"}
        assert payload["action"] == "document_viewed"
        assert payload["user"] == {
            "id": "1",
            "name": "Umar Khan",
            "email": "umar@pocketlaw.com",
            "role": "admin",
        }
        assert payload["data"] == {"document": {"id": "1", "name": "Service Agreement.pdf", "type": "pdf"}}

    def test_timestamp_format(self):
        data = TaskDeletedData(task=TaskReference(id="2", title="Update NDA Template"))

        timestamp = build_envelope(EventAction.TASK_DELETED, ACTOR, data).to_payload()["timestamp"]

        assert timestamp.endswith("Z")
        assert len(timestamp) == len("2024-01-20T10:15:00.000Z")
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
        assert abs(datetime.now(UTC) - parsed) < timedelta(seconds=5)

    def test_camel_case_keys_on_the_wire(self):
        data = UserLogoutData(logout_time="2024-01-20T10:15:00.000Z")

        payload = build_envelope(EventAction.USER_LOGOUT, ACTOR, data).to_payload()

        assert payload["data"] == {"logoutTime": "2024-01-20T10:15:00.000Z"}

    def test_mismatched_payload_is_rejected(self):
        data = UserLogoutData(logout_time="2024-01-20T10:15:00.000Z")

        with pytest.raises(ValueError):
            build_envelope(EventAction.USER_LOGIN, ACTOR, data)

    def test_timestamps_are_non_decreasing(self):
        data = TaskDeletedData(task=TaskReference(id="2", title="Update NDA Template"))

        envelopes = [build_envelope(EventAction.TASK_DELETED, ACTOR, data) for _ in range(50)]

        stamps = [e.timestamp for e in envelopes]
        assert stamps == sorted(stamps)

    def test_envelopes_differ_only_in_timestamp(self):
        data = TaskDeletedData(task=TaskReference(id="2", title="Update NDA Template"))

        first = build_envelope(EventAction.TASK_DELETED, ACTOR, data).to_payload()
        second = build_envelope(EventAction.TASK_DELETED, ACTOR, data).to_payload()

        first.pop("timestamp")
        second.pop("timestamp")
        assert first == second

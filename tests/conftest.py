import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Pins the environment so settings resolve the test webhook endpoint and
    logging stays quiet.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        # Get the test file path relative to the tests directory
        test_path = Path(item.fspath)

        # Mark tests based on their directory
        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(autouse=True)
def webhook():
    """Record every webhook envelope instead of POSTing it."""
    from webhooks import reset_transport, set_transport
    from webhooks.fake import FakeWebhookTransport

    transport = set_transport(FakeWebhookTransport())
    yield transport
    reset_transport()


@pytest.fixture(autouse=True)
def session_store(tmp_path):
    """Point the session store at a per-test file."""
    from identity.session import SessionStore, reset_session_store, set_session_store

    store = set_session_store(SessionStore(tmp_path / "session.json"))
    yield store
    reset_session_store()


@pytest.fixture()
def admin():
    from shared.snapshots import Actor

    return Actor(id="1", name="Umar Khan", email="umar@pocketlaw.com", role="admin")


@pytest.fixture()
def team_member():
    from shared.snapshots import Actor

    return Actor(id="2", name="Team Member", email="team@pocketlaw.com", role="team")


@pytest.fixture()
def client_user():
    from shared.snapshots import Actor

    return Actor(id="3", name="Client User", email="client@pocketlaw.com", role="client")

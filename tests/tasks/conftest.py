import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def tasks_bed():
    from tasks.domain import tasks

    bed = DomainFixture(tasks)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(tasks_bed):
    with tasks_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()

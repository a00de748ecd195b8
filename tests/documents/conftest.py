import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def documents_bed():
    from documents.domain import documents

    bed = DomainFixture(documents)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(documents_bed):
    with documents_bed.domain_context():
        yield

        from protean import current_domain

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()

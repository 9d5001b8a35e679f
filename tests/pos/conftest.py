import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def pos_bed():
    from pos.domain import pos

    bed = DomainFixture(pos)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(pos_bed):
    with pos_bed.domain_context():
        yield

        from protean import current_domain

        for _, provider in current_domain.providers.items():
            provider._data_reset()

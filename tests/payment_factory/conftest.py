import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def factory_bed():
    from payment_factory.domain import payment_factory

    bed = DomainFixture(payment_factory)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(factory_bed):
    from payment_factory.instantiation import reset_backend
    from protean import current_domain

    with factory_bed.domain_context():
        yield

        for _, provider in current_domain.providers.items():
            provider._data_reset()
        current_domain.event_store.store._data_reset()

    reset_backend()


@pytest.fixture()
def backend():
    """The active fake instantiation backend for this test."""
    from payment_factory.instantiation import set_backend
    from payment_factory.instantiation.fake_adapter import FakeInstanceBackend

    fake = FakeInstanceBackend()
    set_backend(fake)
    return fake

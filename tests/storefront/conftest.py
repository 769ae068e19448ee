import pytest
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


@pytest.fixture()
def store():
    from storefront.order.store import OrderStore

    return OrderStore()


@pytest.fixture()
def email():
    from storefront.notifications.channel.fake_email import FakeEmailAdapter

    return FakeEmailAdapter()


@pytest.fixture()
def notifier(email):
    from storefront.notifications.notifier import Notifier

    notifier = Notifier(channel=email, bakery_name="Test Bakery", max_workers=1)
    yield notifier
    notifier.drain(timeout=5)
    notifier.shutdown()


@pytest.fixture()
def lifecycle(store, notifier):
    from storefront.order.lifecycle import OrderLifecycle

    return OrderLifecycle(store, notifier)


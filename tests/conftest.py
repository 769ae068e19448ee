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

    Select the config environment before any domain module is imported, so
    logging and Protean pick up the test settings.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("EMAIL_ADAPTER", "fake")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/notifications/" in str(test_path):
            item.add_marker(pytest.mark.notifications)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def reset_notification_singletons():
    """Drop the channel and notifier singletons after every test."""
    yield

    from storefront.notifications.channel import reset_channels
    from storefront.notifications.notifier import reset_notifier

    reset_notifier()
    reset_channels()

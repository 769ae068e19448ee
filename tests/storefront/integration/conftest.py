import pytest
from fastapi.testclient import TestClient
from storefront.api import create_app


@pytest.fixture()
def client(store, notifier):
    return TestClient(create_app(store=store, notifier=notifier))

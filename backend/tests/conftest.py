import pytest
from fastapi.testclient import TestClient

from grocery_api.main import create_app
from grocery_api.storage import ItemStore


@pytest.fixture
def store() -> ItemStore:
    return ItemStore.seeded()


@pytest.fixture
def client(store: ItemStore) -> TestClient:
    return TestClient(create_app(store))

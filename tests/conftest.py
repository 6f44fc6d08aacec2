# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.database import CatalogStore
from product_api.main import create_app

API_KEY = "mysecurekey"
HEADERS = {"x-api-key": API_KEY}


@pytest.fixture
def store():
    return CatalogStore.seeded()


@pytest.fixture
def settings():
    return Settings(api_key=API_KEY, default_page=1, default_limit=5)


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    return TestClient(app)

# tests/conftest.py
import os

os.environ.setdefault("SHOPIFY_WEBHOOK_SECRET", "test-webhook-secret")

import pytest
from fastapi.testclient import TestClient

from skuhook.catalog.connection import MemCatalogDatabase
from skuhook.config import Settings, get_settings
from skuhook.errors import CatalogUnavailable
from skuhook.main import create_app
from skuhook.utils.shopify import compute_shopify_hmac

SECRET = "shhh-webhook"
CATALOG = ["SKU2006-001", "SKU2006-002", "SKU2006-003"]

class RecordingNotifier:
    def __init__(self):
        self.calls = []

    def notify(self, sku):
        self.calls.append(sku)

class BrokenCatalog:
    def list(self):
        raise CatalogUnavailable("Catalog backend unavailable")

    def contains(self, sku):
        raise CatalogUnavailable("Catalog backend unavailable")

class BrokenCatalogDatabase:
    def connect(self):
        return BrokenCatalog()

    def disconnect(self):
        pass

@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

@pytest.fixture
def settings():
    return Settings(SHOPIFY_WEBHOOK_SECRET=SECRET, _env_file=None)

@pytest.fixture
def notifier():
    return RecordingNotifier()

@pytest.fixture
def client(settings, notifier):
    app = create_app(settings, catalog_db=MemCatalogDatabase(CATALOG), notifier=notifier)
    with TestClient(app) as c:
        yield c

@pytest.fixture
def sign():
    return lambda body: compute_shopify_hmac(body, SECRET)

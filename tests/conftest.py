"""Shared fixtures for the API and cart test suites."""

import pytest
from fastapi.testclient import TestClient

from app.core import sheets_client
from app.database import init_store, store
from app.main import app
from app.repositories.cart_repo import CartRepository, LocalStorage
from app.routers import products as products_router
from app.services.cart_service import CartService


@pytest.fixture(autouse=True)
def fresh_store():
    """Every test starts from the seed data."""
    init_store()
    yield store
    init_store()


@pytest.fixture(autouse=True)
def no_sheets(monkeypatch):
    """Google Sheets is unconfigured unless a test opts in."""
    monkeypatch.setattr(
        sheets_client,
        "settings",
        sheets_client.settings.model_copy(
            update={"GOOGLE_APPLICATION_CREDENTIALS": None, "GOOGLE_SHEET_ID": None}
        ),
    )
    monkeypatch.setattr(products_router.service, "sheet_id", None)


@pytest.fixture
def sheets_configured(monkeypatch):
    """Pretend credentials and a sheet id are configured."""
    monkeypatch.setattr(
        sheets_client,
        "settings",
        sheets_client.settings.model_copy(
            update={"GOOGLE_APPLICATION_CREDENTIALS": "/secrets/test-creds.json"}
        ),
    )
    monkeypatch.setattr(products_router.service, "sheet_id", "sheet-123")
    return "sheet-123"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def widget_payload():
    return {"productName": "Widget", "price": 9.99, "quantityAvailable": 3}


@pytest.fixture
def cart_path(tmp_path):
    return tmp_path / "cart.json"


@pytest.fixture
def cart_service(cart_path):
    return CartService(CartRepository(LocalStorage(cart_path)))

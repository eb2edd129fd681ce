"""
Shared fixtures: in-memory SQLite database, API client with overridden
dependencies, a fake product directory and an authenticated user.
"""

import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from smart_pantry.api.v1.deps import get_product_directory
from smart_pantry.db.session import get_db
from smart_pantry.main import app
from smart_pantry.models import Base
from smart_pantry.schemas.product import BarcodeProductData


class FakeDirectory:
    """In-memory stand-in for Open Food Facts that counts lookups."""

    def __init__(self, products: Optional[Dict[str, BarcodeProductData]] = None):
        self.products = dict(products or {})
        self.calls = []

    async def lookup(self, barcode: str) -> Optional[BarcodeProductData]:
        self.calls.append(barcode)
        return self.products.get(barcode)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def directory():
    return FakeDirectory({
        "123456789012": BarcodeProductData(
            barcode="123456789012",
            name="Apple",
            brand="Orchard Co",
            category="Fruits",
            unit="g",
        ),
    })


@pytest.fixture
def client(session_factory, directory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_product_directory] = lambda: directory
    yield TestClient(app)
    app.dependency_overrides.clear()


def register(client: TestClient, email: str, password: str = "password123") -> Dict[str, str]:
    response = client.post("/api/v1/auth/register", json={
        "email": email,
        "password": password,
        "full_name": "Pantry Tester",
    })
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def tokens(client):
    return register(client, "owner@pantry.io")


@pytest.fixture
def auth_headers(tokens):
    return {"Authorization": f"Bearer {tokens['access_token']}"}


@pytest.fixture
def other_headers(client):
    tokens = register(client, "guest@pantry.io")
    return {"Authorization": f"Bearer {tokens['access_token']}"}


@pytest.fixture
def product(client, auth_headers):
    """A manually registered product (Dairy, 7 days shelf life)."""
    response = client.post("/api/v1/products", headers=auth_headers, json={
        "barcode": "8001505005707",
        "name": "Whole Milk",
        "brand": "Alpine",
        "category": "Dairies, Milks",
        "unit": "ml",
    })
    assert response.status_code == 201, response.text
    return response.json()

"""
Pytest configuration and fixtures for integration tests.
"""

import os
import sys
import tempfile
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import ConnectionFactory
from app.models import Product
from app.schema import create_tables


@pytest.fixture
def db_path(monkeypatch):
    """
    A fresh temporary database with the products table, exposed through DATABASE_PATH.
    """
    db_fd, path = tempfile.mkstemp(suffix=".db")
    monkeypatch.setenv("DATABASE_PATH", path)

    factory = ConnectionFactory(path)
    with factory.connection() as conn:
        create_tables(conn.cursor())

    yield path

    # Cleanup
    os.close(db_fd)
    os.unlink(path)


@pytest.fixture
def factory(db_path):
    return ConnectionFactory(db_path)


@pytest.fixture
def client(db_path):
    """
    Create a test client backed by the temporary database.
    """
    from fastapi.testclient import TestClient
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_product_data():
    """Sample product body for create requests."""
    return {"name": "Widget", "price": 9.99}


class FakeProductService:
    """In-memory stand-in for the repository that records every call."""

    def __init__(self):
        self.products = {}
        self.calls = []

    def list_products(self):
        self.calls.append(("list", None))
        return list(self.products.values())

    def get_product(self, product_id):
        self.calls.append(("get", product_id))
        return self.products.get(product_id)

    def create_product(self, product):
        self.calls.append(("create", None))
        product_id = len(self.products) + 1
        self.products[product_id] = Product(id=product_id, name=product.name, price=product.price)
        return product_id

    def update_product(self, product):
        self.calls.append(("update", product.id))
        if product.id not in self.products:
            return False
        self.products[product.id] = product
        return True

    def delete_product(self, product_id):
        self.calls.append(("delete", product_id))
        return self.products.pop(product_id, None) is not None


@pytest.fixture
def fake_service():
    """
    Route product requests to an in-memory service instead of the database.
    """
    from app.main import app
    from app.routes.products import get_product_service

    service = FakeProductService()
    app.dependency_overrides[get_product_service] = lambda: service
    yield service
    app.dependency_overrides.clear()

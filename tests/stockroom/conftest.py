from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from stockroom.product.product import Product
from stockroom.product.service import ProductService
from stockroom.store.memory_adapter import InMemoryProductStore


@pytest.fixture()
def store():
    return InMemoryProductStore()


@pytest.fixture()
def service(store):
    return ProductService(store)


@pytest.fixture()
def hobbit():
    return Product(
        name="The Hobbit",
        description="There and back again",
        price=Decimal("14.99"),
        quantity=14,
    )


@pytest.fixture()
def hobbit_payload():
    return {
        "name": "The Hobbit",
        "description": "There and back again",
        "price": 14.99,
        "quantity": 14,
    }


@pytest.fixture()
def app():
    from app import create_app

    return create_app()


@pytest.fixture()
def client(app):
    return TestClient(app)

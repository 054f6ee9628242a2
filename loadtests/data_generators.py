"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the product validation gate and
match the exact field names the Products API reads.
"""

import random

from faker import Faker

fake = Faker()


def product_data() -> dict:
    """Generate a stock payload: non-blank name, description, price, quantity."""
    return {
        "name": f"{fake.word().capitalize()} {fake.word().capitalize()}",
        "description": fake.sentence(),
        "price": round(random.uniform(0.99, 199.99), 2),
        "quantity": random.randint(1, 500),
    }


def correction_data(product: dict) -> dict:
    """Generate a full replacement for a stocked product, keeping its id."""
    return {
        **product_data(),
        "id": product["id"],
        "name": product["name"],
        "quantity": max(0, product["quantity"] - random.randint(0, 5)),
    }


def invalid_product_data() -> dict:
    """Generate a payload the validation gate rejects (blank name)."""
    return {**product_data(), "name": "   "}

"""Tests for the Product entity."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from stockroom.product.product import Product


class TestProductIdentity:
    def test_new_product_has_no_id(self, hobbit):
        assert hobbit.id is None
        assert hobbit.is_persisted is False

    def test_with_id_returns_persisted_copy(self, hobbit):
        stored = hobbit.with_id("620c8c44e136fd50c99323be")
        assert stored.id == "620c8c44e136fd50c99323be"
        assert stored.is_persisted is True
        assert hobbit.id is None

    def test_empty_id_is_not_persisted(self, hobbit):
        assert hobbit.with_id("").is_persisted is False

    def test_without_id_strips_identity(self, hobbit):
        assert hobbit.with_id("abc").without_id() == hobbit

    def test_product_is_immutable(self, hobbit):
        with pytest.raises(FrozenInstanceError):
            hobbit.name = "Changed"


class TestProductDocuments:
    def test_to_document_excludes_id(self, hobbit):
        document = hobbit.with_id("abc").to_document()
        assert document == {
            "name": "The Hobbit",
            "description": "There and back again",
            "price": Decimal("14.99"),
            "quantity": 14,
        }

    def test_from_document_sets_id(self, hobbit):
        product = Product.from_document("abc", hobbit.to_document())
        assert product == hobbit.with_id("abc")

    def test_from_document_coerces_numeric_price(self):
        product = Product.from_document(
            "abc",
            {"name": "Map", "description": "", "price": 2.5, "quantity": "3"},
        )
        assert product.price == Decimal("2.5")
        assert product.quantity == 3

"""ProductService — the five inventory operations over a ProductStore.

``correct`` and ``unstock`` look the product up and then write or delete in a
second store call. Two requests racing on one id can both pass the lookup;
the store's last-write-wins or idempotent delete decides the result.
"""

from stockroom.product.outcomes import (
    Absent,
    Corrected,
    CorrectResult,
    Found,
    Lookup,
    NotFound,
    Stocked,
    StockResult,
    Unstocked,
    UnstockResult,
)
from stockroom.product.product import Product
from stockroom.store.port import ProductStore
from stockroom.utils.interception import intercepted
from stockroom.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    """Stateless orchestration of stock, retrieve, correct and unstock."""

    def __init__(self, store: ProductStore):
        self.store = store

    @intercepted("service")
    def stock(self, product: Product) -> StockResult:
        """Stock a new product. Always creates a record, even for a known name.

        Do not use to adjust quantity; see ``correct``.
        """
        stored = self.store.save(product.without_id())
        logger.info("Product stocked", product_id=stored.id, quantity=stored.quantity)
        return Stocked(stored)

    @intercepted("service")
    def retrieve_one(self, product_id: str) -> Lookup:
        product = self.store.find_by_id(product_id)
        if product is None:
            return Absent(product_id)
        return Found(product)

    @intercepted("service")
    def retrieve_all(self) -> list[Product]:
        return list(self.store.find_all())

    @intercepted("service")
    def correct(self, product: Product) -> CorrectResult:
        """Replace every field of an existing product.

        Fields are not merged: whatever the payload carries overwrites the
        stored record.
        """
        if not product.id or self.store.find_by_id(product.id) is None:
            return NotFound(product.id or "")

        stored = self.store.save(product)
        logger.info("Product corrected", product_id=stored.id)
        return Corrected(stored)

    @intercepted("service")
    def unstock(self, product_id: str) -> UnstockResult:
        if self.store.find_by_id(product_id) is None:
            return NotFound(product_id)

        self.store.delete_by_id(product_id)
        logger.info("Product unstocked", product_id=product_id)
        return Unstocked(product_id)

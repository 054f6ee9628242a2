"""In-memory product store — default adapter for development and tests.

Ids are 24 hex characters, the same shape the MongoDB adapter produces.
"""

import threading
from uuid import uuid4

from stockroom.product.product import Product
from stockroom.store.port import ProductStore
from stockroom.utils.interception import intercepted


class InMemoryProductStore(ProductStore):
    """Dict-backed store keyed by product id, in insertion order."""

    name = "memory"

    def __init__(self):
        self._records: dict[str, Product] = {}
        self._lock = threading.Lock()

    @intercepted("store")
    def find_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            return self._records.get(product_id)

    @intercepted("store")
    def save(self, product: Product) -> Product:
        stored = product if product.is_persisted else product.with_id(uuid4().hex[:24])
        with self._lock:
            self._records[stored.id] = stored
        return stored

    @intercepted("store")
    def find_all(self) -> list[Product]:
        with self._lock:
            return list(self._records.values())

    @intercepted("store", returns_value=False)
    def delete_by_id(self, product_id: str) -> None:
        with self._lock:
            self._records.pop(product_id, None)

    def clear(self) -> None:
        """Drop every record (useful for testing)."""
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

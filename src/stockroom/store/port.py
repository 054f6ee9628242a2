"""Product store port — the persistence contract ProductService depends on.

Adapters must give read-your-writes to the same caller: after ``save`` or
``delete_by_id`` returns, the next ``find_by_id`` from that caller sees it.
Nothing here is atomic across calls.
"""

from abc import ABC, abstractmethod

from stockroom.product.product import Product


class ProductStore(ABC):
    """Abstract interface for product store adapters."""

    name: str = "abstract"

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        """Return the stored product, or ``None`` when the id is unknown."""
        ...

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert a product without an id, or replace the one with its id.

        Returns:
            The stored product, always carrying its id.
        """
        ...

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every stored product, in store order."""
        ...

    @abstractmethod
    def delete_by_id(self, product_id: str) -> None:
        """Remove the product with this id. Unknown ids are a no-op."""
        ...

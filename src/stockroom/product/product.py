"""Product entity — the record moved between the api, service and store layers."""

from dataclasses import asdict, dataclass, replace
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class Product:
    """A stocked product.

    ``id`` is ``None`` until the store assigns one on first save. After that
    it is the only handle used to look the product up, replace or unstock it.
    """

    name: str
    description: str
    price: Decimal
    quantity: int
    id: str | None = None

    @property
    def is_persisted(self) -> bool:
        return bool(self.id)

    def with_id(self, product_id: str) -> "Product":
        """Return a copy carrying the given persistence identity."""
        return replace(self, id=product_id)

    def without_id(self) -> "Product":
        return replace(self, id=None)

    def to_document(self) -> dict[str, Any]:
        """Field mapping without the identity, as handed to a store."""
        document = asdict(self)
        document.pop("id")
        return document

    @classmethod
    def from_document(cls, product_id: str, document: dict[str, Any]) -> "Product":
        price = document["price"]
        if not isinstance(price, Decimal):
            price = Decimal(str(price))
        return cls(
            id=str(product_id),
            name=document["name"],
            description=document["description"],
            price=price,
            quantity=int(document["quantity"]),
        )

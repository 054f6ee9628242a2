"""MongoDB product store — persists products as documents in one collection.

Ids are ObjectId hex strings. A lookup id that is not valid ObjectId hex is
queried verbatim, so a malformed id is simply unknown rather than an error.
Driver failures surface as ``StoreUnavailableError``.
"""

from decimal import Decimal
from typing import Any

import structlog
from bson import Decimal128, ObjectId
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from stockroom.exceptions import StoreUnavailableError
from stockroom.product.product import Product
from stockroom.store.port import ProductStore
from stockroom.utils.interception import intercepted

logger = structlog.get_logger(__name__)


def _document_key(product_id: str) -> ObjectId | str:
    return ObjectId(product_id) if ObjectId.is_valid(product_id) else product_id


def _to_document(product: Product) -> dict[str, Any]:
    document = product.to_document()
    document["price"] = Decimal128(document["price"])
    return document


def _from_document(document: dict[str, Any]) -> Product:
    fields = dict(document)
    price = fields.get("price")
    if isinstance(price, Decimal128):
        fields["price"] = price.to_decimal()
    elif price is not None and not isinstance(price, Decimal):
        fields["price"] = Decimal(str(price))
    return Product.from_document(str(fields.pop("_id")), fields)


class MongoProductStore(ProductStore):
    """Product store backed by a pymongo collection."""

    name = "mongo"

    def __init__(self, collection: Collection):
        self._collection = collection

    @classmethod
    def from_uri(
        cls,
        uri: str,
        database: str = "stockroom",
        collection: str = "Product",
        timeout_ms: int = 5000,
    ) -> "MongoProductStore":
        client = MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        logger.info("Connected MongoDB product store", database=database, collection=collection)
        return cls(client[database][collection])

    @intercepted("store")
    def find_by_id(self, product_id: str) -> Product | None:
        try:
            document = self._collection.find_one({"_id": _document_key(product_id)})
        except PyMongoError as exc:
            raise StoreUnavailableError(f"find_by_id failed: {exc}") from exc
        return _from_document(document) if document is not None else None

    @intercepted("store")
    def save(self, product: Product) -> Product:
        document = _to_document(product)
        try:
            if not product.is_persisted:
                inserted = self._collection.insert_one(document)
                return product.with_id(str(inserted.inserted_id))

            self._collection.replace_one({"_id": _document_key(product.id)}, document, upsert=True)
        except PyMongoError as exc:
            raise StoreUnavailableError(f"save failed: {exc}") from exc
        return product

    @intercepted("store")
    def find_all(self) -> list[Product]:
        try:
            return [_from_document(document) for document in self._collection.find({})]
        except PyMongoError as exc:
            raise StoreUnavailableError(f"find_all failed: {exc}") from exc

    @intercepted("store", returns_value=False)
    def delete_by_id(self, product_id: str) -> None:
        try:
            self._collection.delete_one({"_id": _document_key(product_id)})
        except PyMongoError as exc:
            raise StoreUnavailableError(f"delete_by_id failed: {exc}") from exc

"""Product store abstraction — pluggable persistence for products."""

import os

from stockroom.store.port import ProductStore

_store_instance = None


def get_store() -> ProductStore:
    """Return the configured product store adapter (singleton).

    Uses the in-memory store by default. In production, configure via the
    STOCKROOM_STORE environment variable (``mongo``) together with
    MONGO_URI, MONGO_DATABASE, MONGO_COLLECTION and MONGO_TIMEOUT_MS.
    """
    global _store_instance
    if _store_instance is None:
        adapter = os.environ.get("STOCKROOM_STORE", "memory")
        if adapter == "memory":
            from stockroom.store.memory_adapter import InMemoryProductStore

            _store_instance = InMemoryProductStore()
        elif adapter == "mongo":
            from stockroom.store.mongo_adapter import MongoProductStore

            _store_instance = MongoProductStore.from_uri(
                os.environ.get("MONGO_URI", "mongodb://localhost:27017"),
                database=os.environ.get("MONGO_DATABASE", "stockroom"),
                collection=os.environ.get("MONGO_COLLECTION", "Product"),
                timeout_ms=int(os.environ.get("MONGO_TIMEOUT_MS", "5000")),
            )
        else:
            raise ValueError(f"Unknown product store adapter: {adapter}")
    return _store_instance


def reset_store():
    """Reset the store singleton (useful for testing)."""
    global _store_instance
    _store_instance = None


__all__ = ["ProductStore", "get_store", "reset_store"]

"""Composition root: wires the configured store into ProductService."""

from stockroom.product.service import ProductService
from stockroom.store import get_store

_service_instance = None


def get_product_service() -> ProductService:
    """Return the process-wide ProductService (singleton)."""
    global _service_instance
    if _service_instance is None:
        _service_instance = ProductService(get_store())
    return _service_instance


def reset_product_service():
    """Reset the service singleton (useful for testing)."""
    global _service_instance
    _service_instance = None

"""Products API package."""

from stockroom.api.errors import register_failure_translator
from stockroom.api.routes import router

__all__ = ["router", "register_failure_translator"]

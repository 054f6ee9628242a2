"""Failure translator — outermost mapping of uncaught failures to envelopes.

Validation problems and unknown products never get here; they are values
turned into 400 and 404 envelopes by the routes. Whatever else escapes is
logged with its kind and answered with a detail-free 500 envelope.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from stockroom.api.schemas import INTERNAL_ERROR_MESSAGE, INVALID_MESSAGE, envelope
from stockroom.exceptions import StockroomError
from stockroom.utils.logging import get_logger

logger = get_logger(__name__)

# Failure kinds answered by the translator. ``Exception`` is registered on
# top of these as the last resort.
TRANSLATED_FAILURES: tuple[type[Exception], ...] = (
    StockroomError,
    LookupError,
    ValueError,
    TypeError,
    AttributeError,
    ArithmeticError,
    RuntimeError,
)


async def translate_failure(request: Request, exc: Exception):
    logger.error(
        "Unhandled failure",
        error_type=type(exc).__name__,
        error=str(exc),
        method=request.method,
        path=request.url.path,
    )
    return envelope(500, INTERNAL_ERROR_MESSAGE)


async def translate_request_validation(request: Request, exc: RequestValidationError):
    fields = ", ".join(".".join(str(part) for part in error.get("loc", ())) for error in exc.errors())
    logger.warning("Request rejected by router validation", path=request.url.path, fields=fields)
    return envelope(400, f"{INVALID_MESSAGE}: {fields}" if fields else INVALID_MESSAGE)


async def translate_http_error(request: Request, exc: StarletteHTTPException):
    return envelope(exc.status_code, str(exc.detail))


def register_failure_translator(app: FastAPI) -> None:
    """Install the translator's exception handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, translate_request_validation)
    app.add_exception_handler(StarletteHTTPException, translate_http_error)
    for failure in TRANSLATED_FAILURES:
        app.add_exception_handler(failure, translate_failure)
    app.add_exception_handler(Exception, translate_failure)

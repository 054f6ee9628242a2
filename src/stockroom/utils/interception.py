"""Interceptor logger for the api, service and store boundaries.

Each boundary method is wrapped explicitly with ``@intercepted(<boundary>)``.
The wrapper logs entry, then classifies the result by shape:

- success (info): a present value, a sequence, a 2xx response, an outcome
  other than NotFound
- non-success (warning): ``None``, ``Absent``, ``NotFound``, a non-2xx response
- failure (error): the call raised; the exception propagates untouched

Calls nested inside a call on the same boundary are not logged again.
"""

import functools
import inspect
from contextvars import ContextVar
from typing import Any, Callable

import structlog
from fastapi import Response

from stockroom.product.outcomes import Absent, NotFound, Outcome

logger = structlog.get_logger(__name__)

_active_boundaries: ContextVar[frozenset[str]] = ContextVar("stockroom_active_boundaries", default=frozenset())


def describe_non_success(result: Any, returns_value: bool = True) -> str | None:
    """Return a short label when ``result`` is a non-success shape, else ``None``."""
    if result is None:
        return "None" if returns_value else None
    if isinstance(result, Response):
        return None if 200 <= result.status_code < 300 else f"status {result.status_code}"
    if isinstance(result, Absent):
        return "Absent"
    if isinstance(result, NotFound) or result is Outcome.NOT_FOUND:
        return "NotFound"
    return None


class _Interception:
    def __init__(self, name: str, boundary: str, returns_value: bool):
        self.name = name
        self.boundary = boundary
        self.returns_value = returns_value
        self.token = None

    def enter(self) -> bool:
        active = _active_boundaries.get()
        if self.boundary in active:
            return False
        self.token = _active_boundaries.set(active | {self.boundary})
        logger.info(f"Entering {self.name}", boundary=self.boundary)
        return True

    def leave(self) -> None:
        _active_boundaries.reset(self.token)

    def returned(self, result: Any) -> None:
        shape = describe_non_success(result, self.returns_value)
        if shape is None:
            logger.info(f"Exiting {self.name} after successful execution", boundary=self.boundary)
        else:
            logger.warning(f"Exiting {self.name} with {shape}", boundary=self.boundary)

    def raised(self, exc: Exception) -> None:
        logger.error(
            f"Exiting {self.name} with exception",
            boundary=self.boundary,
            error_type=type(exc).__name__,
            error=str(exc),
        )


def intercepted(boundary: str, returns_value: bool = True) -> Callable:
    """Wrap a boundary callable with entry/exit/failure logging.

    ``returns_value=False`` marks a procedure, for which ``None`` is success.
    """

    def decorator(func: Callable) -> Callable:
        name = func.__qualname__

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                interception = _Interception(name, boundary, returns_value)
                if not interception.enter():
                    return await func(*args, **kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception as exc:
                    interception.raised(exc)
                    raise
                finally:
                    interception.leave()
                interception.returned(result)
                return result

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            interception = _Interception(name, boundary, returns_value)
            if not interception.enter():
                return func(*args, **kwargs)
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                interception.raised(exc)
                raise
            finally:
                interception.leave()
            interception.returned(result)
            return result

        return wrapper

    return decorator

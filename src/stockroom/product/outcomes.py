"""Tagged results returned by ProductService.

Reads answer ``Found | Absent``; mutations answer one of ``Stocked``,
``Corrected``, ``Unstocked`` or ``NotFound``. An unknown product is a value,
never an exception, so callers cannot confuse it with a failure.
"""

from dataclasses import dataclass
from enum import Enum

from stockroom.product.product import Product


class Outcome(Enum):
    """What a mutating operation did."""

    STOCKED = "Stocked"
    NOT_FOUND = "NotFound"
    CORRECTED = "Corrected"
    UNSTOCKED = "Unstocked"


@dataclass(frozen=True)
class Found:
    product: Product


@dataclass(frozen=True)
class Absent:
    product_id: str


@dataclass(frozen=True)
class Stocked:
    product: Product
    outcome = Outcome.STOCKED


@dataclass(frozen=True)
class Corrected:
    product: Product
    outcome = Outcome.CORRECTED


@dataclass(frozen=True)
class Unstocked:
    product_id: str
    outcome = Outcome.UNSTOCKED


@dataclass(frozen=True)
class NotFound:
    product_id: str
    outcome = Outcome.NOT_FOUND


Lookup = Found | Absent
StockResult = Stocked
CorrectResult = Corrected | NotFound
UnstockResult = Unstocked | NotFound

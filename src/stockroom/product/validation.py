"""Validation gate for inbound product payloads.

Runs before ``stock`` and ``correct``. A rejected payload never reaches
ProductService or the store.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from stockroom.product.product import Product

# Prices render as JSON numbers (IEEE doubles), which hold 15 significant
# digits exactly. Quantities are stored as int64 documents.
PRICE_MAX_DIGITS = 15
QUANTITY_MIN = -(2**63)
QUANTITY_MAX = 2**63 - 1

_CONSTRAINT_BY_ERROR = {
    "decimal_max_digits": "precision",
    "decimal_max_places": "precision",
    "decimal_whole_digits": "precision",
    "finite_number": "precision",
    "greater_than_equal": "range",
    "less_than_equal": "range",
}


class ProductPayload(BaseModel):
    """Wire shape of a product sent by a caller.

    ``price`` and ``quantity`` are checked for presence, type and what the
    envelope and the store can represent. Zero and negative values are
    accepted.
    """

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "name": "The Lord of the Rings",
                    "description": "Featuring Tom Bombadil",
                    "price": 14.99,
                    "quantity": 22,
                }
            ]
        },
    )

    id: str | None = None
    name: str
    description: str
    price: Decimal = Field(max_digits=PRICE_MAX_DIGITS, allow_inf_nan=False)
    quantity: int = Field(strict=True, ge=QUANTITY_MIN, le=QUANTITY_MAX)

    @field_validator("price", mode="before")
    @classmethod
    def price_from_literal(cls, value: Any) -> Any:
        # JSON numbers arrive as floats; keep the digits the caller wrote
        if isinstance(value, float):
            return str(value)
        return value

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_product(self) -> Product:
        return Product(
            id=self.id or None,
            name=self.name,
            description=self.description,
            price=self.price,
            quantity=self.quantity,
        )


@dataclass(frozen=True)
class Violation:
    """One failed constraint on one field."""

    field: str
    constraint: str
    message: str


@dataclass(frozen=True)
class Accepted:
    product: Product


@dataclass(frozen=True)
class Rejected:
    violations: tuple[Violation, ...]

    @property
    def summary(self) -> str:
        return "; ".join(violation.message for violation in self.violations)


def _violation(error: dict[str, Any]) -> Violation:
    field = ".".join(str(part) for part in error["loc"]) or "body"

    if error["type"] == "missing" or error.get("input", ...) is None:
        return Violation(field, "required", f"{field} is required")
    if error["type"] == "value_error":
        return Violation(field, "not_blank", f"{field} must not be blank")
    if error["type"] == "model_type":
        return Violation(field, "object", "body must be a JSON object")
    if error["type"] in _CONSTRAINT_BY_ERROR:
        return Violation(field, _CONSTRAINT_BY_ERROR[error["type"]], f"{field}: {error['msg']}")
    return Violation(field, "type", f"{field}: {error['msg']}")


def validate_product(payload: Any, require_id: bool = False) -> Accepted | Rejected:
    """Check a raw payload against the product constraints.

    ``require_id`` is set for replacement, where the payload must address
    an existing record.
    """
    try:
        accepted = ProductPayload.model_validate(payload)
    except ValidationError as exc:
        return Rejected(tuple(_violation(error) for error in exc.errors()))

    if require_id and not accepted.id:
        return Rejected((Violation("id", "required", "id is required"),))

    return Accepted(accepted.to_product())

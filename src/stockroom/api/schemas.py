"""Pydantic response schemas and the response envelope for the Products API."""

from decimal import Decimal
from typing import Annotated

from fastapi.responses import JSONResponse
from pydantic import BaseModel, PlainSerializer

from stockroom.product.product import Product

STOCKED_MESSAGE = "Stocked Successfully"
CORRECTED_MESSAGE = "Corrected Successfully"
SUCCESS_MESSAGE = "Success"
NOT_FOUND_MESSAGE = "Product Not Found"
INVALID_MESSAGE = "Invalid Product"
INTERNAL_ERROR_MESSAGE = "Internal error"

JsonNumber = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ProductView(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "620c8c44e136fd50c99323be",
                    "name": "The Lord of the Rings",
                    "description": "Featuring Tom Bombadil",
                    "price": 14.99,
                    "quantity": 22,
                }
            ]
        }
    }

    id: str | None = None
    name: str
    description: str
    price: JsonNumber
    quantity: int

    @classmethod
    def from_product(cls, product: Product) -> "ProductView":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            quantity=product.quantity,
        )


class Envelope(BaseModel):
    """Uniform response body: result data plus a human-readable message.

    Either part may be empty on its own.
    """

    model_config = {"json_schema_extra": {"examples": [{"data": None, "message": NOT_FOUND_MESSAGE}]}}

    data: list[ProductView] | None = None
    message: str


def envelope(status_code: int, message: str, products: list[Product] | None = None) -> JSONResponse:
    """Build the JSON response for an envelope."""
    body = Envelope(
        data=[ProductView.from_product(product) for product in products] if products is not None else None,
        message=message,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def documented(*status_codes: int) -> dict[int, dict]:
    """OpenAPI ``responses`` entries for the given status codes, all enveloped."""
    descriptions = {
        200: "Success",
        201: "Product stocked",
        400: "Invalid Product provided",
        404: "Provided Product ID doesn't exist in inventory",
        500: "Internal error",
    }
    return {code: {"model": Envelope, "description": descriptions[code]} for code in status_codes}

"""FastAPI endpoints for the Products API."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from stockroom.api.schemas import (
    CORRECTED_MESSAGE,
    INVALID_MESSAGE,
    NOT_FOUND_MESSAGE,
    STOCKED_MESSAGE,
    SUCCESS_MESSAGE,
    documented,
    envelope,
)
from stockroom.domain import get_product_service
from stockroom.product.outcomes import Absent, NotFound
from stockroom.product.service import ProductService
from stockroom.product.validation import ProductPayload, Rejected, Violation, validate_product
from stockroom.utils.interception import intercepted

router = APIRouter(prefix="/products", tags=["products"])

_PRODUCT_BODY = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": ProductPayload.model_json_schema()}},
    }
}

_NOT_JSON = Rejected((Violation("body", "json", "body must be valid JSON"),))


async def _read_payload(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return _NOT_JSON


def _rejected(rejection: Rejected):
    return envelope(400, f"{INVALID_MESSAGE}: {rejection.summary}")


@router.post(
    "",
    status_code=201,
    summary="Stock a Product",
    description="Add a new product to inventory. Do not use to add quantity.",
    responses=documented(201, 400, 500),
    openapi_extra=_PRODUCT_BODY,
)
@intercepted("api")
async def stock_product(request: Request, service: ProductService = Depends(get_product_service)):
    payload = await _read_payload(request)
    checked = payload if isinstance(payload, Rejected) else validate_product(payload)
    if isinstance(checked, Rejected):
        return _rejected(checked)

    stocked = service.stock(checked.product)
    return envelope(201, STOCKED_MESSAGE, [stocked.product])


@router.get(
    "/{product_id}",
    summary="Get a Product",
    description="Get a Product by ID",
    responses=documented(200, 404, 500),
)
@intercepted("api")
async def get_product(product_id: str, service: ProductService = Depends(get_product_service)):
    lookup = service.retrieve_one(product_id)
    if isinstance(lookup, Absent):
        return envelope(404, NOT_FOUND_MESSAGE)
    return envelope(200, SUCCESS_MESSAGE, [lookup.product])


@router.get(
    "",
    summary="Get all Products",
    description="Get all Products in the inventory",
    responses=documented(200, 500),
)
@intercepted("api")
async def list_products(service: ProductService = Depends(get_product_service)):
    return envelope(200, SUCCESS_MESSAGE, service.retrieve_all())


@router.put(
    "",
    summary="Correct a Product",
    description="Correct (adjust) a Product in the inventory by its ID. Every field is replaced.",
    responses=documented(200, 400, 404, 500),
    openapi_extra=_PRODUCT_BODY,
)
@intercepted("api")
async def correct_product(request: Request, service: ProductService = Depends(get_product_service)):
    payload = await _read_payload(request)
    checked = payload if isinstance(payload, Rejected) else validate_product(payload, require_id=True)
    if isinstance(checked, Rejected):
        return _rejected(checked)

    result = service.correct(checked.product)
    if isinstance(result, NotFound):
        return envelope(404, NOT_FOUND_MESSAGE)
    return envelope(200, CORRECTED_MESSAGE, [result.product])


@router.delete(
    "/{product_id}",
    summary="Unstock a Product",
    description="Unstock a Product from the inventory by its ID",
    responses=documented(200, 404, 500),
)
@intercepted("api")
async def unstock_product(product_id: str, service: ProductService = Depends(get_product_service)):
    result = service.unstock(product_id)
    if isinstance(result, NotFound):
        return envelope(404, NOT_FOUND_MESSAGE)
    return envelope(200, SUCCESS_MESSAGE)

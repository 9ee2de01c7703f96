"""Reviews, quote requests and contact messages API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse

from api.dependencies import get_query_service, require_feature
from api.models.schemas import CreatedResponse, ErrorResponse
from api.services.queries import SupplierQueryService
from config.logging_config import get_logger
from src.submissions.schemas import (
    ContactMessageForm,
    FormErrors,
    QuoteRequestForm,
    ReviewForm,
    validate_form,
)

logger = get_logger("api.engagement")

router = APIRouter()

FORM_INVALID = "Please check the form for errors"


def _invalid(errors: FormErrors) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=FORM_INVALID, details=errors).model_dump(),
    )


def _require_supplier(service: SupplierQueryService, supplier_id: str) -> dict:
    supplier = service.find_supplier(supplier_id)
    if supplier is None:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return supplier


@router.post(
    "/reviews",
    response_model=CreatedResponse,
    dependencies=[Depends(require_feature("reviews_system"))],
)
async def create_review(
    payload: dict[str, Any] = Body(...),
    service: SupplierQueryService = Depends(get_query_service),
):
    """Leave a review on an approved supplier."""
    form, errors = validate_form(ReviewForm, payload)
    if form is None:
        return _invalid(errors)

    _require_supplier(service, str(form.supplier_id))
    review = service.create_review(form)
    return {"success": True, "data": review, "message": "Review submitted successfully!"}


@router.post(
    "/quotes",
    response_model=CreatedResponse,
    dependencies=[Depends(require_feature("quote_requests"))],
)
async def create_quote_request(
    payload: dict[str, Any] = Body(...),
    service: SupplierQueryService = Depends(get_query_service),
):
    """Request a quote from an approved supplier."""
    form, errors = validate_form(QuoteRequestForm, payload)
    if form is None:
        return _invalid(errors)

    supplier = _require_supplier(service, str(form.supplier_id))
    if not supplier["accepts_quotes"]:
        raise HTTPException(status_code=400, detail="This supplier is not accepting quote requests")

    quote = service.create_quote_request(form)
    logger.info(f"Quote request {quote['id']} sent to {supplier['slug']}")
    return {"success": True, "data": quote, "message": "Quote request sent successfully!"}


@router.post("/contact", response_model=CreatedResponse)
async def create_contact_message(
    payload: dict[str, Any] = Body(...),
    service: SupplierQueryService = Depends(get_query_service),
):
    """Send a general message, optionally addressed to a supplier."""
    form, errors = validate_form(ContactMessageForm, payload)
    if form is None:
        return _invalid(errors)

    if form.supplier_id is not None:
        _require_supplier(service, str(form.supplier_id))

    message = service.create_contact_message(form)
    return {"success": True, "data": message, "message": "Message sent successfully!"}

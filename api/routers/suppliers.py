"""Suppliers API router."""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from api.config import Settings, get_settings
from api.dependencies import get_query_service
from api.models.schemas import (
    CreatedResponse,
    ErrorResponse,
    SupplierDetailResponse,
    SupplierListResponse,
)
from api.services.notifications import notify_submission
from api.services.queries import SupplierQueryService
from config.logging_config import get_logger
from src.listing.filter_state import SupplierFilter
from src.submissions.schemas import SupplierSubmission, validate_form

logger = get_logger("api.suppliers")

router = APIRouter()

SUBMISSION_RECEIVED = "Supplier submission received! We'll review it within 2-3 business days."
SUBMISSION_INVALID = "Please check your submission for errors"


@router.get("", response_model=SupplierListResponse)
async def list_suppliers(
    request: Request,
    service: SupplierQueryService = Depends(get_query_service),
    settings: Settings = Depends(get_settings),
):
    """List approved suppliers.

    Accepts the listing query grammar: search, category, location, rating,
    hasDiscount, featured, tags (repeated), sortBy, sortOrder, page, limit.
    """
    filters = SupplierFilter.from_query_string(request.url.query)
    suppliers, pagination = service.list_suppliers(
        filters,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )
    return {"success": True, "data": suppliers, "pagination": pagination.to_dict()}


@router.get("/{slug}", response_model=SupplierDetailResponse)
async def get_supplier(
    slug: str,
    service: SupplierQueryService = Depends(get_query_service),
):
    """Get an approved supplier's full profile."""
    supplier = service.get_supplier(slug)
    if supplier is None:
        raise HTTPException(status_code=404, detail="Supplier not found")
    return {"success": True, "data": supplier}


@router.post("/submit", response_model=CreatedResponse)
async def submit_supplier(
    payload: dict[str, Any] = Body(...),
    service: SupplierQueryService = Depends(get_query_service),
):
    """Submit a supplier for review. New suppliers start as pending."""
    submission, errors = validate_form(SupplierSubmission, payload)
    if submission is not None and not service.category_exists(str(submission.category_id)):
        submission, errors = None, {"category_id": SupplierSubmission.field_messages["category_id"]}

    if submission is None:
        logger.info(f"Rejected supplier submission: {sorted(errors)}")
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=SUBMISSION_INVALID, details=errors).model_dump(),
        )

    supplier = service.create_supplier(submission)
    notify_submission(
        {**submission.model_dump(mode="json"), **supplier},
        submission.contact_email,
    )
    return {"success": True, "data": supplier, "message": SUBMISSION_RECEIVED}

"""Categories and feature flags API router."""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_query_service
from api.models.schemas import CategoryListResponse, FeatureFlagResponse
from api.services.queries import SupplierQueryService

router = APIRouter()


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(service: SupplierQueryService = Depends(get_query_service)):
    """Get all categories with approved supplier counts."""
    return {"success": True, "data": service.list_categories()}


@router.get("/feature-flags/{flag_id}", response_model=FeatureFlagResponse)
async def get_feature_flag(
    flag_id: str,
    service: SupplierQueryService = Depends(get_query_service),
):
    """Get whether a feature flag is enabled."""
    enabled = service.get_feature_flag(flag_id)
    if enabled is None:
        raise HTTPException(status_code=404, detail=f"Unknown feature flag: {flag_id}")
    return {"success": True, "id": flag_id, "enabled": enabled}

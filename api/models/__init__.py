"""API Pydantic models."""

from api.models.schemas import (
    PaginationInfo,
    SupplierItem,
    SupplierListResponse,
    SupplierDetailResponse,
    CategoryItem,
    CategoryListResponse,
    FeatureFlagResponse,
    CreatedResponse,
    ErrorResponse,
)

__all__ = [
    "PaginationInfo",
    "SupplierItem",
    "SupplierListResponse",
    "SupplierDetailResponse",
    "CategoryItem",
    "CategoryListResponse",
    "FeatureFlagResponse",
    "CreatedResponse",
    "ErrorResponse",
]

"""Pydantic schemas for API response envelopes.

Every endpoint answers with ``{"success": ..., ...}``. Request bodies are
validated with the form schemas in ``src.submissions.schemas``.
"""

from pydantic import BaseModel, Field
from typing import Any, Optional


class PaginationInfo(BaseModel):
    """Pagination metadata, camelCase on the wire."""
    page: int
    limit: int
    total: int
    totalPages: int
    hasNext: bool
    hasPrev: bool


class CategoryRef(BaseModel):
    id: str
    name: str
    slug: str


class SupplierItem(BaseModel):
    """Supplier as shown in listings."""
    id: str
    name: str
    slug: str
    category_id: Optional[str] = None
    category: Optional[CategoryRef] = None
    short_summary: Optional[str] = None
    description: Optional[str] = None
    website_url: Optional[str] = None
    location: Optional[str] = None
    service_areas: list[str] = Field(default_factory=list)
    featured: bool = False
    verified_business: bool = False
    verified_insurance: bool = False
    has_discount: bool = False
    discount_description: Optional[str] = None
    rating_average: float = 0
    rating_count: int = 0
    view_count: int = 0
    accepts_quotes: bool = True
    created_at: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class SupplierListResponse(BaseModel):
    """Listing endpoint envelope."""
    success: bool = True
    data: list[SupplierItem]
    pagination: PaginationInfo


class SupplierDetailResponse(BaseModel):
    success: bool = True
    data: dict[str, Any]


class CategoryItem(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    icon: Optional[str] = None
    supplier_count: int = 0


class CategoryListResponse(BaseModel):
    success: bool = True
    data: list[CategoryItem]


class FeatureFlagResponse(BaseModel):
    success: bool = True
    id: str
    enabled: bool


class CreatedResponse(BaseModel):
    """Result of a successful form submission."""
    success: bool = True
    data: dict[str, Any]
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Failure envelope; ``details`` maps field names to messages."""
    success: bool = False
    error: str
    details: Optional[dict[str, str]] = None

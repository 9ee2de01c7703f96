"""Pydantic schemas for supplier directory form payloads.

There is one schema per form. Validation failures are reported per field
with user-facing messages and are never sent to the network layer.
"""

import re
from datetime import date
from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar
from urllib.parse import urlparse
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError

from config.constants import MAX_SERVICE_AREAS, MAX_TAGS

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\d\s\-\+\(\)]+$")

FormErrors = Dict[str, str]
M = TypeVar("M", bound="FormModel")


def _check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise PydanticCustomError("email", "Please enter a valid email address")
    return value


def _check_phone(value: Optional[str]) -> Optional[str]:
    if value is not None and not PHONE_PATTERN.match(value):
        raise PydanticCustomError("phone", "Please enter a valid phone number")
    return value


def _unique_stripped(values: Any) -> Any:
    """Trim list entries and drop blanks and repeats."""
    if not isinstance(values, list):
        return values
    result = []
    for value in values:
        if isinstance(value, str):
            value = value.strip()
            if not value or value in result:
                continue
        result.append(value)
    return result


class FormModel(BaseModel):
    """Base for form payloads: trims strings, treats blank optionals as absent."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    # Field name -> message used for any error on that field
    field_messages: ClassVar[Dict[str, str]] = {}

    @model_validator(mode="before")
    @classmethod
    def _blank_optionals_to_none(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        cleaned = dict(data)
        for name, info in cls.model_fields.items():
            value = cleaned.get(name)
            if isinstance(value, str) and not value.strip() and not info.is_required():
                cleaned[name] = None
        return cleaned


class SupplierSubmission(FormModel):
    """Supplier profile submitted through the multi-step form."""

    field_messages: ClassVar[Dict[str, str]] = {
        "category_id": "Please select a category",
        "website_url": "Please enter a valid website URL",
    }

    name: str = Field(..., min_length=2, max_length=200, title="Company name")
    category_id: UUID = Field(..., title="Category")
    description: str = Field(..., min_length=50, max_length=2000, title="Description")
    short_summary: str = Field(..., min_length=10, max_length=300, title="Summary")
    website_url: str = Field(..., title="Website URL")
    contact_email: str = Field(..., title="Contact email")
    contact_phone: Optional[str] = Field(None, max_length=30, title="Phone")
    location: Optional[str] = Field(None, max_length=200, title="Location")
    service_areas: List[str] = Field(default_factory=list, max_length=MAX_SERVICE_AREAS, title="Service areas")
    founded_year: Optional[int] = Field(None, ge=1800, title="Founded year")
    employee_count: Optional[str] = Field(None, max_length=50, title="Employee count")
    pricing_model: Optional[str] = Field(None, max_length=100, title="Pricing model")
    has_discount: bool = False
    discount_description: Optional[str] = Field(None, max_length=500, title="Discount description")
    discount_code: Optional[str] = Field(None, max_length=50, title="Discount code")
    accepts_quotes: bool = True
    tags: List[str] = Field(default_factory=list, max_length=MAX_TAGS, title="Tags")

    @field_validator("tags", "service_areas", mode="before")
    @classmethod
    def _clean_lists(cls, value: Any) -> Any:
        if value is None:
            return []
        return _unique_stripped(value)

    @field_validator("tags")
    @classmethod
    def _tag_length(cls, value: List[str]) -> List[str]:
        for tag in value:
            if len(tag) > 50:
                raise PydanticCustomError("tag_too_long", "Tags must be 50 characters or fewer")
        return value

    @field_validator("website_url")
    @classmethod
    def _valid_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise PydanticCustomError("url", "Please enter a valid website URL")
        return value

    @field_validator("contact_email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("contact_phone")
    @classmethod
    def _valid_phone(cls, value: Optional[str]) -> Optional[str]:
        return _check_phone(value)

    @field_validator("founded_year")
    @classmethod
    def _not_in_future(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value > date.today().year:
            raise PydanticCustomError("future_year", "Founded year cannot be in the future")
        return value


class ReviewForm(FormModel):
    """Review left on a supplier profile."""

    supplier_id: UUID = Field(..., title="Supplier")
    rating: int = Field(..., ge=1, le=5, title="Rating")
    title: Optional[str] = Field(None, max_length=100, title="Title")
    content: str = Field(..., min_length=10, max_length=1000, title="Review")
    company_name: Optional[str] = Field(None, max_length=100, title="Company name")


class QuoteRequestForm(FormModel):
    """Quote request sent to a supplier."""

    supplier_id: UUID = Field(..., title="Supplier")
    requester_name: str = Field(..., min_length=2, max_length=100, title="Name")
    requester_email: str = Field(..., title="Email")
    company_name: Optional[str] = Field(None, max_length=100, title="Company name")
    phone: Optional[str] = Field(None, max_length=30, title="Phone")
    service_type: Optional[str] = Field(None, max_length=100, title="Service type")
    budget_range: Optional[str] = Field(None, max_length=50, title="Budget range")
    timeline: Optional[str] = Field(None, max_length=50, title="Timeline")
    location: Optional[str] = Field(None, max_length=200, title="Location")
    message: str = Field(..., min_length=10, max_length=2000, title="Message")

    @field_validator("requester_email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        return _check_email(value)

    @field_validator("phone")
    @classmethod
    def _valid_phone(cls, value: Optional[str]) -> Optional[str]:
        return _check_phone(value)


class ContactMessageForm(FormModel):
    """General contact message, optionally addressed to a supplier."""

    name: str = Field(..., min_length=2, max_length=200, title="Name")
    email: str = Field(..., title="Email")
    company: Optional[str] = Field(None, max_length=200, title="Company name")
    phone: Optional[str] = Field(None, max_length=30, title="Phone")
    subject: Optional[str] = Field(None, max_length=200, title="Subject")
    message: str = Field(..., min_length=10, max_length=2000, title="Message")
    supplier_id: Optional[UUID] = Field(None, title="Supplier")

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        return _check_email(value)


def _friendly_message(model: Type[FormModel], error: Dict[str, Any]) -> str:
    """Turn one pydantic error into the message shown next to the field."""
    loc = error.get("loc") or ()
    name = str(loc[0]) if loc else ""
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    info = model.model_fields.get(name)
    label = (info.title if info and info.title else name.replace("_", " ").capitalize()) or "Value"

    if error_type == "missing":
        return f"{label} is required"
    if name in model.field_messages:
        return model.field_messages[name]
    if error_type == "string_too_short":
        return f"{label} must be at least {ctx.get('min_length')} characters"
    if error_type == "string_too_long":
        return f"{label} too long (maximum {ctx.get('max_length')} characters)"
    if error_type == "too_long":
        return f"Maximum {ctx.get('max_length')} {label.lower()} allowed"
    if error_type in ("greater_than_equal", "less_than_equal") and info is not None:
        bounds = {type(m).__name__: m for m in info.metadata}
        low = getattr(bounds.get("Ge"), "ge", None)
        high = getattr(bounds.get("Le"), "le", None)
        if low is not None and high is not None:
            return f"{label} must be between {low} and {high}"
        if low is not None:
            return f"{label} must be at least {low}"
        return f"{label} must be at most {high}"
    return error.get("msg", "Invalid value")


def collect_errors(model: Type[FormModel], exc: ValidationError) -> FormErrors:
    """First message per field, keyed by field name."""
    errors: FormErrors = {}
    for error in exc.errors():
        loc = error.get("loc") or ()
        field_name = str(loc[0]) if loc else "__all__"
        errors.setdefault(field_name, _friendly_message(model, error))
    return errors


def validate_form(model: Type[M], payload: Dict[str, Any]) -> Tuple[Optional[M], FormErrors]:
    """
    Validate a form payload.

    Args:
        model: Schema class for the form.
        payload: Raw submitted values.

    Returns:
        (instance, {}) on success or (None, errors) on failure.
    """
    try:
        return model.model_validate(payload), {}
    except ValidationError as e:
        return None, collect_errors(model, e)

"""Submissions module: form schemas, the supplier wizard and slug helpers."""

from .schemas import (
    FormErrors,
    SupplierSubmission,
    ReviewForm,
    QuoteRequestForm,
    ContactMessageForm,
    validate_form,
)
from .wizard import (
    WizardStep,
    STEPS,
    get_step,
    validate_step,
    first_error_step,
    next_step,
    previous_step,
    submit,
)
from .slugs import create_slug, unique_slug

__all__ = [
    # Schemas
    "FormErrors",
    "SupplierSubmission",
    "ReviewForm",
    "QuoteRequestForm",
    "ContactMessageForm",
    "validate_form",
    # Wizard
    "WizardStep",
    "STEPS",
    "get_step",
    "validate_step",
    "first_error_step",
    "next_step",
    "previous_step",
    "submit",
    # Slugs
    "create_slug",
    "unique_slug",
]

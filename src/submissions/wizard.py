"""Multi-step supplier submission flow.

Each step owns a subset of the ``SupplierSubmission`` fields. A step is
valid when the full schema reports no errors on the fields that step
owns, so step checks and the final check can never disagree.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from config.logging_config import get_logger
from src.submissions.schemas import FormErrors, SupplierSubmission, validate_form

logger = get_logger("submissions")


@dataclass(frozen=True)
class WizardStep:
    """One page of the submission form."""

    number: int
    title: str
    description: str
    fields: Tuple[str, ...]


STEPS: List[WizardStep] = [
    WizardStep(1, "Basic Information", "Company name and category", ("name", "category_id", "short_summary")),
    WizardStep(
        2,
        "Contact & Location",
        "How to reach you",
        ("website_url", "contact_email", "contact_phone", "location", "service_areas"),
    ),
    WizardStep(
        3,
        "Services & Pricing",
        "Description and services",
        (
            "description",
            "founded_year",
            "employee_count",
            "pricing_model",
            "has_discount",
            "discount_description",
            "discount_code",
            "accepts_quotes",
            "tags",
        ),
    ),
    WizardStep(4, "Review & Submit", "Check your details and submit", ()),
]

FIRST_STEP = STEPS[0].number
LAST_STEP = STEPS[-1].number


def get_step(number: int) -> WizardStep:
    """Get a step by number, clamped into the valid range."""
    number = max(FIRST_STEP, min(LAST_STEP, number))
    return STEPS[number - 1]


def step_for_field(field_name: str) -> Optional[int]:
    for step in STEPS:
        if field_name in step.fields:
            return step.number
    return None


def validate_step(number: int, data: Dict[str, Any]) -> FormErrors:
    """Errors for the fields owned by one step."""
    step = get_step(number)
    _, errors = validate_form(SupplierSubmission, data)
    return {name: message for name, message in errors.items() if name in step.fields}


def first_error_step(errors: FormErrors) -> Optional[int]:
    """Earliest step holding any of the given errors."""
    steps = [step_for_field(name) for name in errors]
    steps = [number for number in steps if number is not None]
    return min(steps) if steps else None


def next_step(current: int, data: Dict[str, Any]) -> Tuple[int, FormErrors]:
    """
    Advance past the current step if its fields are valid.

    Returns:
        (step to show, errors for the current step)
    """
    errors = validate_step(current, data)
    if errors:
        return get_step(current).number, errors
    return get_step(current + 1).number, {}


def previous_step(current: int) -> int:
    return get_step(current - 1).number


def submit(data: Dict[str, Any]) -> Tuple[Optional[SupplierSubmission], FormErrors, Optional[int]]:
    """
    Validate the complete submission.

    Returns:
        (submission, errors, step to return to). On success the errors are
        empty and the step is None.
    """
    submission, errors = validate_form(SupplierSubmission, data)
    if submission is None:
        step = first_error_step(errors)
        logger.info(f"Submission rejected with {len(errors)} field errors, returning to step {step}")
        return None, errors, step
    return submission, {}, None

"""Tests for the multi-step supplier submission flow."""

import pytest

from src.submissions import wizard


@pytest.fixture
def complete_data():
    return {
        "name": "BoxMaster Packing",
        "category_id": "3f1c2a8e-5b7d-4c1e-9a2f-1d6e8b4c7a01",
        "short_summary": "Boxes, tape and wrap delivered",
        "description": "Double-walled boxes, bubble wrap and wardrobe cartons delivered next day across the UK.",
        "website_url": "https://boxmaster.example.com",
        "contact_email": "sales@boxmaster.example.com",
        "tags": ["Packing Materials"],
    }


class TestSteps:
    """Tests for step lookup."""

    def test_four_steps(self):
        assert [step.title for step in wizard.STEPS] == [
            "Basic Information",
            "Contact & Location",
            "Services & Pricing",
            "Review & Submit",
        ]
        assert wizard.FIRST_STEP == 1
        assert wizard.LAST_STEP == 4

    @pytest.mark.parametrize("number,expected", [(-3, 1), (0, 1), (2, 2), (4, 4), (9, 4)])
    def test_get_step_clamps(self, number, expected):
        assert wizard.get_step(number).number == expected

    def test_step_for_field(self):
        assert wizard.step_for_field("name") == 1
        assert wizard.step_for_field("contact_email") == 2
        assert wizard.step_for_field("tags") == 3
        assert wizard.step_for_field("unknown") is None

    def test_every_schema_field_belongs_to_one_step(self):
        owned = [name for step in wizard.STEPS for name in step.fields]
        assert len(owned) == len(set(owned))
        assert set(owned) == set(wizard.SupplierSubmission.model_fields)


class TestNavigation:
    """Tests for moving between steps."""

    def test_next_step_blocked_by_errors(self):
        step, errors = wizard.next_step(1, {"name": "X"})

        assert step == 1
        assert set(errors) == {"name", "category_id", "short_summary"}

    def test_next_step_ignores_later_fields(self, complete_data):
        """Test that only the current step's fields gate navigation."""
        data = dict(complete_data, contact_email="", description="")

        step, errors = wizard.next_step(1, data)

        assert step == 2
        assert errors == {}

    def test_next_step_from_last_stays(self, complete_data):
        step, errors = wizard.next_step(4, complete_data)
        assert step == 4
        assert errors == {}

    def test_previous_step(self):
        assert wizard.previous_step(3) == 2
        assert wizard.previous_step(1) == 1

    def test_review_step_has_no_errors(self):
        assert wizard.validate_step(4, {}) == {}


class TestSubmit:
    """Tests for the final submit."""

    def test_submit_valid(self, complete_data):
        submission, errors, step = wizard.submit(complete_data)

        assert submission is not None
        assert submission.name == "BoxMaster Packing"
        assert errors == {}
        assert step is None

    def test_submit_returns_to_earliest_failing_step(self, complete_data):
        data = dict(complete_data, description="short", contact_email="nope")

        submission, errors, step = wizard.submit(data)

        assert submission is None
        assert set(errors) == {"description", "contact_email"}
        assert step == 2

    def test_first_error_step(self):
        assert wizard.first_error_step({"tags": "x", "short_summary": "y"}) == 1
        assert wizard.first_error_step({}) is None
        assert wizard.first_error_step({"__all__": "x"}) is None

# -*- coding: utf-8 -*-
"""
Tests for the validation engine.

Tests cover:
- Required rule and empty sentinels
- Rule order (required, minLength, maxLength, format)
- Email and phone formats
- Section validation
"""

import pytest

from models.form_schema import FieldType, FormField
from services.validation import (
    ValidationFactory,
    ValidationStrategy,
    is_empty_value,
    validate_field,
    validate_section,
)
from tests.factories import make_field


def field(field_id="name", field_type="text", label="Name", required=False, **extra):
    return FormField.from_dict(make_field(field_id, field_type, label, required, **extra))


class TestEmptyValues:
    """Test the empty sentinel of each value shape."""

    @pytest.mark.parametrize("value", [None, "", []])
    def test_empty(self, value):
        assert is_empty_value(value)

    @pytest.mark.parametrize("value", ["a", " ", ["x"], True, False])
    def test_not_empty(self, value):
        assert not is_empty_value(value)


class TestRequiredRule:
    """Test required fields."""

    @pytest.mark.parametrize("value", [None, "", []])
    def test_required_and_empty(self, value):
        error = validate_field(field(required=True), value)
        assert error is not None
        assert error.field_id == "name"
        assert error.message == "Name is required"

    def test_required_and_filled(self):
        assert validate_field(field(required=True), "Jane") is None

    def test_custom_message(self):
        form_field = field(required=True, validation={"message": "Tell us your name"})
        assert validate_field(form_field, "").message == "Tell us your name"

    def test_optional_and_empty(self):
        assert validate_field(field(required=False), None) is None

    def test_required_choice_list(self):
        form_field = field("langs", "checkbox", "Languages", True, options=[
            {"value": "py", "label": "Python"},
        ])
        assert validate_field(form_field, []) is not None
        assert validate_field(form_field, ["py"]) is None

    def test_required_flag_untouched(self):
        form_field = field("terms", "checkbox", "Terms", True)
        assert validate_field(form_field, None) is not None
        assert validate_field(form_field, True) is None


class TestLengthRules:
    """Test minLength / maxLength."""

    def test_too_short(self):
        error = validate_field(field(minLength=3), "ab")
        assert error.message == "Name must be at least 3 characters"

    def test_too_long(self):
        error = validate_field(field(maxLength=4), "abcde")
        assert error.message == "Name must be at most 4 characters"

    def test_within_bounds(self):
        assert validate_field(field(minLength=2, maxLength=4), "abc") is None

    def test_length_not_checked_on_empty_optional(self):
        assert validate_field(field(minLength=3), "") is None

    def test_first_failure_only(self):
        # Too short and not an email: only the length error is reported
        form_field = field("email", "email", "Email", minLength=10)
        error = validate_field(form_field, "a@b")
        assert error.message == "Email must be at least 10 characters"


class TestFormats:
    """Test email and phone formats."""

    @pytest.mark.parametrize("value", ["jane@example.com", "a.b@c.io"])
    def test_valid_email(self, value):
        assert validate_field(field("email", "email", "Email"), value) is None

    @pytest.mark.parametrize("value", ["jane", "jane@example", "ja ne@example.com", "@example.com"])
    def test_invalid_email(self, value):
        error = validate_field(field("email", "email", "Email"), value)
        assert error.message == "Please enter a valid email address"

    @pytest.mark.parametrize("value", ["9876543210", "+91 98765-43210", "(040) 1234567"])
    def test_valid_phone(self, value):
        assert validate_field(field("phone", "tel", "Phone"), value) is None

    @pytest.mark.parametrize("value", ["12345", "98765abc10", "++9876543210"])
    def test_invalid_phone(self, value):
        error = validate_field(field("phone", "tel", "Phone"), value)
        assert error.message == "Please enter a valid phone number"

    def test_text_has_no_format(self):
        assert validate_field(field(), "anything at all") is None


class TestSectionValidation:
    """Test section validation."""

    def test_collects_one_error_per_failing_field(self):
        fields = [
            field("a", required=True, label="A"),
            field("b", "email", "B", required=True),
            field("c", label="C"),
        ]
        result = validate_section(fields, {"b": "not-an-email"})

        assert not result.is_valid
        assert result.error_count == 2
        assert [e.field_id for e in result.errors] == ["a", "b"]

    def test_valid_section(self):
        fields = [field("a", required=True), field("b")]
        result = validate_section(fields, {"a": "x"})
        assert result.is_valid
        assert result.errors == []

    def test_error_for(self):
        result = validate_section([field("a", required=True)], {})
        assert result.error_for("a") is not None
        assert result.error_for("b") is None

    def test_store_not_mutated(self):
        store = {"a": ["x"]}
        validate_section([field("a", "checkbox", options=[{"value": "x", "label": "X"}])], store)
        assert store == {"a": ["x"]}


class TestValidationFactory:
    """Test rule registration."""

    def test_custom_format_rule(self):
        class NoDigits(ValidationStrategy):
            def check(self, form_field, value):
                if isinstance(value, str) and any(ch.isdigit() for ch in value):
                    return "No digits"
                return None

        factory = ValidationFactory()
        factory.register_validator(FieldType.TEXT, NoDigits())

        assert factory.validate_field(field(), "abc1").message == "No digits"
        assert factory.validate_field(field(), "abc") is None

    def test_rule_order(self):
        rules = ValidationFactory().rules_for(field("e", "email", "E"))
        assert [type(r).__name__ for r in rules] == [
            "RequiredRule", "MinLengthRule", "MaxLengthRule", "EmailFormatRule"
        ]

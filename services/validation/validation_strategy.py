# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Pluggable rules for form field values.

Each rule inspects one field's stored value and returns a failure message
or None. Rules are pure: no I/O and no mutation of the value.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from models.form_schema import FieldValue, FormField
from services.translation_manager import tr


@dataclass(frozen=True)
class ValidationError:
    """A field id paired with a human-readable failure message."""
    field_id: str
    message: str


@dataclass
class SectionValidationResult:
    """Result of validating a section: at most one error per field, in declaration order."""
    is_valid: bool
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def error_for(self, field_id: str) -> Optional[ValidationError]:
        """Get the error for a field, if any."""
        for error in self.errors:
            if error.field_id == field_id:
                return error
        return None

    @classmethod
    def valid(cls) -> "SectionValidationResult":
        return cls(is_valid=True, errors=[])


def is_empty_value(value: Optional[FieldValue]) -> bool:
    """
    Check whether a value counts as empty for the required rule.

    Empty means missing, None, "" or an empty list. False is a real answer.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return len(value) == 0
    return False


class ValidationStrategy(ABC):
    """
    Abstract base class for field validation rules.

    Each strategy implements one constraint.
    """

    @abstractmethod
    def check(self, form_field: FormField, value: Optional[FieldValue]) -> Optional[str]:
        """
        Check a value against this rule.

        Args:
            form_field: Field definition carrying the constraint
            value: Current stored value (None when never touched)

        Returns:
            Failure message, or None if the rule passes
        """
        pass

    def is_valid(self, form_field: FormField, value: Optional[FieldValue]) -> bool:
        return self.check(form_field, value) is None


class RequiredRule(ValidationStrategy):
    """Fails when a required field holds an empty value."""

    def check(self, form_field, value):
        if form_field.required and is_empty_value(value):
            return form_field.validation_message or tr("validation.required", label=form_field.label)
        return None


class StringRule(ValidationStrategy):
    """Base for rules that only apply to non-empty string values."""

    def check(self, form_field, value):
        if not isinstance(value, str) or not value:
            return None
        return self.check_string(form_field, value)

    @abstractmethod
    def check_string(self, form_field: FormField, value: str) -> Optional[str]:
        pass


class MinLengthRule(StringRule):

    def check_string(self, form_field, value):
        if form_field.min_length is not None and len(value) < form_field.min_length:
            return tr("validation.min_length", label=form_field.label, min=form_field.min_length)
        return None


class MaxLengthRule(StringRule):

    def check_string(self, form_field, value):
        if form_field.max_length is not None and len(value) > form_field.max_length:
            return tr("validation.max_length", label=form_field.label, max=form_field.max_length)
        return None


class PatternRule(StringRule):
    """Fails when the string does not match a full-string pattern."""

    def __init__(self, pattern: str, message_key: str):
        self.pattern = re.compile(pattern)
        self.message_key = message_key

    def check_string(self, form_field, value):
        if not self.pattern.match(value):
            return tr(self.message_key)
        return None


class EmailFormatRule(PatternRule):

    def __init__(self):
        super().__init__(r"^[^\s@]+@[^\s@]+\.[^\s@]+$", "validation.email")


class PhoneFormatRule(PatternRule):
    """Loose phone pattern: optional leading '+', then 7+ digits, spaces, hyphens or parentheses."""

    def __init__(self):
        super().__init__(r"^\+?[0-9\s\-()]{7,}$", "validation.phone")

# -*- coding: utf-8 -*-
"""
Validation Factory - Builds the ordered rule chain for each field type.

Provides a central point for creating and managing validation strategies.
"""

from typing import Dict, List, Mapping, Optional, Sequence

from models.form_schema import FieldType, FieldValue, FormField
from .validation_strategy import (
    EmailFormatRule,
    MaxLengthRule,
    MinLengthRule,
    PhoneFormatRule,
    RequiredRule,
    SectionValidationResult,
    ValidationError,
    ValidationStrategy,
)


class ValidationFactory:
    """
    Registry of rule chains keyed by field type.

    Every chain starts with the required rule, then minLength, maxLength
    and finally the type's format rule (if any). Evaluation stops at the
    first failing rule.
    """

    def __init__(self):
        """Initialize the validation factory."""
        self._format_rules: Dict[FieldType, ValidationStrategy] = {}
        self._required_rule = RequiredRule()
        self._length_rules: List[ValidationStrategy] = [MinLengthRule(), MaxLengthRule()]
        self._register_default_validators()

    def _register_default_validators(self):
        """Register built-in format rules."""
        self.register_validator(FieldType.EMAIL, EmailFormatRule())
        self.register_validator(FieldType.TELEPHONE, PhoneFormatRule())

    def register_validator(self, field_type: FieldType, validator: ValidationStrategy):
        """
        Register the format rule for a field type.

        Args:
            field_type: Field type the rule applies to
            validator: ValidationStrategy instance
        """
        self._format_rules[field_type] = validator

    def get_validator(self, field_type: FieldType) -> Optional[ValidationStrategy]:
        return self._format_rules.get(field_type)

    def rules_for(self, form_field: FormField) -> List[ValidationStrategy]:
        """Get the ordered rule chain for a field."""
        rules = [self._required_rule, *self._length_rules]
        format_rule = self.get_validator(form_field.field_type)
        if format_rule:
            rules.append(format_rule)
        return rules

    def validate_field(self, form_field: FormField,
                       value: Optional[FieldValue]) -> Optional[ValidationError]:
        """
        Validate one field's value.

        Returns:
            The first failing rule's error, or None
        """
        for rule in self.rules_for(form_field):
            message = rule.check(form_field, value)
            if message is not None:
                return ValidationError(field_id=form_field.field_id, message=message)
        return None

    def validate_section(self, fields: Sequence[FormField],
                         store: Mapping[str, FieldValue]) -> SectionValidationResult:
        """
        Validate every field of a section against the value store.

        Returns:
            SectionValidationResult with one error per failing field
        """
        errors = []
        for form_field in fields:
            error = self.validate_field(form_field, store.get(form_field.field_id))
            if error:
                errors.append(error)

        return SectionValidationResult(is_valid=len(errors) == 0, errors=errors)


_default_factory = ValidationFactory()


def validate_field(form_field: FormField, value: Optional[FieldValue]) -> Optional[ValidationError]:
    """Validate a single field with the default rule chains."""
    return _default_factory.validate_field(form_field, value)


def validate_section(fields: Sequence[FormField],
                     store: Mapping[str, FieldValue]) -> SectionValidationResult:
    """Validate a section with the default rule chains."""
    return _default_factory.validate_section(fields, store)

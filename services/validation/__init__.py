# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy,
    ValidationError,
    SectionValidationResult,
    is_empty_value,
)
from .validation_factory import ValidationFactory, validate_field, validate_section

__all__ = [
    'ValidationStrategy',
    'ValidationError',
    'SectionValidationResult',
    'is_empty_value',
    'ValidationFactory',
    'validate_field',
    'validate_section',
]

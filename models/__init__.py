# -*- coding: utf-8 -*-
"""
Dynaform Data Models
"""

from .form_schema import (
    FieldType,
    FieldValue,
    FieldOption,
    FormField,
    FormSection,
    FormSchema,
    ValueKind,
)
from .identity import Identity

__all__ = [
    "FieldType",
    "FieldValue",
    "FieldOption",
    "FormField",
    "FormSection",
    "FormSchema",
    "ValueKind",
    "Identity",
]

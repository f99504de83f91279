# -*- coding: utf-8 -*-
"""
Wizard Context - wizard state and the accumulated value store.

Provides unified interface for:
- Value store (field id -> stored value)
- Current section index and lifecycle status
- Currently displayed validation errors
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
import uuid

from models.form_schema import FieldValue
from services.validation import ValidationError


class WizardStatus(Enum):
    """Lifecycle of a wizard instance."""
    LOADING = "loading"
    READY = "ready"
    SUBMITTED = "submitted"
    ERROR = "error"


def _copy_value(value: FieldValue) -> FieldValue:
    # Lists are copied so callers never share the stored instance
    return list(value) if isinstance(value, (list, tuple)) else value


class WizardContext:
    """
    State of one wizard session.

    Keys enter the value store only when a field is actually edited, so an
    absent key means "never touched".
    """

    def __init__(self, user_id: Optional[str] = None):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.status: WizardStatus = WizardStatus.LOADING
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.current_section_index: int = 0
        self.user_id: Optional[str] = user_id
        self.error_reason: Optional[str] = None

        # Section completion tracking
        self.completed_sections: set = set()

        # Value store
        self.values: Dict[str, FieldValue] = {}

        # Errors of the last validated section
        self.errors: List[ValidationError] = []

    def mark_section_completed(self, section_index: int):
        """Mark a section as completed."""
        self.completed_sections.add(section_index)
        self.updated_at = datetime.now()

    def is_section_completed(self, section_index: int) -> bool:
        return section_index in self.completed_sections

    def set_value(self, field_id: str, value: FieldValue):
        """Write a value into the store."""
        self.values[field_id] = _copy_value(value)
        self.updated_at = datetime.now()

    def get_value(self, field_id: str, default: Any = None) -> Any:
        """Get a value from the store."""
        if field_id not in self.values:
            return default
        return _copy_value(self.values[field_id])

    def snapshot(self) -> Dict[str, FieldValue]:
        """Independent copy of the value store."""
        return {k: _copy_value(v) for k, v in self.values.items()}

    def set_errors(self, errors: List[ValidationError]):
        self.errors = list(errors)

    def clear_errors(self):
        self.errors = []

    def reset(self):
        """Discard values, errors and progress for a fresh start."""
        self.values = {}
        self.errors = []
        self.completed_sections = set()
        self.current_section_index = 0
        self.error_reason = None
        self.updated_at = datetime.now()

# -*- coding: utf-8 -*-
"""
Form schema entity models.

A FormSchema is fetched once per identity and is read-only afterwards, so
every model here is a frozen dataclass holding tuples.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


# Canonical stored value of a field: text, ordered selection, or flag.
FieldValue = Union[str, List[str], bool]


class FieldType(Enum):
    """Type tag governing a field's control and stored-value shape."""
    TEXT = "text"
    EMAIL = "email"
    TEXTAREA = "textarea"
    DATE = "date"
    TELEPHONE = "tel"
    DROPDOWN = "dropdown"
    RADIO = "radio"
    CHECKBOX = "checkbox"

    @classmethod
    def parse(cls, tag: str) -> "FieldType":
        """Resolve a wire type tag; 'telephone' is accepted for 'tel'."""
        normalized = (tag or "").strip().lower()
        if normalized == "telephone":
            normalized = cls.TELEPHONE.value
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unsupported field type: {tag!r}")


class ValueKind(Enum):
    """Closed variant of stored values, resolved once from the field."""
    TEXT = "text"
    CHOICES = "choices"
    FLAG = "flag"


@dataclass(frozen=True)
class FieldOption:
    """One selectable option of a choice-bearing field."""
    value: str
    label: str
    data_test_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldOption":
        return cls(
            value=str(data.get("value", "")),
            label=str(data.get("label", data.get("value", ""))),
            data_test_id=data.get("dataTestId"),
        )


@dataclass(frozen=True)
class FormField:
    """
    A single data-collection unit.

    min_length/max_length constrain string values; min_value/max_value are
    the inclusive calendar bounds of date fields (ISO yyyy-mm-dd).
    """
    field_id: str
    field_type: FieldType
    label: str
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    options: Tuple[FieldOption, ...] = ()
    validation_message: Optional[str] = None
    placeholder: Optional[str] = None
    data_test_id: Optional[str] = None
    min_value: Optional[str] = None
    max_value: Optional[str] = None

    @property
    def has_options(self) -> bool:
        return len(self.options) > 0

    @property
    def value_kind(self) -> ValueKind:
        """Stored-value shape for this field."""
        if self.field_type == FieldType.CHECKBOX:
            return ValueKind.CHOICES if self.has_options else ValueKind.FLAG
        return ValueKind.TEXT

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormField":
        """Create FormField from its wire representation."""
        field_id = data.get("fieldId")
        if not field_id:
            raise ValueError("Field is missing 'fieldId'")

        validation = data.get("validation") or {}
        return cls(
            field_id=str(field_id),
            field_type=FieldType.parse(data.get("type", "")),
            label=str(data.get("label", field_id)),
            required=bool(data.get("required", False)),
            min_length=_optional_int(data.get("minLength")),
            max_length=_optional_int(data.get("maxLength")),
            options=tuple(FieldOption.from_dict(o) for o in data.get("options") or []),
            validation_message=validation.get("message") or None,
            placeholder=data.get("placeholder"),
            data_test_id=data.get("dataTestId"),
            min_value=data.get("min"),
            max_value=data.get("max"),
        )


@dataclass(frozen=True)
class FormSection:
    """One step of the wizard, grouping related fields."""
    section_id: Union[int, str]
    title: str
    description: str = ""
    fields: Tuple[FormField, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormSection":
        return cls(
            section_id=data.get("sectionId", ""),
            title=str(data.get("title", "")),
            description=str(data.get("description") or ""),
            fields=tuple(FormField.from_dict(f) for f in data.get("fields") or []),
        )


@dataclass(frozen=True)
class FormSchema:
    """Declarative description of a form's sections, fields, and constraints."""
    title: str
    sections: Tuple[FormSection, ...] = ()
    form_id: Optional[str] = None
    version: Optional[str] = None

    def __post_init__(self):
        seen = set()
        for section in self.sections:
            for form_field in section.fields:
                if form_field.field_id in seen:
                    raise ValueError(f"Duplicate field id: {form_field.field_id}")
                seen.add(form_field.field_id)

    @property
    def section_count(self) -> int:
        return len(self.sections)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def field_ids(self) -> List[str]:
        """All field ids in declaration order across sections."""
        return [f.field_id for s in self.sections for f in s.fields]

    def find_field(self, field_id: str) -> Optional[FormField]:
        for section in self.sections:
            for form_field in section.fields:
                if form_field.field_id == field_id:
                    return form_field
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormSchema":
        """
        Create FormSchema from the get-form response.

        Accepts either the full response ({"message", "form": {...}}) or the
        bare form object.
        """
        form = data.get("form", data)
        if not isinstance(form, dict):
            raise ValueError("Form payload is not an object")

        return cls(
            title=str(form.get("formTitle", form.get("title", ""))),
            sections=tuple(FormSection.from_dict(s) for s in form.get("sections") or []),
            form_id=form.get("formId"),
            version=form.get("version"),
        )


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    return int(value)

# -*- coding: utf-8 -*-
"""
Field Renderers - one editable control per field type tag.

Every renderer owns three things for its type:
- the control it builds (create_control)
- how a raw user edit becomes the canonical stored value (normalize)
- how the stored value is shown in the control (display_value)

Renderers never write the value store. A user edit is reported through
value_changed(field_id, value); the owner forwards it to the controller
and calls render() with whatever was stored. Programmatic rendering runs
with the control's signals blocked, so showing a field never counts as
touching it.
"""

from abc import ABCMeta, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from PyQt5.QtCore import QDate, pyqtSignal
from PyQt5.QtWidgets import (
    QButtonGroup, QCheckBox, QComboBox, QDateEdit, QHBoxLayout, QLabel,
    QLineEdit, QPlainTextEdit, QRadioButton, QVBoxLayout, QWidget
)

from app.config import Config
from models.form_schema import FieldType, FieldValue, FormField, ValueKind
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


# Combine PyQt5 metaclass with ABC metaclass
class ABCQWidgetMeta(type(QWidget), ABCMeta):
    """Metaclass that combines PyQt5's metaclass with ABC."""
    pass


class FieldRenderer(QWidget, metaclass=ABCQWidgetMeta):
    """
    Abstract base class for field renderers.

    Signals:
        value_changed(str, object): field id and the normalized value of a
            user edit
    """

    value_changed = pyqtSignal(str, object)

    # Renderers that print the field label themselves (single checkbox)
    owns_label = False

    def __init__(self, form_field: FormField, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.field = form_field
        self._stored: Optional[FieldValue] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)
        self.control = self.create_control()
        layout.addWidget(self.control)
        if form_field.data_test_id:
            self.control.setObjectName(form_field.data_test_id)

    @property
    def field_id(self) -> str:
        return self.field.field_id

    @property
    def stored_value(self) -> Optional[FieldValue]:
        """Value last passed to render(); None when the field was never touched."""
        return self._stored

    # =========================================================================
    # Abstract Methods - Must be implemented by subclasses
    # =========================================================================

    @abstractmethod
    def create_control(self) -> QWidget:
        """Build the editable control and connect its user-edit signals."""
        pass

    @abstractmethod
    def apply_display(self, display: Any):
        """Push a display value into the control."""
        pass

    # =========================================================================
    # Value mapping
    # =========================================================================

    def default_value(self) -> FieldValue:
        """Value shown for a field with no store entry."""
        return ""

    def normalize(self, raw: Any) -> FieldValue:
        """Turn a raw control value into the canonical stored value."""
        return raw

    def display_value(self, stored: Optional[FieldValue]) -> Any:
        """Derive what the control shows from the stored value."""
        if stored is None:
            return self.default_value()
        return stored

    def label_hint(self) -> str:
        """Suffix appended to the field label."""
        return ""

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, stored: Optional[FieldValue]):
        """Show the stored value without emitting value_changed."""
        self._stored = stored
        blockers = self.signal_sources()
        previous = [w.blockSignals(True) for w in blockers]
        try:
            self.apply_display(self.display_value(stored))
        finally:
            for widget, was_blocked in zip(blockers, previous):
                widget.blockSignals(was_blocked)

    def signal_sources(self) -> List[QWidget]:
        """Widgets whose signals must be blocked while rendering."""
        return [self.control]

    def set_error(self, has_error: bool):
        """Toggle the error style of the control."""
        for widget in self.signal_sources():
            widget.setProperty("error", "true" if has_error else "false")
            widget.style().unpolish(widget)
            widget.style().polish(widget)

    def focus_widget(self) -> QWidget:
        return self.control

    def focus_input(self):
        """Move keyboard focus to the control."""
        self.focus_widget().setFocus()

    def _report(self, raw: Any):
        value = self.normalize(raw)
        logger.debug(f"Edit {self.field_id}: {raw!r} -> {value!r}")
        self.value_changed.emit(self.field_id, value)


# =============================================================================
# Text-like renderers
# =============================================================================

class TextFieldRenderer(FieldRenderer):
    """Single-line text; raw input stored verbatim."""

    def create_control(self) -> QWidget:
        line_edit = QLineEdit()
        if self.field.placeholder:
            line_edit.setPlaceholderText(self.field.placeholder)
        if self.field.max_length:
            line_edit.setMaxLength(self.field.max_length)
        line_edit.textEdited.connect(self._report)
        return line_edit

    def apply_display(self, display: Any):
        text = str(display)
        # Only touch the control when needed so the cursor stays put
        if self.control.text() != text:
            self.control.setText(text)


class EmailFieldRenderer(TextFieldRenderer):
    """Email address; format is checked by validation, not by the control."""


class TextAreaFieldRenderer(FieldRenderer):
    """Multi-line text with a length indicator when maxLength is set."""

    def __init__(self, form_field: FormField, parent: Optional[QWidget] = None):
        super().__init__(form_field, parent)
        self.counter_label = None
        if form_field.max_length:
            self.counter_label = QLabel()
            self.counter_label.setObjectName("hint")
            self.layout().addWidget(self.counter_label)
            self._update_counter("")

    def create_control(self) -> QWidget:
        text_edit = QPlainTextEdit()
        if self.field.placeholder:
            text_edit.setPlaceholderText(self.field.placeholder)
        text_edit.setMinimumHeight(110)
        # textChanged also fires on setPlainText; render() blocks it
        text_edit.textChanged.connect(lambda: self._report(text_edit.toPlainText()))
        return text_edit

    def apply_display(self, display: Any):
        text = str(display)
        if self.control.toPlainText() != text:
            self.control.setPlainText(text)
        self._update_counter(text)

    def _update_counter(self, text: str):
        if self.counter_label is not None:
            self.counter_label.setText(
                tr("field.char_count", count=len(text), max=self.field.max_length)
            )


class TelephoneFieldRenderer(FieldRenderer):
    """
    Phone number shown with a fixed regional prefix.

    The store holds the number without the prefix; the control always shows
    it with the prefix.
    """

    def __init__(self, form_field: FormField, parent: Optional[QWidget] = None,
                 prefix: Optional[str] = None):
        self.prefix = prefix if prefix is not None else Config.PHONE_PREFIX
        super().__init__(form_field, parent)

    def create_control(self) -> QWidget:
        line_edit = QLineEdit()
        line_edit.setPlaceholderText(tr("field.phone_placeholder", prefix=self.prefix))
        if self.field.max_length:
            line_edit.setMaxLength(self.field.max_length + len(self.prefix))
        line_edit.textEdited.connect(self._report)
        return line_edit

    def normalize(self, raw: Any) -> FieldValue:
        text = str(raw)
        if text.startswith(self.prefix):
            return text[len(self.prefix):]
        return text

    def display_value(self, stored: Optional[FieldValue]) -> Any:
        text = str(stored) if stored else ""
        if text.startswith(self.prefix):
            return text
        return f"{self.prefix}{text}"

    def apply_display(self, display: Any):
        if self.control.text() != display:
            self.control.setText(display)

    def label_hint(self) -> str:
        return tr("field.phone_hint", prefix=self.prefix)


class DateFieldRenderer(FieldRenderer):
    """
    Calendar date stored as yyyy-mm-dd.

    QDateEdit cannot be empty, so the day before the lower bound acts as the
    unset sentinel and is shown as blank text.
    """

    UNBOUNDED_MIN = QDate(1900, 1, 1)
    UNBOUNDED_MAX = QDate(2100, 12, 31)

    def create_control(self) -> QWidget:
        date_edit = QDateEdit()
        date_edit.setCalendarPopup(True)
        date_edit.setDisplayFormat(Config.QT_DATE_DISPLAY_FORMAT)

        lower = self._parse(self.field.min_value) or self.UNBOUNDED_MIN
        upper = self._parse(self.field.max_value) or self.UNBOUNDED_MAX
        self.sentinel = lower.addDays(-1)
        date_edit.setDateRange(self.sentinel, upper)
        date_edit.setSpecialValueText(" ")
        date_edit.setDate(self.sentinel)

        date_edit.dateChanged.connect(self._report)
        return date_edit

    @property
    def minimum_date(self) -> QDate:
        return self.sentinel.addDays(1)

    @property
    def maximum_date(self) -> QDate:
        return self.control.maximumDate()

    def normalize(self, raw: Any) -> FieldValue:
        if not isinstance(raw, QDate) or not raw.isValid() or raw == self.sentinel:
            return ""
        return raw.toString(Config.QT_DATE_FORMAT)

    def apply_display(self, display: Any):
        date = self._parse(display)
        if date is None or date < self.minimum_date or date > self.maximum_date:
            date = self.sentinel
        self.control.setDate(date)

    def label_hint(self) -> str:
        return tr("field.date_hint")

    @staticmethod
    def _parse(value: Any) -> Optional[QDate]:
        if not value:
            return None
        date = QDate.fromString(str(value), Config.QT_DATE_FORMAT)
        return date if date.isValid() else None


# =============================================================================
# Choice renderers
# =============================================================================

class DropdownFieldRenderer(FieldRenderer):
    """Single choice from a list; the placeholder entry maps to ""."""

    def create_control(self) -> QWidget:
        combo = QComboBox()
        combo.addItem(tr("field.select_option"), "")
        for option in self.field.options:
            combo.addItem(option.label, option.value)
        combo.activated.connect(lambda index: self._report(combo.itemData(index)))
        return combo

    def normalize(self, raw: Any) -> FieldValue:
        return "" if raw is None else str(raw)

    def apply_display(self, display: Any):
        index = self.control.findData(display)
        self.control.setCurrentIndex(index if index >= 0 else 0)


class RadioFieldRenderer(FieldRenderer):
    """Single choice shown as exclusive radio buttons; unset is ""."""

    def create_control(self) -> QWidget:
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.button_group = QButtonGroup(container)
        self.buttons: Dict[str, QRadioButton] = {}
        for option in self.field.options:
            button = QRadioButton(option.label)
            if option.data_test_id:
                button.setObjectName(option.data_test_id)
            button.clicked.connect(lambda checked, value=option.value: self._report(value))
            self.button_group.addButton(button)
            self.buttons[option.value] = button
            layout.addWidget(button)
        return container

    def signal_sources(self) -> List[QWidget]:
        return list(self.buttons.values())

    def apply_display(self, display: Any):
        # A non-exclusive group is the only way to clear every button
        self.button_group.setExclusive(False)
        for value, button in self.buttons.items():
            button.setChecked(value == display)
        self.button_group.setExclusive(True)

    def focus_widget(self) -> QWidget:
        return next(iter(self.buttons.values()), self.control)


class BooleanCheckboxRenderer(FieldRenderer):
    """Checkbox without options; stores a flag."""

    owns_label = True

    def create_control(self) -> QWidget:
        text = self.field.label + (" *" if self.field.required else "")
        checkbox = QCheckBox(text)
        checkbox.clicked.connect(self._report)
        return checkbox

    def default_value(self) -> FieldValue:
        return False

    def normalize(self, raw: Any) -> FieldValue:
        return bool(raw)

    def apply_display(self, display: Any):
        self.control.setChecked(bool(display))


class MultiChoiceCheckboxRenderer(FieldRenderer):
    """Checkbox group with options; stores the selected values in click order."""

    def create_control(self) -> QWidget:
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        self.boxes: Dict[str, QCheckBox] = {}
        for option in self.field.options:
            box = QCheckBox(option.label)
            if option.data_test_id:
                box.setObjectName(option.data_test_id)
            box.clicked.connect(
                lambda checked, value=option.value: self._report((value, checked))
            )
            self.boxes[option.value] = box
            layout.addWidget(box)
        return container

    def signal_sources(self) -> List[QWidget]:
        return list(self.boxes.values())

    def default_value(self) -> FieldValue:
        return []

    def normalize(self, raw: Any) -> FieldValue:
        value, checked = raw
        current = list(self._stored) if isinstance(self._stored, list) else []
        if checked:
            if value not in current:
                current.append(value)
            return current
        return [v for v in current if v != value]

    def apply_display(self, display: Any):
        selected = set(display) if isinstance(display, (list, tuple)) else set()
        for value, box in self.boxes.items():
            box.setChecked(value in selected)

    def focus_widget(self) -> QWidget:
        return next(iter(self.boxes.values()), self.control)


# =============================================================================
# Registry
# =============================================================================

def _checkbox_renderer(form_field: FormField, parent: Optional[QWidget] = None) -> FieldRenderer:
    if form_field.value_kind == ValueKind.CHOICES:
        return MultiChoiceCheckboxRenderer(form_field, parent)
    return BooleanCheckboxRenderer(form_field, parent)


RendererFactory = Callable[[FormField, Optional[QWidget]], FieldRenderer]

RENDERERS: Dict[FieldType, RendererFactory] = {
    FieldType.TEXT: TextFieldRenderer,
    FieldType.EMAIL: EmailFieldRenderer,
    FieldType.TEXTAREA: TextAreaFieldRenderer,
    FieldType.DATE: DateFieldRenderer,
    FieldType.TELEPHONE: TelephoneFieldRenderer,
    FieldType.DROPDOWN: DropdownFieldRenderer,
    FieldType.RADIO: RadioFieldRenderer,
    FieldType.CHECKBOX: _checkbox_renderer,
}


def register_renderer(field_type: FieldType, factory: RendererFactory):
    """Register (or replace) the renderer for a field type."""
    RENDERERS[field_type] = factory


def create_renderer(form_field: FormField, parent: Optional[QWidget] = None) -> FieldRenderer:
    """Build the renderer for a field's type tag."""
    factory = RENDERERS.get(form_field.field_type)
    if factory is None:
        raise ValueError(f"No renderer for field type: {form_field.field_type}")
    return factory(form_field, parent)

# -*- coding: utf-8 -*-
"""
Section View - renders one form section.

Lays out the section's fields in declaration order through their
renderers, shows inline errors and a section-level error summary, and
exposes Previous / Next / Submit. The view keeps no form state: it reports
user intents through its signals and re-renders from what the controller
hands back.
"""

from typing import Dict, List, Mapping, Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QFrame, QHBoxLayout, QLabel, QPushButton, QScrollArea, QVBoxLayout, QWidget
)

from models.form_schema import FieldValue, FormSection
from services.translation_manager import tr
from services.validation import ValidationError
from ui.components.wizard_footer import WizardFooter
from ui.wizards.dynamic_form.field_renderers import FieldRenderer, create_renderer
from ui.wizards.framework.error_boundary import with_error_boundary
from utils.logger import get_logger

logger = get_logger(__name__)


def summary_heading(count: int) -> str:
    if count == 1:
        return tr("errors.summary_one")
    return tr("errors.summary_many", count=count)


class FieldRow(QWidget):
    """Label, renderer and inline error of one field."""

    def __init__(self, renderer: FieldRenderer, parent=None):
        super().__init__(parent)
        self.renderer = renderer

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.label = None
        if not renderer.owns_label:
            form_field = renderer.field
            text = form_field.label + renderer.label_hint()
            if form_field.required:
                text += " *"
            self.label = QLabel(text)
            self.label.setStyleSheet("font-weight: 600;")
            self.label.setBuddy(renderer.focus_widget())
            layout.addWidget(self.label)

        layout.addWidget(renderer)

        self.error_label = QLabel()
        self.error_label.setObjectName("field_error")
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        layout.addWidget(self.error_label)

    def set_error(self, message: Optional[str]):
        self.error_label.setText(message or "")
        self.error_label.setVisible(bool(message))
        self.renderer.set_error(bool(message))


class SectionView(QWidget):
    """
    View of a single section.

    Signals:
        field_changed(str, object): field id and normalized value of a user edit
        next_requested: Next clicked
        previous_requested: Previous clicked
        submit_requested: Submit clicked
    """

    field_changed = pyqtSignal(str, object)
    next_requested = pyqtSignal()
    previous_requested = pyqtSignal()
    submit_requested = pyqtSignal()

    def __init__(self, section: FormSection, section_number: int = 1, parent=None):
        super().__init__(parent)
        self.section = section
        self.section_number = section_number
        self.rows: Dict[str, FieldRow] = {}
        self._setup_ui()

    def _setup_ui(self):
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.NoFrame)
        outer.addWidget(self.scroll_area)

        card = QFrame()
        card.setObjectName("section_card")
        layout = QVBoxLayout(card)
        layout.setContentsMargins(28, 24, 28, 24)
        layout.setSpacing(20)

        # Header
        number_label = QLabel(tr("wizard.section_number", number=self.section_number))
        number_label.setObjectName("hint")
        layout.addWidget(number_label)

        self.title_label = QLabel(self.section.title)
        self.title_label.setStyleSheet("font-size: 20px; font-weight: 700;")
        self.title_label.setWordWrap(True)
        layout.addWidget(self.title_label)

        if self.section.description:
            description = QLabel(self.section.description)
            description.setObjectName("hint")
            description.setWordWrap(True)
            layout.addWidget(description)

        # Fields
        for form_field in self.section.fields:
            renderer = create_renderer(form_field)
            renderer.value_changed.connect(self._on_field_changed)
            row = FieldRow(renderer)
            self.rows[form_field.field_id] = row
            layout.addWidget(row)

        layout.addStretch()

        # Error summary
        self.summary_frame = QFrame()
        self.summary_frame.setObjectName("error_summary")
        self.summary_layout = QVBoxLayout(self.summary_frame)
        self.summary_layout.setContentsMargins(16, 12, 16, 12)
        self.summary_layout.setSpacing(6)
        self.summary_heading = QLabel()
        self.summary_heading.setStyleSheet("font-weight: 600;")
        self.summary_layout.addWidget(self.summary_heading)
        self.summary_items: List[QWidget] = []
        self.summary_frame.hide()
        layout.addWidget(self.summary_frame)

        # Navigation
        self.footer = WizardFooter()
        self.footer.previous_clicked.connect(self.previous_requested.emit)
        self.footer.next_clicked.connect(self.next_requested.emit)
        self.footer.submit_clicked.connect(self.submit_requested.emit)
        layout.addWidget(self.footer)

        self.scroll_area.setWidget(card)

    # =========================================================================
    # Rendering
    # =========================================================================

    def renderer(self, field_id: str) -> Optional[FieldRenderer]:
        row = self.rows.get(field_id)
        return row.renderer if row else None

    def render(self, values: Mapping[str, FieldValue]):
        """Render every field from the store; absent keys render as defaults."""
        for field_id, row in self.rows.items():
            row.renderer.render(values.get(field_id))

    def render_field(self, field_id: str, value: Optional[FieldValue]):
        renderer = self.renderer(field_id)
        if renderer is not None:
            renderer.render(value)

    def set_navigation(self, is_first: bool, is_last: bool):
        self.footer.set_position(is_first, is_last)

    def show_errors(self, errors: List[ValidationError]):
        """Replace inline errors and the summary with the given errors."""
        by_field = {e.field_id: e.message for e in errors}
        for field_id, row in self.rows.items():
            row.set_error(by_field.get(field_id))

        for item in self.summary_items:
            self.summary_layout.removeWidget(item)
            item.deleteLater()
        self.summary_items = []

        if not errors:
            self.summary_frame.hide()
            return

        self.summary_heading.setText(summary_heading(len(errors)))
        for error in errors:
            item = QWidget()
            item_layout = QHBoxLayout(item)
            item_layout.setContentsMargins(0, 0, 0, 0)
            message = QLabel(f"• {error.message}")
            message.setWordWrap(True)
            item_layout.addWidget(message, 1)

            go_button = QPushButton(tr("errors.go_to_field"))
            go_button.setFlat(True)
            go_button.setCursor(Qt.PointingHandCursor)
            go_button.setStyleSheet("color: #B91C1C; text-decoration: underline; border: none;")
            go_button.clicked.connect(lambda _, fid=error.field_id: self.focus_field(fid))
            item_layout.addWidget(go_button)

            self.summary_layout.addWidget(item)
            self.summary_items.append(item)
        self.summary_frame.show()

    @property
    def summary_count(self) -> int:
        return len(self.summary_items)

    def focus_field(self, field_id: str):
        """Scroll to a field and give its control keyboard focus."""
        row = self.rows.get(field_id)
        if row is None:
            logger.warning(f"Cannot focus unknown field {field_id}")
            return
        self.scroll_area.ensureWidgetVisible(row)
        row.renderer.focus_input()

    @with_error_boundary("Section View", "handling field change")
    def _on_field_changed(self, field_id: str, value: FieldValue):
        self.field_changed.emit(field_id, value)

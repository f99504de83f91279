# -*- coding: utf-8 -*-
"""
Dynamic Form Wizard - host view of the schema-driven wizard.

Pages:
- loading: while the schema fetch is outstanding
- error: fetch failed or the form is empty, with "Back to Login"
- form: header with progress strip, then the current SectionView
- success: confirmation shown until the deferred return fires
"""

from typing import Optional

from PyQt5.QtCore import QPropertyAnimation, Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QFrame, QLabel, QProgressBar, QStackedWidget, QVBoxLayout, QWidget
)

from app.config import Config
from controllers.wizard_controller import SchemaSource, WizardController
from models.form_schema import FieldValue, FormSchema
from models.identity import Identity
from services.submission_sink import SubmissionSink
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from ui.components.wizard_header import WizardHeader
from ui.wizards.dynamic_form.section_view import SectionView
from ui.wizards.framework.error_boundary import with_error_boundary
from utils.logger import get_logger

logger = get_logger(__name__)


class DynamicFormWizard(QWidget):
    """
    Wizard host bound to one identity.

    Signals:
        back_to_login_requested: "Back to Login" clicked on the error page
        logout_requested: Logout clicked in the header
        return_to_start_requested: deferred return after submit fired
    """

    back_to_login_requested = pyqtSignal()
    logout_requested = pyqtSignal()
    return_to_start_requested = pyqtSignal()

    PAGE_LOADING = 0
    PAGE_ERROR = 1
    PAGE_FORM = 2
    PAGE_SUCCESS = 3

    def __init__(
        self,
        identity: Identity,
        schema_source: Optional[SchemaSource] = None,
        submission_sink: Optional[SubmissionSink] = None,
        redirect_delay_ms: Optional[int] = None,
        parent=None
    ):
        super().__init__(parent)
        self.identity = identity
        self.redirect_delay_ms = (
            redirect_delay_ms if redirect_delay_ms is not None else Config.SUBMIT_REDIRECT_DELAY_MS
        )
        self.controller = WizardController(
            identity,
            schema_source=schema_source,
            submission_sink=submission_sink,
            redirect_delay_ms=self.redirect_delay_ms,
            parent=self
        )
        self.section_view: Optional[SectionView] = None
        self._shown_index: Optional[int] = None
        self._rendering = False
        self._redirect_animation: Optional[QPropertyAnimation] = None

        self._setup_ui()
        self._connect_signals()

    # =========================================================================
    # UI
    # =========================================================================

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 24)

        self.stack = QStackedWidget()
        self.stack.addWidget(self._create_loading_page())
        self.stack.addWidget(self._create_error_page())
        self.stack.addWidget(self._create_form_page())
        self.stack.addWidget(self._create_success_page())
        layout.addWidget(self.stack)

    def _create_loading_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch()
        self.loading_label = QLabel(tr("wizard.loading"))
        self.loading_label.setAlignment(Qt.AlignCenter)
        self.loading_label.setStyleSheet("font-size: 16px;")
        layout.addWidget(self.loading_label)

        spinner = QProgressBar()
        spinner.setRange(0, 0)
        spinner.setFixedHeight(6)
        spinner.setTextVisible(False)
        layout.addWidget(spinner)
        layout.addStretch()
        return page

    def _create_error_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch()

        card = QFrame()
        card.setObjectName("card")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(32, 32, 32, 32)
        card_layout.setSpacing(16)

        title = QLabel(tr("dialog.error"))
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"font-size: 20px; font-weight: 700; color: {Config.ERROR_COLOR};")
        card_layout.addWidget(title)

        self.error_label = QLabel()
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setWordWrap(True)
        card_layout.addWidget(self.error_label)

        self.btn_back_to_login = ActionButton(tr("wizard.back_to_login"), variant="primary", width=160)
        self.btn_back_to_login.clicked.connect(self.back_to_login_requested.emit)
        card_layout.addWidget(self.btn_back_to_login, alignment=Qt.AlignCenter)

        layout.addWidget(card)
        layout.addStretch()
        return page

    def _create_form_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(12)

        self.header = WizardHeader(
            subtitle=tr("wizard.greeting", name=self.identity.name, roll_number=self.identity.roll_number)
        )
        self.header.logout_clicked.connect(self.logout_requested.emit)
        layout.addWidget(self.header)

        self.section_container = QVBoxLayout()
        self.section_container.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(self.section_container, 1)
        return page

    def _create_success_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.addStretch()

        card = QFrame()
        card.setObjectName("card")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(32, 32, 32, 32)
        card_layout.setSpacing(16)

        title = QLabel(tr("wizard.success_title"))
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"font-size: 24px; font-weight: 700; color: {Config.SUCCESS_COLOR};")
        card_layout.addWidget(title)

        message = QLabel(tr("wizard.success_message"))
        message.setAlignment(Qt.AlignCenter)
        message.setWordWrap(True)
        card_layout.addWidget(message)

        redirecting = QLabel(tr("wizard.redirecting"))
        redirecting.setObjectName("hint")
        redirecting.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(redirecting)

        self.redirect_progress = QProgressBar()
        self.redirect_progress.setRange(0, 100)
        self.redirect_progress.setValue(0)
        self.redirect_progress.setFixedHeight(6)
        self.redirect_progress.setTextVisible(False)
        card_layout.addWidget(self.redirect_progress)

        layout.addWidget(card)
        layout.addStretch()
        return page

    def _connect_signals(self):
        self.controller.schema_ready.connect(self._on_schema_ready)
        self.controller.load_failed.connect(self._on_load_failed)
        self.controller.section_changed.connect(self._on_section_changed)
        self.controller.value_changed.connect(self._on_value_changed)
        self.controller.errors_changed.connect(self._on_errors_changed)
        self.controller.form_submitted.connect(self._on_form_submitted)
        self.controller.return_to_start.connect(self.return_to_start_requested.emit)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start(self):
        """Show the loading page and fetch the schema."""
        self.stack.setCurrentIndex(self.PAGE_LOADING)
        self.controller.load()

    def current_page(self) -> int:
        return self.stack.currentIndex()

    def teardown(self):
        """Stop the controller; pending results and timers become no-ops."""
        if self._redirect_animation is not None:
            self._redirect_animation.stop()
        self.controller.teardown()

    def closeEvent(self, event):
        self.teardown()
        super().closeEvent(event)

    # =========================================================================
    # Controller signal handlers
    # =========================================================================

    @with_error_boundary("Form Wizard", "showing the form")
    def _on_schema_ready(self, schema: FormSchema):
        self.header.set_title(schema.title)
        self.header.set_sections([s.title for s in schema.sections])
        self._shown_index = None
        self._show_current_section()
        self.stack.setCurrentIndex(self.PAGE_FORM)

    def _on_load_failed(self, reason: str):
        self.error_label.setText(reason)
        self.stack.setCurrentIndex(self.PAGE_ERROR)

    @with_error_boundary("Form Wizard", "changing section")
    def _on_section_changed(self, old_index: int, new_index: int):
        self._show_current_section()

    def _on_value_changed(self, field_id: str, value: FieldValue):
        if self.section_view is not None:
            self.section_view.render_field(field_id, value)

    def _on_errors_changed(self, errors: list):
        if self.section_view is not None:
            self.section_view.show_errors(errors)

    def _on_form_submitted(self, values: dict):
        self.stack.setCurrentIndex(self.PAGE_SUCCESS)
        self._redirect_animation = QPropertyAnimation(self.redirect_progress, b"value", self)
        self._redirect_animation.setDuration(self.redirect_delay_ms)
        self._redirect_animation.setStartValue(0)
        self._redirect_animation.setEndValue(100)
        self._redirect_animation.start()

    # =========================================================================
    # Section display
    # =========================================================================

    def _show_current_section(self):
        if self._rendering:
            return
        self._rendering = True
        try:
            section = self.controller.current_section()
            if section is None:
                return
            index = self.controller.current_index

            if self.section_view is None or self._shown_index != index:
                self._replace_section_view(section, index)

            self.section_view.render(self.controller.values())
            self.section_view.show_errors(self.controller.errors)
            self.section_view.set_navigation(
                self.controller.is_first_section,
                self.controller.is_last_section
            )
            self.header.set_current(index)
        finally:
            self._rendering = False

    def _replace_section_view(self, section, index: int):
        if self.section_view is not None:
            self.section_container.removeWidget(self.section_view)
            self.section_view.deleteLater()

        view = SectionView(section, section_number=index + 1)
        view.field_changed.connect(self.controller.change_field)
        view.next_requested.connect(self.controller.request_next)
        view.previous_requested.connect(self.controller.request_previous)
        view.submit_requested.connect(self.controller.request_submit)
        self.section_container.addWidget(view)

        self.section_view = view
        self._shown_index = index
        logger.debug(f"Showing section {index}: {section.title}")

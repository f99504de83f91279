# -*- coding: utf-8 -*-
"""
Login Page - identity registration before the form is reachable.
"""

from PyQt5.QtCore import Qt, QThread, pyqtSignal
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import (
    QFrame, QGraphicsDropShadowEffect, QLabel, QLineEdit, QVBoxLayout, QWidget
)

from app.config import Config
from controllers.auth_controller import AuthController
from controllers.base_controller import OperationResult
from services.translation_manager import tr
from ui.components.action_button import ActionButton
from utils.logger import get_logger

logger = get_logger(__name__)


class RegistrationWorker(QThread):
    """Background worker for identity registration."""

    finished_with_result = pyqtSignal(object)  # OperationResult

    def __init__(self, controller: AuthController, roll_number: str, name: str):
        super().__init__()
        self.controller = controller
        self.roll_number = roll_number
        self.name = name

    def run(self):
        """Register in background."""
        try:
            result = self.controller.register(self.roll_number, self.name)
        except Exception as e:
            logger.error(f"Registration failed unexpectedly: {e}", exc_info=True)
            result = OperationResult.fail(tr("login.unexpected_error"))
        self.finished_with_result.emit(result)


class LoginPage(QWidget):
    """Roll number + name form that registers the identity."""

    login_successful = pyqtSignal(object)  # Identity

    def __init__(self, auth_controller: AuthController, parent=None):
        super().__init__(parent)
        self.auth_controller = auth_controller
        self._worker = None
        self._processing = False
        self._setup_ui()

    def _setup_ui(self):
        """Setup the login UI"""
        main_layout = QVBoxLayout(self)
        main_layout.setAlignment(Qt.AlignCenter)
        main_layout.setContentsMargins(0, 0, 0, 0)

        card = self._create_login_card()
        main_layout.addWidget(card)

    def _create_login_card(self) -> QFrame:
        """Create the login card"""
        card = QFrame()
        card.setObjectName("login_card")
        card.setFixedWidth(420)

        # Subtle shadow
        shadow = QGraphicsDropShadowEffect()
        shadow.setBlurRadius(25)
        shadow.setColor(QColor(150, 150, 150, 40))
        shadow.setOffset(0, 3)
        card.setGraphicsEffect(shadow)

        card_layout = QVBoxLayout(card)
        card_layout.setSpacing(0)
        card_layout.setContentsMargins(32, 32, 32, 32)

        # Title
        title = QLabel(tr("login.title"))
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"color: {Config.PRIMARY_COLOR}; font-size: 22px; font-weight: 700;")
        card_layout.addWidget(title)

        card_layout.addSpacing(4)

        # Subtitle
        subtitle = QLabel(tr("login.subtitle"))
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setWordWrap(True)
        subtitle.setObjectName("hint")
        card_layout.addWidget(subtitle)

        card_layout.addSpacing(24)

        # Roll number
        roll_label = QLabel(tr("login.roll_number"))
        roll_label.setStyleSheet("font-weight: 600;")
        card_layout.addWidget(roll_label)
        card_layout.addSpacing(4)

        self.roll_number_input = QLineEdit()
        self.roll_number_input.setObjectName("roll-number-input")
        self.roll_number_input.setPlaceholderText(tr("login.roll_number_placeholder"))
        self.roll_number_input.setFixedHeight(40)
        self.roll_number_input.textChanged.connect(self._hide_error)
        self.roll_number_input.returnPressed.connect(self._on_login)
        card_layout.addWidget(self.roll_number_input)

        card_layout.addSpacing(14)

        # Name
        name_label = QLabel(tr("login.name"))
        name_label.setStyleSheet("font-weight: 600;")
        card_layout.addWidget(name_label)
        card_layout.addSpacing(4)

        self.name_input = QLineEdit()
        self.name_input.setObjectName("name-input")
        self.name_input.setPlaceholderText(tr("login.name_placeholder"))
        self.name_input.setFixedHeight(40)
        self.name_input.textChanged.connect(self._hide_error)
        self.name_input.returnPressed.connect(self._on_login)
        card_layout.addWidget(self.name_input)

        card_layout.addSpacing(20)

        # Error message
        self.error_label = QLabel("")
        self.error_label.setStyleSheet(f"""
            background-color: #FEF2F2;
            color: {Config.ERROR_COLOR};
            padding: 8px 10px;
            border-radius: 4px;
            border: 1px solid {Config.ERROR_COLOR};
        """)
        self.error_label.setAlignment(Qt.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.hide()
        card_layout.addWidget(self.error_label)

        card_layout.addSpacing(8)

        # Login button
        self.login_btn = ActionButton(tr("login.submit"), variant="primary", width=0, height=42)
        self.login_btn.setObjectName("login-button")
        self.login_btn.clicked.connect(self._on_login)
        card_layout.addWidget(self.login_btn)

        card_layout.addSpacing(16)

        # Version
        version_label = QLabel(f"v {Config.VERSION}")
        version_label.setAlignment(Qt.AlignCenter)
        version_label.setStyleSheet(f"color: {Config.TEXT_LIGHT}; font-size: 10px;")
        card_layout.addWidget(version_label)

        return card

    def _on_login(self):
        """Handle login attempt"""
        if self.is_processing:
            return

        roll_number = self.roll_number_input.text()
        name = self.name_input.text()

        error = self.auth_controller.validate_input(roll_number, name)
        if error:
            self._show_error(error)
            return

        self._set_processing(True)
        worker = RegistrationWorker(self.auth_controller, roll_number, name)
        worker.finished_with_result.connect(self._on_registration_finished)
        worker.finished.connect(lambda: self._release_worker(worker))
        self._worker = worker
        worker.start()

    def _release_worker(self, worker: RegistrationWorker):
        if self._worker is worker:
            self._worker = None
        worker.deleteLater()

    def _on_registration_finished(self, result: OperationResult):
        self._set_processing(False)

        if result.success:
            logger.info(f"Login successful: {result.data.roll_number}")
            self._clear_form()
            self.login_successful.emit(result.data)
        else:
            logger.warning(f"Login failed: {result.message}")
            self._show_error(result.message)

    @property
    def is_processing(self) -> bool:
        return self._processing

    def _set_processing(self, processing: bool):
        self._processing = processing
        self.login_btn.setEnabled(not processing)
        self.login_btn.setText(tr("login.processing") if processing else tr("login.submit"))
        self.roll_number_input.setEnabled(not processing)
        self.name_input.setEnabled(not processing)

    def _show_error(self, message: str):
        """Show error message"""
        self.error_label.setText(message)
        self.error_label.show()

    def _hide_error(self):
        """Hide error message"""
        if self.error_label.isVisible():
            self.error_label.hide()

    def _clear_form(self):
        """Clear form fields"""
        self.roll_number_input.clear()
        self.name_input.clear()
        self.error_label.hide()

    def refresh(self, data=None):
        """Refresh the page"""
        self._clear_form()
        self.roll_number_input.setFocus()

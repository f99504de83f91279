# -*- coding: utf-8 -*-
"""
Main Window - routes between the login page and the form wizard.
"""

from typing import Optional

from PyQt5.QtGui import QKeySequence
from PyQt5.QtWidgets import QApplication, QMainWindow, QShortcut, QStackedWidget

from app.config import Config, Pages
from app.styles import get_stylesheet
from controllers.auth_controller import AuthController
from models.identity import Identity
from services.exceptions import IdentityMissingError
from services.form_api_service import FormApiService
from services.session_service import SessionService, SessionStore
from services.submission_sink import LoggingSubmissionSink, SubmissionSink
from services.theme_service import ThemeService
from services.translation_manager import get_layout_direction
from ui.pages.login_page import LoginPage
from ui.wizards.dynamic_form.form_wizard import DynamicFormWizard
from utils.logger import get_logger

logger = get_logger(__name__)


class MainWindow(QMainWindow):
    """
    Application main window.

    The login page lives for the whole session; a fresh wizard is built on
    every entry into the form and torn down on leaving it.
    """

    def __init__(
        self,
        store: Optional[SessionStore] = None,
        api_service: Optional[FormApiService] = None,
        submission_sink: Optional[SubmissionSink] = None,
        parent=None
    ):
        super().__init__(parent)
        self.store = store or SessionStore()
        self.session = SessionService(self.store)
        self.theme_service = ThemeService(self.store)
        self.api_service = api_service or FormApiService()
        self.submission_sink = submission_sink or LoggingSubmissionSink()
        self.auth_controller = AuthController(self.session, self.api_service, parent=self)
        self.wizard: Optional[DynamicFormWizard] = None
        self.current_page = None

        self._setup_window()
        self._setup_shortcuts()
        self._create_widgets()
        self.setLayoutDirection(get_layout_direction())
        self.apply_theme(self.theme_service.get_theme())

        # Start with login page
        self.navigate_to(Pages.LOGIN)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(Config.APP_TITLE)
        self.setMinimumSize(Config.WINDOW_MIN_WIDTH, Config.WINDOW_MIN_HEIGHT)

    def _setup_shortcuts(self):
        """Setup keyboard shortcuts."""
        # Theme toggle: Ctrl+T
        self.theme_shortcut = QShortcut(QKeySequence("Ctrl+T"), self)
        self.theme_shortcut.activated.connect(self.toggle_theme)

    def _create_widgets(self):
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.login_page = LoginPage(self.auth_controller)
        self.login_page.login_successful.connect(self._on_login_success)
        self.stack.addWidget(self.login_page)

    # =========================================================================
    # Routing
    # =========================================================================

    def navigate_to(self, page_id: str):
        """Navigate to a page; entering the form requires a stored identity."""
        if page_id == Pages.FORM:
            try:
                identity = self.session.load_identity()
            except IdentityMissingError:
                logger.info("No identity in session, redirecting to login")
                self.navigate_to(Pages.LOGIN)
                return
            self._show_wizard(identity)
        elif page_id == Pages.LOGIN:
            self._close_wizard()
            self.login_page.refresh()
            self.stack.setCurrentWidget(self.login_page)
        else:
            logger.error(f"Page not found: {page_id}")
            return

        self.current_page = page_id
        logger.debug(f"Navigated to: {page_id}")

    def _show_wizard(self, identity: Identity):
        self._close_wizard()
        wizard = DynamicFormWizard(
            identity,
            schema_source=self.api_service.get_form,
            submission_sink=self.submission_sink
        )
        wizard.back_to_login_requested.connect(lambda: self.navigate_to(Pages.LOGIN))
        wizard.return_to_start_requested.connect(lambda: self.navigate_to(Pages.LOGIN))
        wizard.logout_requested.connect(self._handle_logout)
        self.stack.addWidget(wizard)
        self.stack.setCurrentWidget(wizard)
        self.wizard = wizard
        wizard.start()

    def _close_wizard(self):
        if self.wizard is None:
            return
        self.wizard.teardown()
        self.stack.removeWidget(self.wizard)
        self.wizard.deleteLater()
        self.wizard = None

    def _on_login_success(self, identity: Identity):
        logger.info(f"User logged in: {identity.roll_number}")
        self.navigate_to(Pages.FORM)

    def _handle_logout(self):
        """Handle logout request."""
        self.auth_controller.logout()
        self.navigate_to(Pages.LOGIN)

    # =========================================================================
    # Theme
    # =========================================================================

    def apply_theme(self, theme: str):
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(get_stylesheet(theme))

    def toggle_theme(self):
        theme = self.theme_service.toggle()
        self.apply_theme(theme)

    def closeEvent(self, event):
        """Handle window close event."""
        self._close_wizard()
        logger.info("Application closing")
        event.accept()

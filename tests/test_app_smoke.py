# -*- coding: utf-8 -*-
"""
Smoke tests to ensure application doesn't break after changes.
These tests verify basic functionality works.
"""
from unittest.mock import MagicMock

import pytest

from app.config import Pages
from models.identity import Identity
from services.form_api_service import FormApiService, RegistrationResult


def test_imports():
    """Test that all main modules can be imported."""
    try:
        from app.main_window import MainWindow
        from controllers import AuthController, WizardController
        from services import FormApiService, SessionService
        from ui.wizards.dynamic_form import DynamicFormWizard, SectionView
        assert True
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


@pytest.fixture
def api_service(two_section_schema):
    service = MagicMock(spec=FormApiService)
    service.create_user.return_value = RegistrationResult(success=True, message="User created")
    service.get_form.return_value = two_section_schema
    return service


@pytest.fixture
def window(qtbot, session_store, api_service):
    from app.main_window import MainWindow

    window = MainWindow(store=session_store, api_service=api_service)
    qtbot.addWidget(window)
    yield window
    window.close()


def test_starts_on_login(window):
    assert window.current_page == Pages.LOGIN
    assert window.stack.currentWidget() is window.login_page


def test_form_requires_identity(window):
    window.navigate_to(Pages.FORM)

    assert window.current_page == Pages.LOGIN
    assert window.wizard is None


def test_login_opens_wizard(window, qtbot, api_service):
    window.login_page.roll_number_input.setText("RA22")
    window.login_page.name_input.setText("Jane")

    with qtbot.waitSignal(window.login_page.login_successful, timeout=3000):
        window.login_page.login_btn.click()

    assert window.current_page == Pages.FORM
    assert window.stack.currentWidget() is window.wizard
    qtbot.waitUntil(lambda: api_service.get_form.called, timeout=3000)
    api_service.get_form.assert_called_with("RA22")


def test_empty_login_shows_error(window, api_service):
    window.login_page.login_btn.click()

    assert not window.login_page.error_label.isHidden()
    assert window.login_page.error_label.text() == "Both roll number and name are required"
    api_service.create_user.assert_not_called()


def test_logout_clears_session(window, qtbot):
    window.session.save_identity(Identity("RA22", "Jane"))
    window.navigate_to(Pages.FORM)
    wizard = window.wizard

    wizard.header.btn_logout.click()

    assert window.current_page == Pages.LOGIN
    assert window.wizard is None
    assert not window.session.has_identity()


def test_back_to_login_keeps_identity(window):
    window.session.save_identity(Identity("RA22", "Jane"))
    window.navigate_to(Pages.FORM)

    window.wizard.back_to_login_requested.emit()

    assert window.current_page == Pages.LOGIN
    assert window.session.has_identity()


def test_theme_toggle(window):
    before = window.theme_service.get_theme()
    window.toggle_theme()
    assert window.theme_service.get_theme() != before

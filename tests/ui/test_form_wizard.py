# -*- coding: utf-8 -*-
"""
Tests for the wizard host: pages, section switching and the post-submit return.
"""

import pytest

from models.identity import Identity
from services.exceptions import SchemaFetchError
from services.submission_sink import LoggingSubmissionSink
from ui.wizards.dynamic_form.form_wizard import DynamicFormWizard


@pytest.fixture
def sink():
    return LoggingSubmissionSink()


@pytest.fixture
def make_wizard(qtbot, sink):
    created = []

    def _make(schema_source):
        wizard = DynamicFormWizard(
            Identity("RA22", "Jane"),
            schema_source=schema_source,
            submission_sink=sink,
            redirect_delay_ms=50
        )
        qtbot.addWidget(wizard)
        created.append(wizard)
        return wizard

    yield _make
    for wizard in created:
        wizard.teardown()


@pytest.fixture
def wizard(make_wizard, qtbot, two_section_schema):
    wizard = make_wizard(lambda roll_number: two_section_schema)
    with qtbot.waitSignal(wizard.controller.schema_ready, timeout=3000):
        wizard.start()
    return wizard


def type_into(wizard, field_id, text):
    wizard.section_view.renderer(field_id).control.textEdited.emit(text)


class TestPages:

    def test_loading_page_first(self, make_wizard, two_section_schema):
        wizard = make_wizard(lambda roll_number: two_section_schema)
        wizard.stack.setCurrentIndex(DynamicFormWizard.PAGE_FORM)
        wizard.start()
        assert wizard.current_page() == DynamicFormWizard.PAGE_LOADING

    def test_form_page_after_load(self, wizard):
        assert wizard.current_page() == DynamicFormWizard.PAGE_FORM
        assert wizard.header.title_label.text() == "Student Information Form"
        assert wizard.header.subtitle_label.text() == "Signed in as Jane (RA22)"
        assert wizard.header.progress_label.text() == "Section 1 of 2"
        assert wizard.section_view.section.title == "Personal Details"

    def test_error_page(self, make_wizard, qtbot):
        def failing_source(roll_number):
            raise SchemaFetchError("timeout", SchemaFetchError.REASON_TRANSPORT)

        wizard = make_wizard(failing_source)
        with qtbot.waitSignal(wizard.controller.load_failed, timeout=3000):
            wizard.start()

        assert wizard.current_page() == DynamicFormWizard.PAGE_ERROR
        assert wizard.error_label.text() == "Failed to load form. Please try again."

        with qtbot.waitSignal(wizard.back_to_login_requested):
            wizard.btn_back_to_login.click()

    def test_logout(self, wizard, qtbot):
        with qtbot.waitSignal(wizard.logout_requested):
            wizard.header.btn_logout.click()


class TestSectionFlow:

    def test_invalid_next_shows_errors(self, wizard):
        first_view = wizard.section_view
        first_view.footer.btn_next.click()

        assert wizard.section_view is first_view
        assert first_view.summary_count == 2
        assert wizard.controller.current_index == 0

    def test_edits_reach_store(self, wizard):
        type_into(wizard, "first_name", "Jane")
        assert wizard.controller.values() == {"first_name": "Jane"}

    def test_next_switches_section(self, wizard):
        type_into(wizard, "first_name", "Jane")
        type_into(wizard, "email", "jane@example.com")

        wizard.section_view.footer.btn_next.click()

        assert wizard.section_view.section.title == "Contact Preferences"
        assert wizard.header.progress_label.text() == "Section 2 of 2"
        assert wizard.section_view.footer.btn_next.isHidden()
        assert not wizard.section_view.footer.btn_submit.isHidden()

    def test_previous_restores_values(self, wizard):
        type_into(wizard, "first_name", "Jane")
        type_into(wizard, "email", "jane@example.com")
        wizard.section_view.footer.btn_next.click()

        wizard.section_view.footer.btn_previous.click()

        assert wizard.section_view.renderer("first_name").control.text() == "Jane"
        assert wizard.section_view.summary_count == 0

    def test_submit_and_return(self, wizard, sink, qtbot):
        type_into(wizard, "first_name", "Jane")
        type_into(wizard, "email", "jane@example.com")
        wizard.section_view.footer.btn_next.click()
        type_into(wizard, "phone", "+919876543210")
        wizard.section_view.renderer("contact_method").buttons["email"].click()

        with qtbot.waitSignal(wizard.return_to_start_requested, timeout=1000):
            wizard.section_view.footer.btn_submit.click()
            assert wizard.current_page() == DynamicFormWizard.PAGE_SUCCESS

        assert sink.submissions == [{
            "first_name": "Jane",
            "email": "jane@example.com",
            "phone": "9876543210",
            "contact_method": "email",
        }]

    def test_teardown_cancels_return(self, wizard, qtbot):
        fired = []
        wizard.return_to_start_requested.connect(lambda: fired.append(True))
        type_into(wizard, "first_name", "Jane")
        type_into(wizard, "email", "jane@example.com")
        wizard.section_view.footer.btn_next.click()
        type_into(wizard, "phone", "9876543210")
        wizard.section_view.renderer("contact_method").buttons["phone"].click()
        wizard.section_view.footer.btn_submit.click()

        wizard.teardown()
        qtbot.wait(150)

        assert fired == []

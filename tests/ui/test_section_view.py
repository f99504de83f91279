# -*- coding: utf-8 -*-
"""
Tests for SectionView: layout, errors summary and navigation affordances.
"""

from unittest.mock import MagicMock

import pytest
from PyQt5.QtWidgets import QPushButton

from services.validation import ValidationError
from ui.components.wizard_header import truncate_title
from ui.wizards.dynamic_form.section_view import SectionView, summary_heading


@pytest.fixture
def view(qtbot, two_section_schema):
    view = SectionView(two_section_schema.sections[0], section_number=1)
    qtbot.addWidget(view)
    view.render({})
    return view


ERRORS = [
    ValidationError("first_name", "Please enter your first name"),
    ValidationError("email", "Email Address is required"),
]


class TestSummaryHeading:

    def test_singular(self):
        assert summary_heading(1) == "There is 1 error that needs to be fixed"

    def test_plural(self):
        assert summary_heading(3) == "There are 3 errors that need to be fixed"


class TestLayout:

    def test_fields_in_declaration_order(self, view):
        assert list(view.rows) == ["first_name", "email"]

    def test_required_label_marker(self, view):
        assert view.rows["first_name"].label.text() == "First Name *"

    def test_telephone_label_hint(self, qtbot, two_section_schema):
        view = SectionView(two_section_schema.sections[1], section_number=2)
        qtbot.addWidget(view)
        assert view.rows["phone"].label.text() == "Phone Number (+91) *"

    def test_render_from_store(self, view):
        view.render({"first_name": "Jane"})
        assert view.renderer("first_name").control.text() == "Jane"
        assert view.renderer("email").control.text() == ""

    def test_field_edit_forwarded(self, view, qtbot):
        with qtbot.waitSignal(view.field_changed) as blocker:
            view.renderer("first_name").control.textEdited.emit("Jane")
        assert blocker.args == ["first_name", "Jane"]


class TestErrors:

    def test_hidden_without_errors(self, view):
        assert view.summary_frame.isHidden()
        assert view.summary_count == 0

    def test_inline_and_summary(self, view):
        view.show_errors(ERRORS)

        assert not view.summary_frame.isHidden()
        assert view.summary_heading.text() == "There are 2 errors that need to be fixed"
        assert view.summary_count == 2
        assert view.rows["first_name"].error_label.text() == "Please enter your first name"
        assert not view.rows["email"].error_label.isHidden()

    def test_replaced_not_accumulated(self, view):
        view.show_errors(ERRORS)
        view.show_errors(ERRORS[1:])

        assert view.summary_count == 1
        assert view.summary_heading.text() == "There is 1 error that needs to be fixed"
        assert view.rows["first_name"].error_label.isHidden()

    def test_cleared(self, view):
        view.show_errors(ERRORS)
        view.show_errors([])

        assert view.summary_frame.isHidden()
        assert all(row.error_label.isHidden() for row in view.rows.values())

    def test_go_to_field(self, view):
        focus = MagicMock()
        view.renderer("email").focus_input = focus
        view.show_errors(ERRORS)

        view.summary_items[1].findChild(QPushButton).click()

        focus.assert_called_once()

    def test_unknown_field_focus_is_ignored(self, view):
        view.focus_field("missing")


class TestNavigation:

    def test_first_section(self, view):
        view.set_navigation(is_first=True, is_last=False)
        assert view.footer.btn_previous.isHidden()
        assert not view.footer.btn_next.isHidden()
        assert view.footer.btn_submit.isHidden()

    def test_middle_section(self, view):
        view.set_navigation(is_first=False, is_last=False)
        assert not view.footer.btn_previous.isHidden()
        assert not view.footer.btn_next.isHidden()
        assert view.footer.btn_submit.isHidden()

    def test_last_section(self, view):
        view.set_navigation(is_first=False, is_last=True)
        assert not view.footer.btn_previous.isHidden()
        assert view.footer.btn_next.isHidden()
        assert not view.footer.btn_submit.isHidden()

    def test_single_section(self, view):
        view.set_navigation(is_first=True, is_last=True)
        assert view.footer.btn_previous.isHidden()
        assert not view.footer.btn_submit.isHidden()

    @pytest.mark.parametrize("button,signal", [
        ("btn_previous", "previous_requested"),
        ("btn_next", "next_requested"),
        ("btn_submit", "submit_requested"),
    ])
    def test_buttons_emit_intents(self, view, qtbot, button, signal):
        view.set_navigation(is_first=False, is_last=False)
        with qtbot.waitSignal(getattr(view, signal)):
            getattr(view.footer, button).click()


class TestTruncateTitle:

    def test_short_title_kept(self):
        assert truncate_title("Personal Details") == "Personal Details"

    def test_long_title_truncated(self):
        assert truncate_title("Educational Background and History") == "Educational Backgrou..."

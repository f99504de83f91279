# -*- coding: utf-8 -*-
"""
Tests for the per-type field renderers.

Tests cover:
- Raw edit -> stored value normalization per type
- Stored value -> display per type
- Rendering never reports an edit
"""

import pytest
from PyQt5.QtCore import QDate

from models.form_schema import FieldType, FormField
from tests.factories import make_field
from ui.wizards.dynamic_form.field_renderers import (
    BooleanCheckboxRenderer, DateFieldRenderer, DropdownFieldRenderer,
    MultiChoiceCheckboxRenderer, RadioFieldRenderer, TelephoneFieldRenderer,
    TextAreaFieldRenderer, TextFieldRenderer, create_renderer, register_renderer,
    RENDERERS
)

OPTIONS = [
    {"value": "a", "label": "Alpha", "dataTestId": "opt-a"},
    {"value": "b", "label": "Beta", "dataTestId": "opt-b"},
    {"value": "c", "label": "Gamma"},
]


@pytest.fixture
def build(qtbot):
    """Create a renderer for a wire field and register it with qtbot."""
    def _build(field_id, field_type, **extra):
        renderer = create_renderer(FormField.from_dict(make_field(field_id, field_type, **extra)))
        qtbot.addWidget(renderer)
        renderer.render(None)
        return renderer
    return _build


def follow_store(renderer):
    """Re-render every reported value, like the wizard does; returns the emitted values."""
    emitted = []

    def on_changed(field_id, value):
        emitted.append(value)
        renderer.render(value)

    renderer.value_changed.connect(on_changed)
    return emitted


class TestRegistry:

    @pytest.mark.parametrize("field_type,extra,expected", [
        ("text", {}, TextFieldRenderer),
        ("email", {}, TextFieldRenderer),
        ("textarea", {}, TextAreaFieldRenderer),
        ("date", {}, DateFieldRenderer),
        ("tel", {}, TelephoneFieldRenderer),
        ("telephone", {}, TelephoneFieldRenderer),
        ("dropdown", {"options": OPTIONS}, DropdownFieldRenderer),
        ("radio", {"options": OPTIONS}, RadioFieldRenderer),
        ("checkbox", {}, BooleanCheckboxRenderer),
        ("checkbox", {"options": OPTIONS}, MultiChoiceCheckboxRenderer),
    ])
    def test_renderer_per_type(self, build, field_type, extra, expected):
        assert isinstance(build("f", field_type, **extra), expected)

    def test_register_renderer_replaces_factory(self, build, monkeypatch):
        # Restored after the test
        monkeypatch.setitem(RENDERERS, FieldType.EMAIL, RENDERERS[FieldType.EMAIL])
        register_renderer(FieldType.EMAIL, TextAreaFieldRenderer)

        assert isinstance(build("f", "email"), TextAreaFieldRenderer)

    def test_data_test_id_becomes_object_name(self, build):
        renderer = build("first_name", "text", dataTestId="first-name-input")
        assert renderer.control.objectName() == "first-name-input"


class TestTextRenderer:

    def test_edit_reports_raw_text(self, build, qtbot):
        renderer = build("first_name", "text")
        emitted = follow_store(renderer)

        qtbot.keyClicks(renderer.control, "Jo")

        assert emitted == ["J", "Jo"]

    def test_render_shows_stored_value(self, build):
        renderer = build("first_name", "text")
        renderer.render("Jane")
        assert renderer.control.text() == "Jane"

        renderer.render(None)
        assert renderer.control.text() == ""

    def test_render_does_not_report(self, build, qtbot):
        renderer = build("first_name", "text")
        with qtbot.assertNotEmitted(renderer.value_changed):
            renderer.render("Jane")

    def test_max_length_on_control(self, build):
        renderer = build("first_name", "text", maxLength=5)
        assert renderer.control.maxLength() == 5


class TestTextAreaRenderer:

    def test_counter(self, build):
        renderer = build("bio", "textarea", maxLength=100)
        assert renderer.counter_label.text() == "0/100 characters"

        renderer.render("hello")

        assert renderer.counter_label.text() == "5/100 characters"

    def test_no_counter_without_max_length(self, build):
        assert build("bio", "textarea").counter_label is None

    def test_edit_reports_text(self, build):
        renderer = build("bio", "textarea")
        emitted = follow_store(renderer)

        renderer.control.setPlainText("line one")

        assert emitted[-1] == "line one"


class TestTelephoneRenderer:

    def test_display_adds_prefix(self, build):
        renderer = build("phone", "tel")
        renderer.render("9876543210")
        assert renderer.control.text() == "+919876543210"

    def test_unset_shows_prefix_only(self, build):
        assert build("phone", "tel").control.text() == "+91"

    def test_edit_strips_prefix(self, build, qtbot):
        renderer = build("phone", "tel", maxLength=10)
        emitted = follow_store(renderer)
        renderer.control.end(False)

        qtbot.keyClicks(renderer.control, "1234567890")

        assert emitted[-1] == "1234567890"
        assert renderer.control.text() == "+911234567890"

    def test_normalize(self, build):
        renderer = build("phone", "tel")
        assert renderer.normalize("+911234567890") == "1234567890"
        assert renderer.normalize("1234567890") == "1234567890"

    def test_max_length_includes_prefix(self, build):
        assert build("phone", "tel", maxLength=10).control.maxLength() == 13

    def test_label_hint(self, build):
        assert build("phone", "tel").label_hint() == " (+91)"


class TestDateRenderer:

    def test_unset_renders_sentinel(self, build):
        renderer = build("dob", "date")
        assert renderer.control.date() == renderer.sentinel
        assert renderer.normalize(renderer.control.date()) == ""

    def test_stored_iso_date(self, build):
        renderer = build("dob", "date")
        renderer.render("2024-05-17")
        assert renderer.control.date() == QDate(2024, 5, 17)

    def test_edit_reports_iso_date(self, build):
        renderer = build("dob", "date")
        emitted = follow_store(renderer)

        renderer.control.setDate(QDate(2001, 2, 3))

        assert emitted == ["2001-02-03"]

    def test_bounds_from_min_max(self, build):
        renderer = build("dob", "date", min="2024-01-01", max="2024-12-31")
        assert renderer.minimum_date == QDate(2024, 1, 1)
        assert renderer.maximum_date == QDate(2024, 12, 31)

    def test_out_of_range_value_renders_unset(self, build):
        renderer = build("dob", "date", min="2024-01-01", max="2024-12-31")
        renderer.render("2023-05-01")
        assert renderer.control.date() == renderer.sentinel

    def test_label_hint(self, build):
        assert build("dob", "date").label_hint() == " (dd-mm-yyyy)"


class TestDropdownRenderer:

    def test_placeholder_first(self, build):
        renderer = build("choice", "dropdown", options=OPTIONS)
        assert renderer.control.itemText(0) == "-- Select an option --"
        assert renderer.control.count() == 4

    def test_placeholder_maps_to_empty(self, build):
        renderer = build("choice", "dropdown", options=OPTIONS)
        emitted = follow_store(renderer)

        renderer.control.activated.emit(2)
        renderer.control.activated.emit(0)

        assert emitted == ["b", ""]

    def test_render_selects_option(self, build):
        renderer = build("choice", "dropdown", options=OPTIONS)
        renderer.render("c")
        assert renderer.control.currentText() == "Gamma"

        renderer.render("")
        assert renderer.control.currentIndex() == 0


class TestRadioRenderer:

    def test_click_reports_value(self, build):
        renderer = build("choice", "radio", options=OPTIONS)
        emitted = follow_store(renderer)

        renderer.buttons["b"].click()

        assert emitted == ["b"]
        assert renderer.buttons["b"].isChecked()

    def test_render_clears_all(self, build):
        renderer = build("choice", "radio", options=OPTIONS)
        renderer.render("a")
        renderer.render("")
        assert not any(b.isChecked() for b in renderer.buttons.values())

    def test_option_test_ids(self, build):
        renderer = build("choice", "radio", options=OPTIONS)
        assert renderer.buttons["a"].objectName() == "opt-a"


class TestCheckboxRenderers:

    def test_boolean_flag(self, build):
        renderer = build("agree", "checkbox", label="I agree", required=True)
        emitted = follow_store(renderer)
        assert renderer.control.text() == "I agree *"
        assert renderer.owns_label

        renderer.control.click()
        renderer.control.click()

        assert emitted == [True, False]

    def test_boolean_default_unchecked(self, build):
        assert not build("agree", "checkbox").control.isChecked()

    def test_multi_choice_toggles_in_click_order(self, build):
        renderer = build("langs", "checkbox", options=OPTIONS)
        emitted = follow_store(renderer)

        renderer.boxes["a"].click()
        renderer.boxes["b"].click()
        renderer.boxes["a"].click()

        assert emitted == [["a"], ["a", "b"], ["b"]]
        assert not renderer.boxes["a"].isChecked()
        assert renderer.boxes["b"].isChecked()

    def test_multi_choice_render(self, build, qtbot):
        renderer = build("langs", "checkbox", options=OPTIONS)
        with qtbot.assertNotEmitted(renderer.value_changed):
            renderer.render(["c", "a"])
        assert [v for v, box in renderer.boxes.items() if box.isChecked()] == ["a", "c"]


class TestErrorStyle:

    def test_error_property(self, build):
        renderer = build("first_name", "text")
        renderer.set_error(True)
        assert renderer.control.property("error") == "true"
        renderer.set_error(False)
        assert renderer.control.property("error") == "false"

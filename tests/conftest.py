# -*- coding: utf-8 -*-
"""
Shared test configuration.
"""
import os
import sys
from pathlib import Path

# Must be set before any Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ["APP_LANGUAGE"] = "en"

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

from models.form_schema import FormSchema
from services.session_service import SessionStore
from tests.factories import make_field


@pytest.fixture
def two_section_payload():
    """get-form response with a fully specified two-section form."""
    return {
        "message": "Form fetched successfully",
        "form": {
            "formTitle": "Student Information Form",
            "formId": "form-1",
            "version": "1",
            "sections": [
                {
                    "sectionId": 1,
                    "title": "Personal Details",
                    "description": "Tell us about yourself",
                    "fields": [
                        make_field("first_name", "text", "First Name", True, minLength=2, maxLength=20,
                                   validation={"message": "Please enter your first name"}),
                        make_field("email", "email", "Email Address", True),
                    ],
                },
                {
                    "sectionId": 2,
                    "title": "Contact Preferences",
                    "description": "How can we reach you",
                    "fields": [
                        make_field("phone", "tel", "Phone Number", True, maxLength=10),
                        make_field("contact_method", "radio", "Preferred Contact", True, options=[
                            {"value": "email", "label": "Email", "dataTestId": "contact-email"},
                            {"value": "phone", "label": "Phone", "dataTestId": "contact-phone"},
                        ]),
                    ],
                },
            ],
        },
    }


@pytest.fixture
def two_section_schema(two_section_payload):
    return FormSchema.from_dict(two_section_payload)


@pytest.fixture
def session_store(tmp_path):
    """Session store backed by a temporary file."""
    return SessionStore(tmp_path / "session.json")

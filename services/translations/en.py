# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.success": "Success",
    "dialog.confirm": "Confirm",

    # Login
    "login.title": "Welcome",
    "login.subtitle": "Sign in to fill out your form",
    "login.roll_number": "Roll Number",
    "login.roll_number_placeholder": "Enter roll no (e.g. RA2211003010554)",
    "login.name": "Full Name",
    "login.name_placeholder": "Enter your full name",
    "login.submit": "Sign In",
    "login.processing": "Processing...",
    "login.both_required": "Both roll number and name are required",
    "login.unexpected_error": "An unexpected error occurred. Please try again.",

    # Registration
    "registration.success": "User created successfully",
    "registration.failed": "Failed to create user",

    # Wizard
    "wizard.loading": "Loading your form...",
    "wizard.greeting": "Signed in as {name} ({roll_number})",
    "wizard.logout": "Logout",
    "wizard.back_to_login": "Back to Login",
    "wizard.previous": "Previous",
    "wizard.next": "Next",
    "wizard.submit": "Submit",
    "wizard.section_number": "Section {number}",
    "wizard.progress": "Section {current} of {total}",
    "wizard.success_title": "Success!",
    "wizard.success_message": "Your form has been submitted successfully. Thank you for your participation!",
    "wizard.redirecting": "Redirecting to home page...",

    # Error summary
    "errors.summary_one": "There is 1 error that needs to be fixed",
    "errors.summary_many": "There are {count} errors that need to be fixed",
    "errors.go_to_field": "Go to field",

    # Fields
    "field.select_option": "-- Select an option --",
    "field.date_hint": " (dd-mm-yyyy)",
    "field.phone_hint": " ({prefix})",
    "field.phone_placeholder": "{prefix} Phone Number",
    "field.char_count": "{count}/{max} characters",

    # Validation
    "validation.required": "{label} is required",
    "validation.min_length": "{label} must be at least {min} characters",
    "validation.max_length": "{label} must be at most {max} characters",
    "validation.email": "Please enter a valid email address",
    "validation.phone": "Please enter a valid phone number",

    # Errors
    "error.schema.load_failed": "Failed to load form. Please try again.",
    "error.schema.empty": "This form has no sections to fill out.",
    "error.schema.invalid": "The form received from the server is invalid.",
    "error.api.connection": "Connection error. Please check your internet connection.",
    "error.api.timeout": "Connection timeout. Please try again.",
    "error.unexpected": "An unexpected error occurred.",
}

# -*- coding: utf-8 -*-
"""
Dynaform Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "FormApiService",
    "SessionService",
    "ThemeService",
    "LoggingSubmissionSink",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "FormApiService":
        from .form_api_service import FormApiService
        return FormApiService
    elif name == "SessionService":
        from .session_service import SessionService
        return SessionService
    elif name == "ThemeService":
        from .theme_service import ThemeService
        return ThemeService
    elif name == "LoggingSubmissionSink":
        from .submission_sink import LoggingSubmissionSink
        return LoggingSubmissionSink
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

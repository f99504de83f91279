# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ApiException(Exception):
    """Exception raised for API errors."""

    def __init__(self, message: str, status_code: int = None,
                 response_data: dict = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.context = context

    def __str__(self):
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class NetworkException(Exception):
    """Exception raised for network/connection errors."""

    def __init__(self, message: str, original_error: Exception = None,
                 context: str = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = context


class SchemaFetchError(Exception):
    """
    Schema retrieval failed or produced an unusable schema.

    reason is one of the REASON_* codes; cause keeps the underlying error.
    """

    REASON_TRANSPORT = "transport"
    REASON_EMPTY = "empty"
    REASON_INVALID = "invalid"

    def __init__(self, message: str, reason: str = REASON_TRANSPORT,
                 cause: Exception = None):
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.cause = cause


class IdentityMissingError(Exception):
    """No identity in the session store when entering the wizard."""

    def __init__(self, message: str = "No identity in session"):
        super().__init__(message)
        self.message = message

# -*- coding: utf-8 -*-
"""Centralized error message mapper."""

from services.translation_manager import tr
from services.exceptions import ApiException, NetworkException, SchemaFetchError
from utils.logger import get_logger

logger = get_logger(__name__)


def map_api_error(error: ApiException) -> str:
    """Map API exception to generic user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    if error.status_code:
        logger.warning(f"API error ({error.status_code}): {error}")
    return tr("error.api.connection")


def map_network_error(error: NetworkException) -> str:
    """Map network exception to user-friendly translated message."""
    msg = str(error.original_error) if error.original_error else ""
    if "timeout" in msg.lower() or "timed out" in msg.lower():
        return tr("error.api.timeout")
    return tr("error.api.connection")


def map_schema_error(error: SchemaFetchError) -> str:
    """Map schema retrieval failure to the text shown on the error page."""
    if error.reason == SchemaFetchError.REASON_EMPTY:
        return tr("error.schema.empty")
    if error.reason == SchemaFetchError.REASON_INVALID:
        return tr("error.schema.invalid")
    return tr("error.schema.load_failed")


def map_exception(error: Exception, context: str = None) -> str:
    """Map any exception to generic user-friendly message.

    Technical details are logged only - never shown to the user.
    """
    if isinstance(error, SchemaFetchError):
        return map_schema_error(error)

    if isinstance(error, ApiException):
        if not error.context and context:
            error.context = context
        return map_api_error(error)

    if isinstance(error, NetworkException):
        return map_network_error(error)

    # Log unexpected errors
    logger.warning(f"Unexpected error: {error}")
    return tr("error.unexpected")

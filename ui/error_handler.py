# -*- coding: utf-8 -*-
"""Centralized error handler for UI layer."""

from PyQt5.QtWidgets import QMessageBox, QWidget

from services.error_mapper import map_exception
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class ErrorHandler:
    """Centralized error handler that maps exceptions to user-friendly dialogs."""

    @staticmethod
    def handle(error: Exception, parent: QWidget = None,
               context: str = None, show_dialog: bool = True) -> str:
        """
        Handle any exception: log it, map it, optionally show dialog.

        Args:
            error: The exception to handle
            parent: Parent widget for dialog
            context: Context for error mapping (e.g., "Section View")
            show_dialog: Whether to show dialog to user

        Returns:
            User-friendly error message string
        """
        logger.error(f"Error in {context or 'unknown'}: {error}", exc_info=True)

        message = map_exception(error, context)

        if show_dialog and parent:
            ErrorHandler.show_error(parent, message)

        return message

    @staticmethod
    def show_error(parent: QWidget, message: str, title: str = None):
        """Show error dialog with translated title."""
        QMessageBox.critical(parent, title or tr("dialog.error"), message)

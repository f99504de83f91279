# -*- coding: utf-8 -*-
"""
Error Boundary for wizard views.

Catches exceptions raised by UI event handlers so a faulty renderer or
view handler is logged and reported instead of tearing down the event loop.
"""

from functools import wraps
from typing import Callable

from PyQt5.QtWidgets import QWidget

from utils.logger import get_logger

logger = get_logger(__name__)


def with_error_boundary(view_name: str, operation_name: str = "operation"):
    """
    Decorator to add error boundary to a widget method.

    Usage:
        @with_error_boundary("Section View", "handling field change")
        def _on_field_changed(self, field_id, value):
            ...

    Args:
        view_name: Name of the protected view
        operation_name: Name of the operation

    Returns:
        Decorator function
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)

            except (MemoryError, KeyboardInterrupt):
                raise

            except Exception as e:
                logger.error(
                    f"Error in {view_name} during {operation_name}: {str(e)}",
                    exc_info=True
                )

                parent_window = self.window() if isinstance(self, QWidget) else None
                if parent_window is not None and parent_window.isVisible():
                    from ui.error_handler import ErrorHandler
                    ErrorHandler.handle(e, parent_window, context=view_name)

                return None

        return wrapper
    return decorator

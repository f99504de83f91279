# -*- coding: utf-8 -*-
"""
Step Navigator - Manages the current section index.

Handles:
- Step progression (next/previous)
- Range checking against the section count

Validation is the caller's job; the navigator only moves the index.
"""

from PyQt5.QtCore import QObject, pyqtSignal

from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Tracks the current section of a wizard.

    The index itself lives on the context so the context is always the
    single source of wizard state.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index

    def __init__(self, context: WizardContext, step_count: int = 0, parent=None):
        super().__init__(parent)
        self.context = context
        self.step_count = step_count

    @property
    def current_index(self) -> int:
        return self.context.current_section_index

    def set_step_count(self, step_count: int):
        self.step_count = step_count

    def is_in_range(self) -> bool:
        return 0 <= self.current_index < self.step_count

    def is_first(self) -> bool:
        return self.current_index == 0

    def is_last(self) -> bool:
        return self.current_index == self.step_count - 1

    def can_go_next(self) -> bool:
        """Check if there is a following step."""
        return self.current_index < self.step_count - 1

    def can_go_previous(self) -> bool:
        """Check if there is a preceding step."""
        return self.current_index > 0

    def next_step(self) -> bool:
        """Navigate to the next step."""
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            return False

        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")
        return self._navigate_to(self.current_index + 1)

    def previous_step(self) -> bool:
        """Navigate to the previous step."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        return self._navigate_to(self.current_index - 1)

    def ensure_in_range(self) -> bool:
        """
        Reset to the first step if the index fell outside the step range.

        Returns:
            True if a reset happened
        """
        if self.step_count > 0 and not self.is_in_range():
            logger.warning(
                f"Step index {self.current_index} out of range (count {self.step_count}), resetting to 0"
            )
            self._navigate_to(0)
            return True
        return False

    def _navigate_to(self, new_index: int) -> bool:
        if new_index < 0 or new_index >= self.step_count:
            logger.error(f"Invalid step index: {new_index} (valid range: 0-{self.step_count - 1})")
            return False

        old_index = self.current_index
        self.context.current_section_index = new_index
        self.step_changed.emit(old_index, new_index)
        return True

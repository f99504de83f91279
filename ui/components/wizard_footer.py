# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Previous / Next / Submit navigation bar.
"""

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QHBoxLayout, QSizePolicy, QWidget

from services.translation_manager import tr
from ui.components.action_button import ActionButton


class WizardFooter(QWidget):
    """
    Navigation footer for a multi-section form.

    Previous is hidden (keeping its space) on the first section. Exactly one
    of Next and Submit is visible at a time.

    Signals:
        previous_clicked: Emitted when Previous button is clicked
        next_clicked: Emitted when Next button is clicked
        submit_clicked: Emitted when Submit button is clicked

    Usage:
        footer = WizardFooter()
        footer.set_position(is_first=True, is_last=False)
        footer.next_clicked.connect(self._on_next)
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    submit_clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 16, 0, 0)
        layout.setSpacing(12)

        self.btn_previous = ActionButton(tr("wizard.previous"), variant="outline", width=120)
        policy = self.btn_previous.sizePolicy()
        policy.setRetainSizeWhenHidden(True)
        self.btn_previous.setSizePolicy(policy)
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        layout.addStretch()

        self.btn_next = ActionButton(tr("wizard.next"), variant="primary", width=120)
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

        self.btn_submit = ActionButton(tr("wizard.submit"), variant="primary", width=120)
        self.btn_submit.setObjectName("submit-button")
        self.btn_submit.clicked.connect(self.submit_clicked.emit)
        layout.addWidget(self.btn_submit)

        self.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Fixed)

    def set_position(self, is_first: bool, is_last: bool):
        """Show the affordances for the section's position in the form."""
        self.btn_previous.setEnabled(not is_first)
        self.btn_previous.setVisible(not is_first)
        self.btn_next.setVisible(not is_last)
        self.btn_submit.setVisible(is_last)

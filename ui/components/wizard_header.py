# -*- coding: utf-8 -*-
"""
Wizard Header Component - form title, logout and section progress strip.
"""

from typing import List

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from app.config import Config
from services.translation_manager import tr
from ui.components.action_button import ActionButton


def truncate_title(title: str, max_chars: int = None) -> str:
    """Shorten a section title for the progress strip."""
    limit = max_chars if max_chars is not None else Config.SECTION_TITLE_MAX_CHARS
    if len(title) <= limit:
        return title
    return title[:limit] + "..."


class WizardHeader(QWidget):
    """
    Header of the form wizard.

    Features:
    - Form title and greeting
    - Logout button
    - One progress marker per section (completed / current / upcoming)

    Signals:
        logout_clicked: Emitted when Logout button is clicked

    Usage:
        header = WizardHeader(title="Student Survey")
        header.set_sections(["Personal", "Contact"])
        header.set_current(1)
    """

    logout_clicked = pyqtSignal()

    def __init__(self, title: str = "", subtitle: str = "", parent=None):
        super().__init__(parent)
        self.title_text = title
        self.subtitle_text = subtitle
        self.markers: List[QLabel] = []
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 8)
        layout.setSpacing(12)

        top_row = QHBoxLayout()
        titles = QVBoxLayout()
        titles.setSpacing(4)

        self.title_label = QLabel(self.title_text)
        self.title_label.setStyleSheet(
            f"font-size: 22px; font-weight: 700; color: {Config.PRIMARY_COLOR}; background: transparent;"
        )
        titles.addWidget(self.title_label)

        self.subtitle_label = QLabel(self.subtitle_text)
        self.subtitle_label.setObjectName("hint")
        self.subtitle_label.setVisible(bool(self.subtitle_text))
        titles.addWidget(self.subtitle_label)

        top_row.addLayout(titles)
        top_row.addStretch()

        self.btn_logout = ActionButton(tr("wizard.logout"), variant="secondary", width=100, height=36)
        self.btn_logout.clicked.connect(self.logout_clicked.emit)
        top_row.addWidget(self.btn_logout, alignment=Qt.AlignTop)
        layout.addLayout(top_row)

        self.progress_label = QLabel()
        self.progress_label.setObjectName("hint")
        layout.addWidget(self.progress_label)

        self.strip = QFrame()
        self.strip_layout = QHBoxLayout(self.strip)
        self.strip_layout.setContentsMargins(0, 0, 0, 0)
        self.strip_layout.setSpacing(8)
        layout.addWidget(self.strip)

    def set_title(self, title: str):
        """Update title text."""
        self.title_text = title
        self.title_label.setText(title)

    def set_sections(self, titles: List[str]):
        """Rebuild the progress strip with one marker per section."""
        for marker in self.markers:
            self.strip_layout.removeWidget(marker)
            marker.deleteLater()
        self.markers = []

        for number, title in enumerate(titles, start=1):
            marker = QLabel(f"{number}. {truncate_title(title)}")
            marker.setToolTip(title)
            marker.setAlignment(Qt.AlignCenter)
            self.strip_layout.addWidget(marker, 1)
            self.markers.append(marker)
        self.set_current(0)

    def set_current(self, index: int):
        """Highlight the current section and mark earlier ones completed."""
        total = len(self.markers)
        for i, marker in enumerate(self.markers):
            if i < index:
                color, background = "white", Config.SUCCESS_COLOR
            elif i == index:
                color, background = "white", Config.PRIMARY_COLOR
            else:
                color, background = Config.TEXT_LIGHT, "transparent"
            marker.setStyleSheet(
                f"color: {color}; background-color: {background}; "
                f"border: 1px solid {Config.BORDER_COLOR}; border-radius: 12px; padding: 4px 8px;"
            )
        if total:
            self.progress_label.setText(tr("wizard.progress", current=index + 1, total=total))

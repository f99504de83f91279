# -*- coding: utf-8 -*-
"""
Action Button Component - Reusable button with consistent styling.

Used by the wizard footer, the login page and the wizard pages so every
button shares dimensions, colors, and behavior.
"""

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QPushButton

from app.config import Config


class ActionButton(QPushButton):
    """
    Reusable action button with consistent styling.

    Supports three variants:
    - primary: Brand color solid - for main actions (Next, Submit, Sign In)
    - secondary: Gray - for secondary actions (Logout)
    - outline: Brand border on white - for Previous and "Back to Login"

    Usage:
        btn = ActionButton("Next", variant="primary")
        btn = ActionButton("Previous", variant="outline", width=120)
    """

    def __init__(
        self,
        text: str,
        variant: str = "primary",
        width: int = 114,
        height: int = 44,
        parent=None
    ):
        """
        Initialize action button.

        Args:
            text: Button text
            variant: "primary", "secondary", or "outline"
            width: Button width in pixels (0 keeps the width flexible)
            height: Button height in pixels
            parent: Parent widget
        """
        super().__init__(text, parent)

        if width:
            self.setFixedSize(width, height)
        else:
            self.setFixedHeight(height)
        self.setCursor(Qt.PointingHandCursor)

        self.variant = variant
        self._apply_style(variant)

    def _apply_style(self, variant: str):
        """
        Apply button styling based on variant.

        Args:
            variant: "primary", "secondary", or "outline"
        """
        if variant == "primary":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: {Config.PRIMARY_COLOR};
                    color: white;
                    border: none;
                    padding: 8px 12px;
                    border-radius: 8px;
                    font-size: 13px;
                    font-weight: 600;
                }}
                QPushButton:hover {{
                    background-color: {Config.PRIMARY_DARK};
                }}
                QPushButton:disabled {{
                    background-color: #FDBA74;
                }}
            """)
        elif variant == "secondary":
            self.setStyleSheet("""
                QPushButton {
                    background-color: #6B7280;
                    color: white;
                    border: none;
                    padding: 8px 12px;
                    border-radius: 8px;
                    font-size: 13px;
                }
                QPushButton:hover {
                    background-color: #4B5563;
                }
                QPushButton:disabled {
                    background-color: #D1D5DB;
                }
            """)
        elif variant == "outline":
            self.setStyleSheet(f"""
                QPushButton {{
                    background-color: #FFFFFF;
                    color: {Config.PRIMARY_COLOR};
                    border: 1px solid {Config.PRIMARY_COLOR};
                    padding: 8px 12px;
                    border-radius: 8px;
                    font-size: 13px;
                }}
                QPushButton:hover {{
                    background-color: #FFF7ED;
                }}
                QPushButton:disabled {{
                    color: #D1D5DB;
                    border-color: #E5E7EB;
                }}
            """)
        else:
            raise ValueError(f"Invalid variant: {variant}. Must be 'primary', 'secondary', or 'outline'")

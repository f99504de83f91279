# -*- coding: utf-8 -*-
"""
Application stylesheet for the light and dark themes.
"""

from .config import Config


def get_stylesheet(theme: str = "light") -> str:
    """Generate the main application stylesheet for a theme."""
    if theme == "dark":
        background = Config.DARK_BACKGROUND_COLOR
        card = Config.DARK_CARD_BACKGROUND
        text = Config.DARK_TEXT_COLOR
        border = Config.DARK_BORDER_COLOR
    else:
        background = Config.BACKGROUND_COLOR
        card = Config.CARD_BACKGROUND
        text = Config.TEXT_COLOR
        border = Config.BORDER_COLOR

    return f"""
    /* ===== Global Styles ===== */
    QWidget {{
        color: {text};
        background-color: {background};
    }}

    QMainWindow {{
        background-color: {background};
    }}

    /* ===== Cards ===== */
    QFrame#card, QFrame#login_card, QFrame#section_card {{
        background-color: {card};
        border: 1px solid {border};
        border-radius: 12px;
    }}

    QFrame#card QLabel, QFrame#login_card QLabel, QFrame#section_card QLabel {{
        background: transparent;
    }}

    /* ===== Inputs ===== */
    QLineEdit, QPlainTextEdit, QComboBox, QDateEdit {{
        background-color: {card};
        border: 1px solid {border};
        border-radius: 8px;
        padding: 8px 12px;
    }}

    QLineEdit:focus, QPlainTextEdit:focus, QComboBox:focus, QDateEdit:focus {{
        border: 1px solid {Config.PRIMARY_COLOR};
    }}

    QLineEdit[error="true"], QPlainTextEdit[error="true"],
    QComboBox[error="true"], QDateEdit[error="true"] {{
        border: 1px solid {Config.ERROR_COLOR};
    }}

    /* ===== Labels ===== */
    QLabel#field_error {{
        color: {Config.ERROR_COLOR};
    }}

    QLabel#hint {{
        color: {Config.TEXT_LIGHT};
    }}

    /* ===== Error summary ===== */
    QFrame#error_summary {{
        background-color: #FEF2F2;
        border: 1px solid #FCA5A5;
        border-radius: 8px;
    }}

    QFrame#error_summary QLabel {{
        color: #991B1B;
        background: transparent;
    }}

    /* ===== Progress ===== */
    QProgressBar {{
        border: none;
        background-color: {border};
        border-radius: 3px;
    }}

    QProgressBar::chunk {{
        background-color: {Config.PRIMARY_COLOR};
        border-radius: 3px;
    }}
    """

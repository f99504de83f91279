# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "https://dynamic-form-generator-9rl7.onrender.com")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Form behaviour
_PHONE_PREFIX = os.getenv("PHONE_PREFIX", "+91")
_SUBMIT_REDIRECT_DELAY_MS = int(os.getenv("SUBMIT_REDIRECT_DELAY_MS", "3000"))

# Language: "en" or "ar"
_APP_LANGUAGE = os.getenv("APP_LANGUAGE", "en")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Dynaform"
    APP_TITLE: str = "Dynamic Form Wizard"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Dynaform"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, API_VERIFY_SSL)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Form behaviour
    PHONE_PREFIX: str = _PHONE_PREFIX
    SUBMIT_REDIRECT_DELAY_MS: int = _SUBMIT_REDIRECT_DELAY_MS
    SECTION_TITLE_MAX_CHARS: int = 20

    # Language
    LANGUAGE: str = _APP_LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Session store (identity + theme preference)
    SESSION_FILE: str = "session.json"
    SESSION_PATH: Path = DATA_DIR / SESSION_FILE

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 960
    WINDOW_MIN_HEIGHT: int = 720

    # Branding Colors
    PRIMARY_COLOR: str = "#EA580C"
    PRIMARY_DARK: str = "#C2410C"
    ACCENT_COLOR: str = "#F59E0B"
    TEXT_COLOR: str = "#1F2937"
    TEXT_LIGHT: str = "#6B7280"
    BACKGROUND_COLOR: str = "#FFF7ED"
    CARD_BACKGROUND: str = "#FFFFFF"
    BORDER_COLOR: str = "#D1D5DB"
    SUCCESS_COLOR: str = "#16A34A"
    ERROR_COLOR: str = "#DC2626"

    # Dark theme
    DARK_BACKGROUND_COLOR: str = "#111827"
    DARK_CARD_BACKGROUND: str = "#1F2937"
    DARK_TEXT_COLOR: str = "#F3F4F6"
    DARK_BORDER_COLOR: str = "#4B5563"

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    QT_DATE_FORMAT: str = "yyyy-MM-dd"
    QT_DATE_DISPLAY_FORMAT: str = "dd-MM-yyyy"


# Page identifiers
class Pages:
    LOGIN = "login"
    FORM = "form"

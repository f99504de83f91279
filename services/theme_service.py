# -*- coding: utf-8 -*-
"""
Theme preference, persisted independently of the identity.
"""

from typing import Optional

from services.session_service import SessionStore
from utils.logger import get_logger

logger = get_logger(__name__)


class ThemeService:
    """Light/dark preference stored under the 'theme' key."""

    THEME_KEY = "theme"
    LIGHT = "light"
    DARK = "dark"

    def __init__(self, store: Optional[SessionStore] = None):
        self.store = store or SessionStore()

    def get_theme(self) -> str:
        theme = self.store.get(self.THEME_KEY)
        if theme in (self.LIGHT, self.DARK):
            return theme
        return self.LIGHT

    def set_theme(self, theme: str):
        if theme not in (self.LIGHT, self.DARK):
            raise ValueError(f"Unknown theme: {theme}")
        self.store.set(self.THEME_KEY, theme)
        logger.info(f"Theme set to {theme}")

    def toggle(self) -> str:
        new_theme = self.DARK if self.get_theme() == self.LIGHT else self.LIGHT
        self.set_theme(new_theme)
        return new_theme

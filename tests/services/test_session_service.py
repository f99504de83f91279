# -*- coding: utf-8 -*-
"""
Tests for session persistence and the theme preference.
"""

import pytest

from models.identity import Identity
from services.exceptions import IdentityMissingError
from services.session_service import SessionService, SessionStore
from services.theme_service import ThemeService


class TestSessionStore:
    """Test the JSON key-value store."""

    def test_values_survive_reload(self, tmp_path):
        path = tmp_path / "session.json"
        SessionStore(path).set("theme", "dark")
        assert SessionStore(path).get("theme") == "dark"

    def test_remove(self, session_store):
        session_store.set("key", 1)
        session_store.remove("key")
        assert not session_store.contains("key")

    def test_corrupt_file_starts_empty(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json", encoding="utf-8")
        assert SessionStore(path).get("user") is None


class TestSessionService:
    """Test identity persistence."""

    def test_save_and_load(self, session_store):
        service = SessionService(session_store)
        service.save_identity(Identity("RA22", "Jane"))

        assert service.has_identity()
        assert service.load_identity() == Identity("RA22", "Jane")

    def test_missing_identity(self, session_store):
        service = SessionService(session_store)
        assert not service.has_identity()
        with pytest.raises(IdentityMissingError):
            service.load_identity()

    def test_unusable_identity(self, session_store):
        session_store.set(SessionService.USER_KEY, {"name": "Jane"})
        with pytest.raises(IdentityMissingError):
            SessionService(session_store).load_identity()

    def test_clear_identity_keeps_theme(self, session_store):
        service = SessionService(session_store)
        theme = ThemeService(session_store)
        service.save_identity(Identity("RA22", "Jane"))
        theme.set_theme(ThemeService.DARK)

        service.clear_identity()

        assert not service.has_identity()
        assert theme.get_theme() == ThemeService.DARK


class TestThemeService:
    """Test the light/dark preference."""

    def test_default_light(self, session_store):
        assert ThemeService(session_store).get_theme() == ThemeService.LIGHT

    def test_toggle(self, session_store):
        theme = ThemeService(session_store)
        assert theme.toggle() == ThemeService.DARK
        assert theme.toggle() == ThemeService.LIGHT

    def test_unknown_theme_rejected(self, session_store):
        with pytest.raises(ValueError):
            ThemeService(session_store).set_theme("sepia")

    def test_stored_under_theme_key(self, session_store):
        ThemeService(session_store).set_theme(ThemeService.DARK)
        assert session_store.get("theme") == "dark"

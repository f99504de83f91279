# -*- coding: utf-8 -*-
"""
Session Service - durable client-side key-value store.

Holds the signed-in identity and the theme preference in a JSON file so
both survive application restarts.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from app.config import Config
from models.identity import Identity
from services.exceptions import IdentityMissingError
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionStore:
    """Key-value store persisted as a JSON object on disk."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else Config.SESSION_PATH
        self._data: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Session file unreadable, starting empty: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2)

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any):
        self._data[key] = value
        self._save()

    def remove(self, key: str):
        if key in self._data:
            del self._data[key]
            self._save()

    def contains(self, key: str) -> bool:
        return key in self._data


class SessionService:
    """
    Identity persistence on top of a SessionStore.

    The wizard receives the loaded Identity explicitly; it never reads the
    store itself.
    """

    USER_KEY = "user"

    def __init__(self, store: Optional[SessionStore] = None):
        self.store = store or SessionStore()

    def save_identity(self, identity: Identity):
        self.store.set(self.USER_KEY, identity.to_dict())
        logger.info(f"Session started for {identity.roll_number}")

    def load_identity(self) -> Identity:
        """
        Load the stored identity.

        Raises:
            IdentityMissingError: nothing stored, or the stored entry is unusable
        """
        data = self.store.get(self.USER_KEY)
        if not isinstance(data, dict):
            raise IdentityMissingError()

        identity = Identity.from_dict(data)
        if not identity.roll_number.strip():
            raise IdentityMissingError("Stored identity has no roll number")
        return identity

    def has_identity(self) -> bool:
        try:
            self.load_identity()
        except IdentityMissingError:
            return False
        return True

    def clear_identity(self):
        self.store.remove(self.USER_KEY)
        logger.info("Session cleared")

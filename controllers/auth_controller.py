# -*- coding: utf-8 -*-
"""
Auth Controller
===============
Identity registration for the login page and session teardown on logout.
"""

from typing import Optional

from controllers.base_controller import BaseController, OperationResult
from models.identity import Identity
from services.form_api_service import FormApiService
from services.session_service import SessionService
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)


class AuthController(BaseController):
    """
    Registers an identity with the backend and keeps it in the session.

    Usage:
        controller = AuthController(session_service)
        result = controller.register("RA22", "Jane")
        if result.success:
            identity = result.data
    """

    def __init__(
        self,
        session: SessionService,
        api_service: Optional[FormApiService] = None,
        parent=None
    ):
        super().__init__(parent)
        self.session = session
        self.api_service = api_service or FormApiService()

    def validate_input(self, roll_number: str, name: str) -> Optional[str]:
        """Local check run before contacting the backend; returns the error text."""
        if not roll_number.strip() or not name.strip():
            return tr("login.both_required")
        return None

    def register(self, roll_number: str, name: str) -> OperationResult[Identity]:
        """
        Register an identity and store it on success.

        Empty input is rejected locally without contacting the backend.
        """
        error = self.validate_input(roll_number, name)
        if error:
            return OperationResult.fail(error)
        identity = Identity(roll_number=roll_number.strip(), name=name.strip())

        self._emit_started("register")
        self._log_operation("register", roll_number=identity.roll_number)
        result = self.api_service.create_user(identity)

        if not result.success:
            self._emit_error("register", result.message)
            return OperationResult.fail(result.message)

        self.session.save_identity(identity)
        self._emit_completed("register", True)
        return OperationResult.ok(data=identity, message=result.message)

    def current_identity(self) -> Optional[Identity]:
        """The stored identity, or None when nobody is signed in."""
        if not self.session.has_identity():
            return None
        return self.session.load_identity()

    def logout(self):
        """Forget the stored identity."""
        self._log_operation("logout")
        self.session.clear_identity()

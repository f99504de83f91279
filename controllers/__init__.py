# -*- coding: utf-8 -*-
"""
Dynaform Controllers
====================
Controller layer between the UI (pages, wizard views) and the services.

Controllers provide:
- Standardized results via OperationResult
- Qt signals for UI updates
- The wizard state machine

Usage:
    from controllers import AuthController

    controller = AuthController(session)
    result = controller.register("RA22", "Jane")
    if not result.success:
        show(result.message)
"""

from controllers.base_controller import (
    BaseController,
    OperationResult,
)

from controllers.auth_controller import AuthController

from controllers.wizard_controller import (
    SchemaFetchWorker,
    WizardController,
)

__all__ = [
    # Base
    "BaseController",
    "OperationResult",

    # Auth
    "AuthController",

    # Wizard
    "SchemaFetchWorker",
    "WizardController",
]

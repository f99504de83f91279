# -*- coding: utf-8 -*-
"""
Wizard Framework - shared wizard state, navigation and error handling.
"""

from .wizard_context import WizardContext, WizardStatus
from .step_navigator import StepNavigator
from .error_boundary import with_error_boundary

__all__ = [
    'WizardContext',
    'WizardStatus',
    'StepNavigator',
    'with_error_boundary'
]

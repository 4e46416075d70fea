# -*- coding: utf-8 -*-
"""
Wizard Framework - Shared state handling for multi-step wizards.

Provides the base context and the step navigator used by wizard
controllers.
"""

from .wizard_context import SessionStatus, WizardContext
from .step_navigator import StepNavigator

__all__ = [
    'SessionStatus',
    'WizardContext',
    'StepNavigator'
]

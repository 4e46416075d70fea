# -*- coding: utf-8 -*-
"""Enrollment wizard services: pure functions over the enrollment draft."""

from .step_validator import StepValidator, ValidationFailure, ValidationRule
from .submission_assembler import Submission, assemble_submission
from .relationship_synchronizer import (
    on_guardian_relation_changed,
    on_parent_mode_changed,
    resolve_guardian_fields,
)
from . import draft_reducer

__all__ = [
    'StepValidator',
    'ValidationFailure',
    'ValidationRule',
    'Submission',
    'assemble_submission',
    'on_guardian_relation_changed',
    'on_parent_mode_changed',
    'resolve_guardian_fields',
    'draft_reducer',
]

# -*- coding: utf-8 -*-
"""Student enrollment wizard."""

from .enrollment_context import EnrollmentContext

__all__ = ['EnrollmentContext']

# -*- coding: utf-8 -*-
"""
Controllers
===========
Controller layer between the UI and the services.

Controllers provide:
- Standardized error handling via OperationResult
- Qt signals for UI updates
- Wizard state and navigation

Usage:
    from controllers import EnrollmentWizardController
    from services.inscription_api_service import InscriptionApiService

    service = InscriptionApiService()
    controller = EnrollmentWizardController(service, service, service)
    controller.submission_succeeded.connect(on_created)
"""

from controllers.base_controller import BaseController, OperationResult
from controllers.enrollment_controller import EnrollmentWizardController, GatewayWorker
from controllers.student_controller import StudentController

__all__ = [
    'BaseController',
    'OperationResult',
    'EnrollmentWizardController',
    'GatewayWorker',
    'StudentController',
]

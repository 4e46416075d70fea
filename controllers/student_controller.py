# -*- coding: utf-8 -*-
"""
Student Controller
==================
Read-only access to enrolled students.

Handles:
- Student list with search and class filters
- Student detail (parents, guardian, enrollment history)
- Photo URLs
"""

from typing import List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController, OperationResult
from models.student import Student, StudentDetail
from services.inscription_api_service import InscriptionApiService
from utils.helpers import get_photo_url
from utils.logger import get_logger

logger = get_logger(__name__)


class StudentController(BaseController):
    """Controller for the student list and detail views."""

    # Signals
    students_loaded = pyqtSignal(list)  # list of Student
    student_selected = pyqtSignal(object)  # StudentDetail

    def __init__(self, service: Optional[InscriptionApiService] = None, parent=None):
        super().__init__(parent)
        self.service = service or InscriptionApiService()
        self._students_cache: List[Student] = []
        self._current_student: Optional[StudentDetail] = None

    # ==================== Properties ====================

    @property
    def students(self) -> List[Student]:
        """Get cached students list."""
        return self._students_cache

    @property
    def current_student(self) -> Optional[StudentDetail]:
        return self._current_student

    # ==================== Queries ====================

    def load_students(self, search: Optional[str] = None,
                      classe_id: Optional[str] = None) -> OperationResult[List[Student]]:
        """
        Load students matching the filters.

        Args:
            search: Free text on names and matricule
            classe_id: Restrict to one class

        Returns:
            OperationResult with the students or the error message
        """
        self._log_operation("load_students", search=search, classe_id=classe_id)
        result = self.execute_with_error_handling(
            "load_students", self.service.get_students, search, classe_id)
        if result.success:
            self._students_cache = result.data
            self.students_loaded.emit(result.data)
        return result

    def select_student(self, student_id: str) -> OperationResult[StudentDetail]:
        """Load the full record of one student."""
        result = self.execute_with_error_handling(
            "select_student", self.service.get_student_detail, student_id)
        if result.success:
            self._current_student = result.data
            self.student_selected.emit(result.data)
        return result

    def photo_url(self, student: Student) -> Optional[str]:
        return get_photo_url(student.photo, self.service.api.base_url)

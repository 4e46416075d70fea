# -*- coding: utf-8 -*-
"""
Tests for the student list/detail controller.
"""

from unittest.mock import Mock

import pytest

from controllers.student_controller import StudentController
from models import Student, StudentDetail
from services.exceptions import NetworkException
from services.inscription_api_service import InscriptionApiService
from services.translations.fr import FR_TRANSLATIONS


@pytest.fixture
def service():
    service = Mock(spec=InscriptionApiService)
    service.api = Mock(base_url="http://api.test")
    return service


@pytest.fixture
def controller(qtbot, service):
    return StudentController(service)


class TestLoadStudents:
    """Test loading the student list."""

    def test_success(self, qtbot, controller, service):
        students = [Student(id="e-1", photo="photos_eleves/e1.jpeg")]
        service.get_students.return_value = students

        with qtbot.waitSignal(controller.students_loaded) as blocker:
            result = controller.load_students(search="Awa")

        assert result.success
        assert blocker.args == [students]
        assert controller.students == students
        service.get_students.assert_called_once_with("Awa", None)
        assert controller.photo_url(students[0]) == "http://api.test/static/photos_eleves/e1.jpeg"

    def test_network_error(self, qtbot, controller, service):
        service.get_students.side_effect = NetworkException("refused", original_error=ConnectionError())

        with qtbot.waitSignal(controller.operation_error) as blocker:
            result = controller.load_students()

        assert not result.success
        assert result.message == FR_TRANSLATIONS["error.api.connection"]
        assert blocker.args == ["load_students", result.message]
        assert not controller.is_loading


class TestSelectStudent:
    def test_detail(self, qtbot, controller, service):
        detail = StudentDetail(id="e-1")
        service.get_student_detail.return_value = detail

        with qtbot.waitSignal(controller.student_selected):
            result = controller.select_student("e-1")

        assert result.data is detail
        assert controller.current_student is detail

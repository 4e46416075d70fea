# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for the application controllers.

Provides the operation signals shared by every controller and the
translation of exceptions into user-facing messages.
"""

from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from services.error_mapper import map_exception
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Result of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = None

    def __post_init__(self):
        if self.errors is None:
            self.errors = []

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None) -> 'OperationResult[T]':
        """Create a failed result."""
        return cls(success=False, message=message, errors=errors or [])


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Common signal patterns
    - Loading state over concurrent operations
    - Error mapping and logging
    """

    # Common signals
    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._pending_operations = 0
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        """Check if controller is performing an operation."""
        return self._pending_operations > 0

    @property
    def last_error(self) -> str:
        """Get last error message."""
        return self._last_error

    def _change_pending(self, delta: int):
        was_loading = self.is_loading
        self._pending_operations = max(0, self._pending_operations + delta)
        if was_loading != self.is_loading:
            self.loading_changed.emit(self.is_loading)

    def _set_error(self, error: str):
        """Set error message."""
        self._last_error = error
        if error:
            logger.error(f"{self.__class__.__name__}: {error}")

    def _log_operation(self, operation: str, **kwargs):
        """Log an operation."""
        logger.info(f"{self.__class__.__name__}.{operation}: {kwargs}")

    def _emit_started(self, operation: str):
        """Emit operation started signal."""
        self.operation_started.emit(operation)
        self._change_pending(1)

    def _emit_completed(self, operation: str, success: bool = True):
        """Emit operation completed signal."""
        self.operation_completed.emit(operation, success)
        self._change_pending(-1)

    def _emit_error(self, operation: str, error: Exception) -> str:
        """Map the exception, emit the error signal and return the message."""
        message = map_exception(error, context=operation)
        self._set_error(message)
        self.operation_error.emit(operation, message)
        self.operation_completed.emit(operation, False)
        self._change_pending(-1)
        return message

    def execute_with_error_handling(
        self,
        operation: str,
        func: Callable,
        *args,
        **kwargs
    ) -> OperationResult:
        """Execute a function synchronously with standard error handling."""
        self._emit_started(operation)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{operation} failed: {e}", exc_info=True)
            return OperationResult.fail(message=self._emit_error(operation, e))
        self._emit_completed(operation, True)
        return OperationResult.ok(data=result)

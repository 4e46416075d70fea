# -*- coding: utf-8 -*-
"""
Step Navigator - Manages navigation between wizard steps.

Handles:
- Step progression (next/previous)
- Step validation before moving forward
- Progress tracking
"""

from typing import Callable, List, Optional
from PyQt5.QtCore import QObject, pyqtSignal

from .wizard_context import WizardContext
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Linear cursor over a fixed number of steps.

    Moving forward runs ``validate(index)`` for the step being left; a
    non-empty result blocks navigation. Moving back is never validated.
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    can_go_next_changed = pyqtSignal(bool)
    can_go_previous_changed = pyqtSignal(bool)
    validation_failed = pyqtSignal(list)  # failures

    def __init__(
        self,
        context: WizardContext,
        step_count: int,
        validate: Callable[[int], list],
        on_leave: Optional[Callable[[int], None]] = None
    ):
        """
        Initialize the navigator.

        Args:
            context: Wizard context
            step_count: Number of steps
            validate: Returns the failures of a step (empty when valid)
            on_leave: Called with the index of a step left forward
        """
        super().__init__()
        self.context = context
        self.step_count = step_count
        self._validate = validate
        self._on_leave = on_leave
        self.current_index = 0
        self.last_failures: list = []

    def can_go_next(self) -> bool:
        """Check if there is a step after the current one."""
        return self.current_index < self.step_count - 1

    def can_go_previous(self) -> bool:
        """Check if there is a step before the current one."""
        return self.current_index > 0

    def is_last_step(self) -> bool:
        return self.current_index == self.step_count - 1

    def validate_current(self) -> List:
        """Run validation for the current step without moving."""
        self.last_failures = list(self._validate(self.current_index))
        return self.last_failures

    def next_step(self) -> bool:
        """
        Navigate to the next step.

        Returns:
            True if navigation was successful
        """
        if not self.can_go_next():
            logger.debug(f"Cannot go next: already at last step ({self.current_index})")
            self.last_failures = []
            return False

        logger.info(f"Navigating: Step {self.current_index} → {self.current_index + 1}")

        failures = self.validate_current()
        if failures:
            logger.warning(f"Step {self.current_index} validation failed: "
                           f"{[getattr(f, 'message', f) for f in failures]}")
            self.validation_failed.emit(failures)
            return False

        self.context.mark_step_completed(self.current_index)
        if self._on_leave is not None:
            self._on_leave(self.current_index)

        return self._navigate_to(self.current_index + 1)

    def previous_step(self) -> bool:
        """Navigate to the previous step."""
        if not self.can_go_previous():
            logger.debug(f"Cannot go previous: already at first step ({self.current_index})")
            return False

        logger.info(f"Navigating back: Step {self.current_index} → {self.current_index - 1}")
        self.last_failures = []
        return self._navigate_to(self.current_index - 1)

    def _navigate_to(self, new_index: int) -> bool:
        if new_index < 0 or new_index >= self.step_count:
            logger.error(f"Invalid step index: {new_index} (valid range: 0-{self.step_count - 1})")
            return False

        old_index = self.current_index
        self.current_index = new_index
        self.context.current_step_index = new_index
        self.context.touch()

        self.step_changed.emit(old_index, new_index)
        self.can_go_next_changed.emit(self.can_go_next())
        self.can_go_previous_changed.emit(self.can_go_previous())
        return True

    def reset(self):
        """Reset navigator to first step."""
        self.last_failures = []
        if self.current_index != 0:
            self._navigate_to(0)

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            Progress percentage (0.0 to 100.0)
        """
        if self.step_count <= 1:
            return 0.0
        return (self.current_index / (self.step_count - 1)) * 100.0

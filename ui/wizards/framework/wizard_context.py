# -*- coding: utf-8 -*-
"""
Wizard Context - Session state shared by every wizard.

A session has an identity (id and reference number), a lifecycle status
and the set of steps already validated. Concrete wizards add their own
data and the review summary.
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Set

from utils.logger import get_logger

logger = get_logger(__name__)


class SessionStatus(str, Enum):
    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    SUBMITTING = "submitting"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


_TRANSITIONS = {
    SessionStatus.DRAFT: {SessionStatus.IN_PROGRESS, SessionStatus.SUBMITTING, SessionStatus.CANCELLED},
    SessionStatus.IN_PROGRESS: {SessionStatus.SUBMITTING, SessionStatus.CANCELLED},
    SessionStatus.SUBMITTING: {SessionStatus.IN_PROGRESS, SessionStatus.COMPLETED, SessionStatus.CANCELLED},
    SessionStatus.COMPLETED: set(),
    SessionStatus.CANCELLED: set(),
}


class WizardContext(ABC):
    """Base class for wizard session state."""

    reference_prefix = "WIZ"

    def __init__(self):
        self._open_session()

    def _open_session(self):
        self.wizard_id: str = uuid.uuid4().hex
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = self.created_at
        self.status: SessionStatus = SessionStatus.DRAFT
        self.current_step_index: int = 0
        self.completed_steps: Set[int] = set()
        # e.g. INS-20250918153045-A3F2
        self.reference_number: str = "{}-{:%Y%m%d%H%M%S}-{}".format(
            self.reference_prefix, self.created_at, self.wizard_id[:4].upper())

    @property
    def is_closed(self) -> bool:
        return not _TRANSITIONS[self.status]

    def transition(self, status: SessionStatus):
        """
        Move the session to a new status.

        Raises:
            ValueError: the move is not allowed from the current status
        """
        status = SessionStatus(status)
        if status is self.status:
            return
        if status not in _TRANSITIONS[self.status]:
            raise ValueError(f"Session {self.reference_number}: "
                             f"cannot go from {self.status.value} to {status.value}")
        logger.debug(f"Session {self.reference_number}: {self.status.value} -> {status.value}")
        self.status = status
        self.touch()

    def touch(self):
        self.updated_at = datetime.now()

    def mark_step_completed(self, step_index: int):
        self.completed_steps.add(step_index)
        self.touch()

    def is_step_completed(self, step_index: int) -> bool:
        return step_index in self.completed_steps

    def to_dict(self) -> Dict[str, Any]:
        """Session fields for logs; subclasses extend it."""
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
        }

    @abstractmethod
    def get_summary(self) -> Dict[str, Any]:
        """Data shown on the review step."""

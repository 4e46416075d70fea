# -*- coding: utf-8 -*-
"""
Enrollment Wizard Controller
============================
Owns the enrollment draft and the step cursor.

Every edit goes through ``dispatch(event)``; navigation, parent search,
reference data loading and submission are exposed as methods, and the
outcome of each is reported through Qt signals. Network calls run on a
GatewayWorker thread; their results come back as queued signals and are
dropped when the session they belong to is gone.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from PyQt5.QtCore import QThread, pyqtSignal

from app.config import Config
from controllers.base_controller import BaseController
from models.enrollment_draft import EnrollmentDraft, WizardStep
from models.person import ParentMode, ParentRole, PersonFields
from models.school import AnneeScolaire, Classe
from services.gateways import EnrollmentGateway, PersonSearchGateway, SchoolYearGateway
from services.translation_manager import tr
from services.wizard import draft_reducer
from services.wizard.relationship_synchronizer import resolve_guardian_fields
from services.wizard.step_validator import StepValidator
from services.wizard.submission_assembler import assemble_submission
from ui.wizards.enrollment import EnrollmentContext
from ui.wizards.framework import SessionStatus, StepNavigator
from utils.logger import get_logger

logger = get_logger(__name__)

OP_SEARCH = "search_parents"
OP_SUBMIT = "submit"
OP_REFERENCE = "load_reference_data"


@dataclass(frozen=True)
class _Ticket:
    """Identifies the request a worker result belongs to."""
    operation: str
    generation: int
    role: Optional[ParentRole] = None
    sequence: int = 0


class GatewayWorker(QThread):
    """Background worker running one gateway call."""

    succeeded = pyqtSignal(object, object)  # ticket, result
    failed = pyqtSignal(object, object)  # ticket, exception

    def __init__(self, ticket: _Ticket, func: Callable, *args):
        super().__init__()
        self.ticket = ticket
        self._func = func
        self._args = args

    def run(self):
        """Run the call in background."""
        try:
            result = self._func(*self._args)
        except Exception as e:
            logger.error(f"{self.ticket.operation} failed: {e}", exc_info=True)
            self.failed.emit(self.ticket, e)
            return
        self.succeeded.emit(self.ticket, result)


class EnrollmentWizardController(BaseController):
    """
    Controller for the student enrollment wizard.

    Signals:
        draft_changed(EnrollmentDraft)
        step_changed(old_step, new_step)
        validation_failed(list of ValidationFailure)
        search_results_ready(role, list of ExistingParent)
        reference_data_loaded(AnneeScolaire or None, list of Classe)
        submission_succeeded(InscriptionResult)
        submission_failed(message)
        wizard_cancelled()
    """

    draft_changed = pyqtSignal(object)
    step_changed = pyqtSignal(int, int)
    validation_failed = pyqtSignal(list)
    search_results_ready = pyqtSignal(str, list)
    reference_data_loaded = pyqtSignal(object, list)
    submission_succeeded = pyqtSignal(object)
    submission_failed = pyqtSignal(str)
    wizard_cancelled = pyqtSignal()

    def __init__(
        self,
        enrollment_gateway: EnrollmentGateway,
        search_gateway: PersonSearchGateway,
        school_year_gateway: Optional[SchoolYearGateway] = None,
        parent=None
    ):
        super().__init__(parent)
        self._enrollment_gateway = enrollment_gateway
        self._search_gateway = search_gateway
        self._school_year_gateway = school_year_gateway

        self.context = EnrollmentContext()
        self.navigator = StepNavigator(
            self.context,
            step_count=len(WizardStep),
            validate=lambda index: StepValidator.validate_step(WizardStep(index), self.draft),
            on_leave=self._on_step_left,
        )
        self.navigator.step_changed.connect(self.step_changed)
        self.navigator.validation_failed.connect(self.validation_failed)

        self._generation = 0
        self._search_sequence = {role: 0 for role in ParentRole}
        self._submitting = False
        self._alive = True
        self._workers: List[GatewayWorker] = []

    # =========================================================================
    # State
    # =========================================================================

    @property
    def draft(self) -> EnrollmentDraft:
        return self.context.draft

    @property
    def current_step(self) -> WizardStep:
        return WizardStep(self.navigator.current_index)

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    @property
    def classes(self) -> List[Classe]:
        return list(self.context.classes)

    @property
    def current_year(self) -> Optional[AnneeScolaire]:
        return self.context.current_year

    def guardian_fields(self) -> PersonFields:
        """Guardian as displayed: the referenced parent or the manual entry."""
        return resolve_guardian_fields(self.draft)

    def summary(self) -> dict:
        return self.context.get_summary()

    # =========================================================================
    # Editing and navigation
    # =========================================================================

    def dispatch(self, event) -> EnrollmentDraft:
        """
        Apply a draft event and publish the new draft.

        Raises:
            ValueError: unknown field or unsupported event
        """
        self._replace_draft(draft_reducer.reduce(self.draft, event))
        return self.draft

    def next(self) -> list:
        """
        Validate the current step and advance.

        Returns:
            The validation failures; empty when the cursor moved.
        """
        if self.current_step is WizardStep.REVIEW:
            logger.debug("Already on the review step")
            return []
        step = self.current_step
        if self.navigator.next_step():
            logger.info(f"Step completed: {StepValidator.get_step_name(step)}")
        return list(self.navigator.last_failures)

    def back(self) -> bool:
        return self.navigator.previous_step()

    def _on_step_left(self, index: int):
        if WizardStep(index) is WizardStep.PARENTS:
            self._replace_draft(draft_reducer.resync(self.draft))

    def _replace_draft(self, draft: EnrollmentDraft):
        if draft != self.draft:
            self.context.set_draft(draft)
            self.draft_changed.emit(draft)

    def cancel(self):
        """Discard the draft; results of pending requests will be ignored."""
        logger.info(f"Enrollment {self.context.reference_number} cancelled")
        self.context.transition(SessionStatus.CANCELLED)
        self._start_new_session()
        self.wizard_cancelled.emit()

    def _start_new_session(self):
        self._generation += 1
        self._submitting = False
        self.context.reset()
        self.navigator.reset()
        self.context.draft = self._with_current_year(self.draft)
        self.draft_changed.emit(self.draft)

    def shutdown(self, timeout_ms: int = 3000):
        """Invalidate pending results and wait for the worker threads."""
        self._alive = False
        self._generation += 1
        for worker in self._workers:
            if worker.isRunning():
                worker.wait(timeout_ms)
        self._workers = []

    # =========================================================================
    # Reference data
    # =========================================================================

    def load_reference_data(self) -> bool:
        """Fetch the current school year and its classes."""
        if self._school_year_gateway is None:
            logger.warning("No school year gateway configured")
            return False
        self._emit_started(OP_REFERENCE)
        self._start_worker(_Ticket(OP_REFERENCE, self._generation), self._fetch_reference_data)
        return True

    def _fetch_reference_data(self) -> Tuple[Optional[AnneeScolaire], List[Classe]]:
        year = self._school_year_gateway.get_current_year()
        classes = self._school_year_gateway.get_classes(year.id if year else None)
        return year, classes

    def _with_current_year(self, draft: EnrollmentDraft) -> EnrollmentDraft:
        year = self.context.current_year
        if year is None or draft.student.annee_scolaire_id:
            return draft
        return draft_reducer.reduce(draft, draft_reducer.StudentFieldChanged("annee_scolaire_id", year.id))

    def _on_reference_data(self, year: Optional[AnneeScolaire], classes: List[Classe]):
        self.context.current_year = year
        self.context.classes = list(classes)
        if year is None:
            self._set_error(tr("error.year.missing"))
            self.operation_error.emit(OP_REFERENCE, tr("error.year.missing"))
            self._emit_completed(OP_REFERENCE, False)
        else:
            self._emit_completed(OP_REFERENCE, True)
            self._replace_draft(self._with_current_year(self.draft))
        logger.info(f"Loaded {len(classes)} classes for year {year.nom if year else '-'}")
        self.reference_data_loaded.emit(year, list(classes))

    # =========================================================================
    # Parent search
    # =========================================================================

    def search_parents(self, role: ParentRole, query: str) -> bool:
        """
        Search existing parents for a role in search mode.

        Returns:
            True if a request was sent
        """
        if self.draft.parent(role).mode is not ParentMode.EXISTING:
            logger.debug(f"Search ignored: {role.value} is not in search mode")
            return False

        query = (query or "").strip()
        self._search_sequence[role] += 1
        if len(query) < Config.PARENT_SEARCH_MIN_LENGTH:
            self.search_results_ready.emit(role.value, [])
            return False

        ticket = _Ticket(OP_SEARCH, self._generation, role, self._search_sequence[role])
        self._emit_started(OP_SEARCH)
        self._start_worker(ticket, self._search_gateway.search_parents, query)
        return True

    def _on_search_results(self, ticket: _Ticket, results: list):
        role = ticket.role
        if self.draft.parent(role).mode is not ParentMode.EXISTING:
            logger.debug(f"Dropping search results: {role.value} left search mode")
            return
        if ticket.sequence != self._search_sequence[role]:
            logger.debug(f"Dropping superseded search results for {role.value}")
            return
        self.search_results_ready.emit(role.value, list(results))

    # =========================================================================
    # Submission
    # =========================================================================

    def submit(self) -> bool:
        """
        Validate, assemble and send the enrollment.

        Returns:
            True if the request was sent
        """
        if self.current_step is not WizardStep.REVIEW:
            logger.warning(f"Submit refused on step {self.current_step.name}")
            return False
        if self._submitting:
            logger.warning("Submit refused: a submission is already in progress")
            self.submission_failed.emit(tr("error.inscription.in_progress"))
            return False

        failures = StepValidator.validate_submission(self.draft)
        if failures:
            self.validation_failed.emit(failures)
            return False

        submission = assemble_submission(self.draft)
        self._submitting = True
        self.context.transition(SessionStatus.SUBMITTING)
        self.context.submission_error = None
        self._log_operation(OP_SUBMIT, reference=self.context.reference_number,
                            photos=sorted(submission.photos))
        self._emit_started(OP_SUBMIT)
        self._start_worker(
            _Ticket(OP_SUBMIT, self._generation),
            self._enrollment_gateway.create_inscription,
            submission.payload,
            submission.photos,
        )
        return True

    def _on_submission_succeeded(self, result):
        reference = self.context.reference_number
        self.context.transition(SessionStatus.COMPLETED)
        logger.info(f"Enrollment {reference} created: inscription {result.id}")
        self._start_new_session()
        self.context.result = result
        self.submission_succeeded.emit(result)

    def _on_submission_failed(self, message: str):
        self._submitting = False
        self.context.transition(SessionStatus.IN_PROGRESS)
        self.context.submission_error = message
        self.submission_failed.emit(message)

    # =========================================================================
    # Workers
    # =========================================================================

    def _start_worker(self, ticket: _Ticket, func: Callable, *args):
        self._workers = [w for w in self._workers if w.isRunning()]
        worker = GatewayWorker(ticket, func, *args)
        worker.succeeded.connect(self._on_worker_succeeded)
        worker.failed.connect(self._on_worker_failed)
        self._workers.append(worker)
        worker.start()

    def _is_current(self, ticket: _Ticket) -> bool:
        if not self._alive:
            logger.debug(f"Dropping {ticket.operation} result received after shutdown")
            return False
        if ticket.operation == OP_REFERENCE:
            # School year and classes are shared by every session
            return True
        if ticket.generation != self._generation:
            logger.debug(f"Dropping stale {ticket.operation} result "
                         f"(generation {ticket.generation}, current {self._generation})")
            return False
        return True

    def _on_worker_succeeded(self, ticket: _Ticket, result: Any):
        if not self._is_current(ticket):
            self._emit_completed(ticket.operation, True)
            return

        if ticket.operation == OP_REFERENCE:
            # Completion depends on whether a current year exists
            year, classes = result
            self._on_reference_data(year, classes)
            return

        self._emit_completed(ticket.operation, True)
        if ticket.operation == OP_SEARCH:
            self._on_search_results(ticket, result)
        elif ticket.operation == OP_SUBMIT:
            self._on_submission_succeeded(result)

    def _on_worker_failed(self, ticket: _Ticket, error: Exception):
        if not self._is_current(ticket):
            self._emit_completed(ticket.operation, False)
            return

        message = self._emit_error(ticket.operation, error)
        if ticket.operation == OP_SUBMIT:
            self._on_submission_failed(message)

# -*- coding: utf-8 -*-
"""
Step validation service for the enrollment wizard.

Validates draft data for each step without UI coupling. Failures are
values, never exceptions: the wizard stays on the step and shows them.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import List, Optional

from models.enrollment_draft import EnrollmentDraft, WizardStep
from models.guardian import GuardianRelation, IndependentGuardian
from models.person import ExistingParent, NewParent, ParentMode, ParentRole
from services.translation_manager import tr
from services.validation import get_validation_factory


class ValidationRule(Enum):
    """Identifiers of the rules a draft can violate."""
    STUDENT_INCOMPLETE = "student_incomplete"
    PARENT_INCOMPLETE = "parent_incomplete"
    PARENT_NOT_SELECTED = "parent_not_selected"
    GUARDIAN_INCOMPLETE = "guardian_incomplete"
    GUARDIAN_FATHER_ABSENT = "guardian_father_absent"
    GUARDIAN_MOTHER_ABSENT = "guardian_mother_absent"
    NO_PARENT = "no_parent"


@dataclass(frozen=True)
class ValidationFailure:
    """One violated rule with its user-facing message."""
    rule: ValidationRule
    message: str
    role: Optional[str] = None


def _labels(fields: List[str]) -> str:
    return ", ".join(tr(f"field.{name}") for name in fields)


class StepValidator:
    """Validates wizard step data based on the enrollment draft."""

    @staticmethod
    def validate_step(step: WizardStep, draft: EnrollmentDraft) -> List[ValidationFailure]:
        """
        Validate the data a step is responsible for.

        Args:
            step: Step being left
            draft: Current enrollment draft

        Returns:
            List of failures (empty when the step may be left)
        """
        if step == WizardStep.STUDENT:
            return StepValidator._check_student(draft)

        elif step == WizardStep.PARENTS:
            # Both parents may be absent here; rule "at least one parent"
            # is enforced at submission.
            failures = []
            for role in ParentRole:
                failures.extend(StepValidator._check_parent(role, draft))
            return failures

        elif step == WizardStep.GUARDIAN:
            return StepValidator._check_guardian_fields(draft)

        elif step == WizardStep.REVIEW:
            return StepValidator.validate_submission(draft)

        return []

    @staticmethod
    def validate_submission(draft: EnrollmentDraft) -> List[ValidationFailure]:
        """
        Full rule set evaluated before the payload is assembled.

        Re-checks the per-step rules, then the cross-field rules:
        a guardian derived from a parent needs that parent, an independent
        guardian needs complete fields, and at least one parent is present.
        """
        failures = StepValidator._check_student(draft)
        for role in ParentRole:
            failures.extend(StepValidator._check_parent(role, draft))

        relation = draft.tuteur.relation
        pere_mode = draft.pere.mode
        mere_mode = draft.mere.mode

        if relation is GuardianRelation.PERE and pere_mode is ParentMode.ABSENT:
            failures.append(ValidationFailure(
                ValidationRule.GUARDIAN_FATHER_ABSENT,
                tr("validation.guardian.father_absent"),
                role="tuteur",
            ))
        if relation is GuardianRelation.MERE and mere_mode is ParentMode.ABSENT:
            failures.append(ValidationFailure(
                ValidationRule.GUARDIAN_MOTHER_ABSENT,
                tr("validation.guardian.mother_absent"),
                role="tuteur",
            ))
        failures.extend(StepValidator._check_guardian_fields(draft))

        if pere_mode is ParentMode.ABSENT and mere_mode is ParentMode.ABSENT:
            failures.append(ValidationFailure(
                ValidationRule.NO_PARENT,
                tr("validation.no_parent"),
            ))

        return failures

    @staticmethod
    def get_step_name(step: WizardStep) -> str:
        """Translated name of a step."""
        return tr(f"wizard.step.{step.name.lower()}")

    # =========================================================================
    # Rules
    # =========================================================================

    @staticmethod
    def _check_student(draft: EnrollmentDraft) -> List[ValidationFailure]:
        missing = get_validation_factory().missing_fields(asdict(draft.student), "eleve")
        if not missing:
            return []
        return [ValidationFailure(
            ValidationRule.STUDENT_INCOMPLETE,
            tr("validation.student.missing", fields=_labels(missing)),
            role="eleve",
        )]

    @staticmethod
    def _check_parent(role: ParentRole, draft: EnrollmentDraft) -> List[ValidationFailure]:
        link = draft.parent(role)
        role_label = tr(f"role.{role.value}")

        if isinstance(link, ExistingParent) and not link.is_selected:
            return [ValidationFailure(
                ValidationRule.PARENT_NOT_SELECTED,
                tr("validation.parent.not_selected", role=role_label),
                role=role.value,
            )]

        if isinstance(link, NewParent):
            missing = get_validation_factory().missing_fields(asdict(link.fields), "personne")
            if missing:
                return [ValidationFailure(
                    ValidationRule.PARENT_INCOMPLETE,
                    tr("validation.parent.missing", role=role_label, fields=_labels(missing)),
                    role=role.value,
                )]
        return []

    @staticmethod
    def _check_guardian_fields(draft: EnrollmentDraft) -> List[ValidationFailure]:
        # Derived guardians take their fields from the parent, validated in
        # the parents step (new) or assumed valid (existing).
        tuteur = draft.tuteur
        if not isinstance(tuteur, IndependentGuardian):
            return []
        missing = get_validation_factory().missing_fields(asdict(tuteur.fields), "personne")
        if not missing:
            return []
        return [ValidationFailure(
            ValidationRule.GUARDIAN_INCOMPLETE,
            tr("validation.guardian.missing", fields=_labels(missing)),
            role="tuteur",
        )]

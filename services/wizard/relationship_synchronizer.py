# -*- coding: utf-8 -*-
"""
Keeps the guardian consistent with the parent links of an enrollment draft.

This is the only place where the guardian depends on the parents. A
derived guardian never references an absent parent: such a selection is
repaired to a blank independent guardian, which the user sees as a reset.
"""

from models.enrollment_draft import EnrollmentDraft
from models.guardian import (
    DerivedGuardian, GuardianDraft, GuardianRelation, IndependentGuardian,
)
from models.person import ParentMode, ParentRole, PersonFields
from utils.logger import get_logger

logger = get_logger(__name__)


def on_guardian_relation_changed(new_relation: GuardianRelation,
                                 draft: EnrollmentDraft) -> GuardianDraft:
    """
    Guardian value after the user picks a new relation.

    Picking a parent that is absent falls back to a blank independent
    guardian. Picking AUTRE keeps the current entries only if the guardian
    was already independent; coming from a derived relation starts blank.
    """
    role = new_relation.role
    if role is not None:
        if draft.parent(role).mode is ParentMode.ABSENT:
            logger.info(f"Guardian cannot derive from absent {role.value}, reset to independent")
            return IndependentGuardian()
        return DerivedGuardian(role)

    if isinstance(draft.tuteur, IndependentGuardian):
        return draft.tuteur
    return IndependentGuardian()


def on_parent_mode_changed(role: ParentRole, draft: EnrollmentDraft) -> GuardianDraft:
    """
    Guardian value after the mode of ``role`` changed.

    ``draft`` already carries the new parent link.
    """
    tuteur = draft.tuteur
    if (isinstance(tuteur, DerivedGuardian) and tuteur.role is role
            and draft.parent(role).mode is ParentMode.ABSENT):
        logger.info(f"Parent {role.value} became absent, guardian reset to independent")
        return IndependentGuardian()
    return tuteur


def resolve_guardian_fields(draft: EnrollmentDraft) -> PersonFields:
    """Current guardian fields; derived guardians read through to the parent."""
    tuteur = draft.tuteur
    if isinstance(tuteur, DerivedGuardian):
        return draft.parent(tuteur.role).snapshot()
    return tuteur.fields

# -*- coding: utf-8 -*-
"""
State transitions of the enrollment draft.

Every user edit is an event and ``reduce(draft, event)`` returns the next
draft. Mode and relation changes go through the relationship
synchronizer; plain field edits never touch another person.
"""

from dataclasses import dataclass, replace
from typing import Union

from models.enrollment_draft import EnrollmentDraft
from models.guardian import DerivedGuardian, GuardianRelation, IndependentGuardian
from models.person import (
    ExistingParent, NewParent, ParentMode, ParentRole, PersonFields,
    empty_link_for_mode,
)
from models.photo import PhotoAttachment
from services.wizard.relationship_synchronizer import (
    on_guardian_relation_changed, on_parent_mode_changed,
)
from utils.logger import get_logger

logger = get_logger(__name__)


# =========================================================================
# Events
# =========================================================================

@dataclass(frozen=True)
class StudentFieldChanged:
    field: str
    value: str


@dataclass(frozen=True)
class ParentModeChanged:
    role: ParentRole
    mode: ParentMode


@dataclass(frozen=True)
class ExistingParentSelected:
    """A person picked from the parent search results."""
    role: ParentRole
    parent: ExistingParent


@dataclass(frozen=True)
class ParentFieldChanged:
    role: ParentRole
    field: str
    value: str


@dataclass(frozen=True)
class GuardianRelationChanged:
    relation: GuardianRelation


@dataclass(frozen=True)
class GuardianFieldChanged:
    field: str
    value: str


@dataclass(frozen=True)
class PhotoAttached:
    attachment: PhotoAttachment


@dataclass(frozen=True)
class PhotoRemoved:
    role: str


DraftEvent = Union[
    StudentFieldChanged, ParentModeChanged, ExistingParentSelected,
    ParentFieldChanged, GuardianRelationChanged, GuardianFieldChanged,
    PhotoAttached, PhotoRemoved,
]


# =========================================================================
# Reducer
# =========================================================================

def reduce(draft: EnrollmentDraft, event: DraftEvent) -> EnrollmentDraft:
    """
    Apply one event to the draft.

    Raises:
        ValueError: unknown field name or unsupported event type
    """
    if isinstance(event, StudentFieldChanged):
        return replace(draft, student=draft.student.with_field(event.field, event.value))

    elif isinstance(event, ParentModeChanged):
        return _change_parent_mode(draft, event.role, event.mode)

    elif isinstance(event, ExistingParentSelected):
        if draft.parent(event.role).mode is not ParentMode.EXISTING:
            logger.debug(f"Ignoring selection for {event.role.value}: not in search mode")
            return draft
        return draft.with_parent(event.role, event.parent)

    elif isinstance(event, ParentFieldChanged):
        link = draft.parent(event.role)
        if not isinstance(link, NewParent):
            # Existing references are read-only, absent parents have no fields
            _check_person_field(event.field)
            logger.debug(f"Ignoring field edit on {event.role.value} in mode {link.mode.value}")
            return draft
        updated = NewParent(fields=link.fields.with_field(event.field, event.value))
        return draft.with_parent(event.role, updated)

    elif isinstance(event, GuardianRelationChanged):
        tuteur = on_guardian_relation_changed(event.relation, draft)
        draft = replace(draft, tuteur=tuteur)
        if isinstance(tuteur, DerivedGuardian):
            draft = draft.without_photo("tuteur")
        return draft

    elif isinstance(event, GuardianFieldChanged):
        tuteur = draft.tuteur
        if not isinstance(tuteur, IndependentGuardian):
            _check_person_field(event.field)
            logger.debug("Ignoring field edit on a derived guardian")
            return draft
        updated = IndependentGuardian(fields=tuteur.fields.with_field(event.field, event.value))
        return replace(draft, tuteur=updated)

    elif isinstance(event, PhotoAttached):
        role = event.attachment.role
        if not _takes_photo(draft, role):
            logger.debug(f"Ignoring photo for {role}: no person is created for it")
            return draft
        return draft.with_photo(event.attachment)

    elif isinstance(event, PhotoRemoved):
        return draft.without_photo(event.role)

    raise ValueError(f"Unsupported draft event: {type(event).__name__}")


def _change_parent_mode(draft: EnrollmentDraft, role: ParentRole,
                        mode: ParentMode) -> EnrollmentDraft:
    if draft.parent(role).mode is mode:
        return draft

    # A mode change always starts from an empty record for the role
    draft = draft.with_parent(role, empty_link_for_mode(mode, role))
    if mode is not ParentMode.NEW:
        draft = draft.without_photo(role.value)

    return replace(draft, tuteur=on_parent_mode_changed(role, draft))


def resync(draft: EnrollmentDraft) -> EnrollmentDraft:
    """Re-run the parent mode synchronization for both roles."""
    for role in ParentRole:
        draft = replace(draft, tuteur=on_parent_mode_changed(role, draft))
    return draft


def _takes_photo(draft: EnrollmentDraft, role: str) -> bool:
    """Whether the submission creates the person a photo belongs to."""
    if role == "eleve":
        return True
    if role == "tuteur":
        return isinstance(draft.tuteur, IndependentGuardian)
    return isinstance(draft.parent(ParentRole(role)), NewParent)


def _check_person_field(name: str):
    if name not in PersonFields.field_names():
        raise ValueError(f"Unknown person field: {name}")

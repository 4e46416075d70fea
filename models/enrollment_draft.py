# -*- coding: utf-8 -*-
"""
Enrollment draft: the immutable value edited by the enrollment wizard.

Every change produces a new EnrollmentDraft (see services.wizard.draft_reducer).
"""

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import Dict, Optional, Tuple

from models.guardian import GuardianDraft, IndependentGuardian
from models.person import AbsentParent, ParentLink, ParentRole
from models.photo import PhotoAttachment
from models.student import StudentDraft


class WizardStep(IntEnum):
    """Enrollment wizard steps, in navigation order."""
    STUDENT = 0
    PARENTS = 1
    GUARDIAN = 2
    REVIEW = 3


@dataclass(frozen=True)
class EnrollmentDraft:
    """Student, both parent links, guardian and pending photos."""

    student: StudentDraft = field(default_factory=StudentDraft)
    pere: ParentLink = field(default_factory=AbsentParent)
    mere: ParentLink = field(default_factory=AbsentParent)
    tuteur: GuardianDraft = field(default_factory=IndependentGuardian)
    photos: Tuple[PhotoAttachment, ...] = ()

    def parent(self, role: ParentRole) -> ParentLink:
        return self.pere if role is ParentRole.PERE else self.mere

    def with_parent(self, role: ParentRole, link: ParentLink) -> "EnrollmentDraft":
        return replace(self, **{role.value: link})

    def photo(self, role: str) -> Optional[PhotoAttachment]:
        for attachment in self.photos:
            if attachment.role == role:
                return attachment
        return None

    def with_photo(self, attachment: PhotoAttachment) -> "EnrollmentDraft":
        """Attach a photo, replacing any previous photo for the same role."""
        others = tuple(p for p in self.photos if p.role != attachment.role)
        return replace(self, photos=others + (attachment,))

    def without_photo(self, role: str) -> "EnrollmentDraft":
        if self.photo(role) is None:
            return self
        return replace(self, photos=tuple(p for p in self.photos if p.role != role))

    def photos_by_role(self) -> Dict[str, PhotoAttachment]:
        return {p.role: p for p in self.photos}

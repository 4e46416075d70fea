# -*- coding: utf-8 -*-
"""
Gestion Scolaire Data Models
"""

from .person import (
    ParentRole, ParentMode, PersonFields,
    AbsentParent, ExistingParent, NewParent,
)
from .guardian import GuardianRelation, DerivedGuardian, IndependentGuardian
from .photo import PhotoAttachment
from .school import ClasseInfo, Classe, AnneeScolaire
from .student import (
    StudentDraft, Student, StudentDetail, ParentSummary,
    Inscription, InscriptionResult,
)
from .enrollment_draft import EnrollmentDraft, WizardStep

__all__ = [
    "ParentRole",
    "ParentMode",
    "PersonFields",
    "AbsentParent",
    "ExistingParent",
    "NewParent",
    "GuardianRelation",
    "DerivedGuardian",
    "IndependentGuardian",
    "PhotoAttachment",
    "ClasseInfo",
    "Classe",
    "AnneeScolaire",
    "StudentDraft",
    "Student",
    "StudentDetail",
    "ParentSummary",
    "Inscription",
    "InscriptionResult",
    "EnrollmentDraft",
    "WizardStep",
]

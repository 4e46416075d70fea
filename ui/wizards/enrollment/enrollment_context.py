# -*- coding: utf-8 -*-
"""
Enrollment Context - State of one student enrollment session.

Extends WizardContext with:
- The immutable enrollment draft
- Reference data (current school year, classes)
- Outcome of the last submission
"""

from typing import Any, Dict, List, Optional

from app.config import Config, Vocabularies
from models.enrollment_draft import EnrollmentDraft
from models.person import ParentRole
from models.school import AnneeScolaire, Classe
from models.student import InscriptionResult
from services.translation_manager import get_language
from services.wizard.relationship_synchronizer import resolve_guardian_fields
from ui.wizards.framework import SessionStatus, WizardContext
from utils.helpers import format_date, full_name
from utils.logger import get_logger

logger = get_logger(__name__)


class EnrollmentContext(WizardContext):
    """Context for the student enrollment wizard."""

    def __init__(self):
        super().__init__()
        self.draft: EnrollmentDraft = EnrollmentDraft()
        self.submission_error: Optional[str] = None
        self.result: Optional[InscriptionResult] = None

        # Reference data survives a reset
        self.current_year: Optional[AnneeScolaire] = None
        self.classes: List[Classe] = []

    reference_prefix = "INS"

    def set_draft(self, draft: EnrollmentDraft):
        self.draft = draft
        if self.status is SessionStatus.DRAFT:
            self.transition(SessionStatus.IN_PROGRESS)
        else:
            self.touch()

    def reset(self):
        """Start a fresh session: new identity, empty draft."""
        old_reference = self.reference_number
        self._open_session()
        self.draft = EnrollmentDraft()
        self.submission_error = None
        self.result = None
        logger.info(f"Enrollment session {old_reference} replaced by {self.reference_number}")

    def classe_name(self, classe_id: str) -> str:
        for classe in self.classes:
            if classe.id == classe_id:
                return classe.nom
        return ""

    def year_name(self, annee_scolaire_id: str) -> str:
        if self.current_year and self.current_year.id == annee_scolaire_id:
            return self.current_year.nom
        return ""

    def get_summary(self) -> Dict[str, Any]:
        """Review step data, resolved from the current draft."""
        english = get_language() == "en"
        student = self.draft.student
        guardian = resolve_guardian_fields(self.draft)

        return {
            "reference_number": self.reference_number,
            "eleve": {
                "nom_complet": full_name(student.prenom, student.nom),
                "sexe": Vocabularies.get_display_name(Vocabularies.GENDERS, student.sexe, english),
                "date_naissance": format_date(student.date_naissance, Config.DATE_FORMAT_DISPLAY),
                "lieu_naissance": student.lieu_naissance,
                "telephone": student.telephone,
                "adresse_quartier": student.adresse_quartier,
            },
            "classe": self.classe_name(student.classe_id),
            "annee_scolaire": self.year_name(student.annee_scolaire_id),
            "parents": {
                role.value: {
                    "mode": self.draft.parent(role).mode.value,
                    "nom_complet": self.draft.parent(role).snapshot().full_name,
                }
                for role in ParentRole
            },
            "tuteur": {
                "relation": Vocabularies.get_display_name(
                    Vocabularies.GUARDIAN_ROLES, self.draft.tuteur.relation.value, english),
                "nom_complet": guardian.full_name,
                "telephone": guardian.telephone,
            },
            "photos": sorted(self.draft.photos_by_role()),
        }

    def to_dict(self) -> Dict[str, Any]:
        """Serialize context to dictionary (photo contents excluded)."""
        data = super().to_dict()
        data.update({
            "tuteur_role": self.draft.tuteur.relation.value,
            "pere_mode": self.draft.pere.mode.value,
            "mere_mode": self.draft.mere.mode.value,
            "photos": sorted(self.draft.photos_by_role()),
            "submission_error": self.submission_error,
            "inscription_id": self.result.id if self.result else None,
        })
        return data

# -*- coding: utf-8 -*-
"""
Student entity models.

StudentDraft is the wizard-side record being enrolled. Student and
StudentDetail mirror the backend read schemas (EleveRead, EleveDetailRead).
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from models.person import PersonFields
from models.school import ClasseInfo, AnneeScolaire

# Fields copied verbatim into the "eleve" payload
STUDENT_PAYLOAD_FIELDS = (
    "nom", "prenom", "sexe", "telephone", "adresse_quartier",
    "date_naissance", "lieu_naissance",
)
STUDENT_FIELDS = STUDENT_PAYLOAD_FIELDS + ("classe_id", "annee_scolaire_id")


@dataclass(frozen=True)
class StudentDraft:
    """Student being enrolled; every field is required before submission."""

    nom: str = ""
    prenom: str = ""
    sexe: str = "M"
    date_naissance: str = ""  # ISO date
    lieu_naissance: str = ""
    telephone: str = ""
    adresse_quartier: str = ""
    classe_id: str = ""
    annee_scolaire_id: str = ""

    def with_field(self, name: str, value: str) -> "StudentDraft":
        if name not in STUDENT_FIELDS:
            raise ValueError(f"Unknown student field: {name}")
        return replace(self, **{name: value or ""})

    def to_payload(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in STUDENT_PAYLOAD_FIELDS}


@dataclass
class ParentSummary:
    """Parent or guardian as returned in a student detail."""
    id: str = ""
    fields: PersonFields = field(default_factory=PersonFields)
    photo: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParentSummary":
        person = data.get("personne") or {}
        return cls(
            id=str(person.get("id", "")),
            fields=PersonFields.from_dict(data),
            photo=person.get("photo"),
        )


@dataclass
class Inscription:
    """Enrollment of a student in a class for a school year."""
    id: str
    statut: str = ""
    date_inscription: str = ""
    classe: Optional[ClasseInfo] = None
    annee_scolaire: Optional[AnneeScolaire] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Inscription":
        classe = data.get("classe")
        annee = data.get("annee_scolaire")
        return cls(
            id=str(data["id"]),
            statut=data.get("statut", ""),
            date_inscription=data.get("date_inscription", ""),
            classe=ClasseInfo.from_dict(classe) if classe else None,
            annee_scolaire=AnneeScolaire.from_dict(annee) if annee else None,
        )


@dataclass
class Student:
    """Student list entry."""
    id: str
    numero_matricule: str = ""
    date_naissance: str = ""
    lieu_naissance: str = ""
    personne: PersonFields = field(default_factory=PersonFields)
    photo: Optional[str] = None
    classe_actuelle: Optional[ClasseInfo] = None

    @property
    def display_name(self) -> str:
        return self.personne.full_name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Student":
        person = data.get("personne") or {}
        classe = data.get("classe_actuelle")
        return cls(
            id=str(data["id"]),
            numero_matricule=data.get("numero_matricule", ""),
            date_naissance=data.get("date_naissance", ""),
            lieu_naissance=data.get("lieu_naissance", ""),
            personne=PersonFields.from_dict(person),
            photo=person.get("photo"),
            classe_actuelle=ClasseInfo.from_dict(classe) if classe else None,
        )


@dataclass
class StudentDetail(Student):
    """Student with family and enrollment history."""
    pere: Optional[ParentSummary] = None
    mere: Optional[ParentSummary] = None
    tuteur: Optional[ParentSummary] = None
    inscriptions: List[Inscription] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StudentDetail":
        base = Student.from_dict(data)
        return cls(
            id=base.id,
            numero_matricule=base.numero_matricule,
            date_naissance=base.date_naissance,
            lieu_naissance=base.lieu_naissance,
            personne=base.personne,
            photo=base.photo,
            classe_actuelle=base.classe_actuelle,
            pere=ParentSummary.from_dict(data["pere"]) if data.get("pere") else None,
            mere=ParentSummary.from_dict(data["mere"]) if data.get("mere") else None,
            tuteur=ParentSummary.from_dict(data["tuteur"]) if data.get("tuteur") else None,
            inscriptions=[Inscription.from_dict(i) for i in data.get("inscriptions", [])],
        )


@dataclass
class InscriptionResult:
    """Response of a successful enrollment creation."""
    id: str
    eleve_id: str
    classe_id: str
    annee_scolaire_id: str
    statut: str = ""
    site_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InscriptionResult":
        return cls(
            id=str(data["id"]),
            eleve_id=str(data.get("eleve_id", "")),
            classe_id=str(data.get("classe_id", "")),
            annee_scolaire_id=str(data.get("annee_scolaire_id", "")),
            statut=data.get("statut", ""),
            site_id=data.get("site_id"),
        )

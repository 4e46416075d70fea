# -*- coding: utf-8 -*-
"""
Person entity models used by the enrollment wizard.

A parent role (father or mother) is linked to the enrollment in one of
three modes: absent, reference to an existing person, or a new person
created together with the enrollment.
"""

from dataclasses import dataclass, field, fields as dc_fields, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class ParentRole(Enum):
    """Parent roles; values match the backend payload keys."""
    PERE = "pere"
    MERE = "mere"

    @property
    def default_sexe(self) -> str:
        return "M" if self is ParentRole.PERE else "F"


class ParentMode(Enum):
    """How a parent role is filled in the draft."""
    ABSENT = "absent"
    EXISTING = "existing"
    NEW = "new"


# Fields that must be non-empty for a person created with the enrollment
REQUIRED_PERSON_FIELDS = ("nom", "prenom", "telephone", "adresse_quartier")
OPTIONAL_PERSON_FIELDS = ("profession", "lieu_travail")


@dataclass(frozen=True)
class PersonFields:
    """Identity and contact fields of a parent or guardian."""

    nom: str = ""
    prenom: str = ""
    sexe: str = ""
    telephone: str = ""
    adresse_quartier: str = ""
    profession: str = ""
    lieu_travail: str = ""

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in dc_fields(cls)]

    def with_field(self, name: str, value: str) -> "PersonFields":
        """Return a copy with one field replaced."""
        if name not in self.field_names():
            raise ValueError(f"Unknown person field: {name}")
        return replace(self, **{name: value or ""})

    @property
    def full_name(self) -> str:
        from utils.helpers import full_name
        return full_name(self.prenom, self.nom)

    def to_payload(self) -> Dict[str, str]:
        """Serialize to the backend person shape; empty optionals are omitted."""
        payload = {
            "nom": self.nom,
            "prenom": self.prenom,
            "sexe": self.sexe,
            "telephone": self.telephone,
            "adresse_quartier": self.adresse_quartier,
        }
        for name in OPTIONAL_PERSON_FIELDS:
            value = getattr(self, name)
            if value:
                payload[name] = value
        return payload

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PersonFields":
        """
        Build from an API person record.

        Accepts both the flat shape and the nested parent shape
        ``{"personne": {...}, "profession": ..., "lieu_travail": ...}``.
        """
        person = data.get("personne") if isinstance(data.get("personne"), dict) else data
        return cls(
            nom=person.get("nom") or "",
            prenom=person.get("prenom") or "",
            sexe=person.get("sexe") or "",
            telephone=person.get("telephone") or "",
            adresse_quartier=person.get("adresse_quartier") or "",
            profession=data.get("profession") or person.get("profession") or "",
            lieu_travail=data.get("lieu_travail") or person.get("lieu_travail") or "",
        )


@dataclass(frozen=True)
class AbsentParent:
    """No parent recorded for the role."""

    @property
    def mode(self) -> ParentMode:
        return ParentMode.ABSENT

    def snapshot(self) -> PersonFields:
        return PersonFields()


@dataclass(frozen=True)
class ExistingParent:
    """
    Reference to a person already known by the backend.

    ``display`` is a read-only cache from the search result. It is used for
    display and guardian derivation only and is never sent to the backend.
    An empty ``id`` means the user picked the mode but has not selected
    anyone yet.
    """

    id: str = ""
    display: PersonFields = field(default_factory=PersonFields)

    @property
    def mode(self) -> ParentMode:
        return ParentMode.EXISTING

    @property
    def is_selected(self) -> bool:
        return bool(self.id)

    def snapshot(self) -> PersonFields:
        return self.display

    @classmethod
    def from_search_result(cls, data: Dict[str, Any]) -> "ExistingParent":
        person = data.get("personne") if isinstance(data.get("personne"), dict) else data
        person_id = data.get("id") or person.get("id") or ""
        return cls(id=str(person_id), display=PersonFields.from_dict(data))


@dataclass(frozen=True)
class NewParent:
    """Full data for a parent created atomically with the enrollment."""

    fields: PersonFields = field(default_factory=PersonFields)

    @property
    def mode(self) -> ParentMode:
        return ParentMode.NEW

    def snapshot(self) -> PersonFields:
        return self.fields

    @classmethod
    def blank(cls, role: Optional[ParentRole] = None) -> "NewParent":
        sexe = role.default_sexe if role else ""
        return cls(fields=PersonFields(sexe=sexe))


ParentLink = Union[AbsentParent, ExistingParent, NewParent]


def empty_link_for_mode(mode: ParentMode, role: ParentRole) -> ParentLink:
    """Fresh link for a mode; never carries data over from another mode."""
    if mode is ParentMode.ABSENT:
        return AbsentParent()
    if mode is ParentMode.EXISTING:
        return ExistingParent()
    return NewParent.blank(role)

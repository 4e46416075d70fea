# -*- coding: utf-8 -*-
"""
Guardian (tuteur) draft model.

The guardian is either derived from one of the parents or entered
independently. Derived guardians hold no field storage of their own.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from models.person import ParentRole, PersonFields


class GuardianRelation(Enum):
    """Origin of the guardian; values are the backend ``tuteur_role`` codes."""
    PERE = "pere"
    MERE = "mere"
    AUTRE = "autre"

    @property
    def role(self) -> Optional[ParentRole]:
        """Parent role the relation derives from, None for AUTRE."""
        if self is GuardianRelation.PERE:
            return ParentRole.PERE
        if self is GuardianRelation.MERE:
            return ParentRole.MERE
        return None

    @classmethod
    def for_role(cls, role: ParentRole) -> "GuardianRelation":
        return cls.PERE if role is ParentRole.PERE else cls.MERE


@dataclass(frozen=True)
class DerivedGuardian:
    """Guardian is the father or the mother."""

    role: ParentRole

    @property
    def relation(self) -> GuardianRelation:
        return GuardianRelation.for_role(self.role)


@dataclass(frozen=True)
class IndependentGuardian:
    """Guardian entered by hand."""

    fields: PersonFields = field(default_factory=lambda: PersonFields(sexe="F"))

    @property
    def relation(self) -> GuardianRelation:
        return GuardianRelation.AUTRE


GuardianDraft = Union[DerivedGuardian, IndependentGuardian]

# -*- coding: utf-8 -*-
"""
Gateway interfaces used by the enrollment wizard.

The wizard only depends on these abstractions; InscriptionApiService is
the REST implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from models.person import ExistingParent
from models.photo import PhotoAttachment
from models.school import AnneeScolaire, Classe
from models.student import InscriptionResult


class EnrollmentGateway(ABC):
    """Creates an enrollment in one all-or-nothing call."""

    @abstractmethod
    def create_inscription(self, payload: Dict[str, Any],
                           photos: Dict[str, PhotoAttachment]) -> InscriptionResult:
        """
        Submit the payload with its photos.

        Raises:
            ApiException, ValidationException, NetworkException
        """
        pass


class PersonSearchGateway(ABC):
    """Looks up parents already known by the backend."""

    @abstractmethod
    def search_parents(self, query: str) -> List[ExistingParent]:
        pass


class SchoolYearGateway(ABC):
    """Reference data needed by the student step."""

    @abstractmethod
    def get_current_year(self) -> Optional[AnneeScolaire]:
        pass

    @abstractmethod
    def get_classes(self, annee_scolaire_id: Optional[str] = None) -> List[Classe]:
        pass

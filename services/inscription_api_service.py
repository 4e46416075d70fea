# -*- coding: utf-8 -*-
"""
Inscription API Service - Enrollment, parent search and reference data
via the REST API.

Endpoints:
- POST /inscriptions/                              (multipart)
- GET  /inscriptions/eleves[?search=&classe_id=]
- GET  /inscriptions/eleves/{id}
- GET  /personnes/parents?search=
- GET  /planification/classes
- GET  /planification/annees-scolaires/actuelle
"""

import json
from typing import Any, Dict, List, Optional

from app.config import Config
from models.person import ExistingParent
from models.photo import PhotoAttachment
from models.school import AnneeScolaire, Classe
from models.student import InscriptionResult, Student, StudentDetail
from services.api_client import ApiClient
from services.exceptions import ApiException
from services.gateways import EnrollmentGateway, PersonSearchGateway, SchoolYearGateway
from utils.logger import get_logger

logger = get_logger(__name__)


class InscriptionApiService(EnrollmentGateway, PersonSearchGateway, SchoolYearGateway):
    """REST implementation of the enrollment wizard gateways."""

    def __init__(self, api_client: Optional[ApiClient] = None):
        self.api = api_client or ApiClient()

    # ==================== Enrollment ====================

    def create_inscription(self, payload: Dict[str, Any],
                           photos: Dict[str, PhotoAttachment]) -> InscriptionResult:
        """
        Create the student, its parents/guardian and the enrollment.

        The JSON payload goes in the ``inscription_data`` part, each photo
        in its own ``photo_<role>`` part.
        """
        form_fields = {"inscription_data": json.dumps(payload, ensure_ascii=False)}
        files = {p.part_name: p.as_file_tuple() for p in photos.values()}

        logger.info(f"Creating inscription for {payload.get('eleve', {}).get('nom', '?')} "
                    f"(tuteur_role={payload.get('tuteur_role')}, photos={sorted(photos)})")

        data = self.api.post_multipart("/inscriptions/", form_fields, files)
        result = InscriptionResult.from_dict(data)
        logger.info(f"Inscription created: {result.id} (eleve {result.eleve_id})")
        return result

    # ==================== Parents ====================

    def search_parents(self, query: str) -> List[ExistingParent]:
        """
        Search existing parents by name or phone.

        Queries shorter than Config.PARENT_SEARCH_MIN_LENGTH are not sent.
        A 404 means the backend does not expose the endpoint yet.
        """
        query = (query or "").strip()
        if len(query) < Config.PARENT_SEARCH_MIN_LENGTH:
            return []

        try:
            data = self.api.get("/personnes/parents", params={"search": query})
        except ApiException as e:
            if e.status_code == 404:
                logger.info("Parent search endpoint not available yet")
                return []
            raise

        return [ExistingParent.from_search_result(item) for item in (data or [])]

    # ==================== Reference data ====================

    def get_current_year(self) -> Optional[AnneeScolaire]:
        try:
            data = self.api.get("/planification/annees-scolaires/actuelle")
        except ApiException as e:
            if e.status_code == 404:
                logger.warning("No current school year defined")
                return None
            raise
        return AnneeScolaire.from_dict(data) if data else None

    def get_classes(self, annee_scolaire_id: Optional[str] = None) -> List[Classe]:
        params = {"active_only": "true"}
        if annee_scolaire_id:
            params["annee_scolaire_id"] = annee_scolaire_id
        data = self.api.get("/planification/classes", params=params)
        return [Classe.from_dict(item) for item in (data or [])]

    # ==================== Students ====================

    def get_students(self, search: Optional[str] = None,
                     classe_id: Optional[str] = None) -> List[Student]:
        params = {}
        if search:
            params["search"] = search
        if classe_id:
            params["classe_id"] = classe_id
        data = self.api.get("/inscriptions/eleves", params=params or None)
        return [Student.from_dict(item) for item in (data or [])]

    def get_student_detail(self, student_id: str) -> StudentDetail:
        data = self.api.get(f"/inscriptions/eleves/{student_id}")
        return StudentDetail.from_dict(data)

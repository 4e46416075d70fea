# -*- coding: utf-8 -*-
"""
Tests for the REST layer of the enrollment wizard.

Tests cover:
- Multipart enrollment creation
- Parent search (minimum length, 404)
- Reference data endpoints
- HTTP error translation in ApiClient
"""

import json
from unittest.mock import MagicMock, Mock

import pytest
import requests

from models import PhotoAttachment
from services.api_client import ApiClient, ApiConfig
from services.exceptions import ApiException, NetworkException, ValidationException
from services.inscription_api_service import InscriptionApiService


@pytest.fixture
def api():
    """ApiClient double."""
    return Mock(spec=ApiClient)


@pytest.fixture
def service(api):
    return InscriptionApiService(api_client=api)


def make_response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = json.dumps(payload) if payload is not None else ""
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response)
    return response


@pytest.fixture
def client():
    """Real ApiClient with a mocked session."""
    client = ApiClient(ApiConfig(base_url="http://api.test/", timeout=5, verify_ssl=True))
    client.session = MagicMock()
    return client


class TestCreateInscription:
    """Test the enrollment creation call."""

    def test_multipart_parts(self, service, api):
        api.post_multipart.return_value = {
            "id": "i-1", "eleve_id": "e-1", "classe_id": "c-1",
            "annee_scolaire_id": "y-1", "statut": "validee",
        }
        photo = PhotoAttachment(role="eleve", file_name="awa.jpg", content=b"jpg", mime_type="image/jpeg")
        payload = {"eleve": {"nom": "Traoré"}, "tuteur_role": "pere", "pere": {"id": "p1"}}

        result = service.create_inscription(payload, {"eleve": photo})

        endpoint, form_fields, files = api.post_multipart.call_args[0]
        assert endpoint == "/inscriptions/"
        assert json.loads(form_fields["inscription_data"]) == payload
        assert files == {"photo_eleve": ("awa.jpg", b"jpg", "image/jpeg")}
        assert result.id == "i-1"
        assert result.eleve_id == "e-1"

    def test_error_propagates(self, service, api):
        api.post_multipart.side_effect = ApiException("conflict", status_code=409)
        with pytest.raises(ApiException):
            service.create_inscription({"eleve": {}}, {})


class TestSearchParents:
    """Test the parent search call."""

    def test_short_query_not_sent(self, service, api):
        assert service.search_parents(" ab ") == []
        api.get.assert_not_called()

    def test_results_mapped(self, service, api):
        api.get.return_value = [
            {"id": "par-1", "personne": {"nom": "Sow", "prenom": "Ali", "telephone": "77"}},
        ]
        parents = service.search_parents("Sow")

        api.get.assert_called_once_with("/personnes/parents", params={"search": "Sow"})
        assert parents[0].id == "par-1"
        assert parents[0].display.telephone == "77"

    def test_missing_endpoint_gives_no_results(self, service, api):
        api.get.side_effect = ApiException("not found", status_code=404)
        assert service.search_parents("Sow") == []

    def test_server_error_propagates(self, service, api):
        api.get.side_effect = ApiException("boom", status_code=500)
        with pytest.raises(ApiException):
            service.search_parents("Sow")


class TestReferenceData:
    """Test school year and classes calls."""

    def test_current_year(self, service, api):
        api.get.return_value = {"id": "y-1", "nom": "2024-2025", "is_current": True}
        year = service.get_current_year()
        assert year.nom == "2024-2025"
        assert year.is_current is True

    def test_no_current_year(self, service, api):
        api.get.side_effect = ApiException("not found", status_code=404)
        assert service.get_current_year() is None

    def test_classes_filtered_by_year(self, service, api):
        api.get.return_value = [{"id": "c-1", "nom": "6e A", "niveau": {"nom": "6e"}}]
        classes = service.get_classes("y-1")

        api.get.assert_called_once_with(
            "/planification/classes", params={"active_only": "true", "annee_scolaire_id": "y-1"})
        assert classes[0].niveau_nom == "6e"

    def test_students_list(self, service, api):
        api.get.return_value = [{"id": "e-1", "personne": {"nom": "Traoré", "prenom": "Awa"}}]
        students = service.get_students(search="Awa")
        api.get.assert_called_once_with("/inscriptions/eleves", params={"search": "Awa"})
        assert students[0].display_name == "Awa Traoré"


class TestApiClient:
    """Test request building and error translation."""

    def test_get_builds_url_and_auth(self, client):
        client.set_access_token("tok")
        client.session.request.return_value = make_response(200, [])

        assert client.get("/planification/classes", params={"active_only": "true"}) == []

        kwargs = client.session.request.call_args[1]
        assert kwargs["url"] == "http://api.test/planification/classes"
        assert kwargs["headers"]["Authorization"] == "Bearer tok"
        assert kwargs["timeout"] == 5

    def test_multipart_text_parts(self, client):
        client.session.request.return_value = make_response(201, {"id": "i-1"})
        client.post_multipart("/inscriptions/", {"inscription_data": "{}"},
                              {"photo_eleve": ("a.jpg", b"x", "image/jpeg")})

        kwargs = client.session.request.call_args[1]
        assert kwargs["files"]["inscription_data"] == (None, "{}")
        assert kwargs["files"]["photo_eleve"] == ("a.jpg", b"x", "image/jpeg")
        assert "Content-Type" not in kwargs["headers"]

    def test_422_raises_validation_exception(self, client):
        client.session.request.return_value = make_response(422, {
            "detail": [{"loc": ["body", "eleve", "telephone"], "msg": "field required"}],
        })
        with pytest.raises(ValidationException) as exc_info:
            client.post("/inscriptions/", {"eleve": {}})
        assert exc_info.value.field == "telephone"
        assert exc_info.value.errors == ["eleve.telephone: field required"]

    def test_http_error_raises_api_exception(self, client):
        client.session.request.return_value = make_response(409, {"detail": "duplicate"})
        with pytest.raises(ApiException) as exc_info:
            client.get("/inscriptions/eleves")
        assert exc_info.value.status_code == 409
        assert exc_info.value.response_data == {"detail": "duplicate"}

    def test_timeout_raises_network_exception(self, client):
        client.session.request.side_effect = requests.exceptions.Timeout("read timed out")
        with pytest.raises(NetworkException) as exc_info:
            client.get("/inscriptions/eleves")
        assert isinstance(exc_info.value.original_error, requests.exceptions.Timeout)

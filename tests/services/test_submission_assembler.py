# -*- coding: utf-8 -*-
"""
Tests for the submission payload assembly.

Tests cover:
- Parent references vs new parent data
- Guardian role and data
- Photo selection per role
"""

from dataclasses import replace

import pytest

from models import (
    DerivedGuardian, ExistingParent, IndependentGuardian, NewParent,
    ParentRole,
)
from services.wizard.submission_assembler import assemble_submission


@pytest.fixture
def mother_fields(father_fields):
    return father_fields.with_field("prenom", "Aminata").with_field("sexe", "F")


class TestParentPayload:
    """Test the payload for each parent mode."""

    def test_new_mother_as_guardian(self, student_only_draft, mother_fields):
        """Test absent father, new mother who is the guardian."""
        draft = student_only_draft.with_parent(ParentRole.MERE, NewParent(fields=mother_fields))
        draft = replace(draft, tuteur=DerivedGuardian(ParentRole.MERE))

        payload = assemble_submission(draft).payload

        assert "pere" not in payload
        assert payload["mere"] == {"data": mother_fields.to_payload()}
        assert "tuteur_data" not in payload
        assert payload["tuteur_role"] == "mere"

    def test_existing_father_and_other_guardian(self, student_only_draft, guardian_fields):
        """Test referenced father, absent mother, guardian entered by hand."""
        draft = student_only_draft.with_parent(
            ParentRole.PERE, ExistingParent(id="p1", display=guardian_fields))
        draft = replace(draft, tuteur=IndependentGuardian(fields=guardian_fields))

        payload = assemble_submission(draft).payload

        assert payload["pere"] == {"id": "p1"}
        assert "mere" not in payload
        assert payload["tuteur_data"] == {"data": guardian_fields.to_payload()}
        assert payload["tuteur_role"] == "autre"

    def test_existing_parent_display_not_sent(self, student_only_draft, existing_mother):
        draft = student_only_draft.with_parent(ParentRole.MERE, existing_mother)
        assert assemble_submission(draft).payload["mere"] == {"id": "p-42"}


class TestStudentPayload:
    """Test student, class and year fields."""

    def test_student_and_enrollment_fields(self, new_father_draft, complete_student):
        payload = assemble_submission(new_father_draft).payload

        assert payload["eleve"] == {
            "nom": "Traoré",
            "prenom": "Awa",
            "sexe": "F",
            "telephone": "76000000",
            "adresse_quartier": "Hamdallaye",
            "date_naissance": "2015-03-12",
            "lieu_naissance": "Bamako",
        }
        assert payload["classe_id"] == complete_student.classe_id
        assert payload["annee_scolaire_id"] == complete_student.annee_scolaire_id

    def test_assembly_is_pure(self, new_father_draft):
        """Test the same draft gives the same payload."""
        assert assemble_submission(new_father_draft) == assemble_submission(new_father_draft)


class TestPhotos:
    """Test which photos travel with the submission."""

    def test_photos_of_created_persons(self, new_father_draft, photo):
        draft = new_father_draft
        for role in ("eleve", "pere", "tuteur"):
            draft = draft.with_photo(photo(role))

        submission = assemble_submission(draft)

        assert sorted(submission.photos) == ["eleve", "pere", "tuteur"]

    def test_existing_parent_photo_dropped(self, student_only_draft, existing_mother, photo):
        """Test the backend already has the referenced person."""
        draft = student_only_draft.with_parent(ParentRole.MERE, existing_mother)
        draft = draft.with_photo(photo("mere")).with_photo(photo("eleve"))
        assert sorted(assemble_submission(draft).photos) == ["eleve"]

    def test_derived_guardian_photo_dropped(self, new_father_draft, photo):
        draft = replace(new_father_draft, tuteur=DerivedGuardian(ParentRole.PERE))
        draft = draft.with_photo(photo("tuteur"))
        assert assemble_submission(draft).photos == {}

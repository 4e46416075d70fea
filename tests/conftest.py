# -*- coding: utf-8 -*-
"""
Shared fixtures for the test suite.
"""
import os
import sys
from pathlib import Path

import pytest

# Run Qt headless when no display is available
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from models import (  # noqa: E402
    EnrollmentDraft, ExistingParent, NewParent, PersonFields, PhotoAttachment,
    StudentDraft,
)
from services.translation_manager import set_language  # noqa: E402


@pytest.fixture(autouse=True)
def french_messages():
    """Run every test with the default UI language."""
    set_language("fr")
    yield
    set_language("fr")


@pytest.fixture
def complete_student():
    return StudentDraft(
        nom="Traoré",
        prenom="Awa",
        sexe="F",
        date_naissance="2015-03-12",
        lieu_naissance="Bamako",
        telephone="76000000",
        adresse_quartier="Hamdallaye",
        classe_id="c-6a",
        annee_scolaire_id="y-2024",
    )


@pytest.fixture
def father_fields():
    return PersonFields(
        nom="Traoré",
        prenom="Moussa",
        sexe="M",
        telephone="70112233",
        adresse_quartier="Hamdallaye",
        profession="Commerçant",
    )


@pytest.fixture
def guardian_fields():
    return PersonFields(
        nom="Keita",
        prenom="Fanta",
        sexe="F",
        telephone="66554433",
        adresse_quartier="Lafiabougou",
    )


@pytest.fixture
def existing_mother():
    return ExistingParent(
        id="p-42",
        display=PersonFields(nom="Diallo", prenom="Mariam", sexe="F", telephone="65000000"),
    )


@pytest.fixture
def student_only_draft(complete_student):
    """Complete student, both parents absent, blank guardian."""
    return EnrollmentDraft(student=complete_student)


@pytest.fixture
def new_father_draft(complete_student, father_fields):
    """Complete student with a new father; guardian still independent and blank."""
    return EnrollmentDraft(student=complete_student, pere=NewParent(fields=father_fields))


@pytest.fixture
def photo():
    def _make(role: str) -> PhotoAttachment:
        return PhotoAttachment(role=role, file_name=f"{role}.jpg",
                               content=b"\xff\xd8\xff", mime_type="image/jpeg")
    return _make

# -*- coding: utf-8 -*-
"""
Tests for the draft reducer.

Tests cover:
- Field edits per person
- Parent mode transitions
- Existing parent selection
- Guardian relation changes
- Photos
"""

import pytest

from models import (
    AbsentParent, DerivedGuardian, EnrollmentDraft, ExistingParent,
    GuardianRelation, IndependentGuardian, NewParent, ParentMode, ParentRole,
)
from services.wizard.draft_reducer import (
    ExistingParentSelected, GuardianFieldChanged, GuardianRelationChanged,
    ParentFieldChanged, ParentModeChanged, PhotoAttached, PhotoRemoved,
    StudentFieldChanged, reduce,
)


class TestStudentEdits:
    """Test student field events."""

    def test_student_field(self):
        draft = reduce(EnrollmentDraft(), StudentFieldChanged("lieu_naissance", "Kayes"))
        assert draft.student.lieu_naissance == "Kayes"

    def test_unknown_student_field(self):
        with pytest.raises(ValueError):
            reduce(EnrollmentDraft(), StudentFieldChanged("matricule", "1"))

    def test_unsupported_event(self):
        with pytest.raises(ValueError):
            reduce(EnrollmentDraft(), object())


class TestParentModes:
    """Test parent mode transitions."""

    def test_new_mode_starts_blank(self):
        draft = reduce(EnrollmentDraft(), ParentModeChanged(ParentRole.MERE, ParentMode.NEW))
        assert draft.mere == NewParent.blank(ParentRole.MERE)

    def test_mode_change_discards_previous_data(self, new_father_draft):
        """Test no data survives a round trip through another mode."""
        draft = reduce(new_father_draft, ParentModeChanged(ParentRole.PERE, ParentMode.EXISTING))
        draft = reduce(draft, ParentModeChanged(ParentRole.PERE, ParentMode.NEW))
        assert draft.pere.fields.nom == ""

    def test_same_mode_keeps_data(self, new_father_draft):
        draft = reduce(new_father_draft, ParentModeChanged(ParentRole.PERE, ParentMode.NEW))
        assert draft is new_father_draft

    def test_leaving_new_mode_drops_photo(self, new_father_draft, photo):
        draft = reduce(new_father_draft, PhotoAttached(photo("pere")))
        draft = reduce(draft, ParentModeChanged(ParentRole.PERE, ParentMode.ABSENT))
        assert draft.photo("pere") is None
        assert draft.pere == AbsentParent()


class TestParentEdits:
    """Test parent field and selection events."""

    def test_edit_new_parent(self, new_father_draft):
        draft = reduce(new_father_draft, ParentFieldChanged(ParentRole.PERE, "profession", "Maçon"))
        assert draft.pere.fields.profession == "Maçon"

    def test_edit_absent_parent_ignored(self):
        draft = EnrollmentDraft()
        assert reduce(draft, ParentFieldChanged(ParentRole.MERE, "nom", "X")) is draft

    def test_edit_unknown_field_rejected_in_any_mode(self):
        with pytest.raises(ValueError):
            reduce(EnrollmentDraft(), ParentFieldChanged(ParentRole.MERE, "surnom", "X"))

    def test_select_existing_parent(self, existing_mother):
        draft = reduce(EnrollmentDraft(), ParentModeChanged(ParentRole.MERE, ParentMode.EXISTING))
        draft = reduce(draft, ExistingParentSelected(ParentRole.MERE, existing_mother))
        assert draft.mere.id == "p-42"

    def test_selection_outside_search_mode_ignored(self, existing_mother):
        """Test a late search selection does not overwrite another mode."""
        draft = EnrollmentDraft()
        assert reduce(draft, ExistingParentSelected(ParentRole.MERE, existing_mother)) is draft


class TestGuardian:
    """Test guardian events."""

    def test_relation_to_parent(self, new_father_draft):
        draft = reduce(new_father_draft, GuardianRelationChanged(GuardianRelation.PERE))
        assert draft.tuteur == DerivedGuardian(ParentRole.PERE)

    def test_derived_relation_drops_guardian_photo(self, new_father_draft, photo):
        draft = reduce(new_father_draft, PhotoAttached(photo("tuteur")))
        draft = reduce(draft, GuardianRelationChanged(GuardianRelation.PERE))
        assert draft.photo("tuteur") is None

    def test_guardian_edit(self):
        draft = reduce(EnrollmentDraft(), GuardianFieldChanged("telephone", "60"))
        assert draft.tuteur.fields.telephone == "60"

    def test_derived_guardian_edit_ignored(self, new_father_draft):
        draft = reduce(new_father_draft, GuardianRelationChanged(GuardianRelation.PERE))
        assert reduce(draft, GuardianFieldChanged("telephone", "60")) is draft

    def test_manual_entries_lost_after_derived_round_trip(self, new_father_draft, guardian_fields):
        """Test values typed before switching to a parent are not restored."""
        draft = reduce(new_father_draft, GuardianFieldChanged("nom", guardian_fields.nom))
        draft = reduce(draft, GuardianRelationChanged(GuardianRelation.PERE))
        draft = reduce(draft, GuardianRelationChanged(GuardianRelation.AUTRE))
        assert draft.tuteur == IndependentGuardian()


class TestPhotos:
    """Test photo events."""

    def test_attach_and_remove(self, photo):
        draft = reduce(EnrollmentDraft(), PhotoAttached(photo("eleve")))
        assert draft.photo("eleve") is not None
        draft = reduce(draft, PhotoRemoved("eleve"))
        assert draft.photos == ()

    def test_photo_for_absent_parent_ignored(self, photo):
        draft = EnrollmentDraft()
        assert reduce(draft, PhotoAttached(photo("mere"))) is draft

    def test_photo_for_existing_parent_ignored(self, existing_mother, photo):
        draft = EnrollmentDraft(mere=existing_mother)
        assert reduce(draft, PhotoAttached(photo("mere"))) is draft

    def test_photo_for_derived_guardian_ignored(self, new_father_draft, photo):
        draft = reduce(new_father_draft, GuardianRelationChanged(GuardianRelation.PERE))
        assert reduce(draft, PhotoAttached(photo("tuteur"))) is draft

    def test_photo_for_new_parent_kept(self, new_father_draft, photo):
        draft = reduce(new_father_draft, PhotoAttached(photo("pere")))
        assert draft.photo("pere") is not None

    def test_existing_parent_not_affected_by_student_edits(self, existing_mother):
        draft = EnrollmentDraft(mere=existing_mother)
        draft = reduce(draft, StudentFieldChanged("nom", "Diallo"))
        assert draft.mere == ExistingParent(id="p-42", display=existing_mother.display)

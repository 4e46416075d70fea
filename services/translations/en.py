# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Wizard steps
    "wizard.step.student": "Student information",
    "wizard.step.parents": "Parents",
    "wizard.step.guardian": "Guardian",
    "wizard.step.review": "Review",

    # Roles
    "role.pere": "the father",
    "role.mere": "the mother",

    # Field labels
    "field.nom": "Last name",
    "field.prenom": "First name",
    "field.sexe": "Sex",
    "field.telephone": "Phone",
    "field.adresse_quartier": "Address / Neighbourhood",
    "field.date_naissance": "Date of birth",
    "field.lieu_naissance": "Place of birth",
    "field.classe_id": "Class",
    "field.annee_scolaire_id": "School year",
    "field.profession": "Profession",
    "field.lieu_travail": "Workplace",

    # Validation
    "validation.student.missing": "Student: required field missing ({fields}).",
    "validation.parent.missing": "Missing information for {role} ({fields}).",
    "validation.parent.not_selected": "Please select {role} from the search results.",
    "validation.guardian.missing": "Missing guardian information ({fields}).",
    "validation.guardian.father_absent": "The guardian cannot be the father: no father is recorded.",
    "validation.guardian.mother_absent": "The guardian cannot be the mother: no mother is recorded.",
    "validation.no_parent": "At least one parent (father or mother) must be recorded.",

    # Errors
    "error.api.connection": "Unable to reach the server. Please try again.",
    "error.api.timeout": "The server took too long to respond. Please try again.",
    "error.api.validation": "The submitted data was rejected by the server.",
    "error.api.duplicate": "This student seems to be enrolled already.",
    "error.inscription.in_progress": "An enrollment is already being submitted.",
    "error.year.missing": "No current school year is defined.",
}

# -*- coding: utf-8 -*-
"""French translations."""

FR_TRANSLATIONS = {
    # Wizard steps
    "wizard.step.student": "Informations élève",
    "wizard.step.parents": "Parents",
    "wizard.step.guardian": "Tuteur",
    "wizard.step.review": "Récapitulatif",

    # Roles
    "role.pere": "le père",
    "role.mere": "la mère",

    # Field labels
    "field.nom": "Nom",
    "field.prenom": "Prénom",
    "field.sexe": "Sexe",
    "field.telephone": "Téléphone",
    "field.adresse_quartier": "Adresse / Quartier",
    "field.date_naissance": "Date de naissance",
    "field.lieu_naissance": "Lieu de naissance",
    "field.classe_id": "Classe",
    "field.annee_scolaire_id": "Année scolaire",
    "field.profession": "Profession",
    "field.lieu_travail": "Lieu de travail",

    # Validation
    "validation.student.missing": "Élève : champ obligatoire manquant ({fields}).",
    "validation.parent.missing": "Informations manquantes pour {role} ({fields}).",
    "validation.parent.not_selected": "Veuillez sélectionner {role} dans les résultats de recherche.",
    "validation.guardian.missing": "Informations du tuteur manquantes ({fields}).",
    "validation.guardian.father_absent": "Le tuteur ne peut pas être le père : aucun père n'est renseigné.",
    "validation.guardian.mother_absent": "Le tuteur ne peut pas être la mère : aucune mère n'est renseignée.",
    "validation.no_parent": "Au moins un parent (père ou mère) doit être renseigné.",

    # Errors
    "error.api.connection": "Impossible de contacter le serveur. Veuillez réessayer.",
    "error.api.timeout": "Le serveur met trop de temps à répondre. Veuillez réessayer.",
    "error.api.validation": "Les données envoyées ont été refusées par le serveur.",
    "error.api.duplicate": "Cet élève semble déjà inscrit.",
    "error.inscription.in_progress": "Une inscription est déjà en cours d'envoi.",
    "error.year.missing": "Aucune année scolaire courante définie.",
}

# -*- coding: utf-8 -*-
"""
Builds the enrollment creation payload from a validated draft.

Pure: no network access. The payload follows the backend contract::

    {
      "eleve": {...},
      "tuteur_role": "pere" | "mere" | "autre",
      "tuteur_data": {"data": {...}},      # only when tuteur_role == "autre"
      "pere": {"id": ...} | {"data": {...}},  # omitted when absent
      "mere": {"id": ...} | {"data": {...}},  # omitted when absent
      "classe_id": ...,
      "annee_scolaire_id": ...
    }

Photos travel as sibling multipart parts, not inside the JSON body.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from models.enrollment_draft import EnrollmentDraft
from models.guardian import IndependentGuardian
from models.person import ExistingParent, NewParent, ParentLink, ParentRole
from models.photo import PhotoAttachment


@dataclass
class Submission:
    """JSON payload plus the photos to send with it, keyed by role."""
    payload: Dict[str, Any]
    photos: Dict[str, PhotoAttachment] = field(default_factory=dict)


def _parent_payload(link: ParentLink) -> Optional[Dict[str, Any]]:
    if isinstance(link, ExistingParent):
        return {"id": link.id}
    if isinstance(link, NewParent):
        return {"data": link.fields.to_payload()}
    return None


def assemble_submission(draft: EnrollmentDraft) -> Submission:
    """Project the draft into the creation payload and its attachments."""
    student = draft.student
    tuteur = draft.tuteur

    payload: Dict[str, Any] = {
        "eleve": student.to_payload(),
        "tuteur_role": tuteur.relation.value,
    }
    if isinstance(tuteur, IndependentGuardian):
        payload["tuteur_data"] = {"data": tuteur.fields.to_payload()}

    for role in ParentRole:
        link_payload = _parent_payload(draft.parent(role))
        if link_payload is not None:
            payload[role.value] = link_payload

    payload["classe_id"] = student.classe_id
    payload["annee_scolaire_id"] = student.annee_scolaire_id

    return Submission(payload=payload, photos=_pending_photos(draft))


def _pending_photos(draft: EnrollmentDraft) -> Dict[str, PhotoAttachment]:
    """Photos of the persons the backend creates from this submission."""
    photos = {}
    for role, attachment in draft.photos_by_role().items():
        if role == "eleve":
            photos[role] = attachment
        elif role == "tuteur":
            if isinstance(draft.tuteur, IndependentGuardian):
                photos[role] = attachment
        elif isinstance(draft.parent(ParentRole(role)), NewParent):
            photos[role] = attachment
    return photos

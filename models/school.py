# -*- coding: utf-8 -*-
"""
School planning models: classes and school years.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ClasseInfo:
    """Short class reference embedded in student records."""
    id: str
    nom: str = ""
    niveau: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClasseInfo":
        niveau = data.get("niveau", "")
        if isinstance(niveau, dict):
            niveau = niveau.get("nom", "")
        return cls(id=str(data["id"]), nom=data.get("nom", ""), niveau=niveau or "")


@dataclass
class Classe:
    """Class offered for enrollment."""
    id: str
    nom: str
    is_active: bool = True
    niveau_nom: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Classe":
        niveau = data.get("niveau") or {}
        return cls(
            id=str(data["id"]),
            nom=data.get("nom", ""),
            is_active=data.get("is_active", True),
            niveau_nom=niveau.get("nom") if isinstance(niveau, dict) else None,
        )


@dataclass
class AnneeScolaire:
    """School year; the backend names it with ``nom`` (e.g. "2024-2025")."""
    id: str
    nom: str = ""
    date_debut: str = ""
    date_fin: str = ""
    is_current: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnneeScolaire":
        return cls(
            id=str(data["id"]),
            nom=data.get("nom", ""),
            date_debut=data.get("date_debut", ""),
            date_fin=data.get("date_fin", ""),
            is_current=bool(data.get("is_current", False)),
        )

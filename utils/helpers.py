# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime, date
from typing import Optional, Union


def format_date(
    value: Optional[Union[datetime, date, str]],
    format_str: str = "%d/%m/%Y"
) -> str:
    """
    Format a date value for display.

    Args:
        value: Date, datetime, or ISO string
        format_str: Output format string

    Returns:
        Formatted date string or empty string
    """
    if value is None or value == "":
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value

    if isinstance(value, (datetime, date)):
        return value.strftime(format_str)

    return str(value)


def full_name(prenom: Optional[str], nom: Optional[str]) -> str:
    """Join first name and last name, skipping blanks."""
    parts = [p.strip() for p in (prenom, nom) if p and p.strip()]
    return " ".join(parts)


def get_photo_url(photo_path: Optional[str], base_url: Optional[str] = None) -> Optional[str]:
    """
    Convert a relative photo path returned by the backend into a full URL.

    Args:
        photo_path: Relative path (e.g. "photos_eleves/uuid.jpeg"), a
            "/static/..." path, or an absolute URL
        base_url: API base URL (defaults to Config.API_BASE_URL)

    Returns:
        Full URL, or None when there is no photo
    """
    if not photo_path:
        return None

    if photo_path.startswith("http://") or photo_path.startswith("https://"):
        return photo_path

    from app.config import Config
    base = (base_url or Config.API_BASE_URL).rstrip("/")
    prefix = Config.PHOTO_STATIC_PREFIX

    if photo_path.startswith(prefix):
        return f"{base}{photo_path}"

    return f"{base}{prefix}{photo_path.lstrip('/')}"

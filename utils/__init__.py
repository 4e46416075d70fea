# -*- coding: utf-8 -*-
"""
Gestion Scolaire Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_date, full_name, get_photo_url

__all__ = [
    "get_logger",
    "setup_logger",
    "format_date",
    "full_name",
    "get_photo_url",
]

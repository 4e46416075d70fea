# -*- coding: utf-8 -*-
"""
Gestion Scolaire Application Core Module
"""

from .config import Config

__all__ = ["Config"]

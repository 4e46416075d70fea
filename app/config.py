# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8000")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Enrollment wizard
_PARENT_SEARCH_MIN_LENGTH = int(os.getenv("PARENT_SEARCH_MIN_LENGTH", "3"))

# UI language: "fr" or "en"
_APP_LANGUAGE = os.getenv("APP_LANGUAGE", "fr")

# Console verbosity; the log file always records DEBUG
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
_LOG_DIR = os.getenv("LOG_DIR")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Gestion Scolaire"
    APP_TITLE: str = "Tableau de bord d'administration scolaire"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Gestion Scolaire"

    # HTTP API Backend Settings
    # If .env not found, uses default (http://localhost:8000)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Photos are served by the backend under this prefix
    PHOTO_STATIC_PREFIX: str = "/static/"

    # Enrollment wizard
    PARENT_SEARCH_MIN_LENGTH: int = _PARENT_SEARCH_MIN_LENGTH

    APP_LANGUAGE: str = _APP_LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOG_DIR) if _LOG_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    # Date/Time Formats
    DATE_FORMAT_DISPLAY: str = "%d/%m/%Y"


# Controlled vocabularies
class Vocabularies:
    # Value (code), Name (French), Name (English)
    GENDERS = [
        ("M", "Masculin", "Male"),
        ("F", "Féminin", "Female"),
    ]

    GUARDIAN_ROLES = [
        ("pere", "Père", "Father"),
        ("mere", "Mère", "Mother"),
        ("autre", "Autre", "Other"),
    ]

    @classmethod
    def get_display_name(cls, vocabulary: list, code: str, english: bool = False) -> str:
        for value, fr, en in vocabulary:
            if value == code:
                return en if english else fr
        return code or ""

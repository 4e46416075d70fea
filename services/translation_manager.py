# -*- coding: utf-8 -*-
"""
Message catalogs for the user-facing texts.

French is the reference catalog: a key missing from the active language
falls back to French, then to the key itself.
"""

from typing import Dict, Optional

from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "fr"


class TranslationManager:
    """Holds the catalogs and the active language."""

    def __init__(self, catalogs: Dict[str, Dict[str, str]], language: Optional[str] = None):
        self._catalogs = catalogs
        self._language = DEFAULT_LANGUAGE
        if language:
            self.set_language(language)

    @property
    def languages(self):
        return sorted(self._catalogs)

    def get_language(self) -> str:
        return self._language

    def set_language(self, lang_code: str):
        if lang_code not in self._catalogs:
            logger.warning(f"Unknown language '{lang_code}', using {DEFAULT_LANGUAGE}")
            lang_code = DEFAULT_LANGUAGE
        if lang_code != self._language:
            logger.info(f"Language changed to: {lang_code}")
            self._language = lang_code

    def tr(self, key: str, **kwargs) -> str:
        text = self._catalogs[self._language].get(key)
        if text is None:
            text = self._catalogs[DEFAULT_LANGUAGE].get(key, key)
        if kwargs:
            try:
                return text.format(**kwargs)
            except (KeyError, IndexError, ValueError) as e:
                logger.debug(f"Cannot format '{key}': {e}")
        return text


def _build_translator() -> TranslationManager:
    from app.config import Config
    from services.translations.en import EN_TRANSLATIONS
    from services.translations.fr import FR_TRANSLATIONS

    return TranslationManager({"fr": FR_TRANSLATIONS, "en": EN_TRANSLATIONS}, Config.APP_LANGUAGE)


_translator = _build_translator()


def tr(key: str, **kwargs) -> str:
    return _translator.tr(key, **kwargs)


def set_language(lang_code: str):
    _translator.set_language(lang_code)


def get_language() -> str:
    return _translator.get_language()

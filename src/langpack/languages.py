from __future__ import annotations

"""Supported languages and their file-name abbreviations."""

from enum import Enum
from typing import Optional


class Language(Enum):
    ENGLISH = 'en'
    GERMAN = 'de'
    SPANISH = 'es'
    FRENCH = 'fr'
    ITALIAN = 'it'
    DUTCH = 'nl'
    PORTUGUESE = 'pt'
    POLISH = 'pl'
    RUSSIAN = 'ru'
    SWEDISH = 'sv'
    TURKISH = 'tr'
    CHINESE = 'zh'
    JAPANESE = 'ja'
    KOREAN = 'ko'

    @property
    def abbreviation(self) -> str:
        return self.value

    @classmethod
    def from_abbreviation(cls, abbreviation: Optional[str]) -> Optional['Language']:
        key = (abbreviation or '').strip().lower()
        for lang in cls:
            if lang.value == key:
                return lang
        return None


DEFAULT_LANGUAGE = Language.ENGLISH

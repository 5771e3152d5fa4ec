from __future__ import annotations

"""
language_package – A directory of per-language files sharing one name.

Files are named ``<name>_<abbreviation>.yml`` (e.g. ``messages_en.yml``,
``messages_de.yml``). Every loaded file becomes the store for its language;
strings are fetched by key and language, expanded with the placeholder
resolver, and color codes are translated on the way out.
"""

import random
from pathlib import Path
from typing import Dict, List, Optional, Union

from langpack.colors import translate_alternate_color_codes
from langpack.constants import ALT_COLOR_CHAR, PACKAGE_FILE_SUFFIX
from langpack.core.interfaces.logging import LoggerLikeProtocol
from langpack.core.interfaces.store import TemplateEntry
from langpack.core.models import EntryField, TextSegment
from langpack.io.language_file import LanguageFile
from langpack.languages import DEFAULT_LANGUAGE, Language
from langpack.logging.helpers import get_logger
from langpack.processing.placeholder_resolver import PlaceholderResolver
from langpack.processing.segmenter import MARKER_OPEN, RichTextSegmenter
from langpack.processing.string_pool import StringPool
from langpack.utils.text import to_list


class LanguagePackage:
    """Key lookup and expansion over a set of :class:`LanguageFile` objects.

    Parameters
    ----------
    directory:
        Folder holding the package files.
    name:
        File-name prefix of the package (matched case-insensitively).
    fallback_language:
        When set, keys missing from the requested language are looked up in
        this language before being reported as missing.
    rng:
        Random source handed to every pool loaded by this package.
    """

    def __init__(
        self,
        directory: Union[str, Path],
        name: str,
        *,
        resolver: Optional[PlaceholderResolver] = None,
        segmenter: Optional[RichTextSegmenter] = None,
        fallback_language: Optional[Language] = None,
        rng: Optional[random.Random] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._directory = Path(directory)
        self._name = name
        self._log = logger or get_logger('package')
        self._resolver = resolver or PlaceholderResolver()
        self._segmenter = segmenter or RichTextSegmenter()
        self._fallback = fallback_language
        self._rng = rng
        self._files: Dict[Language, LanguageFile] = {}

    @property
    def directory(self) -> Path:
        return self._directory

    @property
    def name(self) -> str:
        return self._name

    @property
    def languages(self) -> List[Language]:
        return list(self._files)

    def file_for(self, language: Language) -> Optional[LanguageFile]:
        return self._files.get(language)

    # ------------------------------------------------------------------ #
    #  Loading                                                           #
    # ------------------------------------------------------------------ #
    def _scan(self, prefix: str) -> List[tuple[Language, Path]]:
        if not self._directory.is_dir():
            self._log.warning('⚠  language directory not found: %s', self._directory)
            return []
        prefix = prefix.lower()
        found: List[tuple[Language, Path]] = []
        for path in sorted(self._directory.iterdir()):
            fname = path.name.lower()
            if not path.is_file() or not fname.startswith(prefix) or not fname.endswith(PACKAGE_FILE_SUFFIX):
                continue
            rest = fname[len(prefix):-len(PACKAGE_FILE_SUFFIX)]
            if not rest.startswith('_'):
                continue
            language = Language.from_abbreviation(rest[1:])
            if language is None:
                self._log.warning('⚠  unknown language abbreviation %r in %s; skipped', rest[1:], path.name)
                continue
            found.append((language, path))
        return found

    def load(self) -> None:
        """Load every ``<name>_<abbr>.yml`` file of the package directory."""
        for language, path in self._scan(self._name):
            lang_file = LanguageFile(path, language, rng=self._rng, logger=self._log)
            lang_file.load()
            self._files[language] = lang_file
            self._log.info('✔ loaded %s (%s, %d entries)', path.name, language.abbreviation, len(lang_file))

    def append_package(self, package_name: str) -> None:
        """Merge the files of *package_name* into the already loaded languages."""
        for language, path in self._scan(package_name):
            lang_file = self._files.get(language)
            if lang_file is None:
                self._log.warning('⚠  %s targets language %s which is not loaded; skipped',
                                  path.name, language.abbreviation)
                continue
            lang_file.append_file(path)

    # ------------------------------------------------------------------ #
    #  Store surface                                                     #
    # ------------------------------------------------------------------ #
    def lookup(self, key: str, language: Optional[Language] = None) -> Optional[TemplateEntry]:
        language = language or DEFAULT_LANGUAGE
        lang_file = self._files.get(language)
        entry = lang_file.lookup(key) if lang_file is not None else None
        if entry is None and self._fallback is not None and self._fallback is not language:
            fallback = self._files.get(self._fallback)
            if fallback is not None:
                entry = fallback.lookup(key)
        return entry

    def get_raw_string(self, key: str, language: Optional[Language] = None) -> Optional[str]:
        """Return the unexpanded entry for *key*, rolling pools."""
        entry = self.lookup(key, language)
        if isinstance(entry, StringPool):
            return entry.roll()
        return entry

    # ------------------------------------------------------------------ #
    #  Processed strings                                                 #
    # ------------------------------------------------------------------ #
    def get_string(self, key: str, *fields: EntryField, language: Optional[Language] = None) -> Optional[str]:
        """Expanded, color-translated string for *key*; None when missing."""
        value = self._resolver.expand_key(key, self, language or DEFAULT_LANGUAGE, fields)
        if value is None:
            return None
        return translate_alternate_color_codes(ALT_COLOR_CHAR, value)

    def get_any_string(self, key: str, *fields: EntryField) -> Optional[str]:
        """English first, then every other loaded language."""
        value = self.get_string(key, *fields, language=DEFAULT_LANGUAGE)
        if value is not None:
            return value
        for language in self._files:
            if language is DEFAULT_LANGUAGE:
                continue
            value = self.get_string(key, *fields, language=language)
            if value is not None:
                return value
        return None

    def get_string_list(self, key: str, *fields: EntryField, language: Optional[Language] = None) -> Optional[List[str]]:
        return to_list(self.get_string(key, *fields, language=language))

    def get_any_string_list(self, key: str) -> Optional[List[str]]:
        return to_list(self.get_any_string(key))

    def get_texts(self, key: str, *fields: EntryField, language: Optional[Language] = None) -> Optional[List[TextSegment]]:
        """Processed string for *key* split into rich text segments.

        Raises:
            MarkupFormatError: If the string carries malformed ``[@...]`` markup.
        """
        text = self.get_string(key, *fields, language=language)
        if text is None:
            return None
        if MARKER_OPEN in text:
            return self._segmenter.segment(text)
        return [TextSegment(text)]

    def process_string(self, value: str, *fields: EntryField, language: Optional[Language] = None) -> str:
        """Expand an arbitrary template against this package."""
        return self._resolver.expand(value, self, language or DEFAULT_LANGUAGE, fields)

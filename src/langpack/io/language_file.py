from __future__ import annotations

"""
language_file – One YAML file of localized entries for a single language.

Top-level keys map to either a plain value or a pool section:

    greeting: "Hello {{player}}!"
    motd:
      - "line one"
      - "line two"          # lists are joined with new lines
    tip:
      type: RANDOM          # RANDOM | SEQUENTIAL | SEQUENTIAL_REVERSED
      pool:
        - "Tip A"
        - "Tip B"

Keys are stored lower-cased and looked up case-insensitively.
"""

import random
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Union

import yaml

from langpack.colors import default_color_entries
from langpack.core.interfaces.logging import LoggerLikeProtocol
from langpack.core.interfaces.store import TemplateEntry
from langpack.languages import Language
from langpack.logging.helpers import get_logger
from langpack.processing.string_pool import PoolType, StringPool
from langpack.utils.text import to_a_string


class LanguageFileError(ValueError):
    """Raised when a language file cannot be parsed into entries."""


class LanguageFile:
    def __init__(
        self,
        path: Union[str, Path],
        language: Language,
        *,
        rng: Optional[random.Random] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._path = Path(path)
        self._language = language
        self._rng = rng
        self._log = logger or get_logger('io.language_file')
        self._entries: Dict[str, TemplateEntry] = {}
        if language is Language.ENGLISH:
            for key, code in default_color_entries().items():
                self.add(key, code)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def language(self) -> Language:
        return self._language

    def __contains__(self, key: str) -> bool:
        return key.lower() in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> Iterator[str]:
        return iter(self._entries)

    def load(self) -> None:
        """Read this file's own path into the entry map."""
        self._merge(self._path)

    def append_file(self, path: Union[str, Path]) -> None:
        """Merge another file's entries; later keys replace earlier ones."""
        self._merge(Path(path))

    def get(self, key: str) -> Optional[str]:
        """Return the entry text for *key*, rolling pools; None when missing."""
        entry = self._entries.get(key.lower())
        if entry is None:
            return None
        if isinstance(entry, StringPool):
            return entry.roll()
        return entry

    def lookup(self, key: str, language: Any = None) -> Optional[TemplateEntry]:
        return self._entries.get(key.lower())

    def add(self, key: str, entry: TemplateEntry) -> None:
        self._entries[key.lower()] = entry

    # ------------------------------------------------------------------ #
    #  Parsing                                                           #
    # ------------------------------------------------------------------ #
    def _merge(self, path: Path) -> None:
        try:
            raw = path.read_text(encoding='utf-8')
        except OSError as exc:
            self._log.warning('⚠  could not read language file %s: %s', path, exc)
            return
        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise LanguageFileError(f'invalid YAML in {path}: {exc}') from exc
        if data is None:
            return
        if not isinstance(data, Mapping):
            raise LanguageFileError(f'{path}: top level must be a mapping, got {type(data).__name__}')

        for key, value in data.items():
            key = str(key)
            if isinstance(value, Mapping):
                self.add(key, self._build_pool(key, value))
            else:
                self.add(key, to_a_string(value))
        self._log.debug('loaded %d entries from %s', len(data), path)

    def _build_pool(self, key: str, section: Mapping[str, Any]) -> StringPool:
        policy = PoolType.SEQUENTIAL
        if 'type' in section:
            name = section.get('type')
            found = PoolType.from_name(str(name) if name is not None else None)
            if found is None:
                self._log.warning("⚠  [%s] invalid pool type %r; using '%s' instead", key, name, policy.name)
            else:
                policy = found

        pool = StringPool(policy, rng=self._rng)
        items = section.get('pool')
        if isinstance(items, (str, int, float, bool)):
            items = [items]
        if not items:
            self._log.warning('⚠  [%s] pool is empty', key)
            return pool
        for item in items:
            pool.add(to_a_string(item))
        return pool

from __future__ import annotations

from typing import Any, Optional, Protocol, Union, runtime_checkable

from langpack.processing.string_pool import StringPool

TemplateEntry = Union[str, StringPool]


@runtime_checkable
class StringStoreProtocol(Protocol):
    """Key → template lookup, scoped per language.

    Implementations must match *key* case-insensitively and return None for
    unknown keys. A returned pool is rolled by the caller.
    """

    def lookup(self, key: str, language: Any) -> Optional[TemplateEntry]:
        ...

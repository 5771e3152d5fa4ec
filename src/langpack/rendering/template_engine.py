"""
template_engine – Concrete TemplateEngineProtocol implementation for langpack.

Renders free-form ``{{placeholder}}`` templates with a plain mapping of
variables, optionally backed by a store (usually a LanguagePackage) for keys
the mapping does not define.
"""

from typing import Any, Mapping, Optional

from langpack.core.interfaces.logging import LoggerLikeProtocol
from langpack.core.interfaces.templating import TemplateEngineProtocol
from langpack.core.models import EntryField
from langpack.logging.helpers import get_logger
from langpack.processing.placeholder_resolver import PlaceholderResolver


class PlaceholderTemplateEngine(TemplateEngineProtocol):
    """Double-brace template engine using :class:`PlaceholderResolver`.

      • {{name}}           → variables["name"], else the store, else "name"
      • {{if:flag:a:b}}    → conditional, evaluated against variables first
    """

    def __init__(
        self,
        *,
        store: Any = None,
        language: Any = None,
        resolver: Optional[PlaceholderResolver] = None,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._store = store
        self._language = language
        self._resolver = resolver or PlaceholderResolver()
        self._log = logger or get_logger('templates')

    def render(self, template: str, variables: Mapping[str, object]) -> str:  # type: ignore[override]
        """Render *template* replacing {{placeholders}} via *variables*."""
        try:
            fields = [EntryField(str(k), v) for k, v in variables.items()]  # type: ignore[arg-type]
            return self._resolver.expand(template, self._store, self._language, fields)
        except Exception as exc:  # noqa: BLE001
            # Rendering must never crash the caller.
            self._log.error('template rendering failed: %s', exc)
            return template

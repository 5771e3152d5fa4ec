"""
placeholder_resolver – Recursive ``{{key}}`` expansion.

Semantics:

  • ``{{key}}``                  → override value, else the stored template
                                   (itself expanded), else the literal ``key``
  • ``{{if:cond:then}}``         → ``then`` when *cond* holds, nothing otherwise
  • ``{{if:cond:then:else}}``    → ``then`` or ``else`` by *cond*
  • unknown *cond*               → nothing is emitted

Resolved keys are memoised for the duration of one top-level call (nested
expansions share the memo), so a pool-backed key rolls once per call. Store
keys currently being expanded are tracked; a key that refers back to itself,
or a chain deeper than ``max_depth``, is left unresolved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from langpack.core.interfaces.logging import LoggerLikeProtocol
from langpack.core.models import EntryField
from langpack.logging.helpers import get_logger, trace
from langpack.processing.conditions import ConditionEvaluator
from langpack.processing.string_pool import StringPool

OPEN = '{{'
CLOSE = '}}'
DEFAULT_MAX_DEPTH = 32


@dataclass
class _Expansion:
    """State shared by one top-level expansion and its nested lookups."""
    store: Any
    language: Any
    fields: Sequence[EntryField]
    cache: Dict[str, str] = field(default_factory=dict)
    chain: List[str] = field(default_factory=list)


class PlaceholderResolver:
    def __init__(
        self,
        *,
        evaluator: Optional[ConditionEvaluator] = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
        logger: Optional[LoggerLikeProtocol] = None,
    ) -> None:
        self._log = logger or get_logger('resolver')
        self._evaluator = evaluator or ConditionEvaluator(logger=self._log)
        self._max_depth = int(max_depth)

    # ------------------------------------------------------------------ #
    #  Public surface                                                    #
    # ------------------------------------------------------------------ #
    def expand(
        self,
        template: str,
        store: Any = None,
        language: Any = None,
        overrides: Sequence[EntryField] = (),
    ) -> str:
        """Expand every placeholder of *template*.

        Parameters
        ----------
        template:
            Raw text possibly containing ``{{...}}`` placeholders.
        store:
            Object exposing ``lookup(key, language)``; may be None, in which
            case only *overrides* are consulted.
        language:
            Opaque language selector forwarded to the store.
        overrides:
            Field overrides, searched in order before the store.

        Returns
        -------
        str
            The expanded text. Unresolved keys are echoed literally.
        """
        ctx = _Expansion(store=store, language=language, fields=tuple(overrides))
        return self._expand(template, ctx)

    def expand_key(
        self,
        key: str,
        store: Any,
        language: Any = None,
        overrides: Sequence[EntryField] = (),
    ) -> Optional[str]:
        """Look *key* up in *store* and expand it; None when the key is missing."""
        ctx = _Expansion(store=store, language=language, fields=tuple(overrides))
        return self._resolve_stored(key, ctx)

    def evaluate(
        self,
        expression: str,
        store: Any = None,
        language: Any = None,
        overrides: Sequence[EntryField] = (),
    ) -> Optional[bool]:
        ctx = _Expansion(store=store, language=language, fields=tuple(overrides))
        return self._evaluate(expression, ctx)

    # ------------------------------------------------------------------ #
    #  Scanner                                                           #
    # ------------------------------------------------------------------ #
    def _expand(self, template: str, ctx: _Expansion) -> str:
        out: list[str] = []
        key: list[str] = []
        inside = False
        i = 0
        n = len(template)

        while i < n:
            if inside:
                if template.startswith(CLOSE, i):
                    inside = False
                    i += 2
                    self._emit(''.join(key), ctx, out)
                    continue
                key.append(template[i])
            elif template.startswith(OPEN, i):
                inside = True
                key = []
                i += 2
                continue
            else:
                out.append(template[i])
            i += 1

        return ''.join(out)

    def _emit(self, raw_key: str, ctx: _Expansion, out: list[str]) -> None:
        key: Optional[str] = raw_key.strip()
        parts = key.split(':', 3)
        if key.startswith('if') and (len(parts) >= 3 or parts[0].strip() == 'if'):
            key = self._choose_branch(parts, ctx)
            if key is None:
                return

        value = self._resolve(key, ctx)
        if value is None:
            trace(self._log, 'placeholder unresolved', key=key)
            out.append(key)
            return
        ctx.cache[key] = value
        out.append(value)

    def _choose_branch(self, parts: List[str], ctx: _Expansion) -> Optional[str]:
        """Return the key selected by an ``if:`` directive, or None to skip it."""
        if len(parts) < 3:
            return None
        result = self._evaluate(parts[1], ctx)
        if result is None:
            return None
        if len(parts) == 4:
            return (parts[2] if result else parts[3]).strip()
        return parts[2].strip() if result else None

    # ------------------------------------------------------------------ #
    #  Resolution                                                        #
    # ------------------------------------------------------------------ #
    def _evaluate(self, expression: str, ctx: _Expansion) -> Optional[bool]:
        return self._evaluator.evaluate(
            expression, ctx.fields, lambda name: self._resolve_stored(name, ctx)
        )

    def _resolve(self, key: str, ctx: _Expansion) -> Optional[str]:
        cached = ctx.cache.get(key)
        if cached is not None:
            return cached
        for fld in ctx.fields:
            if fld is not None and fld.is_key(key):
                return fld.as_text()
        return self._resolve_stored(key, ctx)

    def _resolve_stored(self, key: str, ctx: _Expansion) -> Optional[str]:
        if ctx.store is None:
            return None
        folded = key.lower()
        if folded in ctx.chain:
            self._log.warning('⚠  cyclic reference to %r via %s; left unresolved', key, ' → '.join(ctx.chain))
            return None
        if len(ctx.chain) >= self._max_depth:
            self._log.warning('⚠  reference depth %d exceeded at %r; left unresolved', self._max_depth, key)
            return None

        entry = ctx.store.lookup(key, ctx.language)
        if isinstance(entry, StringPool):
            raw = entry.roll()
        else:
            raw = entry
        if raw is None:
            return None

        ctx.chain.append(folded)
        try:
            value = self._expand(raw, ctx)
        finally:
            ctx.chain.pop()
        trace(self._log, 'placeholder resolved from store', key=key, depth=len(ctx.chain))
        return value


def expand(
    template: str,
    store: Any = None,
    language: Any = None,
    overrides: Sequence[EntryField] = (),
) -> str:
    """Module-level convenience wrapper around :meth:`PlaceholderResolver.expand`."""
    return PlaceholderResolver().expand(template, store, language, overrides)

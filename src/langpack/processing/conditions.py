"""
conditions – Boolean expressions used by ``{{if:...}}`` placeholders.

Grammar (checked top-down on the trimmed expression, first match wins):

  • ``a && b``   → every side must be a known True; anything else is False
  • ``a || b``   → True as soon as one side is a known True; otherwise the
                   whole expression falls through to the rules below
  • ``name == v``→ override value compared to ``v`` (trimmed, case-insensitive)
  • ``name != v``→ the same comparison, negated
  • ``[!]name``  → override coerced to bool, else the stored template text

The result is ``None`` ("unknown") when no variable can be found.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from langpack.core.interfaces.logging import LoggerLikeProtocol
from langpack.core.models import EntryField, text_is_truthy
from langpack.logging.helpers import get_logger, trace

# Resolves a bare name through the backing store; None when missing.
StoreResolver = Callable[[str], Optional[str]]


def _find_field(fields: Sequence[EntryField], key: str) -> Optional[EntryField]:
    for fld in fields:
        if fld is not None and fld.is_key(key):
            return fld
    return None


class ConditionEvaluator:
    def __init__(self, *, logger: Optional[LoggerLikeProtocol] = None) -> None:
        self._log = logger or get_logger('conditions')

    def evaluate(
        self,
        expression: str,
        fields: Sequence[EntryField],
        resolve_stored: Optional[StoreResolver] = None,
    ) -> Optional[bool]:
        """Evaluate *expression* against *fields*, then the store."""
        condition = expression.strip()

        if '&&' in condition:
            for part in condition.split('&&'):
                if self.evaluate(part, fields, resolve_stored) is not True:
                    return False
            return True

        if '||' in condition:
            for part in condition.split('||'):
                if self.evaluate(part, fields, resolve_stored) is True:
                    return True
            # No side was true: the whole expression is re-read by the
            # comparison and bare-name rules below.

        invert = False
        result: Optional[bool] = None
        if '==' in condition:
            result = self._compare(condition, '==', fields)
        elif '!=' in condition:
            result = self._compare(condition, '!=', fields)
            invert = True
        else:
            name = condition
            if name.startswith('!'):
                invert = True
                name = name[1:].strip()
            fld = _find_field(fields, name)
            if fld is not None:
                result = fld.as_bool()
            elif resolve_stored is not None:
                stored = resolve_stored(name)
                if stored is not None:
                    result = text_is_truthy(stored)

        if result is not None and invert:
            result = not result
        trace(self._log, 'condition evaluated', expression=condition, result=result)
        return result

    @staticmethod
    def _compare(condition: str, operator: str, fields: Sequence[EntryField]) -> Optional[bool]:
        parts = condition.split(operator)
        key = parts[0].strip()
        literal = parts[1].strip() if len(parts) > 1 else ''
        fld = _find_field(fields, key)
        if fld is None:
            return None
        return fld.as_text().strip().lower() == literal.lower()


def evaluate_condition(
    expression: str,
    store: Any = None,
    language: Any = None,
    overrides: Sequence[EntryField] = (),
) -> Optional[bool]:
    """Evaluate *expression* with *overrides* first and *store* as fallback.

    Bare names missing from the overrides are resolved (and expanded) as
    template keys of *store* in *language*.
    """
    from langpack.processing.placeholder_resolver import PlaceholderResolver

    return PlaceholderResolver().evaluate(expression, store, language, overrides)

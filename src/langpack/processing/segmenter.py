"""
segmenter – Split expanded text on ``[@operator: arg: arg]`` markers.

Recognised operators:

  • ``[@command: /cmd: text]`` → ``text`` that runs ``/cmd`` when clicked
  • ``[@hover: tip: text]``    → ``text``; the action runs ``tip`` as a
                                 command, same as ``[@command]``

Markup errors (unknown operator, wrong arity, unterminated marker) abort the
whole call with :class:`MarkupFormatError`.
"""

from __future__ import annotations

from typing import List, Optional

from langpack.core.models import ActionKind, TextAction, TextSegment

MARKER_OPEN = '[@'
MARKER_CLOSE = ']'
ARG_SEP = ':'

_ARITY = {'command': 2, 'hover': 2}


class MarkupFormatError(ValueError):
    """Raised for malformed ``[@...]`` markup."""


class RichTextSegmenter:
    def segment(self, text: str) -> List[TextSegment]:
        segments: List[TextSegment] = []
        plain: List[str] = []
        buf: List[str] = []
        args: List[str] = []
        operator: Optional[str] = None
        inside = False
        i = 0
        n = len(text)

        while i < n:
            if text.startswith(MARKER_OPEN, i):
                if inside:
                    raise MarkupFormatError(f'nested marker at offset {i} in line: {text!r}')
                if plain:
                    segments.append(TextSegment(''.join(plain)))
                    plain = []
                inside = True
                operator = None
                buf = []
                args = []
                i += 2
                continue

            ch = text[i]
            i += 1
            if not inside:
                plain.append(ch)
                continue

            if ch == MARKER_CLOSE:
                if operator is None:
                    raise MarkupFormatError(f'invalid operation format for line: {text!r}')
                args.append(''.join(buf).strip())
                segments.append(self._action_segment(operator, args))
                inside = False
                continue
            if ch == ARG_SEP:
                if operator is None:
                    operator = ''.join(buf)
                else:
                    args.append(''.join(buf).strip())
                buf = []
                continue
            buf.append(ch)

        if inside:
            raise MarkupFormatError(f'unterminated marker in line: {text!r}')
        if plain:
            segments.append(TextSegment(''.join(plain)))
        return segments

    def _action_segment(self, operator: str, args: List[str]) -> TextSegment:
        op = operator.strip().lower()
        expected = _ARITY.get(op)
        if expected is None:
            raise MarkupFormatError(f"the operator '@{op}' is unknown")
        if len(args) != expected:
            raise MarkupFormatError(
                f"the operator '@{op}' takes {expected} arguments ({len(args)} provided)"
            )
        return TextSegment(args[1], TextAction(ActionKind.RUN_COMMAND, args[0]))


def segment(text: str) -> List[TextSegment]:
    """Module-level convenience wrapper around :meth:`RichTextSegmenter.segment`."""
    return RichTextSegmenter().segment(text)

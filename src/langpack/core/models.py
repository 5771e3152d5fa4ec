from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# Closed set of values a caller may bind to a field override.
FieldValue = Union[None, bool, int, float, str]

_FIELD_TYPES = (bool, int, float, str)


def _check_value(value: object) -> FieldValue:
    if value is None or isinstance(value, _FIELD_TYPES):
        return value  # type: ignore[return-value]
    raise TypeError(
        f"unsupported field value type {type(value).__name__!r}; "
        "expected None, bool, int, float or str"
    )


def text_is_truthy(text: str) -> bool:
    """Truthiness of a template text: anything but 'false' or '0' (any case)."""
    low = text.lower()
    return low == "true" or (low != "false" and low != "0")


def value_to_bool(value: FieldValue) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, float) and not math.isfinite(value):
        return value > 0
    if isinstance(value, (int, float)):
        return int(value) > 0
    return text_is_truthy(value)


def value_to_text(value: FieldValue) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class EntryField:
    """Caller-supplied override for a placeholder key.

    The key is fixed at construction and matched exactly (no case folding);
    the value may be reassigned between resolutions.
    """

    __slots__ = ("_key", "_value")

    def __init__(self, key: str, value: FieldValue = None) -> None:
        self._key = key
        self._value = _check_value(value)

    @property
    def key(self) -> str:
        return self._key

    @property
    def value(self) -> FieldValue:
        return self._value

    @value.setter
    def value(self, value: FieldValue) -> None:
        self._value = _check_value(value)

    def is_key(self, key: str) -> bool:
        return self._key == key

    def as_bool(self) -> bool:
        return value_to_bool(self._value)

    def as_text(self) -> str:
        return value_to_text(self._value)

    def __repr__(self) -> str:
        return f"EntryField({self._key!r}, {self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EntryField):
            return NotImplemented
        return self._key == other._key and self._value == other._value

    __hash__ = None  # type: ignore[assignment]


class ActionKind(str, Enum):
    RUN_COMMAND = "run_command"
    HOVER = "hover"


@dataclass(frozen=True)
class TextAction:
    kind: ActionKind
    payload: str


@dataclass(frozen=True)
class TextSegment:
    text: str
    action: Optional[TextAction] = None

    def to_dict(self) -> dict:
        out: dict = {"text": self.text}
        if self.action is not None:
            out["action"] = {"kind": self.action.kind.value, "payload": self.action.payload}
        return out

from __future__ import annotations

"""
Text coercion helpers shared by the loaders and the package API.

Public API:
    - to_a_string(obj): str
    - to_list(text): list[str] | None
"""

from typing import Any, List, Optional

from langpack.constants import NEW_LINE


def to_a_string(obj: Any) -> str:
    """Convert a YAML value to text; lists become newline-joined lines."""
    if isinstance(obj, (list, tuple)):
        return NEW_LINE.join(to_a_string(item) for item in obj)
    if obj is None:
        return ''
    if isinstance(obj, bool):
        return 'true' if obj else 'false'
    return str(obj)


def to_list(text: Optional[str]) -> Optional[List[str]]:
    """Split *text* on new lines; None passes through."""
    if text is None:
        return None
    return text.split(NEW_LINE)

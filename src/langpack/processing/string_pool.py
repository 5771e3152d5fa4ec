"""
string_pool – Rotating candidate strings bound to a single key.

A pool yields one of its candidates on every :meth:`StringPool.roll` call,
according to its :class:`PoolType`:

  • RANDOM              → uniform pick from the injected ``random.Random``
  • SEQUENTIAL          → cursor walks forward, wrapping to 0
  • SEQUENTIAL_REVERSED → cursor walks backward, wrapping to the last index

Adding a candidate resets the cursor (0 for forward policies, the last index
for the reversed one). Cursor state is guarded by a per-pool lock so several
resolutions may roll the same pool concurrently.
"""

from __future__ import annotations

import random
import threading
from enum import Enum
from typing import Iterable, List, Optional, Tuple


class PoolType(Enum):
    RANDOM = "RANDOM"
    SEQUENTIAL = "SEQUENTIAL"
    SEQUENTIAL_REVERSED = "SEQUENTIAL_REVERSED"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["PoolType"]:
        """Return the policy called *name* (case-insensitive) or None."""
        key = (name or "").strip().upper()
        for member in cls:
            if member.name == key:
                return member
        return None


class StringPool:
    def __init__(
        self,
        policy: PoolType = PoolType.SEQUENTIAL,
        candidates: Iterable[str] = (),
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._policy = policy
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._strings: List[str] = []
        self._index = 0
        for candidate in candidates:
            self.add(candidate)

    @property
    def policy(self) -> PoolType:
        return self._policy

    @property
    def candidates(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._strings)

    @property
    def cursor(self) -> int:
        with self._lock:
            return self._index

    def __len__(self) -> int:
        with self._lock:
            return len(self._strings)

    def __str__(self) -> str:
        rolled = self.roll()
        return rolled if rolled is not None else ""

    def __repr__(self) -> str:
        return f"StringPool({self._policy.name}, {list(self.candidates)!r})"

    def roll(self) -> Optional[str]:
        """Return the next candidate, or None when the pool is empty."""
        with self._lock:
            n = len(self._strings)
            if n == 0:
                return None
            if self._policy is PoolType.RANDOM:
                return self._strings[self._rng.randrange(n)]
            picked = self._strings[self._index]
            if self._policy is PoolType.SEQUENTIAL:
                self._index = 0 if self._index == n - 1 else self._index + 1
            else:
                self._index = n - 1 if self._index == 0 else self._index - 1
            return picked

    def add(self, candidate: str) -> None:
        with self._lock:
            self._strings.append(candidate)
            if self._policy is PoolType.SEQUENTIAL_REVERSED:
                self._index = len(self._strings) - 1
            else:
                self._index = 0

    def clear(self) -> None:
        with self._lock:
            self._strings = []
            self._index = 0

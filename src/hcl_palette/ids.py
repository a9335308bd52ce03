from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass
class IdAllocator:
    """Monotonic id source shared by every entity an engine creates.

    One counter serves all prefixes, so ``next("col-")`` and ``next("hue-")``
    never hand out the same number. Ids are never recycled.
    """

    start: int = 1
    _next: int = field(init=False, repr=False)
    _lock: threading.Lock = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._next = int(self.start)
        self._lock = threading.Lock()

    def next(self, prefix: str = "") -> str:
        with self._lock:
            n = self._next
            self._next += 1
        return f"{prefix}{n}"

    def peek(self) -> int:
        with self._lock:
            return self._next


__all__ = ["IdAllocator"]

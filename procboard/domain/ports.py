from __future__ import annotations
from typing import Callable, Protocol

from .errors import EditorError

__all__ = ["EditorError", "IdAllocatorPort"]


# ---- Ports (Hexagonal boundaries) ----
class IdAllocatorPort(Protocol):
    """Supplies fresh unique integers for new processes and items.

    ``continuation`` is invoked exactly once with the fresh id, possibly
    later than the call itself. No ordering holds between requests.
    """

    def allocate_id(self, continuation: Callable[[int], None]) -> None: ...

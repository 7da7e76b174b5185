"""Identifier allocators implementing :class:`IdAllocatorPort`."""

from __future__ import annotations

from collections import deque
import itertools
import logging
from typing import Callable, Deque, Iterator

from ..domain.ports import IdAllocatorPort

LOGGER = logging.getLogger(__name__)

Continuation = Callable[[int], None]


class SequentialIdAllocator:
    """Hands out increasing integers and resolves each request immediately."""

    def __init__(self, start: int = 1) -> None:
        self._counter: Iterator[int] = itertools.count(int(start))

    def next_id(self) -> int:
        return next(self._counter)

    def allocate_id(self, continuation: Continuation) -> None:
        continuation(self.next_id())


class DeferredIdAllocator:
    """Queue id requests and resolve them later from ``source``.

    Call ``drain()`` from the event loop (e.g. a UI timer) to fire pending
    continuations. Ids are drawn at resolution time, so a continuation only
    ever sees the id issued for its own request.
    """

    def __init__(self, source: SequentialIdAllocator | None = None) -> None:
        self._source = source or SequentialIdAllocator()
        self._pending: Deque[Continuation] = deque()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def allocate_id(self, continuation: Continuation) -> None:
        self._pending.append(continuation)

    def resolve_next(self) -> bool:
        """Resolve the oldest pending request. Returns False when none is pending."""
        if not self._pending:
            return False
        continuation = self._pending.popleft()
        fresh_id = self._source.next_id()
        LOGGER.debug("Resolving id request with %s", fresh_id)
        continuation(fresh_id)
        return True

    def drain(self) -> int:
        """Resolve every pending request, including ones queued while draining."""
        resolved = 0
        while self.resolve_next():
            resolved += 1
        return resolved


def is_allocator(obj: object) -> bool:
    """Return True when ``obj`` satisfies :class:`IdAllocatorPort` structurally."""
    return callable(getattr(obj, "allocate_id", None))


__all__ = ["DeferredIdAllocator", "IdAllocatorPort", "SequentialIdAllocator", "is_allocator"]

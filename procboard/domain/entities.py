from __future__ import annotations

"""Domain value objects and the editor model shared across use-cases and view models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

PLACEHOLDER_ID = "new"
"""Temporary id carried by prototype records until the allocator issues a real one."""


def _require_id(kind: str, value: object) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{kind} id must be a non-empty string.")


@dataclass(frozen=True)
class ProcessItem:
    """Single unit of work that occupies one slot of a process."""

    id: str
    """Allocator-issued identifier; identity of the item across moves and swaps."""
    name: str
    """Display name, editable in editor mode."""
    description: str = ""
    """Free-form description shown alongside the name."""

    def __post_init__(self) -> None:
        _require_id("ProcessItem", self.id)


Slot = Optional[ProcessItem]
"""A slot is either filled with an item or explicitly empty (``None``)."""


@dataclass(frozen=True)
class Process:
    """Named, ordered sequence of slots.

    Slot count and slot position are meaningful on their own: emptying a slot
    keeps it in place, only explicit slot operations change ``len(items)``.
    """

    id: str
    """Allocator-issued identifier used to address the process in mutations."""
    name: str
    """Display name, editable in editor mode."""
    items: Tuple[Slot, ...] = ()
    """Ordered slots; ``None`` marks an empty slot."""

    def __post_init__(self) -> None:
        _require_id("Process", self.id)
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def slot_count(self) -> int:
        return len(self.items)

    def slot(self, index: int) -> Slot:
        """Return the slot content at ``index`` or ``None`` when out of range."""
        if 0 <= index < len(self.items):
            return self.items[index]
        return None


class Mode(Enum):
    """Editor-wide UI mode."""

    VIEWER = "viewer"
    EDITOR = "editor"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class ItemDrag:
    """An item is being dragged out of ``process`` at ``item_index``."""

    process: Process
    item: ProcessItem
    item_index: int
    has_targeted: bool = False


@dataclass(frozen=True)
class EmptySlotDrag:
    """An empty slot itself is being dragged (to the bin)."""

    process: Process
    item_index: int
    has_targeted: bool = False


@dataclass(frozen=True)
class ProcessDrag:
    """A whole process is being dragged (to the bin)."""

    process: Process
    has_targeted: bool = False


DragContext = Union[ItemDrag, EmptySlotDrag, ProcessDrag]


@dataclass(frozen=True)
class Model:
    """Complete editor state.

    ``drag`` is a single tagged field, so at most one drag context can be
    active at any time.
    """

    processes: Tuple[Process, ...] = ()
    mode: Mode = Mode.VIEWER
    drag: Optional[DragContext] = field(default=None)

    def __post_init__(self) -> None:
        object.__setattr__(self, "processes", tuple(self.processes))

    @property
    def item_drag(self) -> Optional[ItemDrag]:
        return self.drag if isinstance(self.drag, ItemDrag) else None

    @property
    def empty_slot_drag(self) -> Optional[EmptySlotDrag]:
        return self.drag if isinstance(self.drag, EmptySlotDrag) else None

    @property
    def process_drag(self) -> Optional[ProcessDrag]:
        return self.drag if isinstance(self.drag, ProcessDrag) else None

    def find_process(self, process_id: str) -> Optional[Process]:
        """Return the current record for ``process_id`` or ``None``."""
        for process in self.processes:
            if process.id == process_id:
                return process
        return None

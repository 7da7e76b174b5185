"""Inbound message vocabulary and outbound effects of the editor core.

The presentation layer translates platform events 1:1 into these messages.
``AllocateId`` is the only effect the core asks the outside world to run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from .drop_targets import DropTarget
from .entities import Mode, Process, ProcessItem


@dataclass(frozen=True)
class ToggleMode:
    mode: Mode


@dataclass(frozen=True)
class RequestNewProcess:
    """Ask for a fresh id, then append ``prototype`` under that id."""

    prototype: Process


@dataclass(frozen=True)
class ProcessCreated:
    fresh_id: int
    prototype: Process


@dataclass(frozen=True)
class RequestNewItem:
    """Ask for a fresh id, then write ``prototype`` into ``process`` at ``slot_index``."""

    process: Process
    prototype: ProcessItem
    slot_index: int


@dataclass(frozen=True)
class ItemCreated:
    fresh_id: int
    process: Process
    prototype: ProcessItem
    slot_index: int


@dataclass(frozen=True)
class AddEmptySlot:
    process: Process


@dataclass(frozen=True)
class ItemDragStarted:
    process: Process
    item: ProcessItem
    item_index: int


@dataclass(frozen=True)
class ItemDragEnded:
    pass


@dataclass(frozen=True)
class EmptySlotDragStarted:
    process: Process
    item_index: int


@dataclass(frozen=True)
class EmptySlotDragEnded:
    pass


@dataclass(frozen=True)
class ProcessDragStarted:
    process: Process


@dataclass(frozen=True)
class ProcessDragEnded:
    pass


@dataclass(frozen=True)
class DropItem:
    target: DropTarget


@dataclass(frozen=True)
class DropEmptySlot:
    pass


@dataclass(frozen=True)
class DropProcess:
    pass


@dataclass(frozen=True)
class SetDragTargetHover:
    has_targeted: bool


@dataclass(frozen=True)
class RenameProcess:
    process: Process
    name: str


@dataclass(frozen=True)
class RenameItem:
    process: Process
    slot_index: int
    name: str


@dataclass(frozen=True)
class NoOp:
    pass


Message = Union[
    ToggleMode,
    RequestNewProcess,
    ProcessCreated,
    RequestNewItem,
    ItemCreated,
    AddEmptySlot,
    ItemDragStarted,
    ItemDragEnded,
    EmptySlotDragStarted,
    EmptySlotDragEnded,
    ProcessDragStarted,
    ProcessDragEnded,
    DropItem,
    DropEmptySlot,
    DropProcess,
    SetDragTargetHover,
    RenameProcess,
    RenameItem,
    NoOp,
]


@dataclass(frozen=True)
class AllocateId:
    """Request a fresh integer id; ``continuation`` turns it into the follow-up message."""

    continuation: Callable[[int], Message]


Effect = AllocateId

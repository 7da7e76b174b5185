"""Drop-target descriptors produced by the presentation layer for item drops."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .entities import Process, ProcessItem


@dataclass(frozen=True)
class DropOnNewSlot:
    """Drop onto the "add slot" area at the end of ``target_process``."""

    target_process: Process


@dataclass(frozen=True)
class DropInBin:
    """Drop onto the bin: delete the dragged item."""


@dataclass(frozen=True)
class DropOnEmptySlot:
    """Drop onto an empty slot. The caller guarantees the slot is empty."""

    target_process: Process
    target_index: int


@dataclass(frozen=True)
class DropOnAnotherProcessItem:
    """Drop onto a filled slot: the two items swap places."""

    target_process: Process
    target_item: ProcessItem
    target_index: int


DropTarget = Union[DropOnNewSlot, DropInBin, DropOnEmptySlot, DropOnAnotherProcessItem]

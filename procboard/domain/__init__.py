"""Domain package exports for records, drop targets and messages."""

from .drop_targets import (
    DropInBin,
    DropOnAnotherProcessItem,
    DropOnEmptySlot,
    DropOnNewSlot,
    DropTarget,
)
from .entities import (
    PLACEHOLDER_ID,
    DragContext,
    EmptySlotDrag,
    ItemDrag,
    Mode,
    Model,
    Process,
    ProcessDrag,
    ProcessItem,
)
from .errors import EditorError

__all__ = [
    "PLACEHOLDER_ID",
    "DragContext",
    "DropInBin",
    "DropOnAnotherProcessItem",
    "DropOnEmptySlot",
    "DropOnNewSlot",
    "DropTarget",
    "EditorError",
    "EmptySlotDrag",
    "ItemDrag",
    "Mode",
    "Model",
    "Process",
    "ProcessDrag",
    "ProcessItem",
]

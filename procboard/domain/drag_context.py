"""Drag context manager: start, clear and hover-flag transitions.

The model holds one drag context at most. Starting a drag while another
one is active replaces it; the platform allows a single drag gesture, so
that case is logged as a warning.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
import logging
from typing import Optional, Type

from .entities import DragContext, EmptySlotDrag, ItemDrag, Model, Process, ProcessDrag, ProcessItem

LOGGER = logging.getLogger(__name__)


class DragHint(Enum):
    """Presentation hint derived from the active drag context."""

    IDLE = "idle"
    DRAGGING = "dragging"
    TARGETING = "targeting"


def _start(context: DragContext, model: Model) -> Model:
    if model.drag is not None:
        LOGGER.warning(
            "Drag %s started while %s was still active; replacing it.",
            type(context).__name__,
            type(model.drag).__name__,
        )
    return replace(model, drag=context)


def _clear(kind: Type[object], model: Model) -> Model:
    if isinstance(model.drag, kind):
        return replace(model, drag=None)
    return model


def clear_drag(model: Model) -> Model:
    """Clear whatever drag context is active."""
    if model.drag is None:
        return model
    return replace(model, drag=None)


# ---- Item drag ----
def set_item_drag(process: Process, item: ProcessItem, item_index: int, model: Model) -> Model:
    return _start(ItemDrag(process=process, item=item, item_index=item_index), model)


def clear_item_drag(model: Model) -> Model:
    return _clear(ItemDrag, model)


def has_item_targeted(model: Model) -> bool:
    drag = model.item_drag
    return bool(drag and drag.has_targeted)


# ---- Empty-slot drag ----
def set_empty_slot_drag(process: Process, item_index: int, model: Model) -> Model:
    return _start(EmptySlotDrag(process=process, item_index=item_index), model)


def clear_empty_slot_drag(model: Model) -> Model:
    return _clear(EmptySlotDrag, model)


def has_empty_slot_targeted(model: Model) -> bool:
    drag = model.empty_slot_drag
    return bool(drag and drag.has_targeted)


# ---- Process drag ----
def set_process_drag(process: Process, model: Model) -> Model:
    return _start(ProcessDrag(process=process), model)


def clear_process_drag(model: Model) -> Model:
    return _clear(ProcessDrag, model)


def has_process_targeted(model: Model) -> bool:
    drag = model.process_drag
    return bool(drag and drag.has_targeted)


# ---- Hover ----
def toggle_targeting(has_targeted: bool, model: Model) -> Model:
    """Set ``has_targeted`` on the active drag context, if any."""
    if model.drag is None:
        return model
    return replace(model, drag=replace(model.drag, has_targeted=bool(has_targeted)))


def drag_hint(model: Model) -> DragHint:
    drag: Optional[DragContext] = model.drag
    if drag is None:
        return DragHint.IDLE
    return DragHint.TARGETING if drag.has_targeted else DragHint.DRAGGING

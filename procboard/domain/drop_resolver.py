"""Map (active drag context, drop target) pairs onto model mutations.

Each resolver clears its drag context afterwards, whether or not a mutation
happened. Resolving without a matching active context returns the model
unchanged. Target/context consistency (e.g. that a ``DropOnEmptySlot``
really points at an empty slot) is the caller's responsibility.
"""

from __future__ import annotations

import logging

from . import mutations
from .drag_context import clear_empty_slot_drag, clear_item_drag, clear_process_drag
from .drop_targets import (
    DropInBin,
    DropOnAnotherProcessItem,
    DropOnEmptySlot,
    DropOnNewSlot,
    DropTarget,
)
from .entities import ItemDrag, Model

LOGGER = logging.getLogger(__name__)


def _drop_on_new_slot(drag: ItemDrag, target: DropOnNewSlot, model: Model) -> Model:
    model = mutations.add_item_slot(target.target_process, model)
    grown = model.find_process(target.target_process.id)
    if grown is None:
        return model
    model = mutations.add_item_to_process(grown.slot_count - 1, drag.item, grown, model)
    return mutations.remove_item_from_process(drag.item_index, drag.process, model)


def _drop_in_bin(drag: ItemDrag, target: DropInBin, model: Model) -> Model:
    return mutations.remove_item_from_process(drag.item_index, drag.process, model)


def _drop_on_empty_slot(drag: ItemDrag, target: DropOnEmptySlot, model: Model) -> Model:
    # Source is emptied first so dropping back onto the own slot keeps the item.
    model = mutations.remove_item_from_process(drag.item_index, drag.process, model)
    return mutations.add_item_to_process(target.target_index, drag.item, target.target_process, model)


def _drop_on_item(drag: ItemDrag, target: DropOnAnotherProcessItem, model: Model) -> Model:
    model = mutations.add_item_to_process(drag.item_index, target.target_item, drag.process, model)
    return mutations.add_item_to_process(target.target_index, drag.item, target.target_process, model)


_RECIPES = {
    DropOnNewSlot: _drop_on_new_slot,
    DropInBin: _drop_in_bin,
    DropOnEmptySlot: _drop_on_empty_slot,
    DropOnAnotherProcessItem: _drop_on_item,
}


def drop_process_item_on(target: DropTarget, model: Model) -> Model:
    """Apply the active item drag to ``target`` and clear the item drag."""
    recipe = _RECIPES.get(type(target))
    if recipe is None:
        raise TypeError(f"Unsupported drop target: {type(target).__name__}")
    drag = model.item_drag
    if drag is None:
        LOGGER.debug("Item drop on %s without an active item drag.", type(target).__name__)
        return model
    target_process = getattr(target, "target_process", None)
    if target_process is not None and model.find_process(target_process.id) is None:
        LOGGER.debug("Drop target process %s no longer exists.", target_process.id)
        return clear_item_drag(model)
    LOGGER.debug(
        "Dropping item %s from %s[%s] on %s",
        drag.item.id,
        drag.process.id,
        drag.item_index,
        type(target).__name__,
    )
    return clear_item_drag(recipe(drag, target, model))


def drop_empty_item_to_bin(model: Model) -> Model:
    """Remove the dragged empty slot from its process."""
    drag = model.empty_slot_drag
    if drag is None:
        return model
    model = mutations.remove_empty_slot(drag.item_index, drag.process, model)
    return clear_empty_slot_drag(model)


def drop_process_to_bin(model: Model) -> Model:
    """Remove the dragged process."""
    drag = model.process_drag
    if drag is None:
        return model
    model = mutations.remove_process(drag.process, model)
    return clear_process_drag(model)

"""Pure transition function of the editor: ``(model, message) -> (model, effects)``.

Handlers are keyed on the message type. Every drop and drag-end message
leaves the model without a drag context, whichever kind was active.
"""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Callable, Dict, List, Tuple

from ..domain import drag_context, drop_resolver, mutations
from ..domain.entities import Model
from ..domain.messages import (
    AddEmptySlot,
    AllocateId,
    DropEmptySlot,
    DropItem,
    DropProcess,
    Effect,
    EmptySlotDragEnded,
    EmptySlotDragStarted,
    ItemCreated,
    ItemDragEnded,
    ItemDragStarted,
    Message,
    NoOp,
    ProcessCreated,
    ProcessDragEnded,
    ProcessDragStarted,
    RenameItem,
    RenameProcess,
    RequestNewItem,
    RequestNewProcess,
    SetDragTargetHover,
    ToggleMode,
)

LOGGER = logging.getLogger(__name__)

Transition = Tuple[Model, List[Effect]]


def _only(model: Model) -> Transition:
    return model, []


def _request_new_process(msg: RequestNewProcess, model: Model) -> Transition:
    prototype = msg.prototype
    return model, [AllocateId(lambda fresh_id: ProcessCreated(fresh_id, prototype))]


def _process_created(msg: ProcessCreated, model: Model) -> Transition:
    process = replace(msg.prototype, id=str(msg.fresh_id))
    LOGGER.debug("Process %s created", process.id)
    return _only(mutations.add_process(process, model))


def _request_new_item(msg: RequestNewItem, model: Model) -> Transition:
    process, prototype, slot_index = msg.process, msg.prototype, msg.slot_index
    return model, [
        AllocateId(lambda fresh_id: ItemCreated(fresh_id, process, prototype, slot_index))
    ]


def _item_created(msg: ItemCreated, model: Model) -> Transition:
    item = replace(msg.prototype, id=str(msg.fresh_id))
    LOGGER.debug("Item %s created in %s[%s]", item.id, msg.process.id, msg.slot_index)
    return _only(mutations.add_item_to_process(msg.slot_index, item, msg.process, model))


def _drop_item(msg: DropItem, model: Model) -> Transition:
    model = drop_resolver.drop_process_item_on(msg.target, model)
    return _only(drag_context.clear_drag(model))


def _drop_empty_slot(msg: DropEmptySlot, model: Model) -> Transition:
    model = drop_resolver.drop_empty_item_to_bin(model)
    return _only(drag_context.clear_drag(model))


def _drop_process(msg: DropProcess, model: Model) -> Transition:
    model = drop_resolver.drop_process_to_bin(model)
    return _only(drag_context.clear_drag(model))


_HANDLERS: Dict[type, Callable[..., Transition]] = {
    NoOp: lambda msg, model: _only(model),
    ToggleMode: lambda msg, model: _only(mutations.toggle_mode(msg.mode, model)),
    RequestNewProcess: _request_new_process,
    ProcessCreated: _process_created,
    RequestNewItem: _request_new_item,
    ItemCreated: _item_created,
    AddEmptySlot: lambda msg, model: _only(mutations.add_item_slot(msg.process, model)),
    RenameProcess: lambda msg, model: _only(mutations.rename_process(msg.process, msg.name, model)),
    RenameItem: lambda msg, model: _only(
        mutations.rename_item(msg.process, msg.slot_index, msg.name, model)
    ),
    ItemDragStarted: lambda msg, model: _only(
        drag_context.set_item_drag(msg.process, msg.item, msg.item_index, model)
    ),
    EmptySlotDragStarted: lambda msg, model: _only(
        drag_context.set_empty_slot_drag(msg.process, msg.item_index, model)
    ),
    ProcessDragStarted: lambda msg, model: _only(drag_context.set_process_drag(msg.process, model)),
    ItemDragEnded: lambda msg, model: _only(drag_context.clear_drag(model)),
    EmptySlotDragEnded: lambda msg, model: _only(drag_context.clear_drag(model)),
    ProcessDragEnded: lambda msg, model: _only(drag_context.clear_drag(model)),
    SetDragTargetHover: lambda msg, model: _only(
        drag_context.toggle_targeting(msg.has_targeted, model)
    ),
    DropItem: _drop_item,
    DropEmptySlot: _drop_empty_slot,
    DropProcess: _drop_process,
}


def update(model: Model, message: Message) -> Transition:
    """Apply ``message`` to ``model``.

    Returns:
        The new model and the effects the caller must run (id allocations).

    Raises:
        TypeError: ``message`` is not part of the message vocabulary.
    """
    handler = _HANDLERS.get(type(message))
    if handler is None:
        raise TypeError(f"Unsupported message: {type(message).__name__}")
    return handler(message, model)

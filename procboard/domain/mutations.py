"""Pure model mutations used by the drop resolver and the update function.

Every function takes the current :class:`Model` and returns a new one.
Processes are addressed by id against the current model; an id that is not
present leaves the model unchanged, as does a slot index out of range.
"""

from __future__ import annotations

from dataclasses import replace
import logging
from typing import Callable, Tuple

from .entities import Mode, Model, Process, ProcessItem, Slot

LOGGER = logging.getLogger(__name__)


def _map_process(process_id: str, change: Callable[[Process], Process], model: Model) -> Model:
    """Replace the process matching ``process_id`` with ``change(process)``."""
    if model.find_process(process_id) is None:
        LOGGER.debug("No process with id %s; mutation skipped.", process_id)
        return model
    processes = tuple(
        change(process) if process.id == process_id else process
        for process in model.processes
    )
    return replace(model, processes=processes)


def _set_slot(items: Tuple[Slot, ...], index: int, value: Slot) -> Tuple[Slot, ...]:
    if not 0 <= index < len(items):
        LOGGER.debug("Slot index %s out of range (%s slots); write skipped.", index, len(items))
        return items
    return items[:index] + (value,) + items[index + 1 :]


def add_process(process: Process, model: Model) -> Model:
    return replace(model, processes=model.processes + (process,))


def remove_process(process: Process, model: Model) -> Model:
    remaining = tuple(p for p in model.processes if p.id != process.id)
    return replace(model, processes=remaining)


def add_item_to_process(slot_index: int, item: ProcessItem, target_process: Process, model: Model) -> Model:
    """Write ``item`` into ``slot_index``, overwriting whatever the slot holds."""
    return _map_process(
        target_process.id,
        lambda p: replace(p, items=_set_slot(p.items, slot_index, item)),
        model,
    )


def remove_item_from_process(slot_index: int, process: Process, model: Model) -> Model:
    """Empty the slot at ``slot_index``. The slot itself stays in place."""
    return _map_process(
        process.id,
        lambda p: replace(p, items=_set_slot(p.items, slot_index, None)),
        model,
    )


def add_item_slot(process: Process, model: Model) -> Model:
    return _map_process(process.id, lambda p: replace(p, items=p.items + (None,)), model)


def remove_empty_slot(slot_index: int, process: Process, model: Model) -> Model:
    """Physically drop the slot at ``slot_index``; later slots shift down by one.

    Only meant for empty slots; filled slots are emptied with
    :func:`remove_item_from_process` instead.
    """

    def _remove(p: Process) -> Process:
        if not 0 <= slot_index < len(p.items):
            return p
        return replace(p, items=p.items[:slot_index] + p.items[slot_index + 1 :])

    return _map_process(process.id, _remove, model)


def rename_process(process: Process, name: str, model: Model) -> Model:
    return _map_process(process.id, lambda p: replace(p, name=name), model)


def rename_item(process: Process, slot_index: int, name: str, model: Model) -> Model:
    def _rename(p: Process) -> Process:
        current = p.slot(slot_index)
        if current is None:
            return p
        return replace(p, items=_set_slot(p.items, slot_index, replace(current, name=name)))

    return _map_process(process.id, _rename, model)


def toggle_mode(mode: Mode, model: Model) -> Model:
    return replace(model, mode=mode)

from __future__ import annotations

from typing import Optional, Sequence

from procboard.domain.entities import Mode, Model, Process, ProcessItem


def make_item(item_id: str, name: Optional[str] = None) -> ProcessItem:
    return ProcessItem(id=item_id, name=name or item_id.upper(), description="")


def make_process(process_id: str, slots: Sequence[Optional[str]], name: Optional[str] = None) -> Process:
    """Build a process; each entry is an item id or ``None`` for an empty slot."""
    items = tuple(make_item(slot) if slot is not None else None for slot in slots)
    return Process(id=process_id, name=name or process_id.upper(), items=items)


def make_model(*processes: Process, mode: Mode = Mode.EDITOR) -> Model:
    return Model(processes=processes, mode=mode)


def slot_ids(model: Model, process_id: str) -> list:
    process = model.find_process(process_id)
    assert process is not None, f"missing process {process_id}"
    return [item.id if item is not None else None for item in process.items]


__all__ = ["make_item", "make_model", "make_process", "slot_ids"]

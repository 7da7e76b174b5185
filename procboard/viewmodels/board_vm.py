from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..domain.drag_context import DragHint, drag_hint
from ..domain.entities import Mode, Model, Process, ProcessItem


@dataclass(frozen=True)
class SlotDTO:
    """One rendered slot. ``index`` is the slot position inside its process."""

    index: int
    item: Optional[ProcessItem]
    draggable: bool
    droppable: bool

    @property
    def is_empty(self) -> bool:
        return self.item is None


@dataclass(frozen=True)
class ProcessCardDTO:
    process: Process
    slots: Tuple[SlotDTO, ...]
    editable: bool
    show_add_slot: bool
    being_dragged: bool = False

    @property
    def id(self) -> str:
        return self.process.id

    @property
    def name(self) -> str:
        return self.process.name


@dataclass(frozen=True)
class BoardDTO:
    cards: Tuple[ProcessCardDTO, ...] = ()
    mode_label: str = Mode.VIEWER.label
    show_bin: bool = False
    show_add_process: bool = False
    drag_hint: DragHint = DragHint.IDLE
    dragged_slot: Optional[Tuple[str, int]] = field(default=None)


class BoardVM:
    """Projects the editor model into what the view renders.

    Viewer mode hides empty slots and every editing affordance. Slot indices
    come from enumerating ``Process.items`` and are carried on each
    ``SlotDTO``; views hand them back verbatim in drag/drop commands.
    """

    @staticmethod
    def build(model: Model) -> BoardDTO:
        editing = model.mode is Mode.EDITOR
        dragged_process = model.process_drag.process.id if model.process_drag else None
        dragged_slot = _dragged_slot(model)

        cards: List[ProcessCardDTO] = []
        for process in model.processes:
            slots = tuple(
                SlotDTO(index=index, item=item, draggable=editing, droppable=editing)
                for index, item in enumerate(process.items)
                if editing or item is not None
            )
            cards.append(
                ProcessCardDTO(
                    process=process,
                    slots=slots,
                    editable=editing,
                    show_add_slot=editing,
                    being_dragged=process.id == dragged_process,
                )
            )

        return BoardDTO(
            cards=tuple(cards),
            mode_label=model.mode.label,
            show_bin=editing,
            show_add_process=editing,
            drag_hint=drag_hint(model),
            dragged_slot=dragged_slot,
        )


def _dragged_slot(model: Model) -> Optional[Tuple[str, int]]:
    if model.item_drag is not None:
        return model.item_drag.process.id, model.item_drag.item_index
    if model.empty_slot_drag is not None:
        return model.empty_slot_drag.process.id, model.empty_slot_drag.item_index
    return None

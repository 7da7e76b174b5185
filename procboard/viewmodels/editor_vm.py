from __future__ import annotations

from collections import deque
import logging
from typing import Callable, Deque, Optional

from ..adapters.id_allocator import is_allocator
from ..domain.drop_targets import (
    DropInBin,
    DropOnAnotherProcessItem,
    DropOnEmptySlot,
    DropOnNewSlot,
)
from ..domain.entities import PLACEHOLDER_ID, Mode, Model, Process, ProcessItem
from ..domain.messages import (
    AddEmptySlot,
    AllocateId,
    DropEmptySlot,
    DropItem,
    DropProcess,
    Effect,
    EmptySlotDragEnded,
    EmptySlotDragStarted,
    ItemDragEnded,
    ItemDragStarted,
    Message,
    ProcessDragEnded,
    ProcessDragStarted,
    RenameItem,
    RenameProcess,
    RequestNewItem,
    RequestNewProcess,
    SetDragTargetHover,
    ToggleMode,
)
from ..domain.ports import IdAllocatorPort
from ..usecases.editor_update import update

LOGGER = logging.getLogger(__name__)


class EditorVM:
    """Owns the single editor model and runs messages through ``update``.

    Responsibilities
    - Queue inbound messages and process them one at a time to completion
    - Run effects (id allocation) after each transition
    - Notify the view after every processed message
    - Offer ``cmd_*`` helpers so views do not build messages themselves

    A continuation fired by the allocator from inside ``dispatch`` is queued
    behind the current message instead of running nested.
    """

    def __init__(
        self,
        id_allocator: IdAllocatorPort,
        *,
        model: Optional[Model] = None,
        on_model_changed: Optional[Callable[[Model], None]] = None,
    ) -> None:
        if not is_allocator(id_allocator):
            raise TypeError("id_allocator must provide allocate_id(continuation).")
        self.id_allocator = id_allocator
        self.model = model or Model()
        self.on_model_changed = on_model_changed
        self._queue: Deque[Message] = deque()
        self._draining = False

    # ---- Message loop ----
    def dispatch(self, message: Message) -> Model:
        self._queue.append(message)
        if self._draining:
            return self.model
        self._draining = True
        try:
            while self._queue:
                self._process(self._queue.popleft())
        except Exception:
            # Messages queued behind a failed one belong to the failed run.
            self._queue.clear()
            raise
        finally:
            self._draining = False
        return self.model

    def _process(self, message: Message) -> None:
        LOGGER.debug("Message %s", type(message).__name__)
        self.model, effects = update(self.model, message)
        for effect in effects:
            self._run_effect(effect)
        if self.on_model_changed:
            self.on_model_changed(self.model)

    def _run_effect(self, effect: Effect) -> None:
        if isinstance(effect, AllocateId):
            continuation = effect.continuation
            self.id_allocator.allocate_id(lambda fresh_id: self.dispatch(continuation(fresh_id)))
            return
        raise TypeError(f"Unsupported effect: {type(effect).__name__}")

    # ---- Mode ----
    @property
    def mode(self) -> Mode:
        return self.model.mode

    def cmd_toggle_mode(self, mode: Optional[Mode] = None) -> None:
        """Switch to ``mode``, or flip between viewer and editor when omitted."""
        if mode is None:
            mode = Mode.VIEWER if self.model.mode is Mode.EDITOR else Mode.EDITOR
        self.dispatch(ToggleMode(mode))

    # ---- Creation ----
    def cmd_add_process(self, name: str = "New process", slots: int = 1) -> None:
        prototype = Process(id=PLACEHOLDER_ID, name=name, items=(None,) * max(0, int(slots)))
        self.dispatch(RequestNewProcess(prototype))

    def cmd_add_item(self, process: Process, slot_index: int, name: str = "New item", description: str = "") -> None:
        prototype = ProcessItem(id=PLACEHOLDER_ID, name=name, description=description)
        self.dispatch(RequestNewItem(process, prototype, slot_index))

    def cmd_add_slot(self, process: Process) -> None:
        self.dispatch(AddEmptySlot(process))

    def cmd_rename_process(self, process: Process, name: str) -> None:
        self.dispatch(RenameProcess(process, name))

    def cmd_rename_item(self, process: Process, slot_index: int, name: str) -> None:
        self.dispatch(RenameItem(process, slot_index, name))

    # ---- Drag start / end ----
    def cmd_start_item_drag(self, process: Process, item: ProcessItem, item_index: int) -> None:
        self.dispatch(ItemDragStarted(process, item, item_index))

    def cmd_start_empty_slot_drag(self, process: Process, item_index: int) -> None:
        self.dispatch(EmptySlotDragStarted(process, item_index))

    def cmd_start_process_drag(self, process: Process) -> None:
        self.dispatch(ProcessDragStarted(process))

    def cmd_end_drag(self) -> None:
        """Platform drag-end: clear whichever context is active."""
        model = self.model
        if model.item_drag is not None:
            self.dispatch(ItemDragEnded())
        elif model.empty_slot_drag is not None:
            self.dispatch(EmptySlotDragEnded())
        elif model.process_drag is not None:
            self.dispatch(ProcessDragEnded())

    def cmd_hover(self, has_targeted: bool) -> None:
        if self.model.drag is None:
            return
        self.dispatch(SetDragTargetHover(has_targeted))

    # ---- Drops ----
    def cmd_drop_on_new_slot(self, process: Process) -> None:
        self.dispatch(DropItem(DropOnNewSlot(process)))

    def cmd_drop_on_slot(self, process: Process, slot_index: int) -> None:
        """Drop on a slot; routes to swap or empty-slot target by its content."""
        current = self.model.find_process(process.id)
        occupant = current.slot(slot_index) if current else None
        if occupant is None:
            self.dispatch(DropItem(DropOnEmptySlot(process, slot_index)))
        else:
            self.dispatch(DropItem(DropOnAnotherProcessItem(process, occupant, slot_index)))

    def cmd_drop_in_bin(self) -> Optional[str]:
        """Drop whatever is being dragged onto the bin.

        Returns the kind of thing deleted ("item", "slot", "process") or None.
        """
        model = self.model
        if model.item_drag is not None:
            self.dispatch(DropItem(DropInBin()))
            return "item"
        if model.empty_slot_drag is not None:
            self.dispatch(DropEmptySlot())
            return "slot"
        if model.process_drag is not None:
            self.dispatch(DropProcess())
            return "process"
        return None

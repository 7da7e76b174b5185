"""NiceGUI runtime orchestration for the process board.

This module composes the editor viewmodel, the id allocator and the board
projection for the web runtime. Views resolve DOM-level ids through it.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence, Tuple

from procboard.adapters.id_allocator import DeferredIdAllocator, SequentialIdAllocator
from procboard.domain.entities import Mode, Model, Process
from procboard.domain.errors import EditorError
from procboard.viewmodels.board_vm import BoardDTO, BoardVM
from procboard.viewmodels.editor_vm import EditorVM
from procboard.viewmodels.settings_vm import SettingsVM

LOGGER = logging.getLogger(__name__)

DemoItem = Optional[Tuple[str, str]]

DEMO_BOARD: Tuple[Tuple[str, Sequence[DemoItem]], ...] = (
    (
        "Onboarding",
        (
            ("Collect documents", "ID, contract, tax forms"),
            ("Create accounts", "Mail, VPN, tracker"),
            None,
            ("Intro meeting", "First-day walkthrough"),
        ),
    ),
    (
        "Release",
        (
            ("Freeze branch", ""),
            ("Run regression", "Full suite on staging"),
            ("Publish notes", ""),
        ),
    ),
)


class WebRuntime:
    """Orchestration state used by NiceGUI views."""

    def __init__(self, settings_vm: Optional[SettingsVM] = None) -> None:
        self.settings_vm = settings_vm or SettingsVM()
        self.status_message = "Ready."
        self.allocator = DeferredIdAllocator(SequentialIdAllocator(start=self.settings_vm.id_start))
        self.editor_vm = EditorVM(
            self.allocator,
            model=Model(mode=self.settings_vm.initial_mode),
        )
        if self.settings_vm.seed_demo:
            self._seed_demo()

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------
    @property
    def model(self) -> Model:
        return self.editor_vm.model

    def board(self) -> BoardDTO:
        return BoardVM.build(self.model)

    def summary(self) -> Dict[str, Any]:
        return {
            "mode": self.model.mode.value,
            "processes": [
                {"id": p.id, "name": p.name, "slots": p.slot_count} for p in self.model.processes
            ],
            "pending_ids": self.allocator.pending,
        }

    def process(self, process_id: str) -> Process:
        """Return the current record for a process id coming from the page."""
        process = self.model.find_process(str(process_id))
        if process is None:
            raise EditorError("UNKNOWN_PROCESS", f"Process {process_id} no longer exists.")
        return process

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def tick(self) -> int:
        """Resolve pending id requests; returns how many were resolved."""
        resolved = self.allocator.drain()
        if resolved:
            LOGGER.debug("Resolved %s id request(s)", resolved)
        return resolved

    def set_mode(self, editing: bool) -> None:
        self.editor_vm.cmd_toggle_mode(Mode.EDITOR if editing else Mode.VIEWER)
        self.status_message = f"{self.model.mode.label} mode."

    def add_process(self) -> None:
        self.editor_vm.cmd_add_process()
        self.status_message = "Creating process..."

    def add_slot(self, process_id: str) -> None:
        self.editor_vm.cmd_add_slot(self.process(process_id))

    def add_item(self, process_id: str, slot_index: int) -> None:
        self.editor_vm.cmd_add_item(self.process(process_id), int(slot_index))
        self.status_message = "Creating item..."

    def rename_process(self, process_id: str, name: str) -> None:
        self.editor_vm.cmd_rename_process(self.process(process_id), str(name or ""))

    def rename_item(self, process_id: str, slot_index: int, name: str) -> None:
        self.editor_vm.cmd_rename_item(self.process(process_id), int(slot_index), str(name or ""))

    def start_slot_drag(self, process_id: str, slot_index: int) -> None:
        """Start an item drag or an empty-slot drag depending on the slot content."""
        process = self.process(process_id)
        item = process.slot(int(slot_index))
        if item is None:
            self.editor_vm.cmd_start_empty_slot_drag(process, int(slot_index))
        else:
            self.editor_vm.cmd_start_item_drag(process, item, int(slot_index))

    def start_process_drag(self, process_id: str) -> None:
        self.editor_vm.cmd_start_process_drag(self.process(process_id))

    def end_drag(self) -> None:
        self.editor_vm.cmd_end_drag()

    def hover(self, has_targeted: bool) -> None:
        self.editor_vm.cmd_hover(bool(has_targeted))

    def drop_on_slot(self, process_id: str, slot_index: int) -> None:
        target = self._drop_target_process(process_id)
        if target is not None:
            self.editor_vm.cmd_drop_on_slot(target, int(slot_index))

    def drop_on_new_slot(self, process_id: str) -> None:
        target = self._drop_target_process(process_id)
        if target is not None:
            self.editor_vm.cmd_drop_on_new_slot(target)

    def _drop_target_process(self, process_id: str) -> Optional[Process]:
        """Resolve the process under an item drop; any other outcome ends the drag."""
        if self.model.item_drag is None:
            self.editor_vm.cmd_end_drag()
            return None
        try:
            return self.process(process_id)
        except EditorError:
            self.editor_vm.cmd_end_drag()
            raise

    def drop_in_bin(self) -> None:
        kind = self.editor_vm.cmd_drop_in_bin()
        self.status_message = f"Deleted {kind}." if kind else "Nothing to delete."

    # ------------------------------------------------------------------
    def _seed_demo(self) -> None:
        for name, items in DEMO_BOARD:
            self.editor_vm.cmd_add_process(name, slots=len(items))
            self.allocator.drain()
            process = self.model.processes[-1]
            for index, entry in enumerate(items):
                if entry is None:
                    continue
                item_name, description = entry
                self.editor_vm.cmd_add_item(process, index, item_name, description)
            self.allocator.drain()
        LOGGER.info("Seeded %s demo process(es)", len(DEMO_BOARD))

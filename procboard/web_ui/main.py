"""NiceGUI entrypoint for the process board web runtime."""

from __future__ import annotations

import argparse
import json
import logging
import os
from typing import Any, Callable

from nicegui import ui

from procboard.domain.drag_context import DragHint
from procboard.domain.entities import Mode
from procboard.utils.logging import apply_debug_preference, configure_root, level_name
from procboard.viewmodels.board_vm import ProcessCardDTO, SlotDTO
from procboard.viewmodels.settings_vm import SettingsVM
from procboard.web_ui.runtime import WebRuntime

LOGGER = logging.getLogger(__name__)

# dragover fires on every pointer move. A trailing event could land after dragleave.
HOVER_THROTTLE_S = 0.2

_HINT_TEXT = {
    DragHint.IDLE: "",
    DragHint.DRAGGING: "Dragging...",
    DragHint.TARGETING: "Release to drop",
}


def _install_theme() -> None:
    """Install global CSS tokens for the board."""
    ui.add_head_html(
        """
<style>
:root {
  --pb-card: rgba(255, 255, 255, 0.9);
  --pb-border: #c9d7e9;
  --pb-accent: #1d5d9b;
  --pb-danger: #b42318;
}
.pb-page { max-width: 1480px; margin: 0 auto; padding: 14px; }
.pb-card { background: var(--pb-card); border: 1px solid var(--pb-border); border-radius: 12px; min-width: 240px; }
.pb-slot { border: 1px solid var(--pb-border); border-radius: 8px; padding: 6px 10px; min-height: 44px; width: 100%; }
.pb-slot-empty { border-style: dashed; color: #8a98ab; }
.pb-new-slot { border: 1px dashed var(--pb-accent); border-radius: 8px; padding: 6px; text-align: center; width: 100%; }
.pb-bin { border: 2px dashed var(--pb-danger); border-radius: 12px; padding: 18px; color: var(--pb-danger); }
.pb-dragging { opacity: 0.45; }
</style>
        """
    )


def _notify_error(exc: Exception) -> None:
    """Render exceptions as concise NiceGUI toasts."""
    ui.notify(str(exc), color="negative", close_button="OK")


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    async def index() -> None:
        @ui.refreshable
        def render_status() -> None:
            board = runtime.board()
            with ui.row().classes("w-full justify-between items-center pb-card p-3 q-mb-sm"):
                ui.label(runtime.settings_vm.title).classes("text-h5")
                with ui.row().classes("items-center q-gutter-sm"):
                    ui.label(_HINT_TEXT[board.drag_hint]).classes("text-caption")
                    ui.label(runtime.status_message).classes("text-caption")
                    ui.switch(
                        "Editor",
                        value=runtime.model.mode is Mode.EDITOR,
                        on_change=lambda e: set_mode(bool(e.value)),
                    )

        @ui.refreshable
        def render_board() -> None:
            board = runtime.board()
            with ui.row().classes("w-full items-start q-gutter-md"):
                for card in board.cards:
                    render_card(card, board.dragged_slot)
                if board.show_add_process:
                    ui.button("Add process", icon="add", on_click=add_process).props("outline")
            if board.show_bin:
                bin_area = ui.row().classes("pb-bin items-center q-mt-md")
                with bin_area:
                    ui.icon("delete")
                    ui.label("Drop here to delete")
                _make_drop_target(bin_area, drop_in_bin)

        def render_card(card: ProcessCardDTO, dragged_slot: Any) -> None:
            classes = "pb-card q-pa-sm" + (" pb-dragging" if card.being_dragged else "")
            with ui.column().classes(classes):
                with ui.row().classes("items-center w-full no-wrap"):
                    if card.editable:
                        handle = ui.icon("drag_indicator").classes("cursor-move")
                        handle.props("draggable")
                        handle.on("dragstart", lambda _, pid=card.id: start_process_drag(pid))
                        handle.on("dragend", end_drag)
                        name_input = ui.input(value=card.name).props("dense borderless")
                        name_input.on(
                            "blur",
                            lambda _, pid=card.id, field=name_input: rename_process(pid, field.value),
                        )
                    else:
                        ui.label(card.name).classes("text-subtitle1")
                for slot in card.slots:
                    dragging = dragged_slot == (card.id, slot.index)
                    render_slot(card, slot, dragging)
                if card.show_add_slot:
                    new_slot = ui.row().classes("pb-new-slot justify-center")
                    with new_slot:
                        ui.button(
                            "Add slot",
                            icon="add",
                            on_click=lambda _, pid=card.id: add_slot(pid),
                        ).props("flat dense")
                    _make_drop_target(new_slot, lambda pid=card.id: drop_on_new_slot(pid))

        def render_slot(card: ProcessCardDTO, slot: SlotDTO, dragging: bool) -> None:
            classes = "pb-slot" + (" pb-slot-empty" if slot.is_empty else "")
            if dragging:
                classes += " pb-dragging"
            element = ui.column().classes(classes)
            with element:
                if slot.item is None:
                    with ui.row().classes("items-center justify-between w-full"):
                        ui.label(f"Empty slot {slot.index + 1}")
                        ui.button(
                            icon="add",
                            on_click=lambda _, pid=card.id, idx=slot.index: add_item(pid, idx),
                        ).props("flat dense round")
                elif card.editable:
                    item_input = ui.input(value=slot.item.name).props("dense borderless")
                    item_input.on(
                        "blur",
                        lambda _, pid=card.id, idx=slot.index, field=item_input: rename_item(
                            pid, idx, field.value
                        ),
                    )
                else:
                    ui.label(slot.item.name)
                if slot.item is not None and slot.item.description:
                    ui.label(slot.item.description).classes("text-caption")
            if slot.draggable:
                element.props("draggable")
                element.on(
                    "dragstart",
                    lambda _, pid=card.id, idx=slot.index: start_slot_drag(pid, idx),
                )
                element.on("dragend", end_drag)
            if slot.droppable:
                _make_drop_target(
                    element, lambda pid=card.id, idx=slot.index: drop_on_slot(pid, idx)
                )

        def _make_drop_target(element: Any, on_drop: Callable[[], None]) -> None:
            element.on(
                "dragover.prevent",
                lambda _: hover(True),
                throttle=HOVER_THROTTLE_S,
                trailing_events=False,
            )
            element.on("dragleave", lambda _: hover(False))
            element.on("drop", lambda _: on_drop())

        def _invoke(action: Callable[[], Any], *refreshers: Callable[[], None]) -> None:
            try:
                action()
            except Exception as exc:
                _notify_error(exc)
                # A failed drop may still have ended the drag.
                refresh_all()
                return
            for refresh in refreshers:
                refresh()

        def refresh_all() -> None:
            render_status.refresh()
            render_board.refresh()

        # Drag start and hover must not re-render the board, the browser
        # aborts a drag whose source element is replaced.
        def start_slot_drag(process_id: str, slot_index: int) -> None:
            _invoke(lambda: runtime.start_slot_drag(process_id, slot_index), render_status.refresh)

        def start_process_drag(process_id: str) -> None:
            _invoke(lambda: runtime.start_process_drag(process_id), render_status.refresh)

        def hover(has_targeted: bool) -> None:
            if runtime.model.drag is None:
                return
            before = runtime.board().drag_hint
            runtime.hover(has_targeted)
            if runtime.board().drag_hint is not before:
                render_status.refresh()

        def end_drag(_: Any = None) -> None:
            _invoke(runtime.end_drag, refresh_all)

        def drop_on_slot(process_id: str, slot_index: int) -> None:
            _invoke(lambda: runtime.drop_on_slot(process_id, slot_index), refresh_all)

        def drop_on_new_slot(process_id: str) -> None:
            _invoke(lambda: runtime.drop_on_new_slot(process_id), refresh_all)

        def drop_in_bin() -> None:
            _invoke(runtime.drop_in_bin, refresh_all)

        def set_mode(editing: bool) -> None:
            _invoke(lambda: runtime.set_mode(editing), render_board.refresh)

        def add_process() -> None:
            _invoke(runtime.add_process, render_status.refresh)

        def add_slot(process_id: str) -> None:
            _invoke(lambda: runtime.add_slot(process_id), render_board.refresh)

        def add_item(process_id: str, slot_index: int) -> None:
            _invoke(lambda: runtime.add_item(process_id, slot_index), render_status.refresh)

        def rename_process(process_id: str, name: str) -> None:
            _invoke(lambda: runtime.rename_process(process_id, name))

        def rename_item(process_id: str, slot_index: int, name: str) -> None:
            _invoke(lambda: runtime.rename_item(process_id, slot_index, name))

        def periodic_tick() -> None:
            if runtime.model.drag is not None:
                return
            if runtime.tick():
                runtime.status_message = "Ready."
                refresh_all()

        with ui.column().classes("pb-page w-full"):
            render_status()
            render_board()

        ui.timer(runtime.settings_vm.allocation_tick_s, periodic_tick)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the process board NiceGUI web UI.")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--mode", choices=["viewer", "editor"], default=None, dest="initial_mode")
    parser.add_argument("--no-demo", action="store_true")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def build_settings(args: argparse.Namespace) -> SettingsVM:
    """Defaults < PROCBOARD_* environment < CLI flags."""
    settings_vm = SettingsVM.from_env()
    settings_vm.apply_dict(
        {
            "host": args.host,
            "port": args.port,
            "initial_mode": args.initial_mode,
            "seed_demo": False if args.no_demo else None,
            "debug_logging": True if args.debug else None,
        }
    )
    return settings_vm


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    configure_root()
    args = _parse_args()
    settings_vm = build_settings(args)
    level = apply_debug_preference(settings_vm.debug_logging)
    LOGGER.debug("Log level %s", level_name(level))
    runtime = WebRuntime(settings_vm)
    if args.smoke_test:
        print("web-smoke-ok", json.dumps(runtime.summary(), sort_keys=True))
        return
    _install_theme()
    _build_ui(runtime)
    ui.run(
        host=settings_vm.host,
        port=settings_vm.port,
        title=settings_vm.title,
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("PROCBOARD_STORAGE_SECRET", "procboard-web-ui-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()

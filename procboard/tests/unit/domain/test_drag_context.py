from __future__ import annotations

import logging

from procboard.domain import drag_context
from procboard.domain.drag_context import DragHint
from procboard.domain.entities import EmptySlotDrag, ItemDrag, ProcessDrag
from procboard.tests.unit.helpers import make_model, make_process


def test_set_and_clear_item_drag() -> None:
    process = make_process("p1", ["a"])
    model = drag_context.set_item_drag(process, process.items[0], 0, make_model(process))

    assert isinstance(model.drag, ItemDrag)
    assert model.drag.item_index == 0
    assert drag_context.has_item_targeted(model) is False

    assert drag_context.clear_item_drag(model).drag is None


def test_clear_of_other_kind_keeps_active_context() -> None:
    process = make_process("p1", [None])
    model = drag_context.set_empty_slot_drag(process, 0, make_model(process))

    assert drag_context.clear_item_drag(model) is model
    assert drag_context.clear_process_drag(model) is model
    assert drag_context.clear_empty_slot_drag(model).drag is None


def test_clearing_absent_context_is_noop() -> None:
    model = make_model()
    assert drag_context.clear_item_drag(model) is model
    assert drag_context.clear_drag(model) is model


def test_starting_second_drag_replaces_first(caplog) -> None:
    process = make_process("p1", ["a"])
    model = drag_context.set_item_drag(process, process.items[0], 0, make_model(process))

    with caplog.at_level(logging.WARNING):
        model = drag_context.set_process_drag(process, model)

    assert isinstance(model.drag, ProcessDrag)
    assert model.item_drag is None
    assert "replacing" in caplog.text


def test_toggle_targeting_updates_active_context_only() -> None:
    process = make_process("p1", [None])
    model = drag_context.set_empty_slot_drag(process, 0, make_model(process))

    model = drag_context.toggle_targeting(True, model)
    assert isinstance(model.drag, EmptySlotDrag)
    assert drag_context.has_empty_slot_targeted(model) is True
    assert drag_context.has_item_targeted(model) is False
    assert drag_context.has_process_targeted(model) is False

    model = drag_context.toggle_targeting(False, model)
    assert drag_context.has_empty_slot_targeted(model) is False


def test_toggle_targeting_without_drag_is_noop() -> None:
    model = make_model()
    assert drag_context.toggle_targeting(True, model) is model


def test_drag_hint_distinguishes_hovering() -> None:
    process = make_process("p1", [])
    model = make_model(process)
    assert drag_context.drag_hint(model) is DragHint.IDLE

    model = drag_context.set_process_drag(process, model)
    assert drag_context.drag_hint(model) is DragHint.DRAGGING

    model = drag_context.toggle_targeting(True, model)
    assert drag_context.drag_hint(model) is DragHint.TARGETING
    assert drag_context.has_process_targeted(model) is True

from __future__ import annotations

from procboard.domain import drag_context
from procboard.domain.drag_context import DragHint
from procboard.domain.entities import Mode
from procboard.tests.unit.helpers import make_model, make_process
from procboard.viewmodels.board_vm import BoardVM


def test_viewer_mode_hides_empty_slots_and_affordances() -> None:
    process = make_process("p1", [None, "a", None, "b"])
    board = BoardVM.build(make_model(process, mode=Mode.VIEWER))

    card = board.cards[0]
    assert [slot.index for slot in card.slots] == [1, 3]
    assert all(not slot.draggable and not slot.droppable for slot in card.slots)
    assert card.editable is False
    assert card.show_add_slot is False
    assert board.show_bin is False
    assert board.show_add_process is False
    assert board.mode_label == "Viewer"


def test_editor_mode_shows_every_slot_with_its_index() -> None:
    process = make_process("p1", [None, "a"])
    board = BoardVM.build(make_model(process, mode=Mode.EDITOR))

    card = board.cards[0]
    assert [(slot.index, slot.is_empty) for slot in card.slots] == [(0, True), (1, False)]
    assert all(slot.draggable and slot.droppable for slot in card.slots)
    assert card.show_add_slot is True
    assert board.show_bin is True
    assert board.show_add_process is True


def test_equal_items_keep_their_own_indices() -> None:
    process = make_process("p1", ["same", "same"])
    board = BoardVM.build(make_model(process))
    assert [slot.index for slot in board.cards[0].slots] == [0, 1]


def test_drag_state_is_projected() -> None:
    p1 = make_process("p1", ["a"])
    p2 = make_process("p2", [None])
    model = make_model(p1, p2)

    board = BoardVM.build(model)
    assert board.drag_hint is DragHint.IDLE
    assert board.dragged_slot is None

    dragging = drag_context.set_item_drag(p1, p1.items[0], 0, model)
    board = BoardVM.build(dragging)
    assert board.drag_hint is DragHint.DRAGGING
    assert board.dragged_slot == ("p1", 0)

    targeting = drag_context.toggle_targeting(True, dragging)
    assert BoardVM.build(targeting).drag_hint is DragHint.TARGETING

    process_drag = drag_context.set_process_drag(p2, model)
    board = BoardVM.build(process_drag)
    assert [card.being_dragged for card in board.cards] == [False, True]

from __future__ import annotations

import pytest

from procboard.adapters.id_allocator import DeferredIdAllocator, SequentialIdAllocator
from procboard.domain.entities import Mode, Model
from procboard.domain.messages import NoOp
from procboard.tests.unit.helpers import make_model, make_process, slot_ids
from procboard.viewmodels.editor_vm import EditorVM


def test_editor_vm_rejects_non_allocator() -> None:
    with pytest.raises(TypeError):
        EditorVM(object())  # type: ignore[arg-type]


def test_add_process_with_immediate_allocator() -> None:
    changes = []
    vm = EditorVM(SequentialIdAllocator(start=5), on_model_changed=changes.append)

    vm.cmd_add_process("Build", slots=2)

    assert [p.id for p in vm.model.processes] == ["5"]
    assert vm.model.processes[0].items == (None, None)
    # Request and creation are two processed messages.
    assert len(changes) == 2
    assert changes[-1] is vm.model


def test_creation_waits_for_deferred_allocation() -> None:
    allocator = DeferredIdAllocator()
    vm = EditorVM(allocator, model=make_model(make_process("p1", [None, None])))

    process = vm.model.processes[0]
    vm.cmd_add_item(process, 1, "Late")
    assert slot_ids(vm.model, "p1") == [None, None]
    assert allocator.pending == 1

    allocator.drain()
    assert slot_ids(vm.model, "p1") == [None, "1"]
    assert vm.model.processes[0].items[1].name == "Late"


def test_each_continuation_creates_its_own_entity() -> None:
    allocator = DeferredIdAllocator()
    vm = EditorVM(allocator)
    vm.cmd_add_process("First")
    vm.cmd_add_process("Second")

    allocator.drain()

    assert [(p.id, p.name) for p in vm.model.processes] == [("1", "First"), ("2", "Second")]


def test_cmd_toggle_mode_flips_and_sets() -> None:
    vm = EditorVM(SequentialIdAllocator())
    assert vm.mode is Mode.VIEWER
    vm.cmd_toggle_mode()
    assert vm.mode is Mode.EDITOR
    vm.cmd_toggle_mode(Mode.EDITOR)
    assert vm.mode is Mode.EDITOR
    vm.cmd_toggle_mode()
    assert vm.mode is Mode.VIEWER


def test_drop_on_slot_routes_by_occupant() -> None:
    p1 = make_process("p1", ["a", None])
    p2 = make_process("p2", ["b"])
    vm = EditorVM(SequentialIdAllocator(), model=make_model(p1, p2))

    vm.cmd_start_item_drag(p1, p1.items[0], 0)
    vm.cmd_drop_on_slot(p2, 0)
    assert slot_ids(vm.model, "p1") == ["b", None]
    assert slot_ids(vm.model, "p2") == ["a"]

    current = vm.model.find_process("p1")
    vm.cmd_start_item_drag(current, current.items[0], 0)
    vm.cmd_drop_on_slot(current, 1)
    assert slot_ids(vm.model, "p1") == [None, "b"]
    assert vm.model.drag is None


def test_drop_on_new_slot_command() -> None:
    process = make_process("p1", ["a1"])
    vm = EditorVM(SequentialIdAllocator(), model=make_model(process))
    vm.cmd_start_item_drag(process, process.items[0], 0)
    vm.cmd_drop_on_new_slot(process)
    assert slot_ids(vm.model, "p1") == [None, "a1"]


@pytest.mark.parametrize(
    "start, expected_kind, expected_counts",
    [
        (lambda vm, p: vm.cmd_start_item_drag(p, p.items[0], 0), "item", [2]),
        (lambda vm, p: vm.cmd_start_empty_slot_drag(p, 1), "slot", [1]),
        (lambda vm, p: vm.cmd_start_process_drag(p), "process", []),
    ],
)
def test_drop_in_bin_dispatches_by_active_drag(start, expected_kind, expected_counts) -> None:
    process = make_process("p1", ["a", None])
    vm = EditorVM(SequentialIdAllocator(), model=make_model(process))

    start(vm, process)
    assert vm.cmd_drop_in_bin() == expected_kind

    assert [p.slot_count for p in vm.model.processes] == expected_counts
    assert vm.model.drag is None


def test_drop_in_bin_without_drag_does_nothing() -> None:
    model = make_model(make_process("p1", ["a"]))
    vm = EditorVM(SequentialIdAllocator(), model=model)
    assert vm.cmd_drop_in_bin() is None
    assert vm.model is model


def test_end_drag_and_hover() -> None:
    process = make_process("p1", ["a"])
    vm = EditorVM(SequentialIdAllocator(), model=make_model(process))

    vm.cmd_hover(True)
    assert vm.model.drag is None

    vm.cmd_start_process_drag(process)
    vm.cmd_hover(True)
    assert vm.model.process_drag.has_targeted is True

    vm.cmd_end_drag()
    assert vm.model.drag is None
    assert slot_ids(vm.model, "p1") == ["a"]


def test_dispatch_returns_current_model() -> None:
    vm = EditorVM(SequentialIdAllocator())
    assert vm.dispatch(NoOp()) is vm.model
    assert isinstance(vm.model, Model)


def test_failed_dispatch_drops_messages_queued_behind_it() -> None:
    calls = []

    def fail_once(model: Model) -> None:
        calls.append(model)
        if len(calls) == 1:
            raise RuntimeError("view exploded")

    vm = EditorVM(SequentialIdAllocator(), on_model_changed=fail_once)
    with pytest.raises(RuntimeError):
        # The synchronous allocator queues ProcessCreated behind the request.
        vm.cmd_add_process("Lost")

    vm.dispatch(NoOp())

    assert vm.model.processes == ()
    assert len(calls) == 2

from __future__ import annotations

import pytest

from procboard.domain.entities import Mode
from procboard.viewmodels.settings_vm import SettingsConfig, SettingsVM


def test_defaults() -> None:
    vm = SettingsVM(config=SettingsConfig())
    assert vm.initial_mode is Mode.VIEWER
    assert vm.port == 8080
    assert vm.seed_demo is True
    assert vm.to_dict()["host"] == "127.0.0.1"


def test_apply_dict_coerces_values_and_skips_none() -> None:
    vm = SettingsVM(config=SettingsConfig())
    vm.apply_dict(
        {
            "initial_mode": "Editor",
            "port": "9000",
            "seed_demo": "no",
            "allocation_tick_s": "0.5",
            "host": None,
        }
    )
    assert vm.initial_mode is Mode.EDITOR
    assert vm.port == 9000
    assert vm.seed_demo is False
    assert vm.allocation_tick_s == pytest.approx(0.5)
    assert vm.host == "127.0.0.1"


@pytest.mark.parametrize(
    "payload",
    [
        {"initial_mode": "admin"},
        {"port": "http"},
        {"port": 70000},
        {"port": -1},
        {"allocation_tick_s": 0},
        {"title": "   "},
        {"unknown_key": 1},
    ],
)
def test_apply_dict_rejects_invalid_values(payload) -> None:
    vm = SettingsVM(config=SettingsConfig())
    with pytest.raises(ValueError):
        vm.apply_dict(payload)


def test_apply_dict_requires_mapping() -> None:
    with pytest.raises(ValueError):
        SettingsVM().apply_dict(["port", 1])  # type: ignore[arg-type]


def test_from_env_reads_prefixed_variables() -> None:
    vm = SettingsVM.from_env(
        {
            "PROCBOARD_INITIAL_MODE": "editor",
            "PROCBOARD_PORT": "8181",
            "PROCBOARD_ID_START": "100",
            "PROCBOARD_TITLE": "",
            "UNRELATED": "x",
        }
    )
    assert vm.initial_mode is Mode.EDITOR
    assert vm.port == 8181
    assert vm.id_start == 100
    assert vm.title == "Process Board"


def test_set_debug_logging() -> None:
    vm = SettingsVM(config=SettingsConfig())
    vm.set_debug_logging("yes")
    assert vm.debug_logging is True

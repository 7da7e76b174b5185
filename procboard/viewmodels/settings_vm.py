from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
import os
from typing import Any, Dict, Mapping, Optional

from ..domain.entities import Mode
from ..utils.logging import env_requests_debug, env_truthy

ENV_PREFIX = "PROCBOARD_"


@dataclass
class SettingsConfig:
    """Typed runtime settings for the editor and its web runtime."""

    initial_mode: str = Mode.VIEWER.value
    host: str = "127.0.0.1"
    port: int = 8080
    title: str = "Process Board"
    seed_demo: bool = True
    id_start: int = 1
    allocation_tick_s: float = 0.1
    debug_logging: bool = False


def _default_config() -> SettingsConfig:
    return SettingsConfig(debug_logging=env_requests_debug())


class SettingsVM:
    """Keeps runtime settings and their validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or _default_config()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SettingsVM":
        """Build settings from defaults overridden by ``PROCBOARD_*`` variables."""
        env = os.environ if environ is None else environ
        vm = cls()
        payload = {}
        for key in cls.keys():
            raw = env.get(ENV_PREFIX + key.upper())
            if raw is not None and raw.strip():
                payload[key] = raw
        vm.apply_dict(payload)
        return vm

    @staticmethod
    def keys() -> tuple[str, ...]:
        return tuple(f.name for f in fields(SettingsConfig))

    @property
    def initial_mode(self) -> Mode:
        return Mode(self.config.initial_mode)

    @property
    def host(self) -> str:
        return self.config.host

    @property
    def port(self) -> int:
        return self.config.port

    @property
    def title(self) -> str:
        return self.config.title

    @property
    def seed_demo(self) -> bool:
        return self.config.seed_demo

    @property
    def id_start(self) -> int:
        return self.config.id_start

    @property
    def allocation_tick_s(self) -> float:
        return self.config.allocation_tick_s

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    def set_debug_logging(self, enabled: bool) -> None:
        self.config = replace(self.config, debug_logging=self._coerce_bool(enabled))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat mapping of settings; ``None`` values are ignored."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        unknown = set(payload.keys()) - set(self.keys())
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for key, raw in payload.items():
            if raw is None:
                continue
            updates[key] = self._coerce_config_value(key, raw)

        if updates:
            self.config = replace(self.config, **updates)

    def to_dict(self) -> dict:
        return asdict(self.config)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "initial_mode":
            return self._coerce_mode(raw)
        if key in {"host", "title"}:
            return self._coerce_str(key, raw)
        if key == "port":
            port = self._coerce_int(key, raw, allow_negative=False)
            if port > 65535:
                raise ValueError("port must be at most 65535.")
            return port
        if key == "id_start":
            return self._coerce_int(key, raw)
        if key == "allocation_tick_s":
            return self._coerce_positive_float(key, raw)
        if key in {"seed_demo", "debug_logging"}:
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_mode(value: Any) -> str:
        if isinstance(value, Mode):
            return value.value
        text = str(value).strip().lower()
        try:
            return Mode(text).value
        except ValueError as exc:
            allowed = ", ".join(mode.value for mode in Mode)
            raise ValueError(f"initial_mode must be one of: {allowed}.") from exc

    @staticmethod
    def _coerce_str(name: str, value: Any) -> str:
        text = str(value).strip()
        if not text:
            raise ValueError(f"{name} must be a non-empty string.")
        return text

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return env_truthy(value)
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, allow_negative: bool = True) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if not allow_negative and coerced < 0:
            raise ValueError(f"{name} must be non-negative.")
        return coerced

    @staticmethod
    def _coerce_positive_float(name: str, value: Any) -> float:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be a number.")
        try:
            coerced = float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"{name} must be a number.") from exc
        if coerced <= 0:
            raise ValueError(f"{name} must be positive.")
        return coerced

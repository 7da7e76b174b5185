"""Root logger setup for the board runtime.

``PROCBOARD_LOG_LEVEL`` (name or number) wins over ``PROCBOARD_DEBUG``, which
wins over the level requested in code or by the debug setting.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "PROCBOARD_LOG_LEVEL"
DEBUG_ENV = "PROCBOARD_DEBUG"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def env_truthy(value: Optional[str]) -> bool:
    """Interpret an environment-style flag ("1", "yes", "on", ...)."""
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def parse_level(value: Union[int, str, None], fallback: int) -> int:
    """Turn a level name or number into a logging level, else ``fallback``."""
    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        # isdigit() accepts superscripts and other digits int() rejects.
        try:
            return int(text)
        except ValueError:
            return fallback
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else fallback


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or None when nothing is set."""
    env = os.environ if environ is None else environ
    raw = env.get(LEVEL_ENV)
    if raw and raw.strip():
        return parse_level(raw, logging.INFO)
    if env_truthy(env.get(DEBUG_ENV)):
        return logging.DEBUG
    return None


def env_requests_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    level = env_level(environ)
    return level is not None and level <= logging.DEBUG


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the compact console format once and set the root level."""
    forced = env_level()
    effective = forced if forced is not None else parse_level(default_level, logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)
    return effective


def apply_debug_preference(debug_enabled: bool) -> int:
    """Follow the ``debug_logging`` setting unless the environment forces a level."""
    forced = env_level()
    level = forced if forced is not None else (logging.DEBUG if debug_enabled else logging.INFO)
    logging.getLogger().setLevel(level)
    return level


def level_name(level: int) -> str:
    return logging.getLevelName(level)

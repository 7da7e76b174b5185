"""Domain-level error types for use-case and adapter mapping.

The editor core itself never raises for well-formed input; these errors are
raised by the outer layers (settings, runtime wiring) and rendered by the UI.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class EditorError(Exception):
    """Base class for user-presentable errors."""

    def __init__(self, code: str, message: str, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = meta or {}

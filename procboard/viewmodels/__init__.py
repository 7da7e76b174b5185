"""ViewModel package for editor state and command surfaces.

Call context:
    ``procboard/web_ui/runtime.py`` builds an :class:`EditorVM` and renders
    the projection produced by :class:`BoardVM` after every message.

Dependencies:
    Modules in this package depend on domain types and the update use case
    only. Platform event wiring and rendering remain outside.

Responsibilities:
    - Own the single editor model and its message loop.
    - Transform the model into view-facing DTOs.
    - Keep runtime settings and their validation.
"""

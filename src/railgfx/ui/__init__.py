"""Terminal UI for the graphics settings editor."""

from .app import (
    EDITOR_KEYS,
    PICKER_KEYS,
    EditorAction,
    LanguagePicker,
    PickerAction,
    apply_editor_action,
    build_editor,
    pick_language,
    run_editor,
)

__all__ = [
    "EDITOR_KEYS",
    "PICKER_KEYS",
    "EditorAction",
    "PickerAction",
    "LanguagePicker",
    "apply_editor_action",
    "build_editor",
    "pick_language",
    "run_editor",
]

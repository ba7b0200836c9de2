"""Full-screen terminal UI built on prompt_toolkit.

Two screens run back to back: the language picker, then the settings
editor. Key handling is table-driven; each key maps to an action and
each action to one session command.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from prompt_toolkit.application import Application
from prompt_toolkit.application.current import get_app
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window, WindowAlign
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension
from prompt_toolkit.widgets import Frame

from ..i18n import LANGUAGE_CHOICES, Language
from ..session import SettingsSession
from . import renderer

logger = logging.getLogger(__name__)

# Rows taken by the header, status box, list frame, and scroll indicator.
LIST_CHROME_ROWS = 9


class EditorAction(str, Enum):
    """Actions available in the settings editor."""

    UP = "up"
    DOWN = "down"
    NEXT_VALUE = "next_value"
    PREV_VALUE = "prev_value"
    SAVE = "save"
    QUIT = "quit"


class PickerAction(str, Enum):
    """Actions available in the language picker."""

    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    QUIT = "quit"


EDITOR_KEYS: Dict[str, EditorAction] = {
    "up": EditorAction.UP,
    "k": EditorAction.UP,
    "down": EditorAction.DOWN,
    "j": EditorAction.DOWN,
    "right": EditorAction.NEXT_VALUE,
    "l": EditorAction.NEXT_VALUE,
    "left": EditorAction.PREV_VALUE,
    "h": EditorAction.PREV_VALUE,
    "s": EditorAction.SAVE,
    "q": EditorAction.QUIT,
    "escape": EditorAction.QUIT,
    "c-c": EditorAction.QUIT,
}

PICKER_KEYS: Dict[str, PickerAction] = {
    "up": PickerAction.UP,
    "k": PickerAction.UP,
    "down": PickerAction.DOWN,
    "j": PickerAction.DOWN,
    "enter": PickerAction.CONFIRM,
    "q": PickerAction.QUIT,
    "escape": PickerAction.QUIT,
    "c-c": PickerAction.QUIT,
}


def apply_editor_action(session: SettingsSession, action: EditorAction) -> bool:
    """Run one editor action against the session.

    Returns:
        False when the action ends the editor, True otherwise.
    """
    if action == EditorAction.QUIT:
        return False
    if action == EditorAction.UP:
        session.move_cursor(-1)
    elif action == EditorAction.DOWN:
        session.move_cursor(1)
    elif action == EditorAction.NEXT_VALUE:
        session.cycle_current_field(1)
    elif action == EditorAction.PREV_VALUE:
        session.cycle_current_field(-1)
    elif action == EditorAction.SAVE:
        session.save()
    return True


class LanguagePicker:
    """State of the language selection screen.

    Attributes:
        cursor: Highlighted entry in LANGUAGE_CHOICES.
        done: True once a language was chosen or the picker was cancelled.
        selected: Chosen language, None if cancelled or still picking.
    """

    def __init__(self) -> None:
        self.cursor = 0
        self.done = False
        self.selected: Optional[Language] = None

    def apply(self, action: PickerAction) -> None:
        if action == PickerAction.UP:
            self.cursor = max(0, self.cursor - 1)
        elif action == PickerAction.DOWN:
            self.cursor = min(len(LANGUAGE_CHOICES) - 1, self.cursor + 1)
        elif action == PickerAction.CONFIRM:
            self.choose(LANGUAGE_CHOICES[self.cursor][1])
        elif action == PickerAction.QUIT:
            self.done = True

    def choose(self, language: Language) -> None:
        self.selected = language
        self.done = True

    def press_shortcut(self, key: str) -> bool:
        """Pick a language by its number key.

        Returns:
            True if ``key`` matched an entry.
        """
        for shortcut, language, _name in LANGUAGE_CHOICES:
            if key == shortcut:
                self.choose(language)
                return True
        return False


def _bind(bindings: KeyBindings, key: str, handler: Callable) -> None:
    # Escape must fire immediately instead of waiting for a meta sequence.
    bindings.add(key, eager=key == "escape")(handler)


def pick_language() -> Optional[Language]:
    """Show the language picker.

    Returns:
        The chosen language, or None if the user quit.
    """
    picker = LanguagePicker()
    bindings = KeyBindings()

    def make_handler(action: PickerAction):
        def handler(event) -> None:
            picker.apply(action)
            if picker.done:
                event.app.exit(result=picker.selected)

        return handler

    for key, action in PICKER_KEYS.items():
        _bind(bindings, key, make_handler(action))

    def make_shortcut(key: str):
        def handler(event) -> None:
            if picker.press_shortcut(key):
                event.app.exit(result=picker.selected)

        return handler

    for shortcut, _language, _name in LANGUAGE_CHOICES:
        _bind(bindings, shortcut, make_shortcut(shortcut))

    body = Frame(
        Window(
            FormattedTextControl(lambda: renderer.render_picker(picker.cursor)),
            height=7,
        ),
        width=Dimension(min=36, max=44),
    )
    layout = Layout(HSplit([Window(), VSplit([Window(), body, Window()]), Window()]))
    app: Application = Application(
        layout=layout,
        key_bindings=bindings,
        style=renderer.STYLE,
        full_screen=True,
    )
    return app.run()


def _visible_rows() -> int:
    rows = get_app().output.get_size().rows
    return max(1, rows - LIST_CHROME_ROWS)


def build_editor(session: SettingsSession) -> Application:
    """Build the settings editor application for ``session``."""
    bindings = KeyBindings()

    def make_handler(action: EditorAction):
        def handler(event) -> None:
            if not apply_editor_action(session, action):
                event.app.exit()

        return handler

    for key, action in EDITOR_KEYS.items():
        _bind(bindings, key, make_handler(action))

    header = Frame(
        Window(FormattedTextControl(lambda: renderer.render_header(session)), height=1)
    )
    rows = Frame(
        HSplit(
            [
                Window(
                    FormattedTextControl(
                        lambda: renderer.render_rows(session, _visible_rows())
                    )
                ),
                Window(
                    FormattedTextControl(
                        lambda: renderer.render_scroll_indicator(session, _visible_rows())
                    ),
                    height=1,
                    style="class:scroll",
                    align=WindowAlign.RIGHT,
                ),
            ]
        ),
        title=session.strings.hint.strip(),
    )
    status = Frame(
        Window(FormattedTextControl(lambda: renderer.render_status(session)), height=1)
    )

    return Application(
        layout=Layout(HSplit([header, rows, status])),
        key_bindings=bindings,
        style=renderer.STYLE,
        full_screen=True,
    )


def run_editor(session: SettingsSession) -> None:
    """Run the settings editor until the user quits."""
    logger.debug("Starting editor with %d fields", session.field_count)
    build_editor(session).run()
